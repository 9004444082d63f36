"""Exception hierarchy for bfh-plots."""

from __future__ import annotations

import os


class BFHPlotsError(Exception):
    """Base class for every error raised by bfh-plots."""


class InvalidInputError(BFHPlotsError, ValueError):
    """Malformed call arguments (wrong type, empty value, out of range)."""


class ConfigurationError(BFHPlotsError):
    """Invalid or conflicting process-wide settings."""


class UnknownColorError(InvalidInputError, KeyError):
    def __init__(self, names: list[str], available: list[str]) -> None:
        self.names = names
        super().__init__(
            f"Unknown color name(s): {', '.join(names)}\n"
            f"Available colors: {', '.join(available)}"
        )

    def __str__(self) -> str:
        return self.args[0]


class UnknownPaletteError(InvalidInputError, KeyError):
    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        super().__init__(
            f"Unknown palette: '{name}'\nAvailable palettes: {', '.join(available)}"
        )

    def __str__(self) -> str:
        return self.args[0]


class AssetError(BFHPlotsError):
    """A branding asset was rejected. ``path`` is the offending input."""

    def __init__(self, message: str, path: str | os.PathLike | None = None) -> None:
        super().__init__(message)
        self.path = path


class AssetNotFoundError(AssetError):
    """The asset does not exist or is not a regular file."""


class PathTamperingError(AssetError):
    """Canonical resolution of the path was not stable across two passes."""


class OutsideAllowedRootError(AssetError):
    """The asset lies outside the configured logo root directory."""


class EmptyOrUnreadableError(AssetError):
    """The asset size could not be read or is zero."""


class NotAnImageError(AssetError):
    """The asset content is neither PNG nor JPEG."""
