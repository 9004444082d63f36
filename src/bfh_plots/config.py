"""Process-wide settings, read from the environment with programmatic overrides."""

from __future__ import annotations

import os
import threading
from pathlib import Path

from .exceptions import ConfigurationError

LOGO_ROOT_ENV = "BFH_PLOTS_LOGO_ROOT"
SKIP_FONT_CHECKS_ENV = "BFH_PLOTS_SKIP_FONT_CHECKS"

_lock = threading.Lock()
_logo_root: str | None = None


def set_logo_root(path: str | os.PathLike) -> None:
    """Restrict logo loading to ``path`` for the rest of the process.

    May be called once. Repeating the same directory is a no-op; a
    different directory raises ``ConfigurationError``.
    """
    global _logo_root

    value = os.fspath(path) if isinstance(path, os.PathLike) else path
    if not isinstance(value, str) or not value:
        raise ConfigurationError("logo root must be a non-empty directory path")

    with _lock:
        if _logo_root is not None:
            if os.path.realpath(_logo_root) == os.path.realpath(value):
                return
            raise ConfigurationError(
                f"logo root is already set to {_logo_root!r}; it cannot be changed"
            )
        _logo_root = value


def logo_root() -> str | None:
    """Return the active logo root: programmatic setting, then environment, else None."""
    if _logo_root is not None:
        return _logo_root
    return os.environ.get(LOGO_ROOT_ENV) or None


def skip_font_checks() -> bool:
    return os.environ.get(SKIP_FONT_CHECKS_ENV, "").strip().lower() in {"1", "true", "yes"}


def package_data_dir() -> Path:
    """Directory holding bundled assets (logos)."""
    return Path(__file__).resolve().parent / "data"
