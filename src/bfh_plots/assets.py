"""Resolve branding image paths safely.

:func:`resolve_asset` turns a caller-supplied path into a verified absolute
path to a PNG or JPEG file. Checks run in a fixed order and the first
failure raises:

1. the path is a non-empty string                     (InvalidInputError)
2. it expands and canonicalises to an existing file   (AssetNotFoundError)
3. canonicalising the result again gives the same path (PathTamperingError)
4. it lies under the allowed root, when one is set    (OutsideAllowedRootError)
5. its size is readable and non-zero                  (EmptyOrUnreadableError)
6. its bytes start with a PNG or JPEG signature       (NotAnImageError)

The allowed root comes from the ``allowed_root`` argument, else from
:func:`bfh_plots.config.logo_root`. File extensions are never consulted.
"""

from __future__ import annotations

import enum
import logging
import os
from dataclasses import dataclass

from . import config
from .exceptions import (
    AssetError,
    AssetNotFoundError,
    ConfigurationError,
    EmptyOrUnreadableError,
    InvalidInputError,
    NotAnImageError,
    OutsideAllowedRootError,
    PathTamperingError,
)

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SOI = b"\xff\xd8"
JPEG_EOI = b"\xff\xd9"
HEADER_BYTES = 12
MIN_JPEG_BYTES = 4


class ImageKind(enum.Enum):
    PNG = "png"
    JPEG = "jpeg"


@dataclass(frozen=True)
class ResolvedAsset:
    path: str
    kind: ImageKind
    size_bytes: int


def _normalize(path: str) -> str:
    # components resolve left to right: "link/.." is the parent of the link target
    return os.path.realpath(os.path.expanduser(path), strict=True)


def _rejected(exc_type: type[AssetError], message: str, path: str) -> AssetError:
    logger.warning("Rejected logo asset %r: %s", path, message)
    return exc_type(message, path)


def _check_raw_path(raw_path: object) -> str:
    if isinstance(raw_path, os.PathLike):
        raw_path = os.fspath(raw_path)
    if not isinstance(raw_path, str) or not raw_path:
        raise InvalidInputError("logo_path must be a non-empty character string")
    if "\x00" in raw_path:
        raise InvalidInputError("logo_path must not contain NUL bytes")
    return raw_path


def _normalize_root(root: str | os.PathLike) -> str:
    try:
        normalized = _normalize(os.fspath(root))
    except (OSError, TypeError, ValueError) as exc:
        raise ConfigurationError(f"Invalid logo root directory {root!r}: {exc}") from exc
    if not os.path.isdir(normalized):
        raise ConfigurationError(f"Invalid logo root directory {root!r}: not a directory")
    return normalized


def within_root(path: str, root: str) -> bool:
    """True when normalized ``path`` is ``root`` or lies beneath it."""
    if path == root:
        return True
    prefix = root if root.endswith(os.sep) else root + os.sep
    return path.startswith(prefix)


def sniff_image_kind(path: str, size: int) -> ImageKind | None:
    """Identify PNG/JPEG content from the file's leading (and trailing) bytes."""
    with open(path, "rb") as fh:
        header = fh.read(min(HEADER_BYTES, size))
        if header.startswith(PNG_SIGNATURE):
            return ImageKind.PNG
        if header.startswith(JPEG_SOI):
            if size < MIN_JPEG_BYTES:
                return None
            fh.seek(size - len(JPEG_EOI))
            if fh.read(len(JPEG_EOI)) == JPEG_EOI:
                return ImageKind.JPEG
    return None


def resolve_asset(
    raw_path: str | os.PathLike,
    allowed_root: str | os.PathLike | None = None,
) -> ResolvedAsset:
    """Verify ``raw_path`` and return its canonical path, image kind, and size."""
    raw_path = _check_raw_path(raw_path)

    try:
        normalized = _normalize(raw_path)
    except OSError:
        raise _rejected(
            AssetNotFoundError,
            f"Logo file not found: {os.path.basename(raw_path) or raw_path}",
            raw_path,
        ) from None
    if not os.path.isfile(normalized):
        raise _rejected(AssetNotFoundError, f"Logo path is not a file: {raw_path}", raw_path)

    try:
        verification = _normalize(normalized)
    except OSError:
        verification = None
    if verification != normalized:
        raise _rejected(
            PathTamperingError,
            f"Invalid file path: {raw_path} (resolution changed between checks)",
            raw_path,
        )

    root = allowed_root if allowed_root is not None else config.logo_root()
    if root is not None:
        normalized_root = _normalize_root(root)
        if not within_root(normalized, normalized_root):
            raise _rejected(
                OutsideAllowedRootError,
                f"Logo file must reside within the allowed root directory {normalized_root}",
                raw_path,
            )

    try:
        size = os.stat(normalized).st_size
    except OSError:
        size = None
    if not size or not os.access(normalized, os.R_OK):
        raise _rejected(EmptyOrUnreadableError, "Logo file is empty or unreadable", raw_path)

    try:
        kind = sniff_image_kind(normalized, size)
    except OSError as exc:
        raise _rejected(
            EmptyOrUnreadableError, f"Logo file is empty or unreadable: {exc}", raw_path
        ) from exc
    if kind is None:
        raise _rejected(NotAnImageError, "Logo file must be a valid PNG or JPEG image", raw_path)

    return ResolvedAsset(path=normalized, kind=kind, size_bytes=size)
