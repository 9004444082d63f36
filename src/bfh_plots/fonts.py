"""Font detection for BFH charts.

The preferred typeface is Mari (installed on hospital PCs), then Roboto,
then Arial, then the generic ``sans`` family. Detection needs a system font
enumeration, which is slow enough that the result is cached for the life of
the process. Call :func:`clear_font_cache` (or pass ``force_refresh=True``)
after installing fonts mid-session.

Enumeration sources are tried in order until one reports a family list:

1. matplotlib's font manager (the fonts matplotlib can actually render)
2. fontconfig's ``fc-list`` (bounded by a timeout)

When no source is available the resolver answers ``"sans"`` and does not
cache it, so a source that appears later is picked up without a cache clear.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
import sys
import threading
from collections.abc import Callable, Iterable, Sequence

from . import config
from .exceptions import InvalidInputError
from .theme import FONTS
from .validation import check_bool

logger = logging.getLogger(__name__)

FALLBACK_FONT = FONTS["fallback"]
FC_LIST_TIMEOUT = 5.0

FontSource = Callable[[], "set[str] | None"]


def matplotlib_families() -> set[str] | None:
    """Family names registered with matplotlib's font manager."""
    from matplotlib import font_manager

    families = {entry.name for entry in font_manager.fontManager.ttflist}
    return families or None


def fontconfig_families(timeout: float = FC_LIST_TIMEOUT) -> set[str] | None:
    """Family names reported by ``fc-list``, or None when fontconfig is missing."""
    if shutil.which("fc-list") is None:
        return None
    try:
        proc = subprocess.run(
            ["fc-list", "-f", "%{family}\n"],
            check=True,
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("fc-list failed: %s", exc)
        return None

    families: set[str] = set()
    for line in proc.stdout.splitlines():
        # fc-list reports localised aliases comma-separated
        families.update(name.strip() for name in line.split(",") if name.strip())
    return families


DEFAULT_SOURCES: tuple[FontSource, ...] = (matplotlib_families, fontconfig_families)


class FontCache:
    """Thread-safe map of cache key -> resolved font family."""

    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()

    @staticmethod
    def key(candidates: Sequence[str], verify_installed: bool) -> str:
        # e.g. "Mari|Roboto|Arial|sans_true"
        return f"{'|'.join(candidates)}_{str(verify_installed).lower()}"

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, font: str) -> None:
        with self._lock:
            self._entries[key] = font

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def _check_candidates(candidates: object) -> tuple[str, ...]:
    if isinstance(candidates, str) or not isinstance(candidates, Iterable):
        raise InvalidInputError("candidates must be a sequence of font family names")
    names = tuple(candidates)
    if not names:
        raise InvalidInputError("candidates must not be empty")
    if not all(isinstance(name, str) and name for name in names):
        raise InvalidInputError("candidates must contain non-empty strings only")
    return names


class FontResolver:
    """Pick the first installed family from a candidate list, with caching."""

    def __init__(
        self,
        sources: Iterable[FontSource] | None = None,
        cache: FontCache | None = None,
    ) -> None:
        self.sources = tuple(DEFAULT_SOURCES if sources is None else sources)
        self.cache = cache if cache is not None else FontCache()
        self._resolve_lock = threading.Lock()

    def installed_families(self) -> set[str] | None:
        """Return the installed family names, or None when nothing can enumerate them."""
        if config.skip_font_checks():
            return None
        for source in self.sources:
            try:
                families = source()
            except Exception as exc:
                logger.warning(
                    "Font enumeration via %s failed: %s",
                    getattr(source, "__name__", source), exc,
                )
                continue
            if families is not None:
                return set(families)
        return None

    def resolve(
        self,
        candidates: Sequence[str],
        verify_installed: bool = True,
        force_refresh: bool = False,
    ) -> str:
        names = _check_candidates(candidates)
        verify_installed = check_bool(verify_installed, "verify_installed").unwrap()
        force_refresh = check_bool(force_refresh, "force_refresh").unwrap()

        if not verify_installed:
            return names[0]

        key = self.cache.key(names, verify_installed)
        if not force_refresh:
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("Using cached font: %s", cached)
                return cached

        with self._resolve_lock:
            # another thread may have populated the entry while we waited
            if not force_refresh:
                cached = self.cache.get(key)
                if cached is not None:
                    return cached

            installed = self.installed_families()
            if installed is None:
                logger.info("No font enumeration available; using fallback font: %s",
                            FALLBACK_FONT)
                return FALLBACK_FONT

            selected = next((name for name in names if name in installed), FALLBACK_FONT)
            if selected == FALLBACK_FONT:
                logger.info("Using fallback font: %s", selected)
            else:
                logger.info("Using font: %s", selected)
            self.cache.set(key, selected)
            return selected

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("BFH font cache cleared")


default_resolver = FontResolver()


def resolve_font(
    candidates: Sequence[str],
    verify_installed: bool = True,
    force_refresh: bool = False,
) -> str:
    """Resolve ``candidates`` with the process-wide resolver."""
    return default_resolver.resolve(candidates, verify_installed, force_refresh)


def clear_font_cache() -> None:
    default_resolver.clear_cache()


def get_font(verify_installed: bool = True, force_refresh: bool = False) -> str:
    """Best available BFH font: Mari → Roboto → Arial → sans."""
    return resolve_font(FONTS["priority"], verify_installed, force_refresh)


def check_fonts(resolver: FontResolver | None = None) -> dict[str, bool | None]:
    """Report which BFH fonts are installed.

    Values are None when fonts cannot be enumerated on this system.
    """
    resolver = resolver or default_resolver
    installed = resolver.installed_families()

    if installed is None:
        results: dict[str, bool | None] = {name: None for name in FONTS["report"]}
        logger.info("Font enumeration unavailable; install fontconfig to check fonts")
    else:
        results = {name: name in installed for name in FONTS["report"]}
        for name, present in results.items():
            logger.info("%-15s: %s", name, "available" if present else "not found")

    logger.info("Recommended font: %s", resolver.resolve(FONTS["priority"]))
    if not (results.get("Mari Office") or results.get("Mari")):
        logger.info(
            "Mari fonts not found. They are installed on BFH computers; "
            "Roboto is recommended for external users."
        )
    return results


def set_fonts() -> str:
    """Make the detected BFH font matplotlib's default family."""
    import matplotlib.pyplot as plt

    font = get_font()
    plt.rcParams["font.family"] = mpl_family(font)
    logger.info("BFH fonts set as default: %s", font)
    return font


def mpl_family(font: str) -> str:
    """Map the generic ``sans`` fallback onto matplotlib's ``sans-serif``."""
    return "sans-serif" if font == FALLBACK_FONT else font


def roboto_install_hint(platform: str | None = None) -> str:
    """Instructions for installing Roboto, the open-source fallback."""
    platform = platform or sys.platform
    lines = [
        "Roboto is a free, open-source font by Google (Apache License 2.0).",
        "Download: https://fonts.google.com/specimen/Roboto",
    ]
    if platform == "darwin":
        lines.append("macOS: double-click the .ttf files, or: brew install --cask font-roboto")
    elif platform.startswith("win"):
        lines.append("Windows: right-click the .ttf files and choose 'Install'")
    else:
        lines.append("Linux: sudo apt-get install fonts-roboto (Ubuntu/Debian)")
    lines.append(
        "Then restart Python and call bfh_plots.clear_font_cache() or check_fonts()."
    )
    return "\n".join(lines)
