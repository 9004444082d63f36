"""Translate theme.py constants into matplotlib rcParams."""

from __future__ import annotations

import enum
import logging

import matplotlib as mpl
import matplotlib.pyplot as plt

from .fonts import get_font, mpl_family
from .theme import COLORS, COLOR_CYCLE, LAYOUT, PALETTES
from .validation import check_choice, check_numeric_range

logger = logging.getLogger(__name__)

PT_PER_CM = 72 / 2.54

# set by apply(), cleared by reset()
_applied = False


class ThemeName(str, enum.Enum):
    BFH = "bfh"
    MINIMAL = "bfh_minimal"
    PRINT = "bfh_print"
    PRESENTATION = "bfh_presentation"
    DARK = "bfh_dark"


BASE_SIZES = {
    ThemeName.BFH: 12,
    ThemeName.MINIMAL: 12,
    ThemeName.PRINT: 14,
    ThemeName.PRESENTATION: 16,
    ThemeName.DARK: 12,
}


def _base_rc(size: float, family: str) -> dict:
    """The plain BFH look every variant starts from."""
    return {
        # Figure
        "figure.figsize": LAYOUT["figsize"],
        "figure.dpi": LAYOUT["dpi"],
        "figure.facecolor": COLORS["white"],
        "figure.edgecolor": "none",
        "savefig.dpi": 300,
        "savefig.facecolor": COLORS["white"],
        "savefig.edgecolor": "none",
        "savefig.bbox": "tight",
        "savefig.pad_inches": size / 72,

        # Axes: left spine and baseline only, no grid
        "axes.facecolor": COLORS["white"],
        "axes.edgecolor": LAYOUT["axis_line"],
        "axes.linewidth": LAYOUT["line_width"],
        "axes.titlesize": size * LAYOUT["title_scale"],
        "axes.titleweight": "normal",
        "axes.titlelocation": "left",
        "axes.titlecolor": "black",
        "axes.titlepad": size * 0.5,
        "axes.labelsize": size,
        "axes.labelweight": "normal",
        "axes.labelcolor": LAYOUT["text"],
        "axes.labelpad": size * 0.5,
        "axes.prop_cycle": mpl.cycler(color=COLOR_CYCLE),
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.grid": False,
        "axes.axisbelow": True,
        "xaxis.labellocation": "left",
        "yaxis.labellocation": "top",

        "grid.color": "#e5e5e5",
        "grid.linewidth": LAYOUT["line_width"],

        # Ticks: none on x, short inward ticks on y
        "xtick.labelsize": size * LAYOUT["tick_scale"],
        "ytick.labelsize": size * LAYOUT["tick_scale"],
        "xtick.color": LAYOUT["axis_line"],
        "ytick.color": LAYOUT["axis_line"],
        "xtick.labelcolor": LAYOUT["text"],
        "ytick.labelcolor": LAYOUT["text"],
        "xtick.major.size": 0,
        "xtick.minor.visible": False,
        "ytick.direction": "in",
        "ytick.major.size": 0.15 * PT_PER_CM,
        "ytick.major.width": LAYOUT["line_width"],
        "ytick.minor.visible": False,

        # Lines
        "lines.linewidth": 1.5,
        "lines.markersize": 6,
        "patch.facecolor": COLOR_CYCLE[0],

        # Legend
        "legend.frameon": False,
        "legend.facecolor": COLORS["white"],
        "legend.fontsize": size * LAYOUT["tick_scale"],
        "legend.title_fontsize": size * LAYOUT["tick_scale"],

        # Font
        "font.family": mpl_family(family),
        "font.size": size,
        "text.color": "black",
    }


def _overrides(name: ThemeName, size: float) -> dict:
    if name is ThemeName.MINIMAL:
        return {
            "axes.spines.left": False,
            "axes.spines.bottom": False,
            "ytick.major.size": 0,
        }
    if name is ThemeName.PRINT:
        # darker text and heavier lines for paper
        return {
            "text.color": "black",
            "axes.labelcolor": "black",
            "xtick.labelcolor": "black",
            "ytick.labelcolor": "black",
            "axes.grid": True,
            "axes.grid.axis": "y",
            "grid.color": "#cccccc",
            "grid.linewidth": 0.7,
            "axes.edgecolor": "black",
            "axes.linewidth": 0.7,
            "xtick.color": "black",
            "ytick.color": "black",
            "xtick.major.size": 3.5,
            "xtick.major.width": LAYOUT["line_width"],
            "axes.titlesize": size * 1.4,
            "axes.titleweight": "bold",
        }
    if name is ThemeName.PRESENTATION:
        return {
            "axes.titlesize": size * 1.5,
            "axes.titleweight": "bold",
            "axes.grid": True,
            "axes.grid.axis": "y",
            "grid.color": "#d9d9d9",
            "grid.linewidth": 0.8,
            "legend.fontsize": size,
            "legend.title_fontsize": size * 1.1,
        }
    if name is ThemeName.DARK:
        bg = LAYOUT["dark_bg"]
        return {
            "figure.facecolor": bg,
            "savefig.facecolor": bg,
            "axes.facecolor": bg,
            "legend.facecolor": bg,
            "text.color": "white",
            "axes.titlecolor": "white",
            "axes.titleweight": "bold",
            "axes.labelcolor": "white",
            "axes.labelweight": "bold",
            "xtick.labelcolor": "#cccccc",
            "ytick.labelcolor": "#cccccc",
            "axes.grid": True,
            "axes.grid.axis": "y",
            "grid.color": "#4d4d4d",
            "axes.edgecolor": "#7f7f7f",
            "xtick.color": "#7f7f7f",
            "ytick.color": "#7f7f7f",
            "legend.labelcolor": "white",
        }
    return {}


def _theme_name(theme: str | ThemeName) -> ThemeName:
    value = theme.value if isinstance(theme, ThemeName) else theme
    return ThemeName(check_choice(value, "theme", [t.value for t in ThemeName]).unwrap())


def theme_rc(
    theme: str | ThemeName = ThemeName.BFH,
    base_size: float | None = None,
    base_family: str | None = None,
) -> dict:
    """rcParams for a BFH theme. ``base_family=None`` auto-detects the font."""
    name = _theme_name(theme)
    size = BASE_SIZES[name] if base_size is None else base_size
    size = check_numeric_range(size, "base_size", 0, 200, exclusive_min=True).unwrap()
    family = base_family if base_family is not None else get_font()

    rc = _base_rc(size, family)
    rc.update(_overrides(name, size))
    return rc


def _palette_or_main(palette: str) -> str:
    if palette in PALETTES:
        return palette
    logger.warning("Palette %r not found. Using 'main' palette.", palette)
    return "main"


def apply(
    theme: str | ThemeName = ThemeName.BFH,
    palette: str = "main",
    base_size: float | None = None,
    base_family: str | None = None,
) -> dict:
    """Apply a BFH theme and palette to matplotlib globally. Returns the rcParams set."""
    global _applied

    rc = theme_rc(theme, base_size, base_family)
    palette = _palette_or_main(palette)
    rc["axes.prop_cycle"] = mpl.cycler(color=PALETTES[palette])
    rc["patch.facecolor"] = PALETTES[palette][0]

    plt.rcParams.update(rc)
    _applied = True
    logger.info("BFH defaults set: theme=%s palette=%s", _theme_name(theme).value, palette)
    return rc


def reset() -> None:
    """Restore matplotlib's stock defaults."""
    global _applied

    mpl.rcdefaults()
    _applied = False
    logger.info("matplotlib defaults have been reset")


def is_applied() -> bool:
    """True once a BFH theme has been applied globally and not reset since."""
    return _applied


def theme_context(
    theme: str | ThemeName = ThemeName.BFH,
    palette: str = "main",
    base_size: float | None = None,
    base_family: str | None = None,
):
    """Context manager applying a BFH theme only inside the ``with`` block."""
    rc = theme_rc(theme, base_size, base_family)
    rc["axes.prop_cycle"] = mpl.cycler(color=PALETTES[_palette_or_main(palette)])
    return plt.rc_context(rc)
