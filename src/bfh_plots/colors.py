"""Color lookups and palette interpolation."""

from __future__ import annotations

import logging
from collections.abc import Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import LinearSegmentedColormap, to_hex

from .exceptions import InvalidInputError, UnknownColorError, UnknownPaletteError
from .theme import COLORS, PALETTES
from .validation import check_bool, check_palette_name

logger = logging.getLogger(__name__)


def cols(*names: str) -> dict[str, str]:
    """Hex codes for the named colors. No names returns the whole table."""
    if not names:
        return dict(COLORS)
    if not all(isinstance(name, str) for name in names):
        raise InvalidInputError("Color names must be character strings")

    unknown = [name for name in names if name not in COLORS]
    if unknown:
        raise UnknownColorError(unknown, list(COLORS))
    return {name: COLORS[name] for name in names}


def palette(name: str = "main", reverse: bool = False) -> list[str]:
    """The colors of a named palette, optionally reversed."""
    name = check_palette_name(name).unwrap()
    reverse = check_bool(reverse, "reverse").unwrap()
    if name not in PALETTES:
        raise UnknownPaletteError(name, list(PALETTES))

    colors = list(PALETTES[name])
    if reverse:
        colors.reverse()
    return colors


def palette_cmap(name: str = "main", reverse: bool = False) -> LinearSegmentedColormap:
    """A smooth colormap through the palette's colors."""
    return LinearSegmentedColormap.from_list(f"bfh_{name}", palette(name, reverse))


def palette_ramp(name: str = "main", n: int | None = None, reverse: bool = False) -> list[str]:
    """``n`` colors interpolated evenly along the palette (endpoints included)."""
    colors = palette(name, reverse)
    if n is None:
        return colors
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
        raise InvalidInputError("n must be a whole number")
    n = int(n)
    if n < 0:
        raise InvalidInputError("n must not be negative")
    if n == 0:
        return []

    cmap = LinearSegmentedColormap.from_list(f"bfh_{name}", colors)
    return [to_hex(cmap(x)) for x in np.linspace(0.0, 1.0, n)]


def show_palettes(n: int | None = None) -> plt.Figure:
    """Swatch chart of every palette, one row each."""
    names = list(PALETTES)
    fig, axes = plt.subplots(len(names), 1, figsize=(6, 0.45 * len(names)))

    for ax, name in zip(axes, names):
        swatches = palette_ramp(name, n)
        for i, color in enumerate(swatches):
            ax.add_patch(plt.Rectangle((i, 0), 1, 1, color=color))
        ax.set_xlim(0, max(len(swatches), 1))
        ax.set_ylim(0, 1)
        ax.set_axis_off()
        ax.text(-0.1, 0.5, name, ha="right", va="center", fontsize=8,
                transform=ax.transData)

    fig.subplots_adjust(left=0.3, right=0.98, hspace=0.4)
    return fig


def check_colorblind_safe(colors: Sequence[str]) -> Sequence[str]:
    """Placeholder accessibility hook: logs the palette size and returns it unchanged."""
    logger.info(
        "For full colorblind accessibility testing use a dedicated simulator; %d colors",
        len(colors),
    )
    return colors
