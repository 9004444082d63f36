"""Palette-backed color scales: cyclers for categories, colormaps for values."""

from __future__ import annotations

import matplotlib as mpl
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap

from .colors import palette, palette_ramp
from .validation import check_bool, check_palette_name

CONTINUOUS_STEPS = 256


def color_scale(
    palette_name: str = "main",
    discrete: bool = True,
    reverse: bool = False,
):
    """Discrete scale (a color cycler) or continuous scale (a 256-step colormap)."""
    palette_name = check_palette_name(palette_name).unwrap()
    discrete = check_bool(discrete, "discrete").unwrap()
    reverse = check_bool(reverse, "reverse").unwrap()

    if discrete:
        return mpl.cycler(color=palette(palette_name, reverse))
    return continuous_cmap(palette_name, reverse)


def continuous_cmap(palette_name: str = "blues", reverse: bool = False) -> ListedColormap:
    suffix = "_r" if reverse else ""
    return ListedColormap(
        palette_ramp(palette_name, CONTINUOUS_STEPS, reverse),
        name=f"bfh_{palette_name}{suffix}",
    )


def apply_scale(
    ax: plt.Axes | None = None,
    palette_name: str = "main",
    reverse: bool = False,
) -> plt.Axes:
    """Use the palette as the color cycle of ``ax`` (current axes by default)."""
    ax = ax if ax is not None else plt.gca()
    ax.set_prop_cycle(color_scale(palette_name, discrete=True, reverse=reverse))
    return ax
