"""Convenience chart functions: line(), bar(), scatter(), figure(), save(), combine()."""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path
from typing import Any

import matplotlib.pyplot as plt
import numpy as np
from numpy.typing import ArrayLike

from . import style
from .branding import labs
from .exceptions import InvalidInputError
from .scales import apply_scale
from .theme import DIMENSIONS, SAVE_PRESETS
from .validation import check_choice

logger = logging.getLogger(__name__)


def _ensure_style() -> None:
    """Apply the default BFH style unless a theme is already in effect."""
    if not style.is_applied():
        style.apply()


def figure(
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, plt.Axes]:
    """Create a styled (fig, ax) pair. Escape hatch for custom charts."""
    _ensure_style()
    fig, ax = plt.subplots(figsize=figsize)
    return fig, ax


def get_dimensions(kind: str = "report", fmt: str = "standard") -> tuple[float, float]:
    """Recommended (width, height) in inches for an output type and aspect."""
    if kind not in DIMENSIONS:
        logger.warning("Unknown type %r. Using 'report'.", kind)
        kind = "report"
    if fmt not in DIMENSIONS[kind]:
        logger.warning("Unknown format %r. Using 'standard'.", fmt)
        fmt = "standard"
    return DIMENSIONS[kind][fmt]


def save(
    fig: plt.Figure,
    filename: str,
    preset: str = "report_full",
    width: float | None = None,
    height: float | None = None,
    dpi: int = 300,
    output_dir: str | Path | None = None,
) -> Path:
    """Resize ``fig`` to a preset (or explicit inches) and write it to disk.

    Returns the path to the saved file.
    """
    if width is None or height is None:
        if preset not in SAVE_PRESETS:
            logger.warning("Unknown preset %r. Using report_full dimensions.", preset)
            preset = "report_full"
        preset_w, preset_h = SAVE_PRESETS[preset]
        width = preset_w if width is None else width
        height = preset_h if height is None else height

    dest = Path(output_dir) if output_dir else Path(os.getcwd())
    dest.mkdir(parents=True, exist_ok=True)
    path = dest / filename

    fig.set_size_inches(width, height)
    fig.savefig(path, dpi=dpi)
    plt.close(fig)
    logger.info("Plot saved: %s (%.1f x %.1f in at %d dpi)", path, width, height, dpi)
    return path


def _chart(figsize: tuple[float, float] | None,
           palette: str | None) -> tuple[plt.Figure, plt.Axes]:
    fig, ax = figure(figsize=figsize)
    if palette is not None:
        apply_scale(ax, palette)
    return fig, ax


def _finish(
    fig: plt.Figure,
    ax: plt.Axes,
    labels: dict[str, str | None],
    filename: str | None,
    output_dir: str | Path | None,
) -> None:
    # labs() capitalises axis labels, subtitle and caption
    labs(ax, **{key: value for key, value in labels.items() if value})
    if filename:
        save(fig, filename, output_dir=output_dir)


def line(
    x: ArrayLike,
    y: ArrayLike | dict[str, ArrayLike],
    *,
    title: str | None = None,
    subtitle: str | None = None,
    caption: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    palette: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes]:
    """Line chart. Pass a dict of {label: y_values} for one line per series.

    ``palette`` names a BFH palette for this chart only; the global cycle
    is used otherwise.
    """
    fig, ax = _chart(figsize, palette)

    series = y if isinstance(y, dict) else {None: y}
    for label, y_data in series.items():
        ax.plot(x, y_data, label=label, **kwargs)
    if isinstance(y, dict):
        ax.legend()

    _finish(fig, ax, dict(title=title, subtitle=subtitle, caption=caption,
                          x=xlabel, y=ylabel), filename, output_dir)
    return fig, ax


def bar(
    x: ArrayLike,
    y: ArrayLike | dict[str, ArrayLike],
    *,
    title: str | None = None,
    subtitle: str | None = None,
    caption: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    palette: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    bar_width: float = 0.8,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes]:
    """Bar chart; a dict of {label: y_values} gives side-by-side groups."""
    fig, ax = _chart(figsize, palette)
    positions = np.asarray(x)

    if isinstance(y, dict):
        step = bar_width / len(y)
        first = positions - bar_width / 2 + step / 2
        for i, (label, y_data) in enumerate(y.items()):
            ax.bar(first + i * step, y_data, width=step, label=label, **kwargs)
        ax.legend()
    else:
        ax.bar(positions, y, width=bar_width, **kwargs)

    _finish(fig, ax, dict(title=title, subtitle=subtitle, caption=caption,
                          x=xlabel, y=ylabel), filename, output_dir)
    return fig, ax


def scatter(
    x: ArrayLike,
    y: ArrayLike | dict[str, tuple[ArrayLike, ArrayLike]],
    *,
    title: str | None = None,
    subtitle: str | None = None,
    caption: str | None = None,
    xlabel: str | None = None,
    ylabel: str | None = None,
    palette: str | None = None,
    filename: str | None = None,
    output_dir: str | Path | None = None,
    figsize: tuple[float, float] | None = None,
    **kwargs: Any,
) -> tuple[plt.Figure, plt.Axes]:
    """Scatter plot. A dict of {label: (x, y)} draws one colour per series."""
    fig, ax = _chart(figsize, palette)

    series = y if isinstance(y, dict) else {None: (x, y)}
    for label, points in series.items():
        ax.scatter(*points, label=label, **kwargs)
    if isinstance(y, dict):
        ax.legend()

    _finish(fig, ax, dict(title=title, subtitle=subtitle, caption=caption,
                          x=xlabel, y=ylabel), filename, output_dir)
    return fig, ax


def combine(
    n: int,
    ncols: int | None = None,
    nrows: int | None = None,
    figsize: tuple[float, float] | None = None,
) -> tuple[plt.Figure, list[plt.Axes]]:
    """Styled grid with room for ``n`` panels; unused cells are removed."""
    if n < 1:
        raise InvalidInputError("n must be at least 1")
    if ncols is None and nrows is None:
        ncols = math.ceil(math.sqrt(n))
    if ncols is None:
        ncols = math.ceil(n / nrows)
    if nrows is None:
        nrows = math.ceil(n / ncols)
    if nrows * ncols < n:
        raise InvalidInputError(f"a {nrows}x{ncols} grid cannot hold {n} panels")

    _ensure_style()
    fig, grid = plt.subplots(nrows, ncols, figsize=figsize, squeeze=False)
    axes = list(grid.flat)
    for extra in axes[n:]:
        fig.delaxes(extra)
    return fig, axes[:n]


_LEGEND_LOCS = {
    "bottom": ("lower center", (0.5, 0.0)),
    "top": ("upper center", (0.5, 1.0)),
    "left": ("center left", (0.0, 0.5)),
    "right": ("center right", (1.0, 0.5)),
}


def shared_legend(
    fig: plt.Figure,
    axes: list[plt.Axes],
    position: str = "bottom",
):
    """Replace per-panel legends with one figure legend; ``"none"`` drops them all."""
    position = check_choice(position, "legend_position", [*_LEGEND_LOCS, "none"]).unwrap()

    handles, labels = [], []
    for ax in axes:
        for handle, label in zip(*ax.get_legend_handles_labels()):
            if label not in labels:
                handles.append(handle)
                labels.append(label)
        if ax.get_legend() is not None:
            ax.get_legend().remove()

    if position == "none" or not handles:
        return None

    loc, anchor = _LEGEND_LOCS[position]
    ncol = len(labels) if position in ("bottom", "top") else 1
    return fig.legend(handles, labels, loc=loc, bbox_to_anchor=anchor, ncol=ncol)
