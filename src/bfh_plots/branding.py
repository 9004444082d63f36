"""Logos, footers, colour bars and title blocks for BFH-branded figures.

Every image goes through :func:`bfh_plots.assets.resolve_asset` before it is
decoded, so a rejected logo raises with the specific reason rather than
being silently dropped. Set ``BFH_PLOTS_LOGO_ROOT`` (or call
:func:`bfh_plots.config.set_logo_root`) to confine logos to one directory.
"""

from __future__ import annotations

import enum
import logging
import os
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle
from PIL import Image, UnidentifiedImageError

from . import config
from .assets import ImageKind, resolve_asset
from .exceptions import InvalidInputError, NotAnImageError
from .theme import COLORS, LAYOUT
from .validation import check_choice, check_numeric_range

logger = logging.getLogger(__name__)

DEFAULT_FOOTER_TEXT = "Bispebjerg og Frederiksberg Hospital"
LOGO_LABEL = "bfh_logo"


class LogoSize(str, enum.Enum):
    FULL = "full"     # print resolution
    WEB = "web"       # 800 px
    SMALL = "small"   # 400 px


class LogoVariant(str, enum.Enum):
    COLOR = "color"
    GREY = "grey"
    MARK = "mark"     # symbol only


class Position(str, enum.Enum):
    TOPLEFT = "topleft"
    TOPRIGHT = "topright"
    BOTTOMLEFT = "bottomleft"
    BOTTOMRIGHT = "bottomright"


class BarPosition(str, enum.Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"


# grey and mark have no small rendition; web is used instead
LOGO_FILES = {
    (LogoVariant.COLOR, LogoSize.FULL): "bfh_logo.png",
    (LogoVariant.COLOR, LogoSize.WEB): "bfh_logo_web.png",
    (LogoVariant.COLOR, LogoSize.SMALL): "bfh_logo_small.png",
    (LogoVariant.GREY, LogoSize.FULL): "bfh_logo_grey.png",
    (LogoVariant.GREY, LogoSize.WEB): "bfh_logo_grey_web.png",
    (LogoVariant.GREY, LogoSize.SMALL): "bfh_logo_grey_web.png",
    (LogoVariant.MARK, LogoSize.FULL): "bfh_mark.png",
    (LogoVariant.MARK, LogoSize.WEB): "bfh_mark_web.png",
    (LogoVariant.MARK, LogoSize.SMALL): "bfh_mark_web.png",
}


def _enum_choice(enum_type: type[enum.Enum], value, name: str):
    value = value.value if isinstance(value, enum_type) else value
    return enum_type(check_choice(value, name, [m.value for m in enum_type]).unwrap())


def logo_filename(size: str | LogoSize = LogoSize.WEB,
                  variant: str | LogoVariant = LogoVariant.COLOR) -> str:
    size = _enum_choice(LogoSize, size, "size")
    variant = _enum_choice(LogoVariant, variant, "variant")
    return LOGO_FILES[(variant, size)]


def get_logo_path(size: str | LogoSize = LogoSize.WEB,
                  variant: str | LogoVariant = LogoVariant.COLOR) -> Path | None:
    """Path to a packaged logo, or None when the asset is not installed."""
    path = config.package_data_dir() / "logo" / logo_filename(size, variant)
    if not path.is_file():
        logger.warning(
            "BFH logo file %s not found in package; it may not have been installed", path.name
        )
        return None
    return path


def _decode(path: str, kind: ImageKind) -> np.ndarray:
    try:
        with Image.open(path) as img:
            img.load()
            if img.format != kind.name:
                raise NotAnImageError(
                    f"Logo content is {img.format}, expected {kind.name}", path
                )
            return np.asarray(img.convert("RGBA"))
    except (UnidentifiedImageError, OSError) as exc:
        raise NotAnImageError(f"Failed to read {kind.name} file: {exc}", path) from exc


def _logo_origin(position: Position, width: float, height: float,
                 padding: float) -> tuple[float, float]:
    left, right = padding, 1 - padding - width
    bottom, top = padding, 1 - padding - height
    return {
        Position.TOPLEFT: (left, top),
        Position.TOPRIGHT: (right, top),
        Position.BOTTOMLEFT: (left, bottom),
        Position.BOTTOMRIGHT: (right, bottom),
    }[position]


def add_logo(
    fig: plt.Figure,
    logo_path: str | os.PathLike,
    position: str | Position = Position.BOTTOMRIGHT,
    size: float = 0.1,
    alpha: float = 1.0,
    padding: float = 0.02,
) -> plt.Figure:
    """Place a PNG/JPEG logo in a corner of ``fig``.

    ``size`` is the logo width as a fraction of the figure width; the
    height follows from the image's aspect ratio.
    """
    asset = resolve_asset(logo_path)

    size = check_numeric_range(size, "size", 0, 1, exclusive_min=True).unwrap()
    alpha = check_numeric_range(alpha, "alpha", 0, 1).unwrap()
    padding = check_numeric_range(padding, "padding", 0, 1).unwrap()
    position = _enum_choice(Position, position, "position")

    logo = _decode(asset.path, asset.kind)
    img_h, img_w = logo.shape[:2]
    fig_w, fig_h = fig.get_size_inches()
    width = size
    height = size * (img_h / img_w) * (fig_w / fig_h)

    x0, y0 = _logo_origin(position, width, height, padding)
    ax = fig.add_axes((x0, y0, width, height), label=LOGO_LABEL, zorder=10)
    ax.imshow(logo, alpha=alpha, interpolation="antialiased")
    ax.set_axis_off()
    return fig


def add_packaged_logo(
    fig: plt.Figure,
    position: str | Position = Position.BOTTOMRIGHT,
    size: float = 0.15,
    alpha: float = 0.9,
    logo_size: str | LogoSize = LogoSize.WEB,
    variant: str | LogoVariant = LogoVariant.COLOR,
) -> plt.Figure:
    """Like :func:`add_logo`, using the logo shipped with the package."""
    path = get_logo_path(logo_size, variant)
    if path is None:
        logger.warning("Could not find BFH logo; figure returned without logo")
        return fig
    return add_logo(fig, path, position, size, alpha)


def add_footer(
    fig: plt.Figure,
    text: str | None = None,
    color: str = COLORS["hospital_primary"],
    text_color: str = "white",
    height: float = 0.05,
) -> plt.Figure:
    """Full-width coloured bar along the bottom of the figure, with centred text."""
    height = check_numeric_range(height, "height", 0, 1, exclusive_min=True).unwrap()
    text = text if text is not None else DEFAULT_FOOTER_TEXT

    fig.add_artist(Rectangle(
        (0, 0), 1, height,
        transform=fig.transFigure, facecolor=color, edgecolor="none", zorder=5,
    ))
    fig.text(0.5, height / 2, text, ha="center", va="center",
             color=text_color, fontsize=10, zorder=6)

    # keep the x axis clear of the bar
    fig.subplots_adjust(bottom=max(fig.subplotpars.bottom, height + 0.08))
    return fig


def add_color_bar(
    fig: plt.Figure,
    position: str | BarPosition = BarPosition.TOP,
    color: str = COLORS["hospital_primary"],
    size: float = 0.02,
) -> plt.Figure:
    """Thin brand-coloured stripe along one edge of the figure."""
    position = _enum_choice(BarPosition, position, "position")
    size = check_numeric_range(size, "size", 0, 1, exclusive_min=True).unwrap()

    bounds = {
        BarPosition.TOP: ((0, 1 - size), 1, size),
        BarPosition.BOTTOM: ((0, 0), 1, size),
        BarPosition.LEFT: ((0, 0), size, 1),
        BarPosition.RIGHT: ((1 - size, 0), size, 1),
    }[position]
    origin, width, height = bounds
    fig.add_artist(Rectangle(
        origin, width, height,
        transform=fig.transFigure, facecolor=color, edgecolor="none", zorder=5,
    ))
    return fig


def title_block(
    ax: plt.Axes,
    title: str,
    subtitle: str | None = None,
    caption: str | None = None,
) -> plt.Axes:
    """Left-aligned title with optional subtitle above the axes and caption below."""
    base = plt.rcParams["font.size"]
    pad = plt.rcParams["axes.titlepad"]

    if subtitle:
        sub_size = base * LAYOUT["subtitle_scale"]
        ax.text(0, 1.0, subtitle, transform=ax.transAxes, ha="left", va="bottom",
                fontsize=sub_size, gid="subtitle")
        pad += sub_size * 1.6
    ax.set_title(title, loc="left", pad=pad)

    if caption:
        ax.figure.text(0.99, 0.01, caption, ha="right", va="bottom",
                       fontsize=base * LAYOUT["caption_scale"],
                       color=LAYOUT["caption"], gid="caption")
    return ax


_LABEL_KEYS = ("title", "subtitle", "caption", "x", "y")


def upper_labels(labels: dict[str, object]) -> dict[str, object]:
    """Uppercase every string label except the title."""
    return {
        key: value.upper() if isinstance(value, str) and key != "title" else value
        for key, value in labels.items()
    }


def labs(ax: plt.Axes, **labels: str) -> plt.Axes:
    """Set labels BFH-style: axis labels, subtitle and caption in capitals."""
    unknown = sorted(set(labels) - set(_LABEL_KEYS))
    if unknown:
        raise InvalidInputError(
            f"Unknown label(s): {', '.join(unknown)}; use {', '.join(_LABEL_KEYS)}"
        )
    labels = upper_labels(labels)

    if labels.get("x") is not None:
        ax.set_xlabel(labels["x"])
    if labels.get("y") is not None:
        ax.set_ylabel(labels["y"])
    if any(labels.get(key) for key in ("title", "subtitle", "caption")):
        title_block(ax, labels.get("title") or "", labels.get("subtitle"), labels.get("caption"))
    return ax
