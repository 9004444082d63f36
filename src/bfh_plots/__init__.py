"""bfh-plots: BFH-branded matplotlib charts for Bispebjerg og Frederiksberg Hospital."""

from .assets import ImageKind, ResolvedAsset, resolve_asset
from .branding import (
    add_color_bar,
    add_footer,
    add_logo,
    add_packaged_logo,
    get_logo_path,
    labs,
    title_block,
)
from .charts import bar, combine, figure, get_dimensions, line, save, scatter, shared_legend
from .colors import cols, palette, palette_cmap, palette_ramp, show_palettes
from .config import set_logo_root
from .exceptions import (
    AssetError,
    AssetNotFoundError,
    BFHPlotsError,
    ConfigurationError,
    EmptyOrUnreadableError,
    InvalidInputError,
    NotAnImageError,
    OutsideAllowedRootError,
    PathTamperingError,
)
from .fonts import (
    FontCache,
    FontResolver,
    check_fonts,
    clear_font_cache,
    get_font,
    resolve_font,
    set_fonts,
)
from .scales import apply_scale, color_scale, continuous_cmap
from .style import apply, reset, theme_context, theme_rc
from .theme import COLORS, COLOR_CYCLE, FONTS, LAYOUT, PALETTES

__version__ = "0.3.0"

__all__ = [
    "bar",
    "combine",
    "figure",
    "get_dimensions",
    "line",
    "save",
    "scatter",
    "shared_legend",
    "apply",
    "reset",
    "theme_context",
    "theme_rc",
    "cols",
    "palette",
    "palette_cmap",
    "palette_ramp",
    "show_palettes",
    "apply_scale",
    "color_scale",
    "continuous_cmap",
    "FontCache",
    "FontResolver",
    "check_fonts",
    "clear_font_cache",
    "get_font",
    "resolve_font",
    "set_fonts",
    "ImageKind",
    "ResolvedAsset",
    "resolve_asset",
    "set_logo_root",
    "add_color_bar",
    "add_footer",
    "add_logo",
    "add_packaged_logo",
    "get_logo_path",
    "labs",
    "title_block",
    "AssetError",
    "AssetNotFoundError",
    "BFHPlotsError",
    "ConfigurationError",
    "EmptyOrUnreadableError",
    "InvalidInputError",
    "NotAnImageError",
    "OutsideAllowedRootError",
    "PathTamperingError",
    "COLORS",
    "COLOR_CYCLE",
    "FONTS",
    "LAYOUT",
    "PALETTES",
]
