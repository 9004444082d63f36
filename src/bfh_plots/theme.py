"""Pure data: colors, palettes, fonts, and layout constants from the BFH style guide.

No library imports: this module defines the visual identity as plain
Python dicts and lists so any consumer (matplotlib, Plotly, reports) can use it.
"""

# Core palette (Bispebjerg og Frederiksberg Hospital + Region Hovedstaden)
COLORS = {
    # Hospital identity colour
    "hospital_primary": "#007dbb",      # RGB 0,125,187
    "hospital_blue": "#009ce8",         # RGB 0,156,232
    "hospital_light_blue1": "#cce5f1",
    "hospital_light_blue2": "#e5f2f8",
    "hospital_grey": "#646c6f",
    "hospital_dark_grey": "#333333",
    "hospital_white": "#ffffff",

    # Region H identity colour
    "regionh_primary": "#002555",       # RGB 0,37,85
    "regionh_blue": "#007dbb",
    "regionh_light_grey1": "#ccd3dd",
    "regionh_light_grey2": "#e5e9ee",
    "regionh_grey": "#646c6f",
    "regionh_dark_grey": "#333333",
    "regionh_white": "#ffffff",

    # Aliases
    "primary": "#007dbb",
    "blue": "#009ce8",
    "light_blue": "#cce5f1",
    "very_light_blue": "#e5f2f8",
    "grey": "#646c6f",
    "dark_grey": "#333333",
    "white": "#ffffff",
    "regionh_navy": "#002555",
}


def _pick(*names: str) -> list[str]:
    return [COLORS[name] for name in names]


# Named palettes, darkest/most prominent first
PALETTES = {
    "main": _pick("hospital_primary", "hospital_blue", "hospital_grey", "dark_grey"),
    "hospital": _pick("hospital_primary", "hospital_blue", "hospital_grey", "dark_grey"),
    "hospital_blues": _pick("hospital_primary", "hospital_blue", "light_blue", "very_light_blue"),
    "hospital_blues_seq": _pick(
        "hospital_primary", "hospital_blue", "light_blue", "very_light_blue", "white",
    ),
    "hospital_infographic": _pick(
        "hospital_primary", "hospital_blue", "light_blue", "hospital_grey", "dark_grey",
    ),

    "regionh": _pick("regionh_primary", "regionh_blue", "regionh_grey", "dark_grey"),
    "regionh_main": _pick(
        "regionh_primary", "regionh_blue", "regionh_light_grey1", "regionh_grey",
    ),
    "regionh_blues": _pick(
        "regionh_primary", "regionh_blue", "regionh_light_grey1", "regionh_light_grey2",
    ),
    "regionh_blues_seq": _pick(
        "regionh_primary", "regionh_blue", "regionh_light_grey1", "regionh_light_grey2", "white",
    ),
    "regionh_infographic": _pick(
        "regionh_primary", "regionh_blue", "regionh_light_grey1", "regionh_grey", "dark_grey",
    ),

    # Legacy names kept for older reports
    "primary": _pick("hospital_primary", "hospital_blue"),
    "blues": _pick("hospital_primary", "hospital_blue", "light_blue", "very_light_blue"),
    "blues_sequential": _pick(
        "hospital_primary", "hospital_blue", "light_blue", "very_light_blue", "white",
    ),
    "greys": _pick("dark_grey", "hospital_grey", "light_blue", "very_light_blue"),
    "contrast": _pick("hospital_primary", "hospital_grey", "hospital_blue", "dark_grey"),
    "infographic": _pick(
        "hospital_primary", "hospital_blue", "light_blue", "hospital_grey", "dark_grey",
    ),
}

# Data color cycle: the main palette
COLOR_CYCLE = PALETTES["main"]

# Mari is installed on employee PCs; Roboto is the open-source fallback.
FONTS = {
    "priority": ("Mari", "Roboto", "Arial", "sans"),
    "report": ("Mari Office", "Mari", "Roboto", "Arial"),
    "fallback": "sans",
}

# Chart layout constants (points unless noted)
LAYOUT = {
    "figsize": (7.0, 5.0),     # inches, matches report_full
    "dpi": 100,
    "base_size": 12,
    "title_scale": 1.3,
    "subtitle_scale": 1.1,
    "caption_scale": 0.8,
    "tick_scale": 0.9,
    "line_width": 0.5,
    "text": "#4d4d4d",         # grey30
    "caption": "#7f7f7f",      # grey50
    "axis_line": "#b3b3b3",    # grey70
    "strip": "#f2f2f2",        # grey95
    "dark_bg": "#1a1a1a",
}

# ggsave-style export presets (inches)
SAVE_PRESETS = {
    "report_full": (7.0, 5.0),
    "report_half": (3.5, 3.0),
    "presentation": (10.0, 6.0),
    "presentation_wide": (12.0, 6.75),
    "square": (6.0, 6.0),
    "poster": (12.0, 9.0),
}

# Recommended figure sizes by output type and aspect (inches)
DIMENSIONS = {
    "report": {"standard": (7.0, 5.0), "wide": (8.0, 4.5), "square": (5.0, 5.0)},
    "presentation": {"standard": (10.0, 6.0), "wide": (12.0, 6.75), "square": (8.0, 8.0)},
    "poster": {"standard": (12.0, 9.0), "wide": (16.0, 9.0), "square": (12.0, 12.0)},
    "web": {"standard": (8.0, 6.0), "wide": (10.0, 5.625), "square": (6.0, 6.0)},
    "print": {"standard": (8.0, 6.0), "wide": (10.0, 6.0), "square": (6.0, 6.0)},
}
