"""bfh-theme: matplotlib branding for Bispebjerg og Frederiksberg Hospital."""

from .assets import LogoAsset, get_logo, get_logo_path
from .branding import add_color_bar, add_footer, add_logo
from .charts import (
    SAVE_PRESETS,
    bfh_labs,
    collect_legend,
    combine_plots,
    figure,
    get_dimensions,
    save,
    title_block,
)
from .colors import BFH_COLORS, BFH_PALETTES, bfh_cols, bfh_pal, check_colorblind_safe, show_palettes
from .config import LogoConfig
from .exceptions import (
    AssetNotFoundError,
    BFHThemeError,
    ConfigurationError,
    ImageDecodeError,
    InvalidAlphaError,
    InvalidArgumentError,
    InvalidPlotInputError,
    MissingCapabilityError,
    PathSecurityError,
    UnsupportedFileTypeError,
)
from .fonts import (
    FontCache,
    check_bfh_fonts,
    clear_bfh_font_cache,
    get_bfh_font,
    set_bfh_fonts,
    setup_bfh_fonts,
)
from .logo import PlacementBox, compose_logo, compute_placement, find_logo_layer, overlay_logo
from .scales import color_cycler, register_colormaps, scale_bfh, scale_bfh_continuous, scale_bfh_discrete
from .style import apply, reset, theme_context
from .theme import (
    THEMES,
    get_theme,
    theme_bfh,
    theme_bfh_dark,
    theme_bfh_minimal,
    theme_bfh_presentation,
    theme_bfh_print,
)

__all__ = [
    "AssetNotFoundError",
    "BFHThemeError",
    "BFH_COLORS",
    "BFH_PALETTES",
    "ConfigurationError",
    "FontCache",
    "ImageDecodeError",
    "InvalidAlphaError",
    "InvalidArgumentError",
    "InvalidPlotInputError",
    "LogoAsset",
    "LogoConfig",
    "MissingCapabilityError",
    "PathSecurityError",
    "PlacementBox",
    "SAVE_PRESETS",
    "THEMES",
    "UnsupportedFileTypeError",
    "add_color_bar",
    "add_footer",
    "add_logo",
    "apply",
    "bfh_cols",
    "bfh_labs",
    "bfh_pal",
    "check_bfh_fonts",
    "check_colorblind_safe",
    "clear_bfh_font_cache",
    "collect_legend",
    "color_cycler",
    "combine_plots",
    "compose_logo",
    "compute_placement",
    "figure",
    "find_logo_layer",
    "get_bfh_font",
    "get_dimensions",
    "get_logo",
    "get_logo_path",
    "get_theme",
    "overlay_logo",
    "register_colormaps",
    "reset",
    "save",
    "scale_bfh",
    "scale_bfh_continuous",
    "scale_bfh_discrete",
    "set_bfh_fonts",
    "setup_bfh_fonts",
    "show_palettes",
    "theme_bfh",
    "theme_bfh_dark",
    "theme_bfh_minimal",
    "theme_bfh_presentation",
    "theme_bfh_print",
    "theme_context",
    "title_block",
]
