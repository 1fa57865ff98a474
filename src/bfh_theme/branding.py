"""Brand annotations for finished figures: footer, color bar and packaged logo.

Like ``overlay_logo``, each helper returns a new figure and leaves its input
untouched.
"""

from __future__ import annotations

from matplotlib.figure import Figure
from matplotlib.patches import Rectangle

from .assets import get_logo
from .colors import BFH_COLORS
from .config import LogoConfig
from .layers import add_overlay_axes, clone_figure, ensure_figure
from .logo import overlay_logo
from .validation import validate_choice, validate_numeric_range

DEFAULT_FOOTER_TEXT = "Bispebjerg og Frederiksberg Hospital"

FOOTER_LAYER_LABEL = "bfh_footer"
COLOR_BAR_LAYER_LABEL = "bfh_color_bar"

BAR_POSITIONS = ("top", "bottom", "left", "right")


def add_footer(
    plot: Figure,
    text: str | None = None,
    color: str = BFH_COLORS["hospital_primary"],
    text_color: str = "white",
    height: float = 0.05,
) -> Figure:
    """Full-width colored band along the bottom edge with centered text."""
    ensure_figure(plot)
    height = validate_numeric_range(height, "height", 0, 1, exclusive_min=True)
    text = text if text is not None else DEFAULT_FOOTER_TEXT

    composed = clone_figure(plot)
    layer = add_overlay_axes(composed, FOOTER_LAYER_LABEL)
    layer.add_patch(Rectangle((0, 0), 1, height, facecolor=color, edgecolor="none", clip_on=False))
    layer.text(0.5, height / 2, text, color=text_color, fontsize=10, ha="center", va="center")
    return composed


def _bar_rect(position: str, size: float) -> tuple[tuple[float, float], float, float]:
    if position == "top":
        return (0, 1 - size), 1, size
    if position == "bottom":
        return (0, 0), 1, size
    if position == "left":
        return (0, 0), size, 1
    return (1 - size, 0), size, 1


def add_color_bar(
    plot: Figure,
    position: str = "top",
    color: str = BFH_COLORS["hospital_primary"],
    size: float = 0.02,
) -> Figure:
    """Thin brand-colored band along one edge; ``size`` is a fraction of the figure."""
    ensure_figure(plot)
    position = validate_choice(position, "position", BAR_POSITIONS)
    size = validate_numeric_range(size, "size", 0, 1, exclusive_min=True)

    composed = clone_figure(plot)
    layer = add_overlay_axes(composed, COLOR_BAR_LAYER_LABEL)
    xy, width, height = _bar_rect(position, size)
    layer.add_patch(Rectangle(xy, width, height, facecolor=color, edgecolor="none", clip_on=False))
    return composed


def add_logo(
    plot: Figure,
    variant: str = "mark",
    resolution: str = "full",
    alpha: float = 1.0,
    *,
    config: LogoConfig | None = None,
) -> Figure:
    """``overlay_logo`` with a packaged logo chosen by variant and resolution."""
    asset = get_logo(variant, resolution)
    return overlay_logo(plot, asset.path, alpha, config=config)
