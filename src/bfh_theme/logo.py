"""
Logo overlay for matplotlib figures.

``overlay_logo`` runs the full pipeline::

    resolve path -> validate -> decode -> place -> compose

Every stage raises on failure (see ``bfh_theme.exceptions``) and the input
figure is never modified; a new figure carrying the logo layer is returned.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .assets import get_logo
from .config import LogoConfig
from .exceptions import InvalidAlphaError
from .images import ImageBuffer, load_image
from .layers import add_overlay_axes, clone_figure, ensure_figure, find_layer
from .security import validate_logo_path
from .validation import validate_numeric_range

logger = logging.getLogger(__name__)

LOGO_LAYER_LABEL = "bfh_logo"

# Logo height and bottom gap, as a fraction of figure height
LOGO_HEIGHT_FRACTION = 1 / 15


@dataclass(frozen=True, slots=True)
class PlacementBox:
    """Logo bounds in normalized figure coordinates."""

    x: float
    y: float
    width: float
    height: float

    @property
    def extent(self) -> tuple[float, float, float, float]:
        return (self.x, self.x + self.width, self.y, self.y + self.height)


def compute_placement(width_px: int, height_px: int) -> PlacementBox:
    """Flush-left box, one logo-height above the bottom edge, aspect preserved."""
    height = LOGO_HEIGHT_FRACTION
    return PlacementBox(
        x=0.0,
        y=LOGO_HEIGHT_FRACTION,
        width=height * (width_px / height_px),
        height=height,
    )


def _validate_alpha(alpha: Any) -> float:
    return validate_numeric_range(alpha, "alpha", 0, 1, error=InvalidAlphaError)


def compose_logo(plot: Figure, image: ImageBuffer, box: PlacementBox, alpha: float = 1.0) -> Figure:
    ensure_figure(plot)
    alpha = _validate_alpha(alpha)

    composed = clone_figure(plot)
    layer = add_overlay_axes(composed, LOGO_LAYER_LABEL)
    artist = layer.imshow(
        image.pixels,
        extent=box.extent,
        alpha=alpha,
        aspect="auto",
        interpolation="antialiased",
    )
    artist.set_clip_on(False)
    # imshow autoscales to the extent; pin the layer back to the full canvas
    layer.set_xlim(0, 1)
    layer.set_ylim(0, 1)
    return composed


def overlay_logo(
    plot: Figure,
    logo_path: str | os.PathLike | None = None,
    alpha: float = 1.0,
    *,
    config: LogoConfig | None = None,
) -> Figure:
    """Return a copy of ``plot`` with a logo in the lower-left corner.

    ``logo_path=None`` uses the bundled mark at full resolution.  PNG and JPEG
    files are accepted; the file type is decided by content, not extension.
    """
    ensure_figure(plot)
    alpha = _validate_alpha(alpha)
    config = config or LogoConfig.from_env()

    if logo_path is None:
        logo_path = get_logo().path

    validated = validate_logo_path(logo_path, config)
    image = load_image(validated)
    box = compute_placement(image.width, image.height)

    logger.info(
        "Adding logo %s (%dx%d px) at alpha=%.2f", validated.path.name, image.width, image.height, alpha
    )
    return compose_logo(plot, image, box, alpha)


def find_logo_layer(fig: Figure) -> Axes | None:
    return find_layer(fig, LOGO_LAYER_LABEL)
