"""Apply BFH theme presets to matplotlib globally or for a block of code."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

import matplotlib as mpl
import matplotlib.pyplot as plt

from .colors import BFH_PALETTES
from .theme import get_theme

logger = logging.getLogger(__name__)


def build_style(
    theme: str = "bfh",
    palette: str = "main",
    base_size: float | None = None,
    base_family: str | None = None,
) -> dict:
    """rcParams for ``theme`` with ``palette`` as the default color cycle."""
    colors = BFH_PALETTES.get(palette)
    if colors is None:
        logger.warning("Palette '%s' not found. Using 'main' palette.", palette)
        colors = BFH_PALETTES["main"]

    style = get_theme(theme, base_size=base_size, base_family=base_family)
    style["axes.prop_cycle"] = mpl.cycler(color=colors)
    # single-series defaults (bars, patches, images) follow the palette lead
    style["patch.facecolor"] = colors[0]
    return style


def apply(
    theme: str = "bfh",
    palette: str = "main",
    base_size: float | None = None,
    base_family: str | None = None,
) -> bool:
    """Apply a BFH theme to matplotlib globally."""
    plt.rcParams.update(build_style(theme, palette, base_size, base_family))
    logger.info("BFH defaults set: theme=%s, palette=%s", theme, palette)
    return True


def reset() -> bool:
    """Restore matplotlib's own defaults, undoing ``apply()``."""
    mpl.rcdefaults()
    logger.info("matplotlib defaults have been reset.")
    return True


@contextmanager
def theme_context(
    theme: str = "bfh",
    palette: str = "main",
    base_size: float | None = None,
    base_family: str | None = None,
) -> Iterator[dict]:
    """Use a BFH theme inside a ``with`` block only."""
    style = build_style(theme, palette, base_size, base_family)
    with mpl.rc_context(style):
        yield style
