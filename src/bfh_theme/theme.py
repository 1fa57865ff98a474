"""BFH theme presets as matplotlib rcParams dicts.

Each ``theme_*`` builder returns a plain dict; nothing is applied globally
until ``style.apply()`` (or ``style.theme_context()``) is called.
"""

from __future__ import annotations

import logging
from typing import Callable

import matplotlib as mpl

from .colors import BFH_PALETTES
from .fonts import get_bfh_font

logger = logging.getLogger(__name__)

# Neutral tones used across the presets (ggplot-style greyNN names)
GREYS = {
    "grey20": "#333333",
    "grey30": "#4d4d4d",
    "grey50": "#7f7f7f",
    "grey70": "#b3b3b3",
    "grey80": "#cccccc",
    "grey85": "#d9d9d9",
    "grey90": "#e5e5e5",
    "grey95": "#f2f2f2",
    "dark_bg": "#1a1a1a",
}

# Fallback families listed after the detected BFH font
SANS_FALLBACKS = ["Roboto", "Arial", "Helvetica", "DejaVu Sans", "sans-serif"]


def _family_list(base_family: str) -> list[str]:
    return [base_family] + [name for name in SANS_FALLBACKS if name != base_family]


def theme_bfh(base_size: float = 12, base_family: str | None = None) -> dict:
    """The main BFH theme: white background, no grid, left-aligned titles."""
    if base_family is None:
        base_family = get_bfh_font()

    line_width = base_size / 22 * 1.5

    return {
        # Figure
        "figure.facecolor": "white",
        "figure.edgecolor": "none",
        "figure.titlesize": base_size * 1.3,
        "savefig.facecolor": "white",
        "savefig.edgecolor": "none",
        "savefig.bbox": "tight",
        "savefig.pad_inches": base_size / 72,

        # Font
        "font.family": "sans-serif",
        "font.sans-serif": _family_list(base_family),
        "font.size": base_size,
        "text.color": "black",

        # Axes
        "axes.facecolor": "white",
        "axes.edgecolor": GREYS["grey70"],
        "axes.linewidth": line_width,
        "axes.titlesize": base_size * 1.3,
        "axes.titleweight": "normal",
        "axes.titlelocation": "left",
        "axes.titlecolor": "black",
        "axes.titlepad": base_size * 0.5,
        "axes.labelsize": base_size,
        "axes.labelweight": "normal",
        "axes.labelcolor": GREYS["grey30"],
        "axes.labelpad": base_size * 0.5,
        "axes.prop_cycle": mpl.cycler(color=BFH_PALETTES["main"]),
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.grid": False,
        "axes.axisbelow": True,

        # Grid (off by default, styled for presets that turn it on)
        "grid.color": GREYS["grey90"],
        "grid.linewidth": 0.5,

        # Ticks: none on x, short inward ticks on y
        "xtick.labelsize": base_size * 0.9,
        "ytick.labelsize": base_size * 0.9,
        "xtick.labelcolor": GREYS["grey30"],
        "ytick.labelcolor": GREYS["grey30"],
        "xtick.color": GREYS["grey70"],
        "ytick.color": GREYS["grey70"],
        "xtick.major.size": 0,
        "ytick.major.size": 4,
        "ytick.direction": "in",
        "ytick.major.width": line_width,

        # Lines
        "lines.linewidth": 2.0,
        "lines.markersize": 6,

        # Legend
        "legend.frameon": False,
        "legend.facecolor": "white",
        "legend.fontsize": base_size * 0.9,
        "legend.title_fontsize": base_size * 0.9,
    }


def theme_bfh_minimal(base_size: float = 12, base_family: str | None = None) -> dict:
    """theme_bfh without axis lines or ticks."""
    params = theme_bfh(base_size, base_family)
    params.update({
        "axes.grid": False,
        "axes.spines.left": False,
        "axes.spines.bottom": False,
        "xtick.major.size": 0,
        "ytick.major.size": 0,
    })
    return params


def theme_bfh_print(base_size: float = 14, base_family: str | None = None) -> dict:
    """Higher contrast and heavier lines for paper output."""
    params = theme_bfh(base_size, base_family)
    params.update({
        "text.color": "black",
        "axes.labelcolor": "black",
        "xtick.labelcolor": "black",
        "ytick.labelcolor": "black",
        "xtick.color": "black",
        "ytick.color": "black",
        "axes.edgecolor": "black",
        "axes.linewidth": 1.0,
        "axes.grid": True,
        "grid.color": GREYS["grey80"],
        "grid.linewidth": 1.0,
        "xtick.major.size": 3.5,
        "xtick.major.width": 0.7,
        "ytick.major.width": 0.7,
        "axes.titlesize": base_size * 1.4,
        "axes.titleweight": "bold",
    })
    return params


def theme_bfh_presentation(base_size: float = 16, base_family: str | None = None) -> dict:
    """Larger type and a visible grid for slides."""
    params = theme_bfh(base_size, base_family)
    params.update({
        "axes.titlesize": base_size * 1.5,
        "axes.titleweight": "bold",
        "figure.titlesize": base_size * 1.5,
        "axes.grid": True,
        "grid.color": GREYS["grey85"],
        "grid.linewidth": 1.1,
        "legend.fontsize": base_size,
        "legend.title_fontsize": base_size * 1.1,
    })
    return params


def theme_bfh_dark(base_size: float = 12, base_family: str | None = None) -> dict:
    params = theme_bfh(base_size, base_family)
    params.update({
        "figure.facecolor": GREYS["dark_bg"],
        "savefig.facecolor": GREYS["dark_bg"],
        "axes.facecolor": GREYS["dark_bg"],
        "legend.facecolor": GREYS["dark_bg"],
        "text.color": "white",
        "axes.titlecolor": "white",
        "axes.titleweight": "bold",
        "axes.labelcolor": "white",
        "axes.labelweight": "bold",
        "xtick.labelcolor": GREYS["grey80"],
        "ytick.labelcolor": GREYS["grey80"],
        "xtick.color": GREYS["grey50"],
        "ytick.color": GREYS["grey50"],
        "axes.edgecolor": GREYS["grey50"],
        "axes.grid": True,
        "grid.color": GREYS["grey30"],
        "legend.labelcolor": "white",
    })
    return params


THEMES: dict[str, Callable[..., dict]] = {
    "bfh": theme_bfh,
    "bfh_minimal": theme_bfh_minimal,
    "bfh_print": theme_bfh_print,
    "bfh_presentation": theme_bfh_presentation,
    "bfh_dark": theme_bfh_dark,
}


def get_theme(name: str = "bfh", base_size: float | None = None, base_family: str | None = None) -> dict:
    """Build a preset by name; unknown names fall back to ``bfh``.

    ``base_size=None`` keeps each preset's own default size.
    """
    builder = THEMES.get(name)
    if builder is None:
        logger.warning("Unknown theme '%s'. Using 'bfh'.", name)
        builder = theme_bfh

    if base_size is None:
        return builder(base_family=base_family)
    return builder(base_size=base_size, base_family=base_family)
