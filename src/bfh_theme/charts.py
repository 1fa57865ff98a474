"""Figure helpers: figure(), save(), get_dimensions(), combine_plots(), bfh_labs()."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.legend import Legend
from matplotlib.text import Text

from .exceptions import InvalidArgumentError
from .style import apply
from .theme import GREYS
from .validation import validate_choice

logger = logging.getLogger(__name__)

# Save presets, width x height in inches
SAVE_PRESETS = {
    "report_full": (7.0, 5.0),
    "report_half": (3.5, 3.0),
    "presentation": (10.0, 6.0),
    "presentation_wide": (12.0, 6.75),
    "square": (6.0, 6.0),
    "poster": (12.0, 9.0),
}

# Recommended sizes per output target and aspect, in inches
DIMENSIONS = {
    "report": {"standard": (7, 5), "wide": (8, 4.5), "square": (5, 5)},
    "presentation": {"standard": (10, 6), "wide": (12, 6.75), "square": (8, 8)},
    "poster": {"standard": (12, 9), "wide": (16, 9), "square": (12, 12)},
    "web": {"standard": (8, 6), "wide": (10, 5.625), "square": (6, 6)},
    "print": {"standard": (8, 6), "wide": (10, 6), "square": (6, 6)},
}

UNITS_PER_INCH = {"in": 1.0, "cm": 2.54, "mm": 25.4}

LEGEND_POSITIONS = ("bottom", "top", "left", "right", "none")
LEGEND_LOCATIONS = {
    "bottom": "outside lower center",
    "top": "outside upper center",
    "left": "outside center left",
    "right": "outside center right",
}

# Labels bfh_labs() keeps in natural case
KEEP_CASE = {"title"}

SUBTITLE_GID = "bfh_subtitle"
CAPTION_GID = "bfh_caption"


def figure(
    figsize: tuple[float, float] | None = None,
    preset: str | None = None,
) -> tuple[Figure, Axes]:
    """Create a BFH-styled (fig, ax) pair. Escape hatch for custom charts."""
    apply()
    if figsize is None and preset is not None:
        figsize = SAVE_PRESETS.get(preset)
    fig, ax = plt.subplots(figsize=figsize)
    return fig, ax


def _to_inches(value: float, units: str, dpi: float) -> float:
    if units == "px":
        return value / dpi
    return value / UNITS_PER_INCH[units]


def save(
    fig: Figure,
    filename: str | Path,
    preset: str = "report_full",
    width: float | None = None,
    height: float | None = None,
    units: str = "in",
    dpi: int = 300,
    output_dir: str | Path | None = None,
    close: bool = True,
    **kwargs: Any,
) -> Path:
    """Save a figure at BFH dimensions.

    ``width``/``height`` override the preset when given.  Returns the path
    to the saved file.
    """
    units = validate_choice(units, "units", ["in", "cm", "mm", "px"])

    if width is None or height is None:
        if preset not in SAVE_PRESETS:
            logger.warning("Unknown preset '%s'. Using report_full dimensions.", preset)
            preset = "report_full"
        # presets are in inches; express them in the requested units
        per_inch = dpi if units == "px" else UNITS_PER_INCH[units]
        preset_w, preset_h = SAVE_PRESETS[preset]
        width = width if width is not None else preset_w * per_inch
        height = height if height is not None else preset_h * per_inch

    fig.set_size_inches(_to_inches(width, units, dpi), _to_inches(height, units, dpi))

    path = Path(output_dir) / filename if output_dir else Path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, **kwargs)
    if close:
        plt.close(fig)

    logger.info("Plot saved: %s", path)
    logger.info("Dimensions: %.1f x %.1f %s at %d dpi", width, height, units, dpi)
    return path


def get_dimensions(type: str = "report", format: str = "standard") -> dict[str, float]:
    """Recommended ``{"width", "height"}`` in inches for an output target."""
    if type not in DIMENSIONS:
        logger.warning("Unknown type '%s'. Using 'report'.", type)
        type = "report"
    if format not in DIMENSIONS[type]:
        logger.warning("Unknown format '%s'. Using 'standard'.", format)
        format = "standard"

    width, height = DIMENSIONS[type][format]
    return {"width": width, "height": height}


def combine_plots(
    plots: Sequence[Callable[[Axes], Any]],
    ncol: int | None = None,
    nrow: int | None = None,
    legend_position: str = "bottom",
    figsize: tuple[float, float] | None = None,
) -> tuple[Figure, list[Axes]]:
    """Draw several panels into one styled figure with a shared legend.

    Each entry of ``plots`` is called with its own axes and draws into it.
    """
    validate_choice(legend_position, "legend_position", LEGEND_POSITIONS)
    n_panels = len(plots)
    if n_panels == 0:
        raise InvalidArgumentError("plots must contain at least one panel")

    if ncol is None and nrow is None:
        ncol = n_panels
    if ncol is None:
        ncol = int(np.ceil(n_panels / nrow))
    nrow = int(np.ceil(n_panels / ncol))

    apply()
    fig, axes = plt.subplots(nrow, ncol, figsize=figsize, squeeze=False, layout="constrained")
    flat = list(axes.flat)
    for extra in flat[n_panels:]:
        extra.remove()

    panels = flat[:n_panels]
    for draw, ax in zip(plots, panels):
        draw(ax)

    collect_legend(fig, legend_position)
    return fig, panels


def collect_legend(fig: Figure, legend_position: str = "bottom") -> Legend | None:
    """Replace per-panel legends with one figure legend, deduplicated by label."""
    validate_choice(legend_position, "legend_position", LEGEND_POSITIONS)

    handles: dict[str, Any] = {}
    for ax in fig.axes:
        for handle, label in zip(*ax.get_legend_handles_labels()):
            handles.setdefault(label, handle)
        if ax.get_legend() is not None:
            ax.get_legend().remove()

    if legend_position == "none" or not handles:
        return None

    ncols = len(handles) if legend_position in ("bottom", "top") else 1
    return fig.legend(
        list(handles.values()),
        list(handles.keys()),
        loc=LEGEND_LOCATIONS[legend_position],
        ncols=ncols,
    )


def _remove_gid(artists: Iterable[Text], gid: str) -> None:
    for text in list(artists):
        if text.get_gid() == gid:
            text.remove()


def title_block(ax: Axes, title: str, subtitle: str | None = None, caption: str | None = None) -> Axes:
    """Left-aligned title with optional subtitle and a bottom-right caption."""
    size = plt.rcParams["font.size"]
    pad = size * 2.0 if subtitle else plt.rcParams["axes.titlepad"]
    ax.set_title(title, loc="left", pad=pad)

    _remove_gid(ax.texts, SUBTITLE_GID)
    if subtitle is not None:
        ax.text(
            0, 1.02, subtitle, gid=SUBTITLE_GID,
            transform=ax.transAxes, ha="left", va="bottom",
            fontsize=size * 1.1, color=GREYS["grey30"],
        )

    _remove_gid(ax.figure.texts, CAPTION_GID)
    if caption is not None:
        ax.figure.text(
            0.99, 0.01, caption, gid=CAPTION_GID,
            ha="right", va="bottom",
            fontsize=size * 0.8, color=GREYS["grey50"],
        )
    return ax


def bfh_labs(ax: Axes, **labels: Any) -> Axes:
    """Set plot labels, uppercasing everything except the title.

    Keys: ``title``, ``subtitle``, ``caption``, ``x``, ``y`` and a legend
    title as ``color``/``colour``/``fill``.
    """
    labels = {
        key: value.upper() if isinstance(value, str) and key not in KEEP_CASE else value
        for key, value in labels.items()
    }

    if "x" in labels:
        ax.set_xlabel(labels["x"])
    if "y" in labels:
        ax.set_ylabel(labels["y"])

    if {"title", "subtitle", "caption"} & labels.keys():
        title = labels.get("title", ax.get_title(loc="left"))
        title_block(ax, title, labels.get("subtitle"), labels.get("caption"))

    legend_title = next((labels[k] for k in ("color", "colour", "fill") if k in labels), None)
    if legend_title is not None:
        legend = ax.get_legend()
        if legend is not None:
            legend.set_title(legend_title)
        elif ax.get_legend_handles_labels()[0]:
            ax.legend(title=legend_title)
    return ax
