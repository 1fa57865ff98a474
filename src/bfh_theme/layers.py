"""Full-figure overlay layers for branding annotations.

Figures passed to the branding helpers are treated as immutable: each helper
clones the figure and draws on a fresh axes spanning the whole canvas, so
coordinates in ``[0, 1]`` map onto the rendered figure at any size.
"""

from __future__ import annotations

import pickle
from typing import Any

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.backend_bases import FigureCanvasBase
from matplotlib.figure import Figure

from .exceptions import InvalidPlotInputError

OVERLAY_ZORDER = 10


def ensure_figure(plot: Any) -> Figure:
    if not isinstance(plot, Figure):
        raise InvalidPlotInputError(
            f"plot must be a matplotlib Figure, got {type(plot).__name__}"
        )
    return plot


def clone_figure(plot: Figure) -> Figure:
    """Deep copy of ``plot`` that is not registered with pyplot.

    Unpickling a pyplot figure opens a new pyplot window for the copy; that
    manager is closed so copies never accumulate in ``plt.get_fignums()``.
    """
    try:
        clone = pickle.loads(pickle.dumps(plot))
    except (pickle.PicklingError, TypeError, AttributeError) as exc:
        raise InvalidPlotInputError(f"plot could not be copied for composition: {exc}") from exc

    if clone.canvas.manager is not None:
        plt.close(clone)
        FigureCanvasBase(clone)
    return clone


def add_overlay_axes(fig: Figure, label: str) -> Axes:
    overlay = fig.add_axes((0, 0, 1, 1), label=label, zorder=OVERLAY_ZORDER)
    overlay.set_axis_off()
    overlay.set_xlim(0, 1)
    overlay.set_ylim(0, 1)
    overlay.set_navigate(False)
    overlay.set_in_layout(False)
    return overlay


def find_layer(fig: Figure, label: str) -> Axes | None:
    for ax in fig.axes:
        if ax.get_label() == label:
            return ax
    return None
