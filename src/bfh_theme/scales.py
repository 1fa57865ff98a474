"""Colormaps and color cycles built from BFH palettes."""

from __future__ import annotations

import matplotlib as mpl
from matplotlib.colors import Colormap, LinearSegmentedColormap, ListedColormap

from .colors import BFH_PALETTES, get_palette
from .validation import validate_logical_argument, validate_palette_argument

CONTINUOUS_STEPS = 256


def scale_bfh(palette: str = "main", discrete: bool = True, reverse: bool = False) -> Colormap:
    """Colormap for a palette.

    Discrete scales use the palette colors as-is (``ListedColormap``);
    continuous scales interpolate a 256-step gradient through them.
    """
    palette = validate_palette_argument(palette)
    reverse = validate_logical_argument(reverse, "reverse")
    discrete = validate_logical_argument(discrete, "discrete")

    colors = get_palette(palette, reverse)
    name = f"bfh_{palette}" + ("_r" if reverse else "")
    if discrete:
        return ListedColormap(colors, name=name)
    return LinearSegmentedColormap.from_list(name, colors, N=CONTINUOUS_STEPS)


def scale_bfh_continuous(palette: str = "blues", reverse: bool = False) -> Colormap:
    return scale_bfh(palette, discrete=False, reverse=reverse)


def scale_bfh_discrete(palette: str = "main", reverse: bool = False) -> Colormap:
    return scale_bfh(palette, discrete=True, reverse=reverse)


def color_cycler(palette: str = "main", reverse: bool = False):
    """Cycler for ``axes.prop_cycle`` or ``ax.set_prop_cycle``."""
    return mpl.cycler(color=get_palette(palette, reverse))


def register_colormaps() -> list[str]:
    """Register every palette as ``bfh_<name>`` (and ``_r``) with matplotlib."""
    registered = []
    for palette in BFH_PALETTES:
        for reverse in (False, True):
            cmap = scale_bfh(palette, discrete=False, reverse=reverse)
            mpl.colormaps.register(cmap, name=cmap.name, force=True)
            registered.append(cmap.name)
    return registered
