import matplotlib as mpl
import pytest
from matplotlib.colors import LinearSegmentedColormap, ListedColormap, to_hex

from bfh_theme.colors import BFH_PALETTES
from bfh_theme.exceptions import InvalidArgumentError
from bfh_theme.scales import (
    color_cycler,
    register_colormaps,
    scale_bfh,
    scale_bfh_continuous,
    scale_bfh_discrete,
)


def test_discrete_scale_uses_palette_colors() -> None:
    cmap = scale_bfh("main")
    assert isinstance(cmap, ListedColormap)
    assert [to_hex(c) for c in cmap.colors] == BFH_PALETTES["main"]
    assert cmap.name == "bfh_main"


def test_continuous_scale_is_a_256_step_gradient() -> None:
    cmap = scale_bfh("blues", discrete=False)
    assert isinstance(cmap, LinearSegmentedColormap)
    assert cmap.N == 256
    assert to_hex(cmap(0.0)) == "#007dbb"
    assert to_hex(cmap(1.0)) == "#e5f2f8"


def test_reverse_flips_gradient_and_name() -> None:
    cmap = scale_bfh_continuous("blues", reverse=True)
    assert cmap.name == "bfh_blues_r"
    assert to_hex(cmap(0.0)) == "#e5f2f8"


def test_shortcut_defaults() -> None:
    assert scale_bfh_continuous().name == "bfh_blues"
    assert isinstance(scale_bfh_discrete(), ListedColormap)


@pytest.mark.parametrize(
    "kwargs",
    [{"palette": ""}, {"palette": 3}, {"discrete": "yes"}, {"reverse": None}, {"palette": "nope"}],
)
def test_invalid_arguments_raise(kwargs) -> None:
    with pytest.raises(InvalidArgumentError):
        scale_bfh(**kwargs)


def test_color_cycler_feeds_prop_cycle() -> None:
    cycle = color_cycler("contrast")
    assert [entry["color"] for entry in cycle] == BFH_PALETTES["contrast"]


def test_register_colormaps_is_repeatable() -> None:
    names = register_colormaps()
    assert "bfh_main" in names and "bfh_main_r" in names
    register_colormaps()
    assert to_hex(mpl.colormaps["bfh_blues"](0.0)) == "#007dbb"
