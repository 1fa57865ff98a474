import logging
from pathlib import Path

import matplotlib.pyplot as plt
import pytest
from PIL import Image

from bfh_theme import fonts
from bfh_theme.charts import (
    CAPTION_GID,
    SUBTITLE_GID,
    bfh_labs,
    collect_legend,
    combine_plots,
    figure,
    get_dimensions,
    save,
    title_block,
)
from bfh_theme.exceptions import InvalidArgumentError


@pytest.fixture(autouse=True)
def _known_font(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(fonts, "_default_cache", fonts.FontCache())
    monkeypatch.setattr(fonts, "available_font_families", lambda: {"DejaVu Sans"})


def _plain_figure():
    fig, ax = plt.subplots()
    ax.plot([0, 1], [1, 0])
    return fig


def test_figure_uses_preset_size() -> None:
    fig, _ = figure(preset="presentation")
    assert tuple(fig.get_size_inches()) == pytest.approx((10, 6))


def test_save_default_preset(tmp_path: Path) -> None:
    path = save(_plain_figure(), "chart.png", output_dir=tmp_path, dpi=50)
    assert path == tmp_path / "chart.png"
    assert Image.open(path).size == (350, 250)


@pytest.mark.parametrize(
    "units, width, height",
    [("cm", 2.54 * 4, 2.54 * 2), ("mm", 101.6, 50.8), ("px", 200, 100), ("in", 4, 2)],
)
def test_save_converts_units(tmp_path: Path, units: str, width: float, height: float) -> None:
    fig = _plain_figure()
    save(fig, tmp_path / "chart.png", width=width, height=height, units=units, dpi=50, close=False)
    assert tuple(fig.get_size_inches()) == pytest.approx((4, 2))


def test_save_preset_in_centimetres_keeps_size(tmp_path: Path) -> None:
    fig = _plain_figure()
    save(fig, tmp_path / "chart.png", preset="square", units="cm", dpi=50, close=False)
    assert tuple(fig.get_size_inches()) == pytest.approx((6, 6))


def test_save_unknown_preset_warns(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    fig = _plain_figure()
    with caplog.at_level(logging.WARNING, logger="bfh_theme.charts"):
        save(fig, tmp_path / "chart.png", preset="billboard", dpi=50, close=False)
    assert "Unknown preset 'billboard'" in caplog.text
    assert tuple(fig.get_size_inches()) == pytest.approx((7, 5))


def test_save_creates_output_dir(tmp_path: Path) -> None:
    path = save(_plain_figure(), "chart.png", output_dir=tmp_path / "figs" / "2024", dpi=50)
    assert path.is_file()


def test_save_rejects_unknown_units(tmp_path: Path) -> None:
    with pytest.raises(InvalidArgumentError, match="units"):
        save(_plain_figure(), tmp_path / "chart.png", units="pt")


def test_dimensions() -> None:
    assert get_dimensions("presentation", "wide") == {"width": 12, "height": 6.75}
    assert get_dimensions() == {"width": 7, "height": 5}


def test_dimensions_unknown_fall_back(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="bfh_theme.charts"):
        assert get_dimensions("tv", "tall") == {"width": 7, "height": 5}
    assert "Unknown type 'tv'" in caplog.text
    assert "Unknown format 'tall'" in caplog.text


def _panel(*labels):
    def draw(ax):
        for i, label in enumerate(labels):
            ax.plot([0, 1], [i, i + 1], label=label)
        ax.legend()

    return draw


def test_combine_plots_grid_and_shared_legend() -> None:
    fig, panels = combine_plots([_panel("A", "B"), _panel("B", "C"), _panel("A")], ncol=2)

    assert len(panels) == 3
    assert len(fig.axes) == 3
    assert all(ax.get_legend() is None for ax in panels)
    assert [t.get_text() for t in fig.legends[0].get_texts()] == ["A", "B", "C"]


def test_combine_plots_without_legend() -> None:
    fig, _ = combine_plots([_panel("A"), _panel("B")], legend_position="none")
    assert fig.legends == []


def test_combine_plots_rows_only() -> None:
    _, panels = combine_plots([_panel("A")] * 4, nrow=2)
    assert panels[1].get_subplotspec().colspan.start == 1


@pytest.mark.parametrize("kwargs", [{"plots": []}, {"plots": [_panel("A")], "legend_position": "inside"}])
def test_combine_plots_rejects_bad_arguments(kwargs) -> None:
    with pytest.raises(InvalidArgumentError):
        combine_plots(**kwargs)


def test_collect_legend_without_labels() -> None:
    fig = _plain_figure()
    assert collect_legend(fig) is None


def test_title_block_replaces_previous_subtitle_and_caption() -> None:
    fig, ax = plt.subplots()
    title_block(ax, "Ventetid", subtitle="2023", caption="Kilde: LPR")
    title_block(ax, "Ventetid", subtitle="2024", caption="Kilde: SP")

    subtitles = [t.get_text() for t in ax.texts if t.get_gid() == SUBTITLE_GID]
    captions = [t.get_text() for t in fig.texts if t.get_gid() == CAPTION_GID]
    assert subtitles == ["2024"]
    assert captions == ["Kilde: SP"]
    assert ax.get_title(loc="left") == "Ventetid"


def test_labs_uppercases_all_but_title() -> None:
    fig, ax = plt.subplots()
    ax.plot([0, 1], [0, 1], label="Afsnit 1")
    bfh_labs(ax, title="Indlæggelser pr. måned", subtitle="region h", x="måned", y="antal", color="afsnit")

    assert ax.get_title(loc="left") == "Indlæggelser pr. måned"
    assert ax.get_xlabel() == "MÅNED"
    assert ax.get_ylabel() == "ANTAL"
    assert ax.get_legend().get_title().get_text() == "AFSNIT"
    assert [t.get_text() for t in ax.texts if t.get_gid() == SUBTITLE_GID] == ["REGION H"]
