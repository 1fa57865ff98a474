from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest
from PIL import Image

from bfh_theme.config import LOGO_MAX_BYTES_ENV, LOGO_ROOT_ENV


@pytest.fixture(autouse=True)
def _isolate_matplotlib(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv(LOGO_ROOT_ENV, raising=False)
    monkeypatch.delenv(LOGO_MAX_BYTES_ENV, raising=False)
    yield
    plt.close("all")
    matplotlib.rcdefaults()


@pytest.fixture
def fig():
    figure, ax = plt.subplots(figsize=(6, 4))
    ax.plot([0, 1, 2], [2, 0, 1])
    return figure


def write_png(path: Path, size: tuple[int, int] = (300, 100)) -> Path:
    Image.new("RGBA", size, (0, 125, 187, 255)).save(path, format="PNG")
    return path


def write_jpeg(path: Path, size: tuple[int, int] = (120, 60)) -> Path:
    Image.new("RGB", size, (0, 156, 232)).save(path, format="JPEG")
    return path


@pytest.fixture
def png_logo(tmp_path: Path) -> Path:
    return write_png(tmp_path / "logo.png")


@pytest.fixture
def jpeg_logo(tmp_path: Path) -> Path:
    return write_jpeg(tmp_path / "logo.jpg")


@pytest.fixture
def make_png():
    return write_png


@pytest.fixture
def make_jpeg():
    return write_jpeg
