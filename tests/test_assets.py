from pathlib import Path

import pytest

from bfh_theme.assets import LOGO_FILES, get_logo, get_logo_path
from bfh_theme.exceptions import AssetNotFoundError
from bfh_theme.security import validate_logo_path


def test_default_logo_is_full_resolution_mark() -> None:
    asset = get_logo()
    assert (asset.variant, asset.resolution) == ("mark", "full")
    assert asset.path.name == "bfh_mark.png"
    assert asset.path.is_file()


@pytest.mark.parametrize("variant, resolution", sorted(LOGO_FILES))
def test_every_bundled_logo_is_a_valid_png(variant: str, resolution: str) -> None:
    path = get_logo_path(variant, resolution)
    assert validate_logo_path(path).format == "png"


@pytest.mark.parametrize("variant, resolution", [("grey", "web"), ("mark", "huge"), ("", "")])
def test_unknown_combination_raises(variant: str, resolution: str) -> None:
    with pytest.raises(AssetNotFoundError, match="Available"):
        get_logo(variant, resolution)


def test_missing_bundled_file_raises(tmp_path: Path) -> None:
    with pytest.raises(AssetNotFoundError, match="bfh_mark.png"):
        get_logo(asset_dir=tmp_path)


def test_asset_dir_override(tmp_path: Path, make_png) -> None:
    make_png(tmp_path / "bfh_logo_web.png")
    asset = get_logo("full", "web", asset_dir=tmp_path)
    assert asset.path == tmp_path / "bfh_logo_web.png"
