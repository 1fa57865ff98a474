"""Lookup of logo files bundled with the package."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .exceptions import AssetNotFoundError

LOGO_DIR = Path(__file__).resolve().parent / "assets" / "logo"

VARIANTS = ("mark", "full")
RESOLUTIONS = ("full", "web", "small")

# (variant, resolution) -> file name under LOGO_DIR
LOGO_FILES = {
    ("mark", "full"): "bfh_mark.png",
    ("mark", "web"): "bfh_mark_web.png",
    ("mark", "small"): "bfh_mark_small.png",
    ("full", "full"): "bfh_logo.png",
    ("full", "web"): "bfh_logo_web.png",
    ("full", "small"): "bfh_logo_small.png",
}


@dataclass(frozen=True, slots=True)
class LogoAsset:
    path: Path
    variant: str
    resolution: str


def get_logo(
    variant: str = "mark",
    resolution: str = "full",
    asset_dir: str | Path | None = None,
) -> LogoAsset:
    """Resolve a bundled logo.

    ``variant`` is ``"mark"`` (symbol only) or ``"full"`` (wordmark);
    ``resolution`` is ``"full"`` (print), ``"web"`` or ``"small"``.
    """
    filename = LOGO_FILES.get((variant, resolution))
    if filename is None:
        available = ", ".join(f"{v}/{r}" for v, r in LOGO_FILES)
        raise AssetNotFoundError(
            f"No bundled logo for variant={variant!r}, resolution={resolution!r}. "
            f"Available: {available}"
        )

    base = Path(asset_dir) if asset_dir is not None else LOGO_DIR
    path = base / filename
    if not path.is_file():
        raise AssetNotFoundError(
            f"Logo file {filename} not found in {base}. "
            "The package assets may not have been installed correctly."
        )
    return LogoAsset(path=path, variant=variant, resolution=resolution)


def get_logo_path(
    variant: str = "mark",
    resolution: str = "full",
    asset_dir: str | Path | None = None,
) -> Path:
    return get_logo(variant, resolution, asset_dir).path
