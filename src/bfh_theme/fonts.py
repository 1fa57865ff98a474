"""Font detection for BFH themes.

Mari is installed on hospital PCs; Roboto and Arial are the public fallbacks.
Detection queries matplotlib's font manager, which is slow enough to be worth
caching: the result lives in a ``FontCache`` until cleared or refreshed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterable

import matplotlib.pyplot as plt
from matplotlib import font_manager

logger = logging.getLogger(__name__)

FONT_PRIORITY = ["Mari", "Roboto", "Arial"]
FALLBACK_FONT = "sans-serif"

# Fonts reported by check_bfh_fonts()
CHECKED_FONTS = ["Mari Office", "Mari", "Roboto", "Arial"]


class FontCache:
    """Single-slot memo for the detected font family.

    Not locked: concurrent refreshes simply leave the last result in place.
    """

    def __init__(self) -> None:
        self._font: str | None = None

    @property
    def cached(self) -> str | None:
        return self._font

    def get(self, detect: Callable[[], str]) -> str:
        if self._font is None:
            self._font = detect()
        return self._font

    def refresh(self, detect: Callable[[], str]) -> str:
        self._font = detect()
        return self._font

    def clear(self) -> None:
        self._font = None


_default_cache = FontCache()


def available_font_families() -> set[str]:
    return {entry.name for entry in font_manager.fontManager.ttflist}


def detect_font(priority: Iterable[str] = FONT_PRIORITY) -> str:
    available = available_font_families()
    for font in priority:
        if font in available:
            logger.info("Using font: %s", font)
            return font
    logger.info("Using fallback font: %s", FALLBACK_FONT)
    return FALLBACK_FONT


def get_bfh_font(
    check_installed: bool = True,
    force_refresh: bool = False,
    cache: FontCache | None = None,
) -> str:
    """Return the best installed BFH font family.

    With ``check_installed=False`` the first-priority name is returned
    without touching the system.
    """
    if not check_installed:
        return FONT_PRIORITY[0]

    cache = cache or _default_cache
    if force_refresh:
        return cache.refresh(detect_font)
    return cache.get(detect_font)


def clear_bfh_font_cache(cache: FontCache | None = None) -> None:
    (cache or _default_cache).clear()
    logger.info("BFH font cache cleared")


def check_bfh_fonts() -> dict[str, bool]:
    available = available_font_families()
    results = {font: font in available for font in CHECKED_FONTS}

    for font, found in results.items():
        logger.info("%-15s: %s", font, "available" if found else "not found")
    if not (results["Mari Office"] or results["Mari"]):
        logger.info(
            "Mari fonts not found. These are installed on BFH employee computers; "
            "Roboto is recommended for external users."
        )
    return results


def setup_bfh_fonts(
    font_files: Iterable[str | Path] = (),
    cache: FontCache | None = None,
) -> str:
    """Register extra font files with matplotlib and return the font to use."""
    font_files = list(font_files)
    for path in font_files:
        font_manager.fontManager.addfont(str(path))
        logger.info("Registered font file %s", Path(path).name)

    return get_bfh_font(force_refresh=bool(font_files), cache=cache)


def set_bfh_fonts(
    font_files: Iterable[str | Path] = (),
    cache: FontCache | None = None,
) -> str:
    """Like ``setup_bfh_fonts`` but also makes the font the global default."""
    font = setup_bfh_fonts(font_files, cache=cache)

    if font != FALLBACK_FONT:
        sans = [name for name in plt.rcParams["font.sans-serif"] if name != font]
        plt.rcParams["font.sans-serif"] = [font, *sans]
    plt.rcParams["font.family"] = "sans-serif"

    logger.info("BFH fonts set as default: %s", font)
    return font
