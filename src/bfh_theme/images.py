"""Decode validated logo files into RGBA pixel buffers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

import numpy as np
from PIL import Image, UnidentifiedImageError, features

from .exceptions import ImageDecodeError, MissingCapabilityError
from .security import ValidatedPath

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, eq=False)
class ImageBuffer:
    """RGBA pixels, shape ``(height, width, 4)``."""

    pixels: np.ndarray

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


def _decode(validated: ValidatedPath, pil_format: str) -> ImageBuffer:
    try:
        with Image.open(validated.path, formats=[pil_format]) as img:
            img.load()
            pixels = np.asarray(img.convert("RGBA"), dtype=np.uint8)
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as exc:
        raise ImageDecodeError(
            f"Failed to read {pil_format} file {validated.path.name}: {exc}"
        ) from exc

    if pixels.ndim != 3 or pixels.shape[0] == 0 or pixels.shape[1] == 0:
        raise ImageDecodeError(f"Logo file {validated.path.name} decoded to an empty image")
    return ImageBuffer(pixels=pixels)


def decode_png(validated: ValidatedPath) -> ImageBuffer:
    return _decode(validated, "PNG")


def decode_jpeg(validated: ValidatedPath) -> ImageBuffer:
    if not features.check_codec("jpg"):
        raise MissingCapabilityError(
            "JPEG support is not available in this Pillow build; "
            "install Pillow with libjpeg or supply a PNG logo"
        )
    return _decode(validated, "JPEG")


DECODERS: dict[str, Callable[[ValidatedPath], ImageBuffer]] = {
    "png": decode_png,
    "jpeg": decode_jpeg,
}


def load_image(validated: ValidatedPath) -> ImageBuffer:
    decoder = DECODERS.get(validated.format)
    if decoder is None:
        raise MissingCapabilityError(f"No decoder registered for {validated.format!r} images")

    image = decoder(validated)
    logger.debug("Decoded %s: %dx%d px", validated.path.name, image.width, image.height)
    return image
