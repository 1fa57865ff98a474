"""Argument validation shared by the palette, scale and branding helpers."""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Iterable

from .exceptions import InvalidArgumentError


def validate_palette_argument(palette: Any) -> str:
    if not isinstance(palette, str) or not palette:
        raise InvalidArgumentError("palette must be a single character string")
    return palette


def validate_logical_argument(value: Any, name: str) -> bool:
    if not isinstance(value, bool):
        raise InvalidArgumentError(f"{name} must be a single logical value (True or False)")
    return value


def validate_numeric_range(
    value: Any,
    name: str,
    min: float,
    max: float,
    *,
    allow_none: bool = False,
    exclusive_min: bool = False,
    exclusive_max: bool = False,
    error: type[InvalidArgumentError] = InvalidArgumentError,
) -> float | None:
    """Check that ``value`` is a single real number inside ``[min, max]``.

    Bounds are inclusive unless ``exclusive_min``/``exclusive_max`` is set.
    ``error`` lets callers raise a more specific subclass (e.g. for alpha).
    """
    if value is None:
        if allow_none:
            return None
        raise error(f"{name} must be numeric")

    # bool is a Real subclass but never a meaningful size or opacity
    if isinstance(value, bool) or not isinstance(value, Real) or math.isnan(value):
        raise error(f"{name} must be numeric")

    if exclusive_min and value <= min:
        raise error(f"{name} must be greater than {min}")
    if not exclusive_min and value < min:
        raise error(f"{name} must be between {min} and {max}")
    if exclusive_max and value >= max:
        raise error(f"{name} must be less than {max}")
    if not exclusive_max and value > max:
        raise error(f"{name} must be between {min} and {max}")

    return float(value)


def validate_choice(
    value: Any,
    name: str,
    choices: Iterable[str],
    *,
    allow_none: bool = False,
) -> str | None:
    choices = list(choices)
    if value is None:
        if allow_none:
            return None
        raise InvalidArgumentError(f"{name} must be one of: {', '.join(choices)}")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a character string")
    if value not in choices:
        raise InvalidArgumentError(f"{name} must be one of: {', '.join(choices)}")
    return value
