from __future__ import annotations
from typing import Mapping, NamedTuple, Sequence, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
RGBElement = Union[Sequence[Scalar], Mapping[str, Scalar], ndarray]

# Numeric types accepted wherever a channel, hue or percentage is expected.
# numpy scalars come in when colors are read out of image arrays.
numeric_types = (int, float, np.integer, np.floating)


class RGBTriplet(NamedTuple):
    """Red, green and blue channels, each an int in ``[0, 255]``."""
    red: int
    green: int
    blue: int


class HSVTriplet(NamedTuple):
    """
    Hue, saturation and value.

    The public form holds ints (hue 0-359, saturation and value as 0-100
    percentages); ``unit_rgb_to_hsv`` returns the float form with hue in
    ``[0, 360)`` and saturation/value as fractions in ``[0, 1]``.
    """
    hue: Scalar
    saturation: Scalar
    value: Scalar


def is_numeric(value: object) -> bool:
    """Check if value is a real number usable as a color component (bools excluded)."""
    return isinstance(value, numeric_types) and not isinstance(value, (bool, np.bool_))
