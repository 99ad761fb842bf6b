"""Chromalite: a small RGB/HSV/HEX color model."""

from .colors.color import Color
from .conversions import (
    validate_hex,
    hex_to_rgb,
    rgb_to_hex,
    hex_to_hsv,
    hsv_to_hex,
    unit_rgb_to_hsv,
    rgb_to_hsv,
    hsv_to_unit_rgb,
    hsv_to_rgb,
    rgb_to_string,
)
from .types.color_types import RGBTriplet, HSVTriplet
from .errors import ColorError, FormatError, ParseError, RangeError

__all__ = [
    # color object
    "Color",
    # conversions
    "validate_hex",
    "hex_to_rgb",
    "rgb_to_hex",
    "hex_to_hsv",
    "hsv_to_hex",
    "unit_rgb_to_hsv",
    "rgb_to_hsv",
    "hsv_to_unit_rgb",
    "hsv_to_rgb",
    "rgb_to_string",
    # value types
    "RGBTriplet",
    "HSVTriplet",
    # errors
    "ColorError",
    "FormatError",
    "ParseError",
    "RangeError",
]
