from string import hexdigits
from typing import Any
from ..errors import FormatError, ParseError
from ..types.color_types import RGBTriplet, HSVTriplet, Scalar
from ..types.limits import HEX_LENGTH, SHORT_HEX_LENGTH
from ..utils.num_utils import check_channel
from .to_hsv import rgb_to_hsv
from .to_rgb import hsv_to_rgb

_HEX_DIGITS = frozenset(hexdigits)


def validate_hex(value: Any) -> str:
    """
    Normalize a hex color string to six lowercase digits without ``#``.

    Only the length is checked here; the digits themselves are checked when
    the string is parsed by ``hex_to_rgb``.

    Args:
        value: Hex string, with or without a leading ``#``, in 3-digit
            shorthand or full 6-digit form.

    Returns:
        str: e.g. ``"abc"`` -> ``"aabbcc"``

    Raises:
        TypeError: value is not a string.
        FormatError: value is not 3 or 6 characters long after stripping ``#``.
    """
    if not isinstance(value, str):
        raise TypeError(f"Hex color must be a string, got {type(value).__name__}")

    digits = value[1:] if value.startswith("#") else value

    if len(digits) not in (SHORT_HEX_LENGTH, HEX_LENGTH):
        raise FormatError(f"Incorrect HEX format: {value!r}")

    if len(digits) == SHORT_HEX_LENGTH:
        digits = "".join(d * 2 for d in digits)

    return digits.lower()


def _parse_pair(pair: str, hex_value: str) -> int:
    # int(..., 16) also accepts signs, whitespace and underscores
    if not set(pair) <= _HEX_DIGITS:
        raise ParseError(f"Can't convert HEX to RGB - #{hex_value}")
    return int(pair, 16)


def hex_to_rgb(value: str) -> RGBTriplet:
    """
    Convert a hex color string to an RGB triplet of ints in [0, 255].

    Raises:
        FormatError: invalid length.
        ParseError: a channel pair is not valid base 16.
    """
    hex_value = validate_hex(value)
    return RGBTriplet(
        _parse_pair(hex_value[0:2], hex_value),
        _parse_pair(hex_value[2:4], hex_value),
        _parse_pair(hex_value[4:6], hex_value),
    )


def rgb_to_hex(r: Scalar, g: Scalar, b: Scalar) -> str:
    """Convert 0-255 channels to a 6-digit lowercase hex string without ``#``."""
    red = check_channel(r, "red")
    green = check_channel(g, "green")
    blue = check_channel(b, "blue")
    return f"{red:02x}{green:02x}{blue:02x}"


def hex_to_hsv(value: str) -> HSVTriplet:
    return rgb_to_hsv(*hex_to_rgb(value))


def hsv_to_hex(h: Scalar, s: Scalar, v: Scalar) -> str:
    return rgb_to_hex(*hsv_to_rgb(h, s, v))
