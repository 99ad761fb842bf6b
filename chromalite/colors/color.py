from __future__ import annotations
import warnings
from typing import Any, Optional, Self
from boundednumbers import UnitFloat
from ..conversions.hex import validate_hex, hex_to_rgb, rgb_to_hex
from ..conversions.to_hsv import unit_rgb_to_hsv, round_percent
from ..conversions.to_rgb import hsv_to_unit_rgb, truncate_unit_rgb
from ..conversions.strings import rgb_to_string
from ..types.color_types import RGBTriplet, HSVTriplet, Scalar
from ..types.limits import MAX_CHANNEL, MAX_PERCENT, HUE_360
from ..utils.num_utils import check_channel, check_percent, wrap_hue, get_dimension


class Color:
    """
    Mutable color that keeps its RGB, HSV and hex forms in sync.

    Every setter recomputes the other two representations before returning,
    so ``rgb``, ``hsv`` and ``hex`` always describe the same color.

    >>> c = Color("#ff0000")
    >>> c.hsv
    HSVTriplet(hue=0, saturation=100, value=100)
    >>> c.hue = 120
    >>> c.hex
    '#00ff00'
    """
    __slots__ = ('_red', '_green', '_blue', '_hue', '_saturation', '_value', '_hex')

    def __init__(self, r: Any = None, g: Scalar = 0, b: Scalar = 0) -> None:
        if isinstance(r, Color):
            for name in Color.__slots__:
                setattr(self, name, getattr(r, name))
        elif isinstance(r, str):
            if not r.startswith('#'):
                warnings.warn(
                    f"Color({r!r}) has no leading '#'; parsing it as hex",
                    UserWarning,
                    stacklevel=2
                )
            self.set_hex(r)
        else:
            self.set_rgb(0 if r is None else r, g, b)

    # ------------------ RGB ------------------
    def set_rgb(self, r: Scalar, g: Optional[Scalar] = None, b: Optional[Scalar] = None) -> Self:
        """
        Set all three channels (0-255). With only ``r`` given, the color
        becomes the gray ``(r, r, r)``.
        """
        if g is None and b is None:
            red = green = blue = check_channel(r, "red")
        else:
            red = check_channel(r, "red")
            green = check_channel(0 if g is None else g, "green")
            blue = check_channel(0 if b is None else b, "blue")

        self._red = red / MAX_CHANNEL
        self._green = green / MAX_CHANNEL
        self._blue = blue / MAX_CHANNEL
        self._calc_hex()
        self._calc_hsv()
        return self

    @property
    def rgb(self) -> RGBTriplet:
        return RGBTriplet(self.red, self.green, self.blue)

    @rgb.setter
    def rgb(self, value: Any) -> None:
        dim = get_dimension(value)
        if isinstance(value, str) or dim not in (1, 3):
            raise ValueError(f"rgb expects a gray level or an (r, g, b) triplet, got {value!r}")
        if dim == 1 and not hasattr(value, '__len__'):
            self.set_rgb(value)
        else:
            self.set_rgb(*value)

    @property
    def red(self) -> int:
        return round(self._red * MAX_CHANNEL)

    @red.setter
    def red(self, r: Scalar) -> None:
        self._red = check_channel(r, "red") / MAX_CHANNEL
        self._calc_hex()
        self._calc_hsv()

    @property
    def green(self) -> int:
        return round(self._green * MAX_CHANNEL)

    @green.setter
    def green(self, g: Scalar) -> None:
        self._green = check_channel(g, "green") / MAX_CHANNEL
        self._calc_hex()
        self._calc_hsv()

    @property
    def blue(self) -> int:
        return round(self._blue * MAX_CHANNEL)

    @blue.setter
    def blue(self, b: Scalar) -> None:
        self._blue = check_channel(b, "blue") / MAX_CHANNEL
        self._calc_hex()
        self._calc_hsv()

    # ------------------ HSV ------------------
    def set_hsv(self, h: Scalar, s: Scalar, v: Scalar) -> Self:
        """
        Set hue (degrees, wraps), saturation and value (percentages).
        RGB channels are truncated to whole 0-255 steps.
        """
        hue = float(wrap_hue(h))
        saturation = check_percent(s, "saturation") / MAX_PERCENT
        value = check_percent(v, "value") / MAX_PERCENT

        self._hue = hue
        self._saturation = saturation
        self._value = value
        self._calc_rgb_from_hsv()
        self._calc_hex()
        return self

    @property
    def hsv(self) -> HSVTriplet:
        return HSVTriplet(self.hue, self.saturation, self.value)

    @hsv.setter
    def hsv(self, value: Any) -> None:
        if get_dimension(value) != 3 or isinstance(value, str):
            raise ValueError(f"hsv expects an (h, s, v) triplet, got {value!r}")
        self.set_hsv(*value)

    @property
    def hue(self) -> int:
        return int(self._hue)

    @hue.setter
    def hue(self, h: Scalar) -> None:
        self._hue = float(wrap_hue(h))
        self._calc_rgb_from_hsv()
        self._calc_hex()

    @property
    def saturation(self) -> int:
        return round_percent(self._saturation)

    @saturation.setter
    def saturation(self, s: Scalar) -> None:
        self._saturation = check_percent(s, "saturation") / MAX_PERCENT
        self._calc_rgb_from_hsv()
        self._calc_hex()

    @property
    def value(self) -> int:
        return round_percent(self._value)

    @value.setter
    def value(self, v: Scalar) -> None:
        self._value = check_percent(v, "value") / MAX_PERCENT
        self._calc_rgb_from_hsv()
        self._calc_hex()

    # ------------------ HEX ------------------
    def set_hex(self, value: str) -> Self:
        """
        Set the color from a hex string (``#`` optional, 3 or 6 digits).

        Raises:
            FormatError: invalid length; the color is left unchanged.
            ParseError: non-hex digits; the color is left unchanged.

        Re-setting the current hex keeps the stored HSV, which may carry
        more precision than the truncated RGB it produced.
        """
        hex_value = validate_hex(value)
        red, green, blue = hex_to_rgb(hex_value)
        if hex_value == getattr(self, '_hex', None):
            return self

        self._hex = hex_value
        self._red = red / MAX_CHANNEL
        self._green = green / MAX_CHANNEL
        self._blue = blue / MAX_CHANNEL
        self._calc_hsv()
        return self

    @property
    def hex(self) -> str:
        return '#' + self._hex

    @hex.setter
    def hex(self, value: str) -> None:
        self.set_hex(value)

    # ------------------ INTERNAL CALCULATORS ------------------
    def _calc_hsv(self) -> None:
        self._hue, self._saturation, self._value = unit_rgb_to_hsv(self._red, self._green, self._blue)

    def _calc_rgb_from_hsv(self) -> None:
        red, green, blue = truncate_unit_rgb(*hsv_to_unit_rgb(self._hue, self._saturation, self._value))
        self._red = red / MAX_CHANNEL
        self._green = green / MAX_CHANNEL
        self._blue = blue / MAX_CHANNEL

    def _calc_hex(self) -> None:
        self._hex = rgb_to_hex(self.red, self.green, self.blue)

    # ------------------ UTILITY ------------------
    def complement(self) -> Color:
        """
        Return a new color with the hue rotated by 180 degrees.

        Saturation and value follow ``v' = v * (s - 1) + 1`` and
        ``s' = v * s / v'``; white (``v' == 0``) maps to black.
        """
        half_turn = HUE_360 / 2
        new_hue = self._hue - half_turn if self._hue >= half_turn else self._hue + half_turn
        new_value = UnitFloat(self._value * (self._saturation - 1) + 1)
        new_saturation = UnitFloat(self._value * self._saturation / new_value) if new_value else UnitFloat(0.0)
        return Color().set_hsv(new_hue, new_saturation * MAX_PERCENT, new_value * MAX_PERCENT)

    def to_string(self) -> str:
        """Return the ``"rgba(r,g,b)"`` form of this color."""
        return rgb_to_string(*self.rgb)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self.rgb == other.rgb

    __hash__ = None  # mutable

    def __repr__(self) -> str:
        return f"Color({self.hex!r})"

    def __str__(self) -> str:
        return self.hex
