import math
from boundednumbers import UnitFloat
from ..types.color_types import HSVTriplet, Scalar
from ..types.limits import MAX_CHANNEL, MAX_PERCENT, HUE_360, HUE_SECTOR
from ..utils.num_utils import check_channel


def unit_rgb_to_hsv(r: float, g: float, b: float) -> HSVTriplet:
    """
    Convert RGB to HSV using the standard min/max decomposition.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        HSVTriplet: (hue [0,360), saturation [0,1], value [0,1]) as floats
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    value = max_c
    saturation = 1.0 - min_c / max_c if max_c != 0 else 0.0

    if delta == 0:
        return HSVTriplet(0.0, UnitFloat(saturation), UnitFloat(value))

    if max_c == r:
        hue = HUE_SECTOR * (((g - b) / delta) % 6)
    elif max_c == g:
        hue = HUE_SECTOR * (2 + (b - r) / delta)
    else:
        hue = HUE_SECTOR * (4 + (r - g) / delta)

    if hue < 0:
        hue += HUE_360
    if hue >= HUE_360:
        hue -= HUE_360

    return HSVTriplet(float(hue), UnitFloat(saturation), UnitFloat(value))


def round_percent(fraction: float) -> int:
    """Round a [0, 1] fraction to an int percentage, halves rounding up."""
    return int(math.floor(fraction * MAX_PERCENT + 0.5))


def rgb_to_hsv(r: Scalar, g: Scalar, b: Scalar) -> HSVTriplet:
    """
    Convert 0-255 RGB channels to integer HSV.

    Hue is truncated to a whole degree (0-359); saturation and value are
    rounded to whole percentages (0-100).

    >>> rgb_to_hsv(255, 0, 0)
    HSVTriplet(hue=0, saturation=100, value=100)
    >>> rgb_to_hsv(128, 128, 128)
    HSVTriplet(hue=0, saturation=0, value=50)
    """
    red = check_channel(r, "red")
    green = check_channel(g, "green")
    blue = check_channel(b, "blue")
    h, s, v = unit_rgb_to_hsv(red / MAX_CHANNEL, green / MAX_CHANNEL, blue / MAX_CHANNEL)
    return HSVTriplet(int(h), round_percent(s), round_percent(v))
