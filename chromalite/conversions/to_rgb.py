from ..types.color_types import RGBTriplet, Scalar
from ..types.limits import MAX_CHANNEL, MAX_PERCENT, HUE_SECTOR
from ..utils.num_utils import check_percent, wrap_hue


def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to RGB using sector decomposition.

    Args:
        h: Hue in degrees, wrapped into [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if v == 0 or s == 0:
        return v, v, v

    sector = wrap_hue(h) / HUE_SECTOR
    i = int(sector)
    f = sector - i
    p = v * (1 - s)
    q = v * (1 - s * f)
    t = v * (1 - s * (1 - f))

    return (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[i % 6]


def truncate_unit_rgb(r: float, g: float, b: float) -> RGBTriplet:
    """Scale [0, 1] channels to 0-255 ints by truncation."""
    return RGBTriplet(int(r * MAX_CHANNEL), int(g * MAX_CHANNEL), int(b * MAX_CHANNEL))


def hsv_to_rgb(h: Scalar, s: Scalar, v: Scalar) -> RGBTriplet:
    """
    Convert HSV to 0-255 RGB channels.

    Each channel is truncated, not rounded, when scaled to 0-255.

    Args:
        h: Hue in degrees (wraps modulo 360)
        s: Saturation percentage in [0, 100]
        v: Value percentage in [0, 100]

    Raises:
        RangeError: s or v outside [0, 100].
    """
    hue = wrap_hue(h)
    saturation = check_percent(s, "saturation") / MAX_PERCENT
    value = check_percent(v, "value") / MAX_PERCENT
    return truncate_unit_rgb(*hsv_to_unit_rgb(hue, saturation, value))
