import math
from typing import Any
from collections.abc import Sized
from boundednumbers.functions import cyclic_wrap_float
from ..errors import RangeError
from ..types.color_types import Scalar, is_numeric
from ..types.limits import MAX_CHANNEL, MAX_PERCENT, HUE_360


def get_dimension(element: Any) -> int:
    if element is None:
        return 0
    if isinstance(element, Sized):
        return len(element)
    return 1


def _require_number(value: Any, name: str) -> None:
    if not is_numeric(value):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")


def check_channel(value: Any, name: str = "channel") -> int:
    """
    Validate an RGB channel and truncate it to an int.

    Raises:
        TypeError: value is not a real number.
        RangeError: value lies outside [0, 255].
    """
    _require_number(value, name)
    if not 0 <= value <= MAX_CHANNEL:
        raise RangeError(f"{name} must be in [0, {MAX_CHANNEL}], got {value!r}")
    return int(value)


def check_percent(value: Any, name: str = "percentage") -> float:
    """Validate a saturation/value percentage in [0, 100]."""
    _require_number(value, name)
    if not 0 <= value <= MAX_PERCENT:
        raise RangeError(f"{name} must be in [0, {MAX_PERCENT}], got {value!r}")
    return float(value)


def wrap_hue(value: Any) -> Scalar:
    """
    Wrap a hue in degrees into [0, 360).

    Raises:
        TypeError: value is not a real number.
        RangeError: value is NaN or infinite.
    """
    _require_number(value, "hue")
    if not math.isfinite(value):
        raise RangeError(f"hue must be finite, got {value!r}")
    hue = cyclic_wrap_float(value, 0, HUE_360)
    # float modulo of a tiny negative number can land exactly on 360
    return hue if hue < HUE_360 else hue - HUE_360
