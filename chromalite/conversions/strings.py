from typing import Mapping, Optional, Union
from numpy import ndarray
from ..types.color_types import Scalar, RGBElement, is_numeric
from ..utils.num_utils import get_dimension


def rgb_to_string(r: Union[Scalar, RGBElement], g: Optional[Scalar] = None, b: Optional[Scalar] = None) -> str:
    """
    Format RGB channels as ``"rgba(r,g,b)"``.

    The ``rgba`` label is kept for compatibility with the existing output
    format; no alpha value is appended.

    Args:
        r: Red channel, or a whole triplet (tuple, list, ndarray or mapping
           whose first three values are red, green and blue) when g and b
           are omitted.
        g: Green channel
        b: Blue channel
    """
    if g is None and b is None and not is_numeric(r):
        if isinstance(r, str):
            raise TypeError(f"Expected an RGB triplet, got {r!r}")
        if isinstance(r, Mapping):
            values = list(r.values())
        elif isinstance(r, ndarray):
            values = r.tolist()
        else:
            values = list(r)
        if get_dimension(values) < 3:
            raise TypeError(f"Expected an RGB triplet, got {r!r}")
        r, g, b = values[:3]
    elif g is None or b is None:
        raise TypeError("rgb_to_string expects three channels or a single triplet")

    return f"rgba({r},{g},{b})"
