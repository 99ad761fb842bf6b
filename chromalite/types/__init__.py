from .color_types import RGBTriplet, HSVTriplet, Scalar, is_numeric

__all__ = ["RGBTriplet", "HSVTriplet", "Scalar", "is_numeric"]
