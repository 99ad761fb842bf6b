from .num_utils import get_dimension, check_channel, check_percent, wrap_hue

__all__ = ["get_dimension", "check_channel", "check_percent", "wrap_hue"]
