"""
Chromalite Color Conversions
============================

Pure conversion routines between RGB triplets, HSV triplets and hex strings.

Conversion Functions
-------------------

Hex:
    validate_hex(value)
        Strip ``#``, expand 3-digit shorthand, lower-case
    hex_to_rgb(value) / rgb_to_hex(r, g, b)
        Hex string <-> 0-255 channels
    hex_to_hsv(value) / hsv_to_hex(h, s, v)
        Composites going through RGB

RGB → HSV:
    unit_rgb_to_hsv(r, g, b)
        Float channels in [0, 1] to float HSV
    rgb_to_hsv(r, g, b)
        0-255 channels to integer HSV (hue truncated, percentages rounded)

HSV → RGB:
    hsv_to_unit_rgb(h, s, v)
        Float HSV to float channels in [0, 1]
    hsv_to_rgb(h, s, v)
        Hue in degrees, percentages to truncated 0-255 channels

Formatting:
    rgb_to_string(r, g, b)
        ``"rgba(r,g,b)"``

Examples
--------
>>> from chromalite.conversions import hex_to_rgb, rgb_to_hsv, hsv_to_rgb
>>> hex_to_rgb("#f80")
RGBTriplet(red=255, green=136, blue=0)
>>> rgb_to_hsv(255, 0, 0)
HSVTriplet(hue=0, saturation=100, value=100)
>>> hsv_to_rgb(0, 100, 100)
RGBTriplet(red=255, green=0, blue=0)
"""

# RGB → HSV conversions
from .to_hsv import unit_rgb_to_hsv, rgb_to_hsv

# HSV → RGB conversions
from .to_rgb import hsv_to_unit_rgb, hsv_to_rgb

# Hex conversions
from .hex import validate_hex, hex_to_rgb, rgb_to_hex, hex_to_hsv, hsv_to_hex

# Formatting
from .strings import rgb_to_string

__all__ = [
    # RGB → HSV
    'unit_rgb_to_hsv',
    'rgb_to_hsv',

    # HSV → RGB
    'hsv_to_unit_rgb',
    'hsv_to_rgb',

    # Hex
    'validate_hex',
    'hex_to_rgb',
    'rgb_to_hex',
    'hex_to_hsv',
    'hsv_to_hex',

    # Formatting
    'rgb_to_string',
]
