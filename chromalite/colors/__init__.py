"""
Chromalite Color Object
=======================

``Color`` holds one color and keeps three views of it consistent:

- RGB: channels as ints in 0-255 (stored internally as fractions)
- HSV: hue in degrees, saturation and value as percentages
- HEX: ``#rrggbb``

Usage
-----
>>> from chromalite.colors import Color
>>>
>>> c = Color(255, 0, 0)
>>> c.hex
'#ff0000'
>>> c.value = 50          # darken; RGB and hex follow
>>> c.rgb
RGBTriplet(red=127, green=0, blue=0)
>>> c.complement().hex
'#7fffff'

Notes
-----
- Setters validate before mutating; a rejected value leaves the color unchanged
- RGB channels outside 0-255 and percentages outside 0-100 raise ``RangeError``
- Hue wraps modulo 360
"""

from .color import Color

__all__ = ['Color']
