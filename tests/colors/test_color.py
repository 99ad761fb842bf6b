from chromalite import Color
from chromalite.types.color_types import RGBTriplet, HSVTriplet
from ..samples import samples_rgb_hsv
import numpy as np
import pytest


def test_default_is_black():
    c = Color()
    assert c.rgb == (0, 0, 0)
    assert c.hsv == (0, 0, 0)
    assert c.hex == "#000000"

def test_from_hex():
    c = Color("#ff0000")
    assert c.hsv == (0, 100, 100)
    assert c.rgb == (255, 0, 0)
    assert isinstance(c.hsv, HSVTriplet)
    assert isinstance(c.rgb, RGBTriplet)

def test_from_short_hex():
    assert Color("#abc").hex == "#aabbcc"

def test_from_hex_without_hash_warns():
    with pytest.warns(UserWarning):
        c = Color("00ff00")
    assert c.rgb == (0, 255, 0)

def test_from_rgb():
    assert Color(0, 255, 0).hex == "#00ff00"

def test_from_rgb_red_is_not_gray():
    assert Color(255, 0, 0).hex == "#ff0000"

def test_missing_channels_default_to_zero():
    assert Color(128).rgb == (128, 0, 0)
    assert Color(128, 64).rgb == (128, 64, 0)

def test_from_numpy_pixel():
    pixel = np.array([12, 34, 56], dtype=np.uint8)
    assert Color(*pixel).rgb == (12, 34, 56)

def test_copy_constructor():
    original = Color(10, 20, 30)
    copy = Color(original)
    assert copy == original
    copy.red = 200
    assert original.rgb == (10, 20, 30)
    assert copy.rgb == (200, 20, 30)

def test_views_agree():
    for rgb, hsv in samples_rgb_hsv.items():
        c = Color(*rgb)
        assert c.rgb == rgb
        assert c.hsv == hsv
        assert c.hex == "#%02x%02x%02x" % rgb

def test_to_string():
    assert Color(1, 2, 3).to_string() == "rgba(1,2,3)"

def test_str_and_repr():
    c = Color(255, 136, 0)
    assert str(c) == "#ff8800"
    assert repr(c) == "Color('#ff8800')"

def test_equality():
    assert Color("#ff0000") == Color(255, 0, 0)
    assert Color("#ff0000") != Color(254, 0, 0)
    assert Color() != (0, 0, 0)

def test_unhashable():
    with pytest.raises(TypeError):
        hash(Color())

def test_no_new_attributes():
    with pytest.raises(AttributeError):
        Color().alpha = 1
