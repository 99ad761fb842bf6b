from chromalite.utils.num_utils import get_dimension, check_channel, check_percent, wrap_hue
from chromalite.types.color_types import is_numeric
from chromalite.errors import RangeError
import numpy as np
import pytest


def test_get_dimension():
    assert get_dimension(None) == 0
    assert get_dimension(5) == 1
    assert get_dimension((1, 2, 3)) == 3
    assert get_dimension(np.zeros(3)) == 3

def test_check_channel():
    assert check_channel(0) == 0
    assert check_channel(255) == 255
    assert check_channel(12.9) == 12
    assert check_channel(np.uint8(200)) == 200
    assert type(check_channel(np.uint8(200))) is int
    with pytest.raises(RangeError, match="red"):
        check_channel(256, "red")
    with pytest.raises(TypeError):
        check_channel("12")

def test_check_percent():
    assert check_percent(0) == 0.0
    assert check_percent(100) == 100.0
    with pytest.raises(RangeError):
        check_percent(100.01)

def test_wrap_hue():
    assert wrap_hue(0) == 0
    assert wrap_hue(360) == 0
    assert wrap_hue(370.5) == pytest.approx(10.5)
    assert wrap_hue(-90) == 270
    assert 0 <= wrap_hue(-1e-20) < 360

def test_is_numeric():
    assert is_numeric(1)
    assert is_numeric(1.5)
    assert is_numeric(np.float32(0.5))
    assert not is_numeric(True)
    assert not is_numeric(np.bool_(True))
    assert not is_numeric("1")
    assert not is_numeric(None)

def test_wrap_hue_rejects_non_finite():
    for bad in (float("nan"), float("inf"), -float("inf"), np.float64("nan")):
        with pytest.raises(RangeError, match="finite"):
            wrap_hue(bad)

def test_check_percent_rejects_nan():
    with pytest.raises(RangeError):
        check_percent(float("nan"))
