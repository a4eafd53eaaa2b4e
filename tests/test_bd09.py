import math

import pytest

from coord_codec.bd09 import gcj02_to_bd09, bd09_to_gcj02
from utils.coordinates import Coordinate

# BD09逆变换为闭式近似，国内范围误差上限约1.7e-6度
BD09_INVERSE_TOLERANCE = 2e-6
# 参照值为六位小数，输入与期望值各含5e-7的舍入误差
BD09_FIXTURE_TOLERANCE = 3e-6

GCJ02_BD09_PAIRS = [
    (Coordinate(114.304569, 30.593354), Coordinate(114.311152, 30.599019)),
    (Coordinate(116.407387, 39.904179), Coordinate(116.413772, 39.910501)),
]


@pytest.mark.parametrize("gcj02, bd09", GCJ02_BD09_PAIRS)
def test_gcj02_to_bd09(gcj02, bd09):
    result = gcj02_to_bd09(gcj02)
    assert isinstance(result, Coordinate)
    assert result.lng == pytest.approx(bd09.lng, abs=1e-6)
    assert result.lat == pytest.approx(bd09.lat, abs=1e-6)


@pytest.mark.parametrize("gcj02, bd09", GCJ02_BD09_PAIRS)
def test_bd09_to_gcj02(gcj02, bd09):
    result = bd09_to_gcj02(bd09)
    assert result.lng == pytest.approx(gcj02.lng, abs=BD09_FIXTURE_TOLERANCE)
    assert result.lat == pytest.approx(gcj02.lat, abs=BD09_FIXTURE_TOLERANCE)


def test_round_trip(china_grid):
    for coord in china_grid:
        restored = bd09_to_gcj02(gcj02_to_bd09(coord))
        assert restored.lng == pytest.approx(coord.lng, abs=BD09_INVERSE_TOLERANCE)
        assert restored.lat == pytest.approx(coord.lat, abs=BD09_INVERSE_TOLERANCE)


def test_applied_outside_china():
    # BD09偏移不区分国内外
    coord = Coordinate(61.972426, 31.998164)
    assert gcj02_to_bd09(coord) != coord


def test_nan_propagates():
    result = gcj02_to_bd09(Coordinate(float("nan"), 30.0))
    assert math.isnan(result.lng)
    assert math.isnan(result.lat)


@pytest.mark.parametrize("func", [gcj02_to_bd09, bd09_to_gcj02])
@pytest.mark.parametrize("coord", [
    Coordinate(float("inf"), 30.0),
    Coordinate(114.304569, float("-inf")),
])
def test_infinity_raises(func, coord):
    # math.sin/math.cos对无穷大抛出ValueError
    with pytest.raises(ValueError):
        func(coord)
