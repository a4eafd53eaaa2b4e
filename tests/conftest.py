import logging

import pytest

from utils.coordinates import Coordinate


# 国内部分城市的WGS84坐标（经度，纬度）
CITY_POINTS = {
    "wuhan": Coordinate(114.304569, 30.593354),
    "beijing": Coordinate(116.407387, 39.904179),
    "shanghai": Coordinate(121.4737, 31.2304),
    "urumqi": Coordinate(87.6168, 43.8256),
    "harbin": Coordinate(126.6424, 45.7567),
    "sanya": Coordinate(109.5119, 18.2528),
    "lhasa": Coordinate(91.1409, 29.6456),
}


@pytest.fixture(params=sorted(CITY_POINTS))
def china_point(request):
    """
    国内城市坐标，逐个参数化
    """
    return CITY_POINTS[request.param]


@pytest.fixture
def china_grid():
    """国内范围内的经纬度网格"""
    return [Coordinate(lng, lat)
            for lng in range(75, 136, 5)
            for lat in range(5, 55, 5)]


@pytest.fixture
def test_logger():
    return logging.getLogger("coord_transform_test")
