from enum import Enum
from typing import NamedTuple

import geojson


class UnsupportedCoordSystemError(ValueError):
    pass


class Coordinate(NamedTuple):
    """
    经纬度坐标（经度在前，纬度在后），不记录所属坐标系，由调用方自行维护
    NaN/Infinity不做校验：NaN在转换中原样传播；Infinity在BD09转换中由math抛出ValueError，GCJ02转换视为国外坐标原样返回
    """
    lng: float
    lat: float

    def to_geojson(self):
        return geojson.Point((self.lng, self.lat))


class CoordSystem(Enum):
    WGS84 = "wgs84"
    GCJ02 = "gcj02"
    BD09 = "bd09"

    @classmethod
    def parse(cls, value):
        """
        将坐标系名称转换为CoordSystem，兼容百度API中的bd09ll写法
        :param value: CoordSystem或坐标系名称（不区分大小写）
        :return: CoordSystem
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise UnsupportedCoordSystemError(f"{value!r} is not supported")

        name = value.strip().lower()
        if name == "bd09ll":
            name = "bd09"
        try:
            return cls(name)
        except ValueError:
            raise UnsupportedCoordSystemError(f"{value} is not supported") from None
