import logging

from pydantic import BaseModel, field_validator

from coord_codec.bd09 import bd09_to_gcj02, gcj02_to_bd09
from coord_codec.gcj02 import gcj02_to_wgs84, wgs84_to_gcj02
from utils.coordinates import Coordinate, CoordSystem
from utils.geo_math import haversine_distance


# WGS84转BD09（GPS转百度坐标系）
def wgs84_to_bd09(coord):
    return gcj02_to_bd09(wgs84_to_gcj02(coord))


# BD09转WGS84（百度坐标系转GPS）
def bd09_to_wgs84(coord):
    return gcj02_to_wgs84(bd09_to_gcj02(coord))


TRANSFORM_FUNCS = {
    (CoordSystem.WGS84, CoordSystem.GCJ02): wgs84_to_gcj02,
    (CoordSystem.GCJ02, CoordSystem.WGS84): gcj02_to_wgs84,
    (CoordSystem.GCJ02, CoordSystem.BD09): gcj02_to_bd09,
    (CoordSystem.BD09, CoordSystem.GCJ02): bd09_to_gcj02,
    (CoordSystem.WGS84, CoordSystem.BD09): wgs84_to_bd09,
    (CoordSystem.BD09, CoordSystem.WGS84): bd09_to_wgs84,
}


def transform(coord, from_crs, to_crs):
    """
    坐标系转换入口
    :param coord: Coordinate或(lng, lat)
    :param from_crs: 源坐标系，CoordSystem或名称（wgs84、gcj02、bd09/bd09ll）
    :param to_crs: 目标坐标系
    :return: 目标坐标系下的Coordinate；源坐标系与目标坐标系相同时原样返回
    """
    from_crs = CoordSystem.parse(from_crs)
    to_crs = CoordSystem.parse(to_crs)
    coord = Coordinate(*coord)
    if from_crs == to_crs:
        return coord
    return TRANSFORM_FUNCS[(from_crs, to_crs)](coord)


class TransformItem(BaseModel):
    lng: float
    lat: float
    from_crs: CoordSystem = CoordSystem.WGS84
    to_crs: CoordSystem = CoordSystem.GCJ02
    logger: object = None

    @field_validator("from_crs", "to_crs", mode="before")
    @classmethod
    def parse_crs(cls, value):
        return CoordSystem.parse(value)


class CoordTransform(object):
    def __init__(self, lng, lat, from_crs="wgs84", to_crs="gcj02", logger=None):
        self.lng = lng
        self.lat = lat
        self.raw_from_crs = from_crs
        self.raw_to_crs = to_crs
        self.logger = logger if logger is not None else logging.getLogger(__name__)

        self.from_crs = None
        self.to_crs = None
        self.result = None

    def __check_input_params(self):
        """
        入参检查：坐标系是否支持
        :return:
        """
        try:
            self.from_crs = CoordSystem.parse(self.raw_from_crs)
            self.to_crs = CoordSystem.parse(self.raw_to_crs)
        except ValueError as e:
            self.logger.error(f"坐标系不支持：{e}")
            raise

    def process(self):
        """
        坐标转换主流程：检查入参；转换坐标并记录偏移距离
        :return: 目标坐标系下的Coordinate
        """
        self.__check_input_params()

        coord = Coordinate(self.lng, self.lat)
        self.result = transform(coord, self.from_crs, self.to_crs)

        offset = haversine_distance(coord, self.result)
        self.logger.info(f"转换坐标系：{self.from_crs.value} 转换为 {self.to_crs.value}，"
                         f"偏移距离 {offset:.2f} m")
        self.logger.debug(f"{tuple(coord)} --> {tuple(self.result)}")
        return self.result
