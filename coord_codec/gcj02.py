from utils.coordinates import Coordinate
from utils.geo_math import out_of_china, gcj02_delta


def wgs84_to_gcj02(coord):
    lng, lat = coord
    # 若不在中国国内，直接返回wgs84坐标系下的坐标
    if out_of_china(lng, lat):
        return coord

    d_lng, d_lat = gcj02_delta(lng, lat)
    return Coordinate(lng + d_lng, lat + d_lat)


def gcj02_to_wgs84(coord):
    """
    GCJ02转WGS84（近似）：在GCJ02坐标处计算偏移量后直接减去，误差为米级
    :param coord: GCJ02坐标
    :return: WGS84坐标
    """
    lng, lat = coord
    if out_of_china(lng, lat):
        return coord

    d_lng, d_lat = gcj02_delta(lng, lat)
    return Coordinate(lng - d_lng, lat - d_lat)


def gcj02_to_wgs84_exact(coord, threshold=1e-6, max_iter=30):
    """
    GCJ02转WGS84（迭代）：反复正向加密并修正，直到与目标GCJ02坐标的差值小于threshold
    :param coord: GCJ02坐标
    :param threshold: 经纬度残差阈值（单位：度）
    :param max_iter: 最大迭代次数，达到后返回当前结果
    :return: WGS84坐标
    """
    lng, lat = coord
    if out_of_china(lng, lat):
        return coord

    wgs_lng, wgs_lat = lng, lat
    for _ in range(max_iter):
        gcj_lng, gcj_lat = wgs84_to_gcj02(Coordinate(wgs_lng, wgs_lat))
        dx = gcj_lng - lng
        dy = gcj_lat - lat
        if abs(dx) < threshold and abs(dy) < threshold:
            break
        wgs_lng -= dx
        wgs_lat -= dy

    return Coordinate(wgs_lng, wgs_lat)
