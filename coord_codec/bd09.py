import math

from utils.coordinates import Coordinate
from utils.geo_math import X_PI


# GCJ02转BD09（火星坐标系转百度坐标系）
def gcj02_to_bd09(coord):
    lng, lat = coord
    z = math.sqrt(lng * lng + lat * lat) + 0.00002 * math.sin(lat * X_PI)
    theta = math.atan2(lat, lng) + 0.000003 * math.cos(lng * X_PI)
    bd_lng = z * math.cos(theta) + 0.0065
    bd_lat = z * math.sin(theta) + 0.006
    return Coordinate(bd_lng, bd_lat)


# BD09转GCJ02（百度坐标系转火星坐标系）
def bd09_to_gcj02(coord):
    lng, lat = coord
    x = lng - 0.0065
    y = lat - 0.006
    z = math.sqrt(x * x + y * y) - 0.00002 * math.sin(y * X_PI)
    theta = math.atan2(y, x) - 0.000003 * math.cos(x * X_PI)
    gcj_lng = z * math.cos(theta)
    gcj_lat = z * math.sin(theta)
    return Coordinate(gcj_lng, gcj_lat)
