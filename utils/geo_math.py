import math

PI = math.pi
X_PI = PI * 3000.0 / 180.0
A = 6378245.0  # 长半轴（克拉索夫斯基椭球）
EE = 0.00669342162296594323  # 偏心率平方

AVG_EARTH_RADIUS = 6371.0088  # in kilometers


def out_of_china(lng, lat):
    """
    粗略判断坐标是否在中国范围外，边界上的点视为国内
    :param lng: 经度
    :param lat: 纬度
    :return: 国外返回True，国内返回False
    """
    return lng < 72.004 or lng > 137.8347 or lat < 0.8293 or lat > 55.8271


def transform_lat(x, y):
    # 经验公式，系数及运算顺序不可调整
    ret = -100.0 + 2.0 * x + 3.0 * y + 0.2 * y * y + \
          0.1 * x * y + 0.2 * math.sqrt(math.fabs(x))
    ret += (20.0 * math.sin(6.0 * x * PI) + 20.0 *
            math.sin(2.0 * x * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(y * PI) + 40.0 *
            math.sin(y / 3.0 * PI)) * 2.0 / 3.0
    ret += (160.0 * math.sin(y / 12.0 * PI) + 320 *
            math.sin(y * PI / 30.0)) * 2.0 / 3.0
    return ret


def transform_lng(x, y):
    ret = 300.0 + x + 2.0 * y + 0.1 * x * x + \
          0.1 * x * y + 0.1 * math.sqrt(math.fabs(x))
    ret += (20.0 * math.sin(6.0 * x * PI) + 20.0 *
            math.sin(2.0 * x * PI)) * 2.0 / 3.0
    ret += (20.0 * math.sin(x * PI) + 40.0 *
            math.sin(x / 3.0 * PI)) * 2.0 / 3.0
    ret += (150.0 * math.sin(x / 12.0 * PI) + 300.0 *
            math.sin(x / 30.0 * PI)) * 2.0 / 3.0
    return ret


def gcj02_delta(lng, lat):
    """
    计算(lng, lat)处的GCJ02偏移量（单位：度）
    :return: (d_lng, d_lat)
    """
    d_lat = transform_lat(lng - 105.0, lat - 35.0)
    d_lng = transform_lng(lng - 105.0, lat - 35.0)
    rad_lat = lat / 180.0 * PI
    magic = math.sin(rad_lat)
    magic = 1 - EE * magic * magic
    magic_sqrt = math.sqrt(magic)
    d_lat = (d_lat * 180.0) / ((A * (1 - EE)) / (magic * magic_sqrt) * PI)
    d_lng = (d_lng * 180.0) / (A / magic_sqrt * math.cos(rad_lat) * PI)
    return d_lng, d_lat


def haversine_distance(cur_point, next_point):
    """
    两点之间的球面距离（单位：m），用于衡量坐标转换的偏移量
    """
    lng1, lat1 = cur_point
    lng2, lat2 = next_point
    # 转换为弧度
    lng1_rad, lat1_rad, lng2_rad, lat2_rad = map(math.radians, [lng1, lat1, lng2, lat2])

    d_lng = lng2_rad - lng1_rad
    d_lat = lat2_rad - lat1_rad
    d = math.sin(d_lat * 0.5) ** 2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(d_lng * 0.5) ** 2
    d = 2 * AVG_EARTH_RADIUS * math.asin(math.sqrt(d))  # in kilometers
    return d * 1000
