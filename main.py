import os
import logging
from pydantic import ValidationError

from coord_transform.transform import TransformItem, CoordTransform
from utils.config_parse import get_transform_config

transform_config = get_transform_config()

log_dir = transform_config["log_dir"]
if not os.path.exists(log_dir):
    os.makedirs(log_dir)

log_file_path = os.path.join(log_dir, 'coord_transform.log')

# 配置日志记录器
logging.basicConfig(
    level=transform_config["level"],  # 设置日志级别
    # 格式化日志输出
    format='%(asctime)s - %(name)s - %(filename)s - %(levelname)s - %(funcName)s - %(lineno)d - %(message)s',
    filename=log_file_path,  # 日志文件名
    filemode='a'  # 追加模式
)

logger = logging.getLogger(__name__)


def coord_transform_test(lng, lat, from_crs=None, to_crs=None):
    """
    测试坐标转换功能，未指定坐标系时使用config.ini中的配置
    :return:
    """
    inputs = {"lng": lng,
              "lat": lat,
              "from_crs": from_crs or transform_config["from_crs"],
              "to_crs": to_crs or transform_config["to_crs"],
              "logger": logger}

    try:
        TransformItem(**inputs)
        result = CoordTransform(**inputs).process()
        return result
    except ValidationError as e:
        print(e)
        return None


if __name__ == '__main__':
    # 武汉
    print(coord_transform_test(114.304569, 30.593354))
    print(coord_transform_test(114.304569, 30.593354, "wgs84", "bd09ll"))
    # 北京
    print(coord_transform_test(116.413772, 39.910501, "bd09", "wgs84"))
    # 国外坐标不做偏移
    print(coord_transform_test(61.972426, 31.998164, "wgs84", "gcj02"))

    print('finished')
