import os
import logging
import configparser

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    ("TRANSFORM", "from_crs"): "wgs84",
    ("TRANSFORM", "to_crs"): "gcj02",
    ("LOG", "log_dir"): "./logs",
    ("LOG", "level"): "INFO",
}


def get_transform_config(path=''):
    """
    读取config.ini中的坐标转换、日志配置，缺失的配置项使用默认值
    :param path: config.ini所在目录
    :return: dict，包含from_crs、to_crs、log_dir、level
    """
    # 创建一个 ConfigParser 对象
    config = configparser.ConfigParser()
    # 读取配置文件
    if not config.read(os.path.join(path, 'config.ini'), encoding='utf-8'):
        logger.warning(f"未找到配置文件：{os.path.join(path, 'config.ini')}，使用默认配置")

    result = {}
    for (section, option), default in DEFAULT_CONFIG.items():
        try:
            result[option] = config.get(section, option)
        except (configparser.NoSectionError, configparser.NoOptionError):
            logger.warning(f"未找到 {section}.{option} 配置，使用默认值 {default}")
            result[option] = default

    # 日志级别写错时使用默认值，避免logging.basicConfig报错
    level = result["level"].strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning(f"日志级别 {result['level']} 不合法，使用默认值 INFO")
        level = "INFO"
    result["level"] = level
    return result


if __name__ == "__main__":
    transform_config = get_transform_config('../')
    print(f"读取到的配置: {transform_config}")
