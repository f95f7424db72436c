"""
logging_config - 日志配置

为 stroke_spline 命名空间配置日志输出。库本身在导入时不配置日志。
"""

import logging
import sys

LOGGER_NAME = "stroke_spline"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def close_handlers(logger: logging.Logger):
    """关闭并移除 logger 上已有的 handler（释放日志文件句柄）。"""
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)


def setup_logging(level: int = logging.INFO, log_file: str | None = None) -> logging.Logger:
    """
    配置包 logger：控制台输出，可选同时写入文件。

    重复调用会先关闭旧 handler，不会重复输出也不会遗留打开的文件。

    Args:
        level: 日志级别 (如 logging.DEBUG)
        log_file: 可选，日志文件路径

    Returns:
        配置好的包 logger
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    close_handlers(logger)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.info(f"Logging initialized at level {logging.getLevelName(level)}.")
    return logger
