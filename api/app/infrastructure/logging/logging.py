import logging
import sys

from core.config import get_settings

# 第三方库日志过于冗长，统一提升到WARNING
NOISY_LOGGERS = ("aiosqlite", "pymongo", "motor")


def setup_logging() -> None:
    """设置应用程序的日志记录配置。

    根据应用程序的配置设置初始化根日志记录器，重复调用时不会重复添加处理器。
    """
    settings = get_settings()

    # 1.获取根日志记录器并设置日志级别
    root_logger = logging.getLogger()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    # 2.日志输出格式定义
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # 3.创建控制台处理器并添加到根日志记录器
    if not any(isinstance(h, logging.StreamHandler) for h in root_logger.handlers):
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        console_handler.setLevel(log_level)
        root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root_logger.info("日志记录器已初始化，日志级别: %s", settings.log_level)
