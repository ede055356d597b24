"""日志模块

基于 Loguru 的全局 logger，导入时按配置完成一次初始化
"""

import sys

from loguru import logger

from ..config.settings import settings


def setup_logger() -> None:
    logger.remove()  # 移除默认的 stderr handler

    logger.add(
        sys.stderr,
        level=settings.LOG_LEVEL,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
    )

    if settings.LOG_FILE:
        logger.add(
            settings.LOG_FILE,
            level="DEBUG",
            rotation="10 MB",
            retention="14 days",
            serialize=True,
        )


setup_logger()

__all__ = ["logger"]
