"""
中央日志配置

导出 loguru 的 logger；configure_logging 由命令行入口调用，
导入时不创建任何文件。
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

DEFAULT_LEVEL = "WARNING"

# 库代码默认静默，由调用方决定是否打开
logger.disable("notation")


def configure_logging(level: str = DEFAULT_LEVEL, log_file: str | Path | None = None) -> None:
    """配置日志输出

    Args:
        level: stderr 输出级别
        log_file: 可选的日志文件，按大小轮转
    """
    logger.remove()
    logger.add(sys.stderr, level=level.upper())

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            log_path,
            rotation="10 MB",
            retention="7 days",
            level="DEBUG",
        )

    logger.enable("notation")


__all__ = ["logger", "configure_logging", "DEFAULT_LEVEL"]
