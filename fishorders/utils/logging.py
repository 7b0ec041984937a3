"""
日志配置模块

为服务和脚本提供统一的日志初始化方式。
"""

import logging
import sys


class ConsoleFormatter(logging.Formatter):
    """带时间戳和来源的控制台格式"""

    def format(self, record: logging.LogRecord) -> str:
        message = f"[{record.created:.3f}] {record.levelname} {record.name}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        # 终端输出时为调试信息着色
        if sys.stderr.isatty() and record.levelno <= logging.DEBUG:
            return f"\033[0;36m{message}\033[0m"
        return message


def setup_logging(level: str = "INFO") -> None:
    """初始化根日志记录器

    Args:
        level: 日志级别名称，例如 "DEBUG" / "INFO"
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # 清理已有的 handler，避免重复输出
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(ConsoleFormatter())
    root_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """按名称获取日志记录器（通常传入 __name__）"""
    return logging.getLogger(name)
