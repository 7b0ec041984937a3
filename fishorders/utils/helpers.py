"""工具函数模块

包含一些常用的工具函数
"""

import time
import uuid
from datetime import datetime


def new_order_id() -> str:
    """生成新的订单ID"""
    return uuid.uuid4().hex


def current_timestamp_ms() -> int:
    """当前时间的毫秒时间戳"""
    return int(time.time() * 1000)


def format_display_date(timestamp_ms: int) -> str:
    """将毫秒时间戳格式化为展示用日期"""
    return datetime.fromtimestamp(timestamp_ms / 1000).strftime('%Y-%m-%d')
