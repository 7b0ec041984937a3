"""列表筛选

在已分类的三个桶内按文本和日期范围筛选，不改变订单所属的桶，也不访问账本。
"""

import enum
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Iterable, List, Optional

from ..models.order import Bucket, Order
from .classifier import classify


class DateRange(str, enum.Enum):
    all = "all"
    today = "today"
    yesterday = "yesterday"
    week = "week"     # 含今天在内的最近7天
    month = "month"   # 本自然月


@dataclass
class FilteredOrders:
    office: List[Order] = field(default_factory=list)
    active: List[Order] = field(default_factory=list)
    archived: List[Order] = field(default_factory=list)

    def bucket(self, bucket: Bucket) -> List[Order]:
        return getattr(self, Bucket(bucket).value)


def matches_text(order: Order, query: str) -> bool:
    """客户姓名不区分大小写匹配；发票号和电话按原文子串匹配"""
    if not query:
        return True
    return (
        query.lower() in order.customer_name.lower()
        or query in order.invoice_number
        or query in order.customer_phone
    )


def in_date_range(order: Order, date_range: DateRange, today: date) -> bool:
    date_range = DateRange(date_range)
    if date_range is DateRange.all:
        return True

    created = order.created_on()
    if date_range is DateRange.today:
        return created == today
    if date_range is DateRange.yesterday:
        return created == today - timedelta(days=1)
    if date_range is DateRange.week:
        return created >= today - timedelta(days=6)
    # month
    return created.year == today.year and created.month == today.month


def filter_orders(orders: Iterable[Order], query: str = "",
                  date_range: DateRange = DateRange.all,
                  today: Optional[date] = None) -> FilteredOrders:
    """返回三个桶各自筛选后的订单列表，保持输入顺序"""
    today = today or date.today()
    result = FilteredOrders()
    for order in orders:
        bucket = classify(order)
        if matches_text(order, query) and in_date_range(order, date_range, today):
            result.bucket(bucket).append(order)
    return result
