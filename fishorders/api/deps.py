"""路由依赖

进程内只有一个订单簿；测试中可通过 app.dependency_overrides 替换。
"""

from ..crud.order import OrderBook

_order_book = OrderBook()


def get_order_book() -> OrderBook:
    """获取订单簿的依赖函数"""
    return _order_book
