"""异常定义

核心层只负责抛出异常，由 HTTP 层统一转换为响应。
"""


class FishOrdersError(Exception):
    """所有业务异常的基类"""


class ContractViolation(FishOrdersError, ValueError):
    """调用方违反接口约定（重量非正、未知品类、apply_delta(None, None) 等）"""


class OrderNotFound(FishOrdersError, LookupError):
    """指定ID的订单不存在"""

    def __init__(self, order_id: str):
        super().__init__(f"Order not found: {order_id}")
        self.order_id = order_id
