"""订单状态分类

按优先级把订单归入 office / active / archived 三个桶之一：
1. 办公室订单 -> office（忽略付款状态）
2. 未付款 -> active
3. 现金或刷卡已付款 -> archived
"""

from ..errors import ContractViolation
from ..models.order import Bucket, Order, PaymentStatus, PAID_STATUSES


def classify(order: Order) -> Bucket:
    if order.is_office_order:
        return Bucket.office
    if order.payment_status is PaymentStatus.unpaid:
        return Bucket.active
    if order.payment_status in PAID_STATUSES:
        return Bucket.archived
    # 旧版状态应在加载时迁移，走到这里说明调用方漏掉了迁移
    raise ContractViolation(
        f"Order {order.id} has unmigrated payment status {order.payment_status!r}"
    )
