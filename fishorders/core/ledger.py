"""账本：按桶增量维护的汇总数据

每次订单变更（新建/修改/删除）都先交给 apply_delta：
- 新建：加上新订单的贡献
- 删除：减去旧订单的贡献
- 修改：先减旧贡献，再加新贡献（修改可能导致订单换桶）

任意时刻，每个桶的汇总都应等于对当前订单集合全量重算的结果。
账本只依赖传入的快照，不持有订单集合的引用。
"""

import copy
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, Optional

from ..errors import ContractViolation
from ..models.order import Bucket, Order, PaymentStatus
from ..utils.logging import get_logger
from .classifier import classify
from .pricing import PricingRates, price_order

logger = get_logger(__name__)

ZERO = Decimal("0")


@dataclass(frozen=True)
class Contribution:
    """单个订单对账本的贡献"""
    bucket: Bucket
    payment_status: PaymentStatus
    weight: Decimal
    revenue: Decimal
    is_free: bool


def _zero_by_payment() -> Dict[PaymentStatus, Decimal]:
    return {status: ZERO for status in PaymentStatus}


@dataclass
class BucketTotals:
    order_count: int = 0
    total_weight: Decimal = ZERO
    total_revenue: Decimal = ZERO
    free_count: int = 0
    revenue_by_payment: Dict[PaymentStatus, Decimal] = field(default_factory=_zero_by_payment)

    def add(self, contribution: Contribution, sign: int = 1) -> None:
        self.order_count += sign
        self.total_weight += sign * contribution.weight
        self.total_revenue += sign * contribution.revenue
        if contribution.is_free:
            self.free_count += sign
        self.revenue_by_payment[contribution.payment_status] += sign * contribution.revenue


class AggregationLedger:
    """按桶维护订单数量、重量、营收等汇总

    账本是可独立构造的普通对象：加载数据时用 rebuild() 折叠出初始状态，
    之后只通过 apply_delta() 增量更新。
    """

    def __init__(self, rates: Optional[PricingRates] = None):
        self.rates = rates
        self._totals: Dict[Bucket, BucketTotals] = {bucket: BucketTotals() for bucket in Bucket}

    @classmethod
    def rebuild(cls, orders: Iterable[Order], rates: Optional[PricingRates] = None) -> "AggregationLedger":
        ledger = cls(rates)
        for order in orders:
            ledger.apply_delta(None, order)
        return ledger

    def contribution_of(self, order: Order) -> Contribution:
        weight = order.effective_weight
        if weight <= 0:
            raise ContractViolation(f"Order {order.id} has non-positive weight {weight}")
        breakdown = price_order(order, self.rates)
        return Contribution(
            bucket=classify(order),
            payment_status=order.payment_status,
            weight=weight,
            revenue=breakdown.total_price,
            is_free=order.is_free,
        )

    def apply_delta(self, previous: Optional[Order], current: Optional[Order]) -> None:
        """冲销旧快照并应用新快照

        两个贡献都先算出来再修改汇总，任何一步违约都不会留下半更新的状态。
        """
        if previous is None and current is None:
            raise ContractViolation("apply_delta requires at least one order snapshot")
        if previous is not None and current is not None and previous.id != current.id:
            raise ContractViolation(
                f"apply_delta snapshots refer to different orders: {previous.id} != {current.id}"
            )

        retract = self.contribution_of(previous) if previous is not None else None
        apply = self.contribution_of(current) if current is not None else None

        if retract is not None:
            self._totals[retract.bucket].add(retract, sign=-1)
        if apply is not None:
            self._totals[apply.bucket].add(apply, sign=1)

        logger.debug(
            "Ledger delta for order %s: %s -> %s",
            (previous or current).id,
            retract.bucket.value if retract else None,
            apply.bucket.value if apply else None,
        )

    def total(self, bucket: Bucket) -> Decimal:
        """指定桶的营收合计"""
        return self._totals[Bucket(bucket)].total_revenue

    def totals(self, bucket: Bucket) -> BucketTotals:
        return copy.deepcopy(self._totals[Bucket(bucket)])

    def snapshot(self) -> Dict[Bucket, BucketTotals]:
        return copy.deepcopy(self._totals)
