"""订单操作（内存订单簿）

封装订单的增删改与付款、接收办公室订单等动作，便于路由层调用并保持业务逻辑集中。
- 每次变更先调用一次 ledger.apply_delta，再修改订单集合
- 所有改动价格相关字段的路径都经过 reprice，final_price 不会被单独修改
- 持久化不在这里处理，调用方拿到变更后的集合自行保存
"""

from datetime import date
from typing import Iterable, List, Optional, Union

from pydantic import ValidationError

from .. import schemas
from ..core.ledger import AggregationLedger
from ..core.migration import migrate_records
from ..core.pricing import PricingRates, reprice
from ..core.query import DateRange, FilteredOrders, filter_orders
from ..errors import ContractViolation, OrderNotFound
from ..models.order import Order, PaymentStatus, PAID_STATUSES
from ..utils.helpers import current_timestamp_ms, format_display_date, new_order_id
from ..utils.logging import get_logger
from .invoice import InvoiceNumberGenerator

logger = get_logger(__name__)


class OrderBook:
    """订单集合及其账本"""

    def __init__(self, rates: Optional[PricingRates] = None,
                 invoices: Optional[InvoiceNumberGenerator] = None):
        self.rates = rates
        self.invoices = invoices or InvoiceNumberGenerator()
        self.ledger = AggregationLedger(rates)
        # 最新的订单排在最前
        self._orders: List[Order] = []

    def load(self, raws: Iterable[Union[dict, Order]]) -> int:
        """加载持久化数组：迁移旧数据、重算价格并重建账本"""
        orders = []
        repriced = 0
        for order in migrate_records(raws):
            priced = reprice(order, self.rates)
            if priced.final_price != order.final_price:
                repriced += 1
            orders.append(priced)
            self.invoices.observe(priced.invoice_number)

        if repriced:
            logger.warning("Recomputed stale final price on %d loaded orders", repriced)

        self._orders = orders
        self.ledger = AggregationLedger.rebuild(orders, self.rates)
        logger.info("Loaded %d orders", len(orders))
        return len(orders)

    def list_orders(self) -> List[Order]:
        return list(self._orders)

    def get_order(self, order_id: str) -> Order:
        return self._orders[self._index(order_id)]

    def create_order(self, data: schemas.OrderCreate) -> Order:
        timestamp = current_timestamp_ms()
        order = Order(
            id=new_order_id(),
            invoice_number=self.invoices.next(),
            date=format_display_date(timestamp),
            timestamp=timestamp,
            **data.model_dump(),
        )
        order = reprice(order, self.rates)
        self.ledger.apply_delta(None, order)
        self._orders.insert(0, order)
        logger.info("Created order %s (invoice %s)", order.id, order.invoice_number)
        return order

    def update_order(self, order_id: str, changes: schemas.OrderUpdate) -> Order:
        return self._replace(order_id, changes.model_dump(exclude_unset=True))

    def mark_paid(self, order_id: str, payment_status: PaymentStatus) -> Order:
        """登记付款方式（现金或刷卡）"""
        if payment_status not in PAID_STATUSES:
            raise ContractViolation(f"{payment_status!r} is not a paid status")
        return self._replace(order_id, {"payment_status": payment_status})

    def accept_office_order(self, order_id: str) -> Order:
        """接收办公室订单，按当前付款状态重新进入正常分类"""
        return self._replace(order_id, {"is_office_order": False})

    def delete_order(self, order_id: str) -> Order:
        index = self._index(order_id)
        order = self._orders[index]
        self.ledger.apply_delta(order, None)
        del self._orders[index]
        logger.info("Deleted order %s", order_id)
        return order

    def buckets(self, query: str = "", date_range: DateRange = DateRange.all,
                today: Optional[date] = None) -> FilteredOrders:
        return filter_orders(self._orders, query, date_range, today)

    def _index(self, order_id: str) -> int:
        for index, order in enumerate(self._orders):
            if order.id == order_id:
                return index
        raise OrderNotFound(order_id)

    def _replace(self, order_id: str, changes: dict) -> Order:
        index = self._index(order_id)
        previous = self._orders[index]
        try:
            updated = Order.model_validate({**previous.model_dump(), **changes})
        except ValidationError as exc:
            raise ContractViolation(f"Invalid update for order {order_id}: {exc}") from exc
        updated = reprice(updated, self.rates)
        self.ledger.apply_delta(previous, updated)
        self._orders[index] = updated
        return updated
