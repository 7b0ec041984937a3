"""旧数据迁移

加载持久化数组时对每条记录执行一次，把旧版本遗留的字符串映射为当前枚举。
迁移是幂等的：对已迁移的记录再次执行结果不变。
"""

from typing import Iterable, List, Union

from pydantic import ValidationError

from ..errors import ContractViolation
from ..models.order import Order, PaymentStatus, PreparationType
from ..utils.logging import get_logger

logger = get_logger(__name__)

# 旧版只有一个“已付款”状态，统一按刷卡处理
LEGACY_PAID = "پرداخت شده"

PAYMENT_STATUS_ALIASES = {
    LEGACY_PAID: PaymentStatus.paid_card,
    "paid": PaymentStatus.paid_card,
    "پرداخت شده (نقد)": PaymentStatus.paid_cash,
    "پرداخت شده (کارت)": PaymentStatus.paid_card,
    "پرداخت نشده": PaymentStatus.unpaid,
}

PREPARATION_TYPE_ALIASES = {
    "فیله": PreparationType.fillet,
    "پاک شده": PreparationType.cleaned,
    "فروش ماهی حذفی": PreparationType.damage,
    "فروش تلفات": PreparationType.damage,
}


def _remap(record: dict, keys, aliases) -> bool:
    changed = False
    for key in keys:
        value = record.get(key)
        if isinstance(value, str) and value in aliases:
            record[key] = aliases[value].value
            changed = True
    return changed


def migrate_legacy_status(raw: Union[dict, Order]) -> Order:
    """把一条原始记录迁移为 Order

    - 旧版“已付款”映射为刷卡已付款
    - 旧版界面文字形式的付款状态和加工品类映射为枚举值
    - 未知取值视为数据错误，抛出 ContractViolation
    """
    if isinstance(raw, Order):
        return raw

    record = dict(raw)
    remapped = _remap(record, ("paymentStatus", "payment_status"), PAYMENT_STATUS_ALIASES)
    remapped = _remap(record, ("preparationType", "preparation_type"), PREPARATION_TYPE_ALIASES) or remapped
    if remapped:
        logger.debug("Remapped legacy values for order %s", record.get("id"))

    try:
        return Order.model_validate(record)
    except ValidationError as exc:
        raise ContractViolation(f"Invalid order record {record.get('id')!r}: {exc}") from exc


def migrate_records(raws: Iterable[Union[dict, Order]]) -> List[Order]:
    """迁移整个持久化数组"""
    orders = [migrate_legacy_status(raw) for raw in raws]
    logger.debug("Migrated %d order records", len(orders))
    return orders
