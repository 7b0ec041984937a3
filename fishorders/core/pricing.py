"""定价引擎

根据重量、加工品类、员工折扣和免单标记计算价格明细。
纯函数，无副作用；重量的合法性由调用方保证。
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..config.settings import settings
from ..errors import ContractViolation
from ..models.order import Order, PreparationType

ZERO = Decimal("0")


@dataclass(frozen=True)
class PricingRates:
    price_per_kg: Decimal
    damage_price_per_kg: Decimal
    staff_discount_rate: Decimal

    @classmethod
    def from_settings(cls) -> "PricingRates":
        return cls(
            price_per_kg=settings.PRICE_PER_KG,
            damage_price_per_kg=settings.DAMAGE_PRICE_PER_KG,
            staff_discount_rate=settings.STAFF_DISCOUNT_RATE,
        )


@dataclass(frozen=True)
class PriceBreakdown:
    base_unit_price: Decimal
    discount_amount: Decimal   # 每公斤折扣
    final_unit_price: Decimal
    total_price: Decimal


def _as_category(category) -> PreparationType:
    if isinstance(category, PreparationType):
        return category
    try:
        return PreparationType(category)
    except ValueError:
        raise ContractViolation(f"Unknown preparation type: {category!r}") from None


def _as_decimal(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # float 先转字符串再构造
    return Decimal(str(value))


def price_of(weight: Decimal, category, has_discount: bool, is_free: bool,
             rates: Optional[PricingRates] = None) -> PriceBreakdown:
    """计算价格明细

    1. 损耗鱼使用单独的单价，其余品类使用统一单价
    2. 仅当有员工折扣、非损耗鱼且非免单时才有折扣
    3. 最终单价 = 单价 - 折扣
    4. 总价 = 重量 × 最终单价
    5. 免单：总价与最终单价均为0，但保留原单价用于小票展示
    """
    category = _as_category(category)
    rates = rates or PricingRates.from_settings()
    is_damage = category is PreparationType.damage

    base_unit_price = rates.damage_price_per_kg if is_damage else rates.price_per_kg

    discount_amount = ZERO
    if has_discount and not is_damage and not is_free:
        discount_amount = base_unit_price * rates.staff_discount_rate

    final_unit_price = base_unit_price - discount_amount
    total_price = _as_decimal(weight) * final_unit_price

    if is_free:
        total_price = ZERO
        final_unit_price = ZERO

    return PriceBreakdown(
        base_unit_price=base_unit_price,
        discount_amount=discount_amount,
        final_unit_price=final_unit_price,
        total_price=total_price,
    )


def price_order(order: Order, rates: Optional[PricingRates] = None) -> PriceBreakdown:
    """按订单的实际计价重量计算价格"""
    return price_of(
        order.effective_weight,
        order.preparation_type,
        order.has_staff_discount,
        order.is_free,
        rates,
    )


def reprice(order: Order, rates: Optional[PricingRates] = None) -> Order:
    """返回 final_price 已按当前字段重新计算的订单副本"""
    breakdown = price_order(order, rates)
    return order.model_copy(update={"final_price": breakdown.total_price})
