"""订单领域模型

Order 为核心实体；PreparationType / PaymentStatus / Bucket 为封闭枚举。
旧数据中的字符串只在迁移入口（core.migration）被识别，这里不做兼容。
"""

import enum
import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PreparationType(str, enum.Enum):
    fillet = "fillet"     # 去骨鱼片
    cleaned = "cleaned"   # 清理干净
    damage = "damage"     # 损耗鱼处理销售


class PaymentStatus(str, enum.Enum):
    unpaid = "unpaid"
    paid_cash = "paid_cash"
    paid_card = "paid_card"


class Bucket(str, enum.Enum):
    office = "office"       # 办公室暂存订单
    active = "active"       # 未付款
    archived = "archived"   # 已付款归档


PAID_STATUSES = (PaymentStatus.paid_cash, PaymentStatus.paid_card)


class Order(BaseModel):
    """订单实体（不可变快照）

    持久化数组中的记录使用 camelCase 字段名，这里同时接受两种写法。
    修改订单时应生成新的快照，旧快照交给账本做冲销。
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    id: str
    invoice_number: str
    date: str = ""          # 展示用日期字符串
    timestamp: int          # 创建时间（毫秒时间戳）

    # 买方信息
    orderer: str = ""
    customer_name: str
    customer_phone: str = ""

    # 商品信息
    quantity: Optional[int] = Field(default=None, ge=0)
    requested_weight: Decimal = Field(gt=0)   # kg
    preparation_type: PreparationType
    description: Optional[str] = None

    # 交付信息
    delivery_weight: Optional[Decimal] = Field(default=None, ge=0)   # kg
    has_staff_discount: bool = False
    is_free: bool = False
    payment_status: PaymentStatus = PaymentStatus.unpaid

    final_price: Decimal = Field(default=Decimal("0"), ge=0)

    is_office_order: bool = False

    @property
    def effective_weight(self) -> Decimal:
        """实际计价重量：交付重量存在且大于0时使用交付重量，否则使用申请重量"""
        if self.delivery_weight and self.delivery_weight > 0:
            return self.delivery_weight
        return self.requested_weight

    def created_on(self) -> datetime.date:
        """订单创建的本地日历日期（去掉时分秒）"""
        return datetime.datetime.fromtimestamp(self.timestamp / 1000).date()
