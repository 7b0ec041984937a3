"""账本汇总的响应模型"""

from decimal import Decimal
from typing import Dict

from pydantic import BaseModel, ConfigDict

from ..models.order import PaymentStatus


class BucketTotalsRead(BaseModel):
    order_count: int
    total_weight: Decimal
    total_revenue: Decimal
    free_count: int
    revenue_by_payment: Dict[PaymentStatus, Decimal]

    model_config = ConfigDict(from_attributes=True)


class LedgerRead(BaseModel):
    office: BucketTotalsRead
    active: BucketTotalsRead
    archived: BucketTotalsRead
