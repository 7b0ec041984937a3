"""定价相关的请求/响应模型"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from ..models.order import PreparationType


class QuoteRequest(BaseModel):
    weight: Decimal = Field(gt=0)
    preparation_type: PreparationType
    has_staff_discount: bool = False
    is_free: bool = False


class PriceBreakdownRead(BaseModel):
    base_unit_price: Decimal
    discount_amount: Decimal
    final_unit_price: Decimal
    total_price: Decimal

    model_config = ConfigDict(from_attributes=True)
