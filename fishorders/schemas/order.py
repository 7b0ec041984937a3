"""订单数据结构定义

定义订单相关的请求/响应 Pydantic 模型
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from ..models.order import Order, PaymentStatus, PreparationType


class OrderBase(BaseModel):
    """订单基础模型"""
    orderer: str = ""
    customer_name: str
    customer_phone: str = ""
    quantity: Optional[int] = Field(default=None, ge=0)
    requested_weight: Decimal = Field(gt=0)
    preparation_type: PreparationType
    description: Optional[str] = None
    delivery_weight: Optional[Decimal] = Field(default=None, ge=0)
    has_staff_discount: bool = False
    is_free: bool = False
    payment_status: PaymentStatus = PaymentStatus.unpaid
    is_office_order: bool = False


class OrderCreate(OrderBase):
    """创建订单时的模型"""
    pass


class OrderUpdate(BaseModel):
    """更新订单时的模型，未提供的字段保持不变"""
    orderer: Optional[str] = None
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    requested_weight: Optional[Decimal] = Field(default=None, gt=0)
    preparation_type: Optional[PreparationType] = None
    description: Optional[str] = None
    delivery_weight: Optional[Decimal] = Field(default=None, ge=0)
    has_staff_discount: Optional[bool] = None
    is_free: Optional[bool] = None
    payment_status: Optional[PaymentStatus] = None
    is_office_order: Optional[bool] = None


class PaymentUpdate(BaseModel):
    """登记付款"""
    payment_status: PaymentStatus


class OrderBuckets(BaseModel):
    """三个标签页对应的筛选结果"""
    office: List[Order]
    active: List[Order]
    archived: List[Order]


class ImportResult(BaseModel):
    imported: int
