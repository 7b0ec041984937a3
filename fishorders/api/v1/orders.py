from typing import List

from fastapi import APIRouter, Depends, Query

from ... import schemas
from ...core.query import DateRange
from ...crud.order import OrderBook
from ...models.order import Order
from ..deps import get_order_book

router = APIRouter(prefix="/orders", tags=["orders"])


@router.get("/", response_model=schemas.OrderBuckets, response_model_by_alias=False)
def list_orders_endpoint(
    q: str = Query("", description="客户姓名、发票号或电话"),
    date_range: DateRange = Query(DateRange.all, alias="range", description="all, today, yesterday, week, month"),
    book: OrderBook = Depends(get_order_book),
):
    """按标签页返回筛选后的订单"""
    filtered = book.buckets(q, date_range)
    return schemas.OrderBuckets(office=filtered.office, active=filtered.active, archived=filtered.archived)


@router.post("/", response_model=Order, response_model_by_alias=False)
def create_order_endpoint(order: schemas.OrderCreate, book: OrderBook = Depends(get_order_book)):
    """创建新订单"""
    return book.create_order(order)


@router.post("/import", response_model=schemas.ImportResult)
def import_orders_endpoint(records: List[dict], book: OrderBook = Depends(get_order_book)):
    """导入持久化的订单数组（替换当前集合并重建账本）"""
    return schemas.ImportResult(imported=book.load(records))


@router.get("/{order_id}", response_model=Order, response_model_by_alias=False)
def get_order_endpoint(order_id: str, book: OrderBook = Depends(get_order_book)):
    return book.get_order(order_id)


@router.put("/{order_id}", response_model=Order, response_model_by_alias=False)
def update_order_endpoint(order_id: str, changes: schemas.OrderUpdate,
                          book: OrderBook = Depends(get_order_book)):
    """修改订单，价格随之重新计算"""
    return book.update_order(order_id, changes)


@router.post("/{order_id}/payment", response_model=Order, response_model_by_alias=False)
def mark_paid_endpoint(order_id: str, payment: schemas.PaymentUpdate,
                       book: OrderBook = Depends(get_order_book)):
    """登记付款"""
    return book.mark_paid(order_id, payment.payment_status)


@router.post("/{order_id}/accept", response_model=Order, response_model_by_alias=False)
def accept_office_order_endpoint(order_id: str, book: OrderBook = Depends(get_order_book)):
    """接收办公室订单"""
    return book.accept_office_order(order_id)


@router.delete("/{order_id}")
def delete_order_endpoint(order_id: str, book: OrderBook = Depends(get_order_book)):
    """删除指定ID的订单"""
    book.delete_order(order_id)
    return {"message": "Order deleted successfully"}
