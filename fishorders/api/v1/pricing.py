from fastapi import APIRouter, Depends

from ... import schemas
from ...core.pricing import price_of
from ...crud.order import OrderBook
from ..deps import get_order_book

router = APIRouter(prefix="/pricing", tags=["pricing"])


@router.post("/quote", response_model=schemas.PriceBreakdownRead)
def quote_endpoint(request: schemas.QuoteRequest, book: OrderBook = Depends(get_order_book)):
    """按订单簿当前费率报价"""
    breakdown = price_of(
        request.weight,
        request.preparation_type,
        request.has_staff_discount,
        request.is_free,
        book.rates,
    )
    return schemas.PriceBreakdownRead.model_validate(breakdown)
