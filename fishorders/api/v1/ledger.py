from fastapi import APIRouter, Depends

from ... import schemas
from ...crud.order import OrderBook
from ...models.order import Bucket
from ..deps import get_order_book

router = APIRouter(prefix="/ledger", tags=["ledger"])


@router.get("/", response_model=schemas.LedgerRead)
def ledger_endpoint(book: OrderBook = Depends(get_order_book)):
    """各桶的汇总"""
    snapshot = book.ledger.snapshot()
    return schemas.LedgerRead(
        office=schemas.BucketTotalsRead.model_validate(snapshot[Bucket.office]),
        active=schemas.BucketTotalsRead.model_validate(snapshot[Bucket.active]),
        archived=schemas.BucketTotalsRead.model_validate(snapshot[Bucket.archived]),
    )


@router.get("/{bucket}", response_model=schemas.BucketTotalsRead)
def bucket_totals_endpoint(bucket: Bucket, book: OrderBook = Depends(get_order_book)):
    return schemas.BucketTotalsRead.model_validate(book.ledger.totals(bucket))
