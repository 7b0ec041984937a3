from .order import OrderCreate, OrderUpdate, PaymentUpdate, OrderBuckets, ImportResult
from .pricing import QuoteRequest, PriceBreakdownRead
from .ledger import BucketTotalsRead, LedgerRead

__all__ = [
    "OrderCreate",
    "OrderUpdate",
    "PaymentUpdate",
    "OrderBuckets",
    "ImportResult",
    "QuoteRequest",
    "PriceBreakdownRead",
    "BucketTotalsRead",
    "LedgerRead",
]
