from .order import Bucket, Order, PaymentStatus, PreparationType, PAID_STATUSES

__all__ = ["Bucket", "Order", "PaymentStatus", "PreparationType", "PAID_STATUSES"]
