from .invoice import InvoiceNumberGenerator
from .order import OrderBook

__all__ = ["InvoiceNumberGenerator", "OrderBook"]
