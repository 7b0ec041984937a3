from .orders import router as orders_router
from .pricing import router as pricing_router
from .ledger import router as ledger_router

__all__ = ["orders_router", "pricing_router", "ledger_router"]
