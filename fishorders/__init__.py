"""应用模块入口

提供统一的模块导入接口
"""

from . import (
    config,
    errors,
    models,
    schemas,
    core,
    crud,
)

# 从子模块导入关键组件
from .config import settings
from .core import AggregationLedger, DateRange, classify, filter_orders, migrate_legacy_status, price_of
from .crud import OrderBook
from .errors import ContractViolation, OrderNotFound

__all__ = [
    "config",
    "errors",
    "models",
    "schemas",
    "core",
    "crud",
    "settings",
    "AggregationLedger",
    "DateRange",
    "classify",
    "filter_orders",
    "migrate_legacy_status",
    "price_of",
    "OrderBook",
    "ContractViolation",
    "OrderNotFound",
]
