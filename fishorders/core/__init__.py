"""核心逻辑：定价、分类、账本、筛选与旧数据迁移"""

from .classifier import classify
from .ledger import AggregationLedger, BucketTotals, Contribution
from .migration import migrate_legacy_status, migrate_records
from .pricing import PriceBreakdown, PricingRates, price_of, price_order, reprice
from .query import DateRange, FilteredOrders, filter_orders, in_date_range, matches_text

__all__ = [
    "classify",
    "AggregationLedger",
    "BucketTotals",
    "Contribution",
    "migrate_legacy_status",
    "migrate_records",
    "PriceBreakdown",
    "PricingRates",
    "price_of",
    "price_order",
    "reprice",
    "DateRange",
    "FilteredOrders",
    "filter_orders",
    "in_date_range",
    "matches_text",
]
