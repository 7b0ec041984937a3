from .helpers import current_timestamp_ms, format_display_date, new_order_id
from .logging import get_logger, setup_logging

__all__ = ["current_timestamp_ms", "format_display_date", "new_order_id", "get_logger", "setup_logging"]
