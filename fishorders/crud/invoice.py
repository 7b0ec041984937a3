"""发票编号生成

编号为单调递增的数字字符串；若记住的上一个编号小于起始编号，则从起始编号开始。
"""

from typing import Optional

from ..config.settings import settings


class InvoiceNumberGenerator:

    def __init__(self, start: Optional[int] = None, last: Optional[int] = None):
        self.start = start if start is not None else settings.INVOICE_START_NUMBER
        self.last = last

    def next(self) -> str:
        candidate = self.last + 1 if self.last is not None else self.start
        if candidate < self.start:
            candidate = self.start
        self.last = candidate
        return str(candidate)

    def observe(self, invoice_number: str) -> None:
        """加载已有订单时推进计数，保证新编号不与已有编号重复"""
        if not invoice_number.isdigit():
            return
        value = int(invoice_number)
        if self.last is None or value > self.last:
            self.last = value
