import sys
from datetime import datetime
from decimal import Decimal
from pathlib import Path
import itertools

import pytest

# Ensure project root is on sys.path so tests can import 'fishorders' package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient

from fishorders.api.deps import get_order_book
from fishorders.core.pricing import PricingRates, reprice
from fishorders.crud.invoice import InvoiceNumberGenerator
from fishorders.crud.order import OrderBook
from fishorders.main import app
from fishorders.models.order import Order, PaymentStatus, PreparationType

# R / Rd in the pricing scenarios
BASE_RATE = Decimal("100000")
DAMAGE_RATE = Decimal("40000")
DISCOUNT_RATE = Decimal("0.2")


def ts(year, month, day, hour=10):
    """Millisecond timestamp for a local wall-clock time."""
    return int(datetime(year, month, day, hour).timestamp() * 1000)


@pytest.fixture
def rates():
    return PricingRates(price_per_kg=BASE_RATE, damage_price_per_kg=DAMAGE_RATE, staff_discount_rate=DISCOUNT_RATE)


@pytest.fixture
def make_order(rates):
    counter = itertools.count(1)

    def _make(**overrides):
        n = next(counter)
        fields = dict(
            id=f"order-{n}",
            invoice_number=str(6310 + n),
            date="2026-10-18",
            timestamp=ts(2026, 10, 18),
            orderer="staff",
            customer_name=f"Customer {n}",
            customer_phone=f"0912000{n:04d}",
            requested_weight=Decimal("2"),
            preparation_type=PreparationType.fillet,
            payment_status=PaymentStatus.unpaid,
        )
        fields.update(overrides)
        return reprice(Order(**fields), rates)

    return _make


@pytest.fixture
def book(rates):
    return OrderBook(rates=rates, invoices=InvoiceNumberGenerator(start=6311))


@pytest.fixture
def client(book):
    app.dependency_overrides[get_order_book] = lambda: book
    yield TestClient(app)
    app.dependency_overrides.clear()
