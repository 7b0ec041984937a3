from decimal import Decimal

import pytest

from fishorders import schemas
from fishorders.core.ledger import AggregationLedger
from fishorders.crud.invoice import InvoiceNumberGenerator
from fishorders.errors import ContractViolation, OrderNotFound
from fishorders.models.order import Bucket, PaymentStatus, PreparationType

from conftest import BASE_RATE, DISCOUNT_RATE


def new_order(**overrides):
    data = dict(customer_name="Sara", customer_phone="0912", requested_weight=Decimal("2"),
                preparation_type=PreparationType.fillet)
    data.update(overrides)
    return schemas.OrderCreate(**data)


def test_invoice_numbers_start_and_increase():
    gen = InvoiceNumberGenerator(start=6311)
    assert [gen.next(), gen.next()] == ["6311", "6312"]


def test_invoice_numbers_jump_to_start_when_history_is_lower():
    gen = InvoiceNumberGenerator(start=6311, last=120)
    assert gen.next() == "6311"


def test_invoice_observe_advances_past_loaded_numbers():
    gen = InvoiceNumberGenerator(start=6311)
    gen.observe("6400")
    gen.observe("6350")
    gen.observe("draft")
    assert gen.next() == "6401"


def test_create_assigns_identity_and_price(book):
    order = book.create_order(new_order())
    assert order.invoice_number == "6311"
    assert order.id
    assert order.timestamp > 0
    assert order.final_price == 2 * BASE_RATE
    assert book.list_orders() == [order]
    assert book.ledger.total(Bucket.active) == 2 * BASE_RATE


def test_newest_order_is_listed_first(book):
    first = book.create_order(new_order())
    second = book.create_order(new_order())
    assert [o.id for o in book.list_orders()] == [second.id, first.id]


def test_update_reprices_order(book):
    order = book.create_order(new_order())
    updated = book.update_order(order.id, schemas.OrderUpdate(has_staff_discount=True, delivery_weight=Decimal("3")))
    expected = 3 * (BASE_RATE - BASE_RATE * DISCOUNT_RATE)
    assert updated.final_price == expected
    assert book.get_order(order.id) == updated
    assert book.ledger.total(Bucket.active) == expected


def test_mark_paid_moves_to_archived(book):
    order = book.create_order(new_order())
    book.mark_paid(order.id, PaymentStatus.paid_card)
    assert book.ledger.total(Bucket.active) == 0
    assert book.ledger.total(Bucket.archived) == order.final_price
    assert book.buckets().archived[0].id == order.id


def test_mark_paid_rejects_unpaid(book):
    order = book.create_order(new_order())
    with pytest.raises(ContractViolation):
        book.mark_paid(order.id, PaymentStatus.unpaid)


def test_accept_office_order(book):
    order = book.create_order(new_order(is_office_order=True))
    assert book.buckets().office == [order]
    accepted = book.accept_office_order(order.id)
    assert accepted.is_office_order is False
    assert book.buckets().active == [accepted]
    assert book.ledger.totals(Bucket.office).order_count == 0


def test_delete_retracts_contribution(book):
    keep = book.create_order(new_order())
    gone = book.create_order(new_order(is_office_order=True))
    book.delete_order(gone.id)
    assert book.list_orders() == [keep]
    assert book.ledger.totals(Bucket.office).order_count == 0
    assert book.ledger.total(Bucket.active) == keep.final_price


def test_missing_order_raises(book):
    with pytest.raises(OrderNotFound):
        book.get_order("nope")
    with pytest.raises(OrderNotFound):
        book.delete_order("nope")


def test_invalid_update_leaves_state_untouched(book):
    order = book.create_order(new_order())
    before = book.ledger.snapshot()
    with pytest.raises(ContractViolation):
        book.update_order(order.id, schemas.OrderUpdate.model_validate({"requested_weight": None}))
    assert book.get_order(order.id) == order
    assert book.ledger.snapshot() == before


def test_load_migrates_reprices_and_rebuilds(book):
    records = [
        {"id": "a", "invoiceNumber": "6500", "timestamp": 1, "customerName": "x",
         "requestedWeight": 1, "preparationType": "فیله", "paymentStatus": "پرداخت شده", "finalPrice": 5},
        {"id": "b", "invoiceNumber": "6501", "timestamp": 2, "customerName": "y",
         "requestedWeight": 2, "preparationType": "فروش تلفات", "paymentStatus": "پرداخت نشده",
         "isOfficeOrder": True},
    ]
    assert book.load(records) == 2
    a = book.get_order("a")
    assert a.payment_status is PaymentStatus.paid_card
    assert a.final_price == BASE_RATE
    assert book.ledger.snapshot() == AggregationLedger.rebuild(book.list_orders(), book.rates).snapshot()
    assert book.create_order(new_order()).invoice_number == "6502"
