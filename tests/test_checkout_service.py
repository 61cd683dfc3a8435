import re
from datetime import datetime
from decimal import Decimal

import pytest
from sqlalchemy import text

from pos_checkout.domain.cart import Cart
from pos_checkout.domain.schemas import ProductVariant
from pos_checkout.services.backend_client import Backend, BackendError, LocalBackend
from pos_checkout.services.checkout_service import CheckoutService, generate_invoice_number
from pos_checkout.services.dispatch_service import DispatchService

INVOICE_RE = re.compile(r"^INV-\d{8}-\d{4}$")


class FakeBackend(Backend):
    """Records every call, fails the actions listed in fail_on."""

    def __init__(self, inner: Backend, fail_on=(), fail_skus=()):
        self.inner = inner
        self.fail_on = set(fail_on)
        self.fail_skus = set(fail_skus)
        self.calls = []

    def invoke(self, action, data=None):
        self.calls.append((action, data))
        if action in self.fail_on:
            raise BackendError(f"{action} failed: boom")
        if action == "updateStock" and data["sku"] in self.fail_skus:
            raise BackendError("updateStock failed: timeout")
        return self.inner.invoke(action, data)


def filled_cart():
    cart = Cart()
    cart.add("1", "Premium Engine Oil",
             ProductVariant(size="1L Bottle", price=Decimal("450"), stock=100, sku="OIL-1L"),
             quantity=2)
    cart.add("2", "Brake Fluid DOT 4",
             ProductVariant(size="500ml", price=Decimal("280"), stock=150, sku="BF-500"))
    return cart


@pytest.fixture
def fake(dispatcher):
    return FakeBackend(LocalBackend(dispatcher))


def test_invoice_number_format():
    for _ in range(50):
        assert INVOICE_RE.match(generate_invoice_number())


def test_invoice_number_uses_date_and_pads_suffix():
    number = generate_invoice_number(datetime(2024, 3, 7, 12, 0), randint=lambda a, b: 42)
    assert number == "INV-20240307-0042"


@pytest.mark.parametrize("name", ["", "   ", None])
def test_missing_customer_name_aborts_before_any_call(fake, name):
    svc = CheckoutService(fake)

    with pytest.raises(ValueError, match="customer name"):
        svc.checkout(filled_cart(), name)

    assert fake.calls == []


def test_empty_cart_aborts_before_any_call(fake):
    with pytest.raises(ValueError):
        CheckoutService(fake).checkout(Cart(), "Ravi")
    assert fake.calls == []


def test_invalid_status_aborts(fake):
    with pytest.raises(ValueError):
        CheckoutService(fake).checkout(filled_cart(), "Ravi", status="refunded")
    assert fake.calls == []


def test_checkout_creates_invoice_then_stock_updates_in_order(fake, invoice_repo):
    svc = CheckoutService(fake, number_factory=lambda: "INV-20240101-0001")

    result = svc.checkout(filled_cart(), "Ravi", "9999999999", status="paid")

    assert [a for a, _ in fake.calls] == ["createInvoice", "updateStock", "updateStock"]
    assert fake.calls[1][1] == {"productId": "1", "sku": "OIL-1L", "quantity": -2}
    assert fake.calls[2][1] == {"productId": "2", "sku": "BF-500", "quantity": -1}

    assert result.invoice_number == "INV-20240101-0001"
    assert result.stock_failures == []
    assert result.invoice.status == "paid"
    assert result.invoice.customer_name == "Ravi"
    assert result.invoice.total == Decimal("1392.4")
    assert [i.invoice_number for i in invoice_repo.list()] == ["INV-20240101-0001"]


def test_invoice_payload_matches_cart(fake):
    CheckoutService(fake).checkout(filled_cart(), "Ravi")

    action, data = fake.calls[0]
    assert action == "createInvoice"
    assert INVOICE_RE.match(data["invoiceNumber"])
    assert data["status"] == "pending"
    assert data["customerPhone"] == ""
    assert [i["name"] for i in data["items"]] == [
        "Premium Engine Oil - 1L Bottle",
        "Brake Fluid DOT 4 - 500ml",
    ]
    assert Decimal(data["subtotal"]) == Decimal("1180")
    assert Decimal(data["tax"]) == Decimal("212.4")


def test_invoice_failure_aborts_without_stock_calls(dispatcher, invoice_repo):
    fake = FakeBackend(LocalBackend(dispatcher), fail_on={"createInvoice"})

    with pytest.raises(BackendError):
        CheckoutService(fake).checkout(filled_cart(), "Ravi")

    assert [a for a, _ in fake.calls] == ["createInvoice"]
    assert invoice_repo.list() == []


def test_stock_failure_is_reported_but_invoice_stands(dispatcher, invoice_repo):
    fake = FakeBackend(LocalBackend(dispatcher), fail_skus={"OIL-1L"})

    result = CheckoutService(fake).checkout(filled_cart(), "Ravi")

    #the second line is still attempted after the first one failed
    assert [a for a, _ in fake.calls] == ["createInvoice", "updateStock", "updateStock"]
    assert len(result.stock_failures) == 1
    failure = result.stock_failures[0]
    assert (failure.product_id, failure.sku, failure.quantity) == ("1", "OIL-1L", -2)
    assert len(invoice_repo.list()) == 1


def test_duplicate_invoice_number_fails_checkout(fake):
    svc = CheckoutService(fake, number_factory=lambda: "INV-20240101-0001")
    svc.checkout(filled_cart(), "Ravi")

    with pytest.raises(BackendError, match="already exists"):
        svc.checkout(filled_cart(), "Asha")


def test_store_failure_during_invoice_creation_is_a_backend_error(catalog, sql_engine, sql_repo):
    with sql_engine.begin() as conn:
        conn.execute(text("DROP TABLE invoices"))
    fake = FakeBackend(LocalBackend(DispatchService(catalog, sql_repo)))

    with pytest.raises(BackendError, match="Could not store invoice"):
        CheckoutService(fake).checkout(filled_cart(), "Ravi")

    assert [a for a, _ in fake.calls] == ["createInvoice"]
