# pos_checkout/services/checkout_service.py
import random
from datetime import datetime
from typing import Callable

from pos_checkout.domain.cart import Cart
from pos_checkout.domain.schemas import CheckoutOut, InvoiceCreate, StockFailure, StockUpdate
from pos_checkout.services.backend_client import Backend, BackendError
from pos_checkout.utils.logging import get_logger

logger = get_logger(__name__)

INVOICE_PREFIX = "INV"
INVOICE_STATUSES = ("pending", "paid")


def generate_invoice_number(
    now: datetime | None = None,
    randint: Callable[[int, int], int] = random.randint,
) -> str:
    """
    INV-YYYYMMDD-RRRR with a random 4 digit suffix.

    Not unique, the invoice store rejects a collision and the checkout fails.
    """
    now = now or datetime.now()
    return f"{INVOICE_PREFIX}-{now:%Y%m%d}-{randint(0, 9999):04d}"


class CheckoutService:
    """
    Creates the invoice, then decrements stock line by line.

    The two steps are not atomic: if invoice creation fails nothing else
    happens, but a failed stock update is only logged and reported back,
    the invoice stays.
    """

    def __init__(self, backend: Backend, number_factory: Callable[[], str] = generate_invoice_number):
        self.backend = backend
        self.number_factory = number_factory

    @staticmethod
    def validate(cart: Cart, customer_name: str, status: str) -> None:
        if not (customer_name or "").strip():
            raise ValueError("Please enter customer name")
        if not cart:
            raise ValueError("Cannot check out an empty cart")
        if status not in INVOICE_STATUSES:
            raise ValueError(f"Invalid invoice status: {status}")

    def checkout(
        self,
        cart: Cart,
        customer_name: str,
        customer_phone: str = "",
        status: str = "pending",
    ) -> CheckoutOut:
        #validation first, no backend call on bad input
        self.validate(cart, customer_name, status)

        totals = cart.totals()
        invoice_number = self.number_factory()

        payload = InvoiceCreate(
            invoice_number=invoice_number,
            items=cart.to_invoice_items(),
            subtotal=totals.subtotal,
            tax=totals.tax,
            total=totals.total,
            status=status,
            customer_name=customer_name,
            customer_phone=customer_phone,
        )

        try:
            invoice = self.backend.create_invoice(payload)
        except BackendError as e:
            logger.error(f"Invoice generation error: {e}")
            raise

        logger.info(f"Invoice {invoice_number} generated, updating stock for {len(cart)} lines")

        #one call per line, in order, each awaited before the next
        failures = []
        for item in cart.items:
            update = StockUpdate(
                product_id=item.product_id,
                sku=item.variant.sku,
                quantity=-item.quantity,
            )
            try:
                self.backend.update_stock(update)
            except BackendError as e:
                logger.error(
                    f"Stock update failed for {item.product_id}/{item.variant.sku} "
                    f"after invoice {invoice_number}: {e}"
                )
                failures.append(
                    StockFailure(
                        product_id=update.product_id,
                        sku=update.sku,
                        quantity=update.quantity,
                        error=str(e),
                    )
                )

        return CheckoutOut(
            invoice_number=invoice_number,
            invoice=invoice,
            stock_failures=failures,
        )
