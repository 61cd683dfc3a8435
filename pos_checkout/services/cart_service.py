# pos_checkout/services/cart_service.py
import uuid
from typing import Any, Dict, List

from pos_checkout.domain.cart import Cart
from pos_checkout.domain.schemas import CheckoutOut, InvoiceItem
from pos_checkout.repos.catalog_repo import CatalogRepo
from pos_checkout.services.checkout_service import CheckoutService
from pos_checkout.utils.logging import get_logger

logger = get_logger(__name__)


class CartNotFound(LookupError):
    pass


class CartService:
    """
    Cart sessions held in memory, one Cart aggregator per cart id.
    Commands (create, add, set, remove, clear, checkout) change state,
    queries (get, invoice_items) only read.
    """

    def __init__(self, catalog: CatalogRepo, checkout_service: CheckoutService):
        self.catalog = catalog
        self.checkout_service = checkout_service
        self._carts: Dict[str, Cart] = {}

    def _get(self, cart_id: str) -> Cart:
        cart = self._carts.get(cart_id)
        if cart is None:
            raise CartNotFound(f"Cart {cart_id} does not exist")
        return cart

    @staticmethod
    def _to_dict(cart_id: str, cart: Cart) -> Dict[str, Any]:
        return {
            "cart_id": cart_id,
            "items": cart.items,
            "totals": cart.totals(),
        }

    #query
    def get_cart(self, cart_id: str) -> Dict[str, Any] | None:
        cart = self._carts.get(cart_id)
        if cart is None:
            return None
        return self._to_dict(cart_id, cart)

    def invoice_items(self, cart_id: str) -> List[InvoiceItem]:
        return self._get(cart_id).to_invoice_items()

    #commands
    def create_cart(self) -> Dict[str, Any]:
        cart_id = uuid.uuid4().hex
        self._carts[cart_id] = Cart()
        logger.info(f"Created cart {cart_id}")
        return self._to_dict(cart_id, self._carts[cart_id])

    def add_product(self, cart_id: str, product_id: str, sku: str, quantity: int = 1) -> Dict[str, Any]:
        cart = self._get(cart_id)

        product = self.catalog.get_product(product_id)
        if not product:
            raise ValueError(f"Product {product_id} does not exist")

        variant = product.find_variant(sku)
        if not variant:
            raise ValueError(f"Product {product_id} has no variant {sku}")

        #out of stock variants cannot be picked, otherwise stock is advisory
        if variant.stock == 0:
            raise ValueError(f"Variant {sku} is out of stock")

        item = cart.add(product.id, product.name, variant, product.image, quantity)
        logger.info(f"Cart {cart_id}: {product_id}/{sku} quantity now {item.quantity}")

        return self._to_dict(cart_id, cart)

    def set_quantity(self, cart_id: str, product_id: str, sku: str, quantity: int) -> Dict[str, Any]:
        cart = self._get(cart_id)
        cart.set_quantity(product_id, sku, quantity)
        logger.info(f"Cart {cart_id}: set {product_id}/{sku} to {quantity}")
        return self._to_dict(cart_id, cart)

    def remove_product(self, cart_id: str, product_id: str, sku: str) -> Dict[str, Any]:
        cart = self._get(cart_id)
        cart.remove(product_id, sku)
        logger.info(f"Cart {cart_id}: removed {product_id}/{sku}")
        return self._to_dict(cart_id, cart)

    def clear_cart(self, cart_id: str) -> Dict[str, Any]:
        cart = self._get(cart_id)
        cart.clear()
        return self._to_dict(cart_id, cart)

    def checkout(
        self,
        cart_id: str,
        customer_name: str,
        customer_phone: str = "",
        status: str = "pending",
    ) -> CheckoutOut:
        cart = self._get(cart_id)
        result = self.checkout_service.checkout(cart, customer_name, customer_phone, status)

        #order complete, start over with an empty cart
        cart.clear()
        logger.info(f"Cart {cart_id} checked out as {result.invoice_number}")

        return result
