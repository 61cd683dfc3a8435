# pos_checkout/domain/cart.py
from decimal import Decimal
from typing import Iterable, List, Optional

from pos_checkout.domain.schemas import CartItem, InvoiceItem, ProductVariant, Totals

#GST, not configurable
TAX_RATE = Decimal("0.18")


def compute_totals(items: Iterable[CartItem]) -> Totals:
    items = list(items)
    subtotal = sum((i.variant.price * i.quantity for i in items), Decimal("0.00"))
    tax = subtotal * TAX_RATE
    return Totals(
        subtotal=subtotal,
        tax=tax,
        total=subtotal + tax,
        item_count=sum(i.quantity for i in items),
    )


class Cart:
    """
    Cart aggregator: one entry per (product_id, sku) holding a quantity.

    Every command swaps the entry list for a new one, so readers never see
    a half-applied change. Stock is advisory here, nothing is checked
    against variant.stock.
    """

    def __init__(self, items: Optional[Iterable[CartItem]] = None):
        self._items: List[CartItem] = list(items or [])

    @property
    def items(self) -> List[CartItem]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def _index(self, product_id: str, sku: str) -> Optional[int]:
        for idx, item in enumerate(self._items):
            if item.key == (product_id, sku):
                return idx
        return None

    #commands
    def add(
        self,
        product_id: str,
        product_name: str,
        variant: ProductVariant,
        image: str = "",
        quantity: int = 1,
    ) -> CartItem:
        if quantity <= 0:
            raise ValueError("Quantity must be greater than 0")

        idx = self._index(product_id, variant.sku)
        updated = list(self._items)

        if idx is not None:
            current = updated[idx]
            updated[idx] = current.model_copy(update={"quantity": current.quantity + quantity})
        else:
            updated.append(
                CartItem(
                    product_id=product_id,
                    product_name=product_name,
                    variant=variant.model_copy(),  # snapshot, not the catalog object
                    quantity=quantity,
                    image=image,
                )
            )
            idx = len(updated) - 1

        self._items = updated
        return updated[idx]

    def set_quantity(self, product_id: str, sku: str, quantity: int) -> None:
        if quantity <= 0:
            self.remove(product_id, sku)
            return

        #missing key is a no-op, never creates an entry
        self._items = [
            item.model_copy(update={"quantity": quantity})
            if item.product_id == product_id and item.variant.sku == sku
            else item
            for item in self._items
        ]

    def remove(self, product_id: str, sku: str) -> None:
        self._items = [
            item for item in self._items
            if not (item.product_id == product_id and item.variant.sku == sku)
        ]

    def clear(self) -> None:
        self._items = []

    #queries
    def totals(self) -> Totals:
        return compute_totals(self._items)

    def to_invoice_items(self) -> List[InvoiceItem]:
        return [
            InvoiceItem(
                name=f"{item.product_name} - {item.variant.size}",
                qty=item.quantity,
                price=item.variant.price,
                tamount=item.variant.price * item.quantity,
            )
            for item in self._items
        ]
