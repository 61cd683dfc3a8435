# pos_checkout/domain/schemas.py
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


InvoiceStatus = Literal["pending", "paid"]


class CamelModel(BaseModel):
    """Base for every wire schema: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


# =====================================================
# CATALOG
# =====================================================
class ProductVariant(CamelModel):
    """A size/SKU option of a product with its own price and stock."""

    size: str
    price: Decimal = Field(..., ge=0)
    stock: int = Field(..., ge=0)
    sku: str = Field(..., min_length=1)


class Product(CamelModel):
    id: str = Field(..., alias="_id")
    name: str
    description: str = ""
    image: str = ""
    category: str = ""
    variants: List[ProductVariant] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_skus(self):
        seen = set()
        for variant in self.variants:
            if variant.sku in seen:
                raise ValueError(f"Duplicate sku {variant.sku} in product {self.id}")
            seen.add(variant.sku)
        return self

    def find_variant(self, sku: str) -> Optional[ProductVariant]:
        return next((v for v in self.variants if v.sku == sku), None)


# =====================================================
# CART
# =====================================================
class CartItem(CamelModel):
    """Cart entry, keyed by (product_id, variant.sku)."""

    product_id: str
    product_name: str
    variant: ProductVariant
    quantity: int = Field(..., ge=1)
    image: str = ""

    @property
    def key(self) -> tuple:
        return self.product_id, self.variant.sku


class Totals(CamelModel):
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    item_count: int


# =====================================================
# INVOICE
# =====================================================
class InvoiceItem(CamelModel):
    name: str
    qty: int
    price: Decimal
    tamount: Decimal


class InvoiceCreate(CamelModel):
    """Payload of the createInvoice action."""

    invoice_number: str = Field(..., min_length=1)
    items: List[InvoiceItem]
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    status: InvoiceStatus = "pending"
    customer_name: Optional[str] = None
    customer_phone: Optional[str] = None
    salesman_id: Optional[str] = None


class Invoice(InvoiceCreate):
    id: str = Field(..., alias="_id")
    created_at: datetime


class StockUpdate(CamelModel):
    """Payload of the updateStock action, quantity is a signed delta."""

    product_id: str
    sku: str
    quantity: int


# =====================================================
# BACKEND DISPATCH
# =====================================================
class DispatchRequest(BaseModel):
    """Not validated here, the dispatch reports a bad action or data as {error}."""

    action: Optional[str] = None
    data: Any = None


# =====================================================
# CART SESSIONS API
# =====================================================
class ItemIn(CamelModel):
    product_id: str = Field(..., min_length=1)
    sku: str = Field(..., min_length=1)
    quantity: int = Field(1, gt=0, description="Quantity to add (must be > 0)")


class QuantityIn(CamelModel):
    quantity: int = Field(..., description="New quantity, <= 0 removes the entry")


class CartOut(CamelModel):
    cart_id: str
    items: List[CartItem]
    totals: Totals


class CheckoutIn(CamelModel):
    customer_name: str = ""
    customer_phone: str = ""
    status: InvoiceStatus = "pending"


class StockFailure(CamelModel):
    product_id: str
    sku: str
    quantity: int
    error: str


class CheckoutOut(CamelModel):
    invoice_number: str
    invoice: Invoice
    stock_failures: List[StockFailure] = Field(default_factory=list)
