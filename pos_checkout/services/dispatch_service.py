# pos_checkout/services/dispatch_service.py
from typing import Any, Callable, Dict

from pos_checkout.domain.schemas import InvoiceCreate, StockUpdate
from pos_checkout.repos.catalog_repo import CatalogRepo
from pos_checkout.repos.invoice_repo import InvoiceRepo
from pos_checkout.utils.logging import get_logger

logger = get_logger(__name__)


class UnknownActionError(ValueError):
    pass


class DispatchService:
    """
    Backend action switch: {action, data} -> json-ready dict.

    getProducts, createInvoice, updateStock, getInvoices. Anything else
    raises UnknownActionError.
    """

    def __init__(self, catalog: CatalogRepo, invoices: InvoiceRepo):
        self.catalog = catalog
        self.invoices = invoices
        self._handlers: Dict[str, Callable[[Dict[str, Any]], Dict[str, Any]]] = {
            "getProducts": self.get_products,
            "createInvoice": self.create_invoice,
            "updateStock": self.update_stock,
            "getInvoices": self.get_invoices,
        }

    def dispatch(self, action: str | None, data: Any = None) -> Dict[str, Any]:
        handler = self._handlers.get(action)
        if handler is None:
            raise UnknownActionError(f"Unknown action: {action}")
        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Invalid data for {action}: expected an object")
        return handler(data or {})

    def get_products(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return {"documents": [p.to_wire() for p in self.catalog.get_products()]}

    def create_invoice(self, data: Dict[str, Any]) -> Dict[str, Any]:
        payload = InvoiceCreate.model_validate(data)
        invoice = self.invoices.add(payload)

        logger.info(f"Invoice created: {invoice.invoice_number}")

        return {
            "insertedId": invoice.id,
            "invoice": invoice.to_wire(),
        }

    def update_stock(self, data: Dict[str, Any]) -> Dict[str, Any]:
        update = StockUpdate.model_validate(data)
        modified = self.catalog.adjust_stock(update.product_id, update.sku, update.quantity)

        return {
            "modifiedCount": modified,
            "message": "Stock updated successfully" if modified else "Stock not updated",
        }

    def get_invoices(self, data: Dict[str, Any]) -> Dict[str, Any]:
        return {"documents": [i.to_wire() for i in self.invoices.list()]}
