# pos_checkout/services/backend_client.py
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import requests
from pydantic import ValidationError
from requests import RequestException

from pos_checkout.domain.schemas import Invoice, InvoiceCreate, Product, StockUpdate
from pos_checkout.repos.invoice_repo import InvoiceStoreError
from pos_checkout.services.dispatch_service import DispatchService
from pos_checkout.utils.logging import get_logger
from pos_checkout.utils.retry import http_retry
from pos_checkout.utils.settings import BACKEND_RETRY_ATTEMPTS, BACKEND_TIMEOUT, BACKEND_URL

logger = get_logger(__name__)

DISPATCH_PATH = "/functions/backend"


class BackendError(RuntimeError):
    """Any failed backend call: transport error, error payload or bad response."""


class Backend(ABC):
    """Typed view over the {action, data} dispatch."""

    @abstractmethod
    def invoke(self, action: str, data: Dict[str, Any] | None = None) -> Dict[str, Any]: ...

    def get_products(self) -> List[Product]:
        result = self.invoke("getProducts")
        return [Product.model_validate(p) for p in result.get("documents", [])]

    def create_invoice(self, payload: InvoiceCreate) -> Invoice:
        result = self.invoke("createInvoice", payload.to_wire())
        try:
            return Invoice.model_validate(result["invoice"])
        except (KeyError, ValidationError) as e:
            raise BackendError(f"Malformed createInvoice response: {e}") from e

    def update_stock(self, update: StockUpdate) -> Dict[str, Any]:
        return self.invoke("updateStock", update.to_wire())

    def get_invoices(self) -> List[Invoice]:
        result = self.invoke("getInvoices")
        return [Invoice.model_validate(i) for i in result.get("documents", [])]


class BackendClient(Backend):
    """Calls a remote dispatch endpoint over HTTP."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = BACKEND_TIMEOUT,
        retry_attempts: int = BACKEND_RETRY_ATTEMPTS,
    ):
        self.base_url = (base_url or BACKEND_URL).rstrip("/")
        self.timeout = timeout
        self.retry_attempts = retry_attempts

    def _post(self, action: str, data: Dict[str, Any] | None) -> requests.Response:
        url = f"{self.base_url}{DISPATCH_PATH}"
        logger.info(f"BackendClient POST {url} action={action}")
        return requests.post(url, json={"action": action, "data": data}, timeout=self.timeout)

    def invoke(self, action: str, data: Dict[str, Any] | None = None) -> Dict[str, Any]:
        try:
            resp = http_retry(self.retry_attempts)(self._post)(action, data)
        except RequestException as e:
            raise BackendError(f"{action} failed: {e}") from e

        try:
            body = resp.json()
        except ValueError:
            body = None

        if resp.status_code >= 400 or not isinstance(body, dict) or "error" in body:
            detail = body.get("error") if isinstance(body, dict) else resp.text
            raise BackendError(f"{action} failed ({resp.status_code}): {detail}")

        return body


class LocalBackend(Backend):
    """Calls the dispatch in-process, errors are reported like the HTTP client's."""

    def __init__(self, dispatcher: DispatchService):
        self.dispatcher = dispatcher

    def invoke(self, action: str, data: Dict[str, Any] | None = None) -> Dict[str, Any]:
        try:
            return self.dispatcher.dispatch(action, data)
        except (ValueError, LookupError, InvoiceStoreError) as e:
            raise BackendError(f"{action} failed: {e}") from e
