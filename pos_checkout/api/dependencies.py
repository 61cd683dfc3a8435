# pos_checkout/api/dependencies.py
from functools import lru_cache

from pos_checkout.data.database import Base, SessionLocal, engine
from pos_checkout.data.seed import sample_products
from pos_checkout.repos.catalog_repo import CatalogRepo
from pos_checkout.repos.invoice_repo import InMemoryInvoiceRepo, InvoiceRepo, SqlInvoiceRepo
from pos_checkout.services.backend_client import Backend, BackendClient, LocalBackend
from pos_checkout.services.cart_service import CartService
from pos_checkout.services.checkout_service import CheckoutService
from pos_checkout.services.dispatch_service import DispatchService
from pos_checkout.utils.logging import get_logger
from pos_checkout.utils.settings import APPLY_STOCK_UPDATES, BACKEND_URL, INVOICE_STORE

logger = get_logger(__name__)

#process-wide singletons, built on first use; tests swap them via dependency_overrides


@lru_cache
def get_catalog() -> CatalogRepo:
    return CatalogRepo(sample_products(), apply_stock_updates=APPLY_STOCK_UPDATES)


@lru_cache
def get_invoice_repo() -> InvoiceRepo:
    if INVOICE_STORE == "sql":
        import pos_checkout.data.models  # noqa: F401  registers InvoiceModel

        Base.metadata.create_all(bind=engine)
        logger.info(f"Invoice store: sql ({engine.url})")
        return SqlInvoiceRepo(SessionLocal)

    if INVOICE_STORE != "memory":
        raise ValueError(f"Unknown INVOICE_STORE: {INVOICE_STORE}")

    logger.info("Invoice store: memory")
    return InMemoryInvoiceRepo()


@lru_cache
def get_dispatch_service() -> DispatchService:
    return DispatchService(get_catalog(), get_invoice_repo())


@lru_cache
def get_backend() -> Backend:
    if BACKEND_URL:
        return BackendClient(BACKEND_URL)
    return LocalBackend(get_dispatch_service())


@lru_cache
def get_cart_service() -> CartService:
    return CartService(get_catalog(), CheckoutService(get_backend()))
