
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pos_checkout.api import dependencies
from pos_checkout.data.database import Base
from pos_checkout.data.models import InvoiceModel  # noqa: F401
from pos_checkout.data.seed import sample_products
from pos_checkout.main import app
from pos_checkout.repos.catalog_repo import CatalogRepo
from pos_checkout.repos.invoice_repo import InMemoryInvoiceRepo, SqlInvoiceRepo
from pos_checkout.services.backend_client import LocalBackend
from pos_checkout.services.cart_service import CartService
from pos_checkout.services.checkout_service import CheckoutService
from pos_checkout.services.dispatch_service import DispatchService


@pytest.fixture
def catalog():
    return CatalogRepo(sample_products())


@pytest.fixture
def invoice_repo():
    return InMemoryInvoiceRepo()


@pytest.fixture
def sql_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sql_repo(sql_engine):
    return SqlInvoiceRepo(sessionmaker(bind=sql_engine))


@pytest.fixture
def dispatcher(catalog, invoice_repo):
    return DispatchService(catalog, invoice_repo)


@pytest.fixture
def backend(dispatcher):
    return LocalBackend(dispatcher)


@pytest.fixture
def cart_service(catalog, backend):
    return CartService(catalog, CheckoutService(backend))


@pytest.fixture
def client(catalog, dispatcher, cart_service):
    app.dependency_overrides[dependencies.get_catalog] = lambda: catalog
    app.dependency_overrides[dependencies.get_dispatch_service] = lambda: dispatcher
    app.dependency_overrides[dependencies.get_cart_service] = lambda: cart_service
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
