# pos_checkout/repos/invoice_repo.py
import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Callable, List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from pos_checkout.data.models.invoice import InvoiceModel
from pos_checkout.domain.schemas import Invoice, InvoiceCreate, InvoiceItem


class DuplicateInvoiceError(ValueError):
    pass


class InvoiceStoreError(RuntimeError):
    """The store itself failed (connection, missing table, ...)."""


class InvoiceRepo(ABC):
    """Append-only invoice store, invoices are never updated after add."""

    @abstractmethod
    def add(self, payload: InvoiceCreate) -> Invoice: ...

    @abstractmethod
    def list(self) -> List[Invoice]: ...

    @abstractmethod
    def exists(self, invoice_number: str) -> bool: ...

    @staticmethod
    def _new_invoice(payload: InvoiceCreate) -> Invoice:
        return Invoice(
            **payload.model_dump(),
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
        )


class InMemoryInvoiceRepo(InvoiceRepo):
    """Lives for the process lifetime, empty again after a restart."""

    def __init__(self):
        self._invoices: List[Invoice] = []

    def add(self, payload: InvoiceCreate) -> Invoice:
        if self.exists(payload.invoice_number):
            raise DuplicateInvoiceError(f"Invoice {payload.invoice_number} already exists")

        invoice = self._new_invoice(payload)
        self._invoices.append(invoice)
        return invoice

    def list(self) -> List[Invoice]:
        return list(self._invoices)

    def exists(self, invoice_number: str) -> bool:
        return any(i.invoice_number == invoice_number for i in self._invoices)


class SqlInvoiceRepo(InvoiceRepo):
    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    @staticmethod
    def _to_schema(row: InvoiceModel) -> Invoice:
        return Invoice(
            id=row.id,
            invoice_number=row.invoice_number,
            items=[InvoiceItem.model_validate(i) for i in row.items],
            subtotal=row.subtotal,
            tax=row.tax,
            total=row.total,
            status=row.status,
            customer_name=row.customer_name,
            customer_phone=row.customer_phone,
            salesman_id=row.salesman_id,
            created_at=row.created_at,
        )

    def add(self, payload: InvoiceCreate) -> Invoice:
        invoice = self._new_invoice(payload)
        row = InvoiceModel(
            id=invoice.id,
            invoice_number=invoice.invoice_number,
            items=[i.model_dump(mode="json") for i in invoice.items],
            subtotal=invoice.subtotal,
            tax=invoice.tax,
            total=invoice.total,
            status=invoice.status,
            customer_name=invoice.customer_name,
            customer_phone=invoice.customer_phone,
            salesman_id=invoice.salesman_id,
            created_at=invoice.created_at,
        )

        with self.session_factory() as db:
            db.add(row)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                raise DuplicateInvoiceError(f"Invoice {payload.invoice_number} already exists")
            except SQLAlchemyError as e:
                db.rollback()
                raise InvoiceStoreError(f"Could not store invoice {payload.invoice_number}: {e}") from e

        return invoice

    def list(self) -> List[Invoice]:
        try:
            with self.session_factory() as db:
                rows = db.execute(
                    select(InvoiceModel).order_by(InvoiceModel.created_at, InvoiceModel.id)
                ).scalars().all()
                return [self._to_schema(r) for r in rows]
        except SQLAlchemyError as e:
            raise InvoiceStoreError(f"Could not read invoices: {e}") from e

    def exists(self, invoice_number: str) -> bool:
        try:
            with self.session_factory() as db:
                found = db.execute(
                    select(InvoiceModel.id).where(InvoiceModel.invoice_number == invoice_number)
                ).first()
                return found is not None
        except SQLAlchemyError as e:
            raise InvoiceStoreError(f"Could not look up invoice {invoice_number}: {e}") from e
