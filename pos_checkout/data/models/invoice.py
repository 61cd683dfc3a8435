# pos_checkout/data/models/invoice.py
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import JSON, Column, DateTime, String
from sqlalchemy.types import TypeDecorator

from pos_checkout.data.database import Base


class ExactDecimal(TypeDecorator):
    """Decimal stored as its exact string form."""

    impl = String(40)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return str(Decimal(value))

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return Decimal(value)


class InvoiceModel(Base):
    __tablename__ = "invoices"

    id = Column(String(36), primary_key=True)
    invoice_number = Column(String(32), nullable=False, unique=True, index=True)

    #invoice lines kept as a json list of {name, qty, price, tamount}
    items = Column(JSON, nullable=False, default=list)
    subtotal = Column(ExactDecimal, nullable=False)
    tax = Column(ExactDecimal, nullable=False)
    total = Column(ExactDecimal, nullable=False)

    status = Column(String(16), nullable=False, default="pending")  # pending, paid
    customer_name = Column(String, nullable=True)
    customer_phone = Column(String, nullable=True)
    salesman_id = Column(String, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
