#import every model so SQLAlchemy registers it in Base.metadata

from pos_checkout.data.models.invoice import InvoiceModel

__all__ = ["InvoiceModel"]
