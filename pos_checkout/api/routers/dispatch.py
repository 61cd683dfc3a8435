# pos_checkout/api/routers/dispatch.py
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from pos_checkout.api.dependencies import get_dispatch_service
from pos_checkout.domain.schemas import DispatchRequest
from pos_checkout.repos.invoice_repo import InvoiceStoreError
from pos_checkout.services.backend_client import DISPATCH_PATH
from pos_checkout.services.dispatch_service import DispatchService
from pos_checkout.utils.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["backend"])


@router.post(DISPATCH_PATH)
def dispatch(
    payload: DispatchRequest,
    svc: DispatchService = Depends(get_dispatch_service),
):
    """
    Single entry point for getProducts, createInvoice, updateStock, getInvoices.
    Every failure comes back as {"error": message} with status 500.
    """
    try:
        return svc.dispatch(payload.action, payload.data)
    except (ValueError, LookupError, InvoiceStoreError) as e:
        logger.error(f"Operation error: {e}")
        return JSONResponse(status_code=500, content={"error": str(e)})
