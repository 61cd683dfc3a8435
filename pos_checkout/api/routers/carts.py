#pos_checkout/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from pos_checkout.api.dependencies import get_cart_service
from pos_checkout.domain.schemas import (
    CartOut,
    CheckoutIn,
    CheckoutOut,
    InvoiceItem,
    ItemIn,
    QuantityIn,
)
from pos_checkout.services.backend_client import BackendError
from pos_checkout.services.cart_service import CartNotFound, CartService

router = APIRouter(prefix="/carts", tags=["carts"])


@router.post("/", response_model=CartOut, status_code=201)
def create_cart(svc: CartService = Depends(get_cart_service)):
    return svc.create_cart()


@router.get("/{cart_id}", response_model=CartOut)
def get_cart(cart_id: str, svc: CartService = Depends(get_cart_service)):
    cart = svc.get_cart(cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")
    return cart


@router.post("/{cart_id}/items", response_model=CartOut)
def add_item(
    cart_id: str,
    payload: ItemIn,
    svc: CartService = Depends(get_cart_service),
):
    try:
        return svc.add_product(
            cart_id=cart_id,
            product_id=payload.product_id,
            sku=payload.sku,
            quantity=payload.quantity,
        )
    except CartNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{cart_id}/items/{product_id}/{sku}", response_model=CartOut)
def set_quantity(
    cart_id: str,
    product_id: str,
    sku: str,
    payload: QuantityIn,
    svc: CartService = Depends(get_cart_service),
):
    try:
        return svc.set_quantity(cart_id, product_id, sku, payload.quantity)
    except CartNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{cart_id}/items/{product_id}/{sku}", response_model=CartOut)
def remove_item(
    cart_id: str,
    product_id: str,
    sku: str,
    svc: CartService = Depends(get_cart_service),
):
    try:
        return svc.remove_product(cart_id, product_id, sku)
    except CartNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{cart_id}/items", response_model=CartOut)
def clear_cart(cart_id: str, svc: CartService = Depends(get_cart_service)):
    try:
        return svc.clear_cart(cart_id)
    except CartNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/{cart_id}/invoice-items", response_model=List[InvoiceItem])
def invoice_items(cart_id: str, svc: CartService = Depends(get_cart_service)):
    try:
        return svc.invoice_items(cart_id)
    except CartNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/{cart_id}/checkout", response_model=CheckoutOut, status_code=201)
def checkout(
    cart_id: str,
    payload: CheckoutIn,
    svc: CartService = Depends(get_cart_service),
):
    """
    Creates the invoice and decrements stock.
    Stock update failures do not fail the request, they are listed in stockFailures.
    """
    try:
        return svc.checkout(
            cart_id,
            customer_name=payload.customer_name,
            customer_phone=payload.customer_phone,
            status=payload.status,
        )
    except CartNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BackendError:
        raise HTTPException(status_code=502, detail="Failed to generate invoice")
