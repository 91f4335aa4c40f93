from typing import Annotated, List

from fastapi import APIRouter, Depends, HTTPException, Path

from stocktrack.core.constants import MAX_PRODUCT_ID
from stocktrack.dependencies import get_product_store
from stocktrack.schemas.product import (
    MessageResponse,
    ProductCreate,
    ProductQuantityUpdate,
    ProductRead,
)
from stocktrack.services.product_store import ProductStore

router = APIRouter(prefix="/products", tags=["Products"])

ProductId = Annotated[int, Path(gt=0, le=MAX_PRODUCT_ID, description="Product identifier")]


@router.get("", response_model=List[ProductRead])
def list_products(store: ProductStore = Depends(get_product_store)):
    return store.list_products()


@router.post("", response_model=ProductRead)
def create_product(payload: ProductCreate, store: ProductStore = Depends(get_product_store)):
    if payload.quantity is not None and payload.quantity < 0:
        raise HTTPException(status_code=400, detail="quantity must be non-negative.")
    return store.create_product(
        name=payload.name,
        sku=payload.sku,
        quantity=payload.quantity,
        location=payload.location,
        supplier=payload.supplier,
    )


@router.put("/{product_id}", response_model=ProductRead)
def update_product_quantity(
    product_id: ProductId,
    payload: ProductQuantityUpdate,
    store: ProductStore = Depends(get_product_store),
):
    if payload.quantity < 0:
        raise HTTPException(status_code=400, detail="quantity must be non-negative.")
    product = store.set_quantity(product_id, payload.quantity)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found.")
    return product


@router.delete("/{product_id}", response_model=MessageResponse)
def delete_product(product_id: ProductId, store: ProductStore = Depends(get_product_store)):
    store.delete_product(product_id)
    return {"message": "Product deleted"}


__all__ = ["router"]
