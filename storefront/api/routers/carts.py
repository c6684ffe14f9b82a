# storefront/api/routers/carts.py
from typing import List

from fastapi import APIRouter, Depends

from storefront.data.database import InMemoryStore, get_store
from storefront.domain.schemas import CartLineOut, CheckoutSummaryOut, Envelope, ItemIn
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["cart"])
checkout_router = APIRouter(prefix="/checkout", tags=["cart"])


def get_service(store: InMemoryStore = Depends(get_store)):
    return CartService(store)


# user_id / item_id stay strings: a non-numeric id is "not found", not a 400


@checkout_router.get("/{user_id}/summary", response_model=Envelope[CheckoutSummaryOut])
def checkout_summary(user_id: str, svc: CartService = Depends(get_service)):
    return {"msg": "Success", "data": svc.checkout_summary(user_id)}


@router.post("/{user_id}", response_model=Envelope[List[CartLineOut]])
def add_item(user_id: str, payload: ItemIn, svc: CartService = Depends(get_service)):
    items = svc.add_item(
        user_id=user_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )
    return {"msg": "Success", "data": items}


@router.get("/{user_id}", response_model=Envelope[List[CartLineOut]])
def get_cart(user_id: str, svc: CartService = Depends(get_service)):
    return {"msg": "Success", "data": svc.get_cart(user_id)}


@router.put("/{user_id}/{item_id}", response_model=Envelope[List[CartLineOut]])
def update_item(
    user_id: str,
    item_id: str,
    payload: ItemIn,
    svc: CartService = Depends(get_service),
):
    items = svc.update_item(
        user_id=user_id,
        item_id=item_id,
        product_id=payload.product_id,
        quantity=payload.quantity,
    )
    return {"msg": "Success", "data": items}


@router.delete("/{user_id}/{item_id}", response_model=Envelope[List[CartLineOut]])
def remove_item(user_id: str, item_id: str, svc: CartService = Depends(get_service)):
    return {"msg": "Success", "data": svc.remove_item(user_id, item_id)}
