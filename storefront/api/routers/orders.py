# storefront/api/routers/orders.py
from typing import List

from fastapi import APIRouter, Depends

from storefront.data.database import InMemoryStore, get_store
from storefront.domain.schemas import AddressIn, Envelope, OrderCreatedOut, OrderOut
from storefront.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(store: InMemoryStore = Depends(get_store)):
    return OrderService(store)


@router.post("/{user_id}", response_model=Envelope[OrderCreatedOut])
def place_order(user_id: str, payload: AddressIn, svc: OrderService = Depends(get_service)):
    """
    Checkout: turns the user's cart into an order.
    The address is validated by AddressIn and then dropped.
    """
    order = svc.place_order(user_id)
    return {"msg": "Success", "data": {"id": order.id}}


@router.get("/{user_id}", response_model=Envelope[List[OrderOut]])
def list_orders(user_id: str, svc: OrderService = Depends(get_service)):
    return {"msg": "Success", "data": svc.list_orders(user_id)}
