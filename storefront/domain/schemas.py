# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Generic, List, TypeVar

T = TypeVar("T")


class CamelModel(BaseModel):
    """Snake case in Python, camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelIn(BaseModel):
    """Request body: only the camelCase keys are accepted."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=False)


# requests

class SignupIn(BaseModel):
    """New account. Email is only length-checked."""

    email: str = Field(..., max_length=255)
    password: str = Field(..., min_length=3, max_length=255)
    name: str = Field(..., min_length=3, max_length=255)


class LoginIn(BaseModel):
    email: str = Field(..., max_length=255)
    password: str = Field(..., min_length=3, max_length=255)


class ItemIn(CamelIn):
    """Product and quantity for a cart line (add and update)."""

    product_id: int = Field(..., description="Catalog product id, 1.0 counts as 1")
    quantity: int = Field(..., ge=1, strict=True, description="Must be >= 1")

    @field_validator("product_id", mode="before")
    @classmethod
    def number_only(cls, value):
        # 1.0 is accepted as 1; strings and bools are not numbers
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("productId must be a number")
        if isinstance(value, float) and value.is_integer():
            return int(value)
        return value


class AddressIn(CamelIn):
    """
    Shipping address sent with an order. Validated, not stored.
    """

    address_line: str = Field(..., min_length=3, max_length=255)
    city: str = Field(..., min_length=3, max_length=255)
    state: str = Field(..., min_length=3, max_length=255)
    postal_code: str = Field(..., min_length=3, max_length=255)
    country: str = Field(..., min_length=3, max_length=255)


# responses

class Envelope(BaseModel, Generic[T]):
    msg: str = "Success"
    data: T


class ProductOut(CamelModel):
    id: int
    title: str
    price: float
    image: str
    category_id: int


class CategoryOut(CamelModel):
    id: int
    name: str


class UserOut(CamelModel):
    id: int
    email: str
    name: str
    username: str


class CartLineOut(CamelModel):
    id: int
    product_id: int
    product_name: str
    price: float
    image_url: str
    quantity: int


class CheckoutSummaryOut(CamelModel):
    items: List[CartLineOut]
    subtotal: float
    shipping: float
    tax: float
    total: float
    discount: float


class OrderCreatedOut(CamelModel):
    id: int


class OrderItemOut(CamelModel):
    id: int
    order_id: int
    price: float
    product_id: int
    product_name: str
    quantity: int
    user_id: int


class OrderOut(CamelModel):
    id: int
    order_date: str
    status: str
    total_amount: float
    user_id: int
    items: List[OrderItemOut]
