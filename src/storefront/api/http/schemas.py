"""Request and response bodies for the storefront API.

Request payloads accept camelCase keys (``categoryId``) or snake_case, ignore
unknown keys and leave every field optional: presence is checked by the
services so a missing field yields the route's own 400 message.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from src.storefront.entities.core.user import User


class Payload(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class IdPayload(Payload):
    id: int | None = None


class CategoryPayload(IdPayload):
    name: str | None = None


class ProductPayload(IdPayload):
    name: str | None = None
    description: str | None = None
    price: float | None = None
    category_id: int | None = None


class OrderPayload(IdPayload):
    user_id: int | None = None
    product_id: int | None = None
    quantity: int | None = None


class ReviewPayload(IdPayload):
    user_id: int | None = None
    product_id: int | None = None
    rating: int | None = None
    comment: str | None = None


class AuthPayload(Payload):
    email: str | None = None
    password: str | None = None
    name: str | None = None
    type: str | None = None


class MessageResponse(BaseModel):
    message: str


class AuthResponse(BaseModel):
    message: str
    user: User


class ErrorResponse(BaseModel):
    error: str
