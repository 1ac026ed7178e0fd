"""User database table model."""

from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship

from src.storefront.entities.core._base import EntityTable

if TYPE_CHECKING:
    from src.storefront.entities.service.order.table import OrderTable
    from src.storefront.entities.service.review.table import ReviewTable


class UserTable(EntityTable, table=True):
    """Database persistence model for users."""

    email: str = Field(index=True, unique=True)
    name: str = Field(default="")
    password_hash: str

    orders: list["OrderTable"] = Relationship(back_populates="user")
    reviews: list["ReviewTable"] = Relationship(back_populates="user")
