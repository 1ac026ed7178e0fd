"""Product database table model."""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from src.storefront.entities.core._base import EntityTable

if TYPE_CHECKING:
    from src.storefront.entities.service.category.table import CategoryTable
    from src.storefront.entities.service.order.table import OrderTable
    from src.storefront.entities.service.review.table import ReviewTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products."""

    name: str
    description: str
    price: float
    category_id: int | None = Field(default=None, foreign_key="categorytable.id")

    category: Optional["CategoryTable"] = Relationship(back_populates="products")
    reviews: list["ReviewTable"] = Relationship(back_populates="product")
    orders: list["OrderTable"] = Relationship(back_populates="product")
