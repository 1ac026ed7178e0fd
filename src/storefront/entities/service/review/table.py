"""Review database table model."""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from src.storefront.entities.core._base import EntityTable

if TYPE_CHECKING:
    from src.storefront.entities.core.user.table import UserTable
    from src.storefront.entities.service.product.table import ProductTable


class ReviewTable(EntityTable, table=True):
    """Database persistence model for reviews."""

    user_id: int = Field(foreign_key="usertable.id", index=True)
    product_id: int = Field(foreign_key="producttable.id", index=True)
    rating: int
    comment: str

    user: Optional["UserTable"] = Relationship(back_populates="reviews")
    product: Optional["ProductTable"] = Relationship(back_populates="reviews")
