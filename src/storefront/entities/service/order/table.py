"""Order database table model."""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship

from src.storefront.entities.core._base import EntityTable

if TYPE_CHECKING:
    from src.storefront.entities.core.user.table import UserTable
    from src.storefront.entities.service.product.table import ProductTable


class OrderTable(EntityTable, table=True):
    """Database persistence model for orders."""

    user_id: int = Field(foreign_key="usertable.id", index=True)
    product_id: int = Field(foreign_key="producttable.id", index=True)
    quantity: int
    total_price: float

    user: Optional["UserTable"] = Relationship(back_populates="orders")
    product: Optional["ProductTable"] = Relationship(back_populates="orders")
