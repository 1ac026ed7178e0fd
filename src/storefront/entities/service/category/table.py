"""Category database table model."""

from typing import TYPE_CHECKING

from sqlmodel import Relationship

from src.storefront.entities.core._base import EntityTable

if TYPE_CHECKING:
    from src.storefront.entities.service.product.table import ProductTable


class CategoryTable(EntityTable, table=True):
    """Database persistence model for categories.

    Deleting a category detaches its products (their ``category_id`` is
    cleared) rather than deleting them.
    """

    name: str

    products: list["ProductTable"] = Relationship(back_populates="category")
