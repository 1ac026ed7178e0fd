"""Entity: Product."""

from typing import Any

from pydantic import Field

from src.storefront.entities.core._base import Entity


class Product(Entity):
    """Product entity representing an item for sale."""

    name: str = Field(description="Product name")
    description: str = Field(description="Product description")
    price: float = Field(description="Unit price")
    category_id: int | None = Field(default=None, description="Owning category")

    def price_for(self, quantity: int) -> float:
        """Total price of ``quantity`` units at the current unit price."""
        return self.price * quantity

    def __eq__(self, other: Any) -> bool:
        """Compare products by business attributes, ignoring timestamps."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.price == other.price
            and self.category_id == other.category_id
        )

    def __hash__(self) -> int:
        return hash((self.id, self.name, self.description, self.price, self.category_id))
