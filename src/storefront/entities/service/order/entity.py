"""Entity: Order."""

from pydantic import Field

from src.storefront.entities.core._base import Entity


class Order(Entity):
    """A purchase of one product by one user.

    ``total_price`` is fixed when the order is placed and is not recomputed
    if the product price changes later.
    """

    user_id: int
    product_id: int
    quantity: int = Field(description="Number of units ordered")
    total_price: float = Field(description="Unit price times quantity at order time")
