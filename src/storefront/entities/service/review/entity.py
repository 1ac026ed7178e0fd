"""Entity: Review."""

from pydantic import Field

from src.storefront.entities.core._base import Entity


class Review(Entity):
    """A user's rating and comment on a product."""

    user_id: int
    product_id: int
    rating: int = Field(description="Score given by the reviewer")
    comment: str
