"""Entity: Category."""

from pydantic import Field

from src.storefront.entities.core._base import Entity


class Category(Entity):
    """Product grouping shown in the storefront navigation."""

    name: str = Field(description="Category name")
