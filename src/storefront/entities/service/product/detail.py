"""Product read model with its category and reviews."""

from pydantic import Field

from src.storefront.entities.service.category.entity import Category
from src.storefront.entities.service.review.entity import Review

from .entity import Product


class ProductDetail(Product):
    category: Category | None = None
    reviews: list[Review] = Field(default_factory=list)
