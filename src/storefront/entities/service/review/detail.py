"""Review read model with its user and product."""

from src.storefront.entities.core.user.entity import User
from src.storefront.entities.service.product.entity import Product

from .entity import Review


class ReviewDetail(Review):
    user: User | None = None
    product: Product | None = None
