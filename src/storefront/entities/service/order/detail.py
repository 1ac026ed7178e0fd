"""Order read model with its product and user."""

from src.storefront.entities.core.user.entity import User
from src.storefront.entities.service.product.entity import Product

from .entity import Order


class OrderDetail(Order):
    product: Product | None = None
    user: User | None = None
