"""Entity package: Product."""

from .detail import ProductDetail
from .entity import Product
from .repository import ProductRepository
from .table import ProductTable

__all__ = ["Product", "ProductDetail", "ProductRepository", "ProductTable"]
