"""Entity package: Order."""

from .detail import OrderDetail
from .entity import Order
from .repository import OrderRepository
from .table import OrderTable

__all__ = ["Order", "OrderDetail", "OrderRepository", "OrderTable"]
