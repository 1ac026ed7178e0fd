"""Entities module with hybrid entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model
- table.py: Database persistence model
- repository.py: Data access layer
- detail.py: Read model with related records (where listings include them)

Importing this package registers every table with the SQLModel metadata, so
relationships between tables resolve regardless of which entity is used first.
"""

from .core.user import User, UserRepository, UserTable
from .service.category import Category, CategoryRepository, CategoryTable
from .service.order import Order, OrderDetail, OrderRepository, OrderTable
from .service.product import Product, ProductDetail, ProductRepository, ProductTable
from .service.review import Review, ReviewDetail, ReviewRepository, ReviewTable

__all__ = [
    "User",
    "UserTable",
    "UserRepository",
    "Category",
    "CategoryTable",
    "CategoryRepository",
    "Product",
    "ProductDetail",
    "ProductTable",
    "ProductRepository",
    "Order",
    "OrderDetail",
    "OrderTable",
    "OrderRepository",
    "Review",
    "ReviewDetail",
    "ReviewTable",
    "ReviewRepository",
]
