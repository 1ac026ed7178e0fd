"""Core services exports."""

from .auth_service import AuthResult, AuthService
from .category_service import CategoryService
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .order_service import OrderService
from .product_service import ProductService
from .review_service import ReviewService

__all__ = [
    # Database Services
    "DbSessionService",
    "DbManageService",
    # Storefront Services
    "AuthResult",
    "AuthService",
    "CategoryService",
    "ProductService",
    "OrderService",
    "ReviewService",
]
