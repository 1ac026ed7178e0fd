"""Product repository."""

from sqlalchemy.orm import selectinload

from src.storefront.entities.core._repository import EntityRepository

from .detail import ProductDetail
from .entity import Product
from .table import ProductTable


class ProductRepository(EntityRepository[Product, ProductTable]):
    """Data-access layer for products; listings include category and reviews."""

    table_class = ProductTable
    entity_class = Product
    detail_class = ProductDetail
    fields = ("name", "description", "price", "category_id")

    def _load_options(self):
        return (
            selectinload(ProductTable.category),
            selectinload(ProductTable.reviews),
        )
