"""Category repository."""

from src.storefront.entities.core._repository import EntityRepository

from .entity import Category
from .table import CategoryTable


class CategoryRepository(EntityRepository[Category, CategoryTable]):
    """Data-access layer for categories."""

    table_class = CategoryTable
    entity_class = Category
    fields = ("name",)
