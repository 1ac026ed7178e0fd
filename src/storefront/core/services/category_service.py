"""Category operations behind /api/categories."""

from loguru import logger
from sqlmodel import Session

from src.storefront.core.errors import NotFoundError
from src.storefront.core.services.base import require, store_operation
from src.storefront.entities.service.category import Category, CategoryRepository


class CategoryService:
    def __init__(self, session: Session) -> None:
        self._session = session
        self._categories = CategoryRepository(session)

    def list_all(self) -> list[Category]:
        with store_operation(self._session, "Failed to fetch categories"):
            return self._categories.list_all()

    def create(self, name: str | None) -> Category:
        require("Name is required", name)

        with store_operation(self._session, "Failed to create category"):
            category = self._categories.create(Category(name=name))
            self._session.commit()

        logger.info("Created category {}", category.id)
        return category

    def update(self, category_id: int | None, name: str | None) -> Category:
        require("ID and name are required", category_id, name)

        with store_operation(self._session, "Failed to update category"):
            existing = self._categories.get(category_id)
            if existing is None:
                raise NotFoundError("Category not found")

            category = self._categories.update(existing.model_copy(update={"name": name}))
            self._session.commit()

        logger.info("Updated category {}", category.id)
        return category

    def delete(self, category_id: int | None) -> None:
        require("ID is required", category_id)

        with store_operation(self._session, "Failed to delete category"):
            if not self._categories.delete(category_id):
                raise NotFoundError("Category not found")
            self._session.commit()

        logger.info("Deleted category {}", category_id)
