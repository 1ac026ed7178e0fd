"""Product operations behind /api/products."""

from loguru import logger
from sqlmodel import Session

from src.storefront.core.errors import NotFoundError
from src.storefront.core.services.base import require, store_operation
from src.storefront.entities.service.product import (
    Product,
    ProductDetail,
    ProductRepository,
)


class ProductService:
    def __init__(self, session: Session) -> None:
        self._session = session
        self._products = ProductRepository(session)

    def list_all(self) -> list[ProductDetail]:
        """All products with their category and reviews."""
        with store_operation(self._session, "Failed to fetch products"):
            return self._products.list_all()

    def create(
        self,
        name: str | None,
        description: str | None,
        price: float | None,
        category_id: int | None = None,
    ) -> Product:
        require("Missing fields", name, description, price)

        with store_operation(self._session, "Failed to create product"):
            product = self._products.create(
                Product(
                    name=name,
                    description=description,
                    price=price,
                    category_id=category_id,
                )
            )
            self._session.commit()

        logger.info("Created product {}", product.id)
        return product

    def update(
        self,
        product_id: int | None,
        name: str | None,
        description: str | None,
        price: float | None,
        category_id: int | None = None,
    ) -> Product:
        """Replace every editable field; an omitted category clears it."""
        require("Missing fields", product_id, name, description, price)

        with store_operation(self._session, "Failed to update product"):
            existing = self._products.get(product_id)
            if existing is None:
                raise NotFoundError("Product not found")

            product = self._products.update(
                existing.model_copy(
                    update={
                        "name": name,
                        "description": description,
                        "price": price,
                        "category_id": category_id,
                    }
                )
            )
            self._session.commit()

        logger.info("Updated product {}", product.id)
        return product

    def delete(self, product_id: int | None) -> None:
        require("ID is required", product_id)

        with store_operation(self._session, "Failed to delete product"):
            if not self._products.delete(product_id):
                raise NotFoundError("Product not found")
            self._session.commit()

        logger.info("Deleted product {}", product_id)
