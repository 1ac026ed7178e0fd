"""Order operations behind /api/orders."""

from loguru import logger
from sqlmodel import Session

from src.storefront.core.errors import NotFoundError
from src.storefront.core.services.base import require, store_operation
from src.storefront.entities.service.order import Order, OrderDetail, OrderRepository
from src.storefront.entities.service.product import ProductRepository


class OrderService:
    def __init__(self, session: Session) -> None:
        self._session = session
        self._orders = OrderRepository(session)
        self._products = ProductRepository(session)

    def list_all(self) -> list[OrderDetail]:
        """All orders with their product and user."""
        with store_operation(self._session, "Failed to fetch orders"):
            return self._orders.list_all()

    def create(
        self,
        user_id: int | None,
        product_id: int | None,
        quantity: int | None,
    ) -> Order:
        """Place an order, pricing it from the product's current unit price.

        Raises:
            ValidationError: A field is missing.
            NotFoundError: The product does not exist.
        """
        require("Missing fields", user_id, product_id, quantity)

        with store_operation(self._session, "Failed to create order"):
            product = self._products.get(product_id)
            if product is None:
                raise NotFoundError("Product not found")

            order = self._orders.create(
                Order(
                    user_id=user_id,
                    product_id=product_id,
                    quantity=quantity,
                    total_price=product.price_for(quantity),
                )
            )
            self._session.commit()

        logger.info(
            "Created order {} for product {} (quantity={}, total={})",
            order.id,
            product_id,
            quantity,
            order.total_price,
        )
        return order

    def delete(self, order_id: int | None) -> None:
        require("ID is required", order_id)

        with store_operation(self._session, "Failed to delete order"):
            if not self._orders.delete(order_id):
                raise NotFoundError("Order not found")
            self._session.commit()

        logger.info("Deleted order {}", order_id)
