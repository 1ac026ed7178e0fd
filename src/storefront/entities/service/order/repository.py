"""Order repository."""

from sqlalchemy.orm import selectinload

from src.storefront.entities.core._repository import EntityRepository

from .detail import OrderDetail
from .entity import Order
from .table import OrderTable


class OrderRepository(EntityRepository[Order, OrderTable]):
    """Data-access layer for orders; listings include product and user."""

    table_class = OrderTable
    entity_class = Order
    detail_class = OrderDetail
    fields = ("user_id", "product_id", "quantity", "total_price")

    def _load_options(self):
        return (
            selectinload(OrderTable.product),
            selectinload(OrderTable.user),
        )
