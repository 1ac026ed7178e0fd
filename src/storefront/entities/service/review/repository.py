"""Review repository."""

from sqlalchemy.orm import selectinload

from src.storefront.entities.core._repository import EntityRepository

from .detail import ReviewDetail
from .entity import Review
from .table import ReviewTable


class ReviewRepository(EntityRepository[Review, ReviewTable]):
    """Data-access layer for reviews; listings include user and product."""

    table_class = ReviewTable
    entity_class = Review
    detail_class = ReviewDetail
    fields = ("user_id", "product_id", "rating", "comment")

    def _load_options(self):
        return (
            selectinload(ReviewTable.user),
            selectinload(ReviewTable.product),
        )
