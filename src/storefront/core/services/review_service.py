"""Review operations behind /api/review."""

from loguru import logger
from sqlmodel import Session

from src.storefront.core.errors import NotFoundError
from src.storefront.core.services.base import require, store_operation
from src.storefront.entities.service.review import (
    Review,
    ReviewDetail,
    ReviewRepository,
)


class ReviewService:
    def __init__(self, session: Session) -> None:
        self._session = session
        self._reviews = ReviewRepository(session)

    def list_all(self) -> list[ReviewDetail]:
        with store_operation(self._session, "Failed to fetch reviews"):
            return self._reviews.list_all()

    def create(
        self,
        user_id: int | None,
        product_id: int | None,
        rating: int | None,
        comment: str | None,
    ) -> Review:
        require("Missing fields", user_id, product_id, rating, comment)

        with store_operation(self._session, "Failed to create review"):
            review = self._reviews.create(
                Review(
                    user_id=user_id,
                    product_id=product_id,
                    rating=rating,
                    comment=comment,
                )
            )
            self._session.commit()

        logger.info("Created review {} for product {}", review.id, product_id)
        return review

    def update(
        self,
        review_id: int | None,
        rating: int | None,
        comment: str | None,
    ) -> Review:
        """Replace the rating and comment; author and product stay fixed."""
        require("ID, rating, and comment are required", review_id, rating, comment)

        with store_operation(self._session, "Failed to update review"):
            existing = self._reviews.get(review_id)
            if existing is None:
                raise NotFoundError("Review not found")

            review = self._reviews.update(
                existing.model_copy(update={"rating": rating, "comment": comment})
            )
            self._session.commit()

        logger.info("Updated review {}", review.id)
        return review

    def delete(self, review_id: int | None) -> None:
        require("ID is required", review_id)

        with store_operation(self._session, "Failed to delete review"):
            if not self._reviews.delete(review_id):
                raise NotFoundError("Review not found")
            self._session.commit()

        logger.info("Deleted review {}", review_id)
