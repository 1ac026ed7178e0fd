"""Review API router with CRUD operations."""

from fastapi import APIRouter, Depends, status

from src.storefront.api.http.deps import get_review_service, json_payload
from src.storefront.api.http.schemas import (
    ErrorResponse,
    IdPayload,
    MessageResponse,
    ReviewPayload,
)
from src.storefront.core.services import ReviewService
from src.storefront.entities.service.review import Review, ReviewDetail

router = APIRouter(
    prefix="/api/review",
    tags=["reviews"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.get("", response_model=list[ReviewDetail])
def list_reviews(
    service: ReviewService = Depends(get_review_service),
) -> list[ReviewDetail]:
    """List all reviews with their author and product."""
    return service.list_all()


@router.post("", response_model=Review, status_code=status.HTTP_201_CREATED)
def create_review(
    body: ReviewPayload = Depends(json_payload(ReviewPayload)),
    service: ReviewService = Depends(get_review_service),
) -> Review:
    return service.create(body.user_id, body.product_id, body.rating, body.comment)


@router.put("", response_model=Review, responses={404: {"model": ErrorResponse}})
def update_review(
    body: ReviewPayload = Depends(json_payload(ReviewPayload)),
    service: ReviewService = Depends(get_review_service),
) -> Review:
    """Replace a review's rating and comment."""
    return service.update(body.id, body.rating, body.comment)


@router.delete("", response_model=MessageResponse, responses={404: {"model": ErrorResponse}})
def delete_review(
    body: IdPayload = Depends(json_payload(IdPayload)),
    service: ReviewService = Depends(get_review_service),
) -> MessageResponse:
    service.delete(body.id)
    return MessageResponse(message="Review deleted")
