"""Category API router with CRUD operations."""

from fastapi import APIRouter, Depends, status

from src.storefront.api.http.deps import get_category_service, json_payload
from src.storefront.api.http.schemas import (
    CategoryPayload,
    ErrorResponse,
    IdPayload,
    MessageResponse,
)
from src.storefront.core.services import CategoryService
from src.storefront.entities.service.category import Category

router = APIRouter(
    prefix="/api/categories",
    tags=["categories"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.get("", response_model=list[Category])
def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> list[Category]:
    """List all categories."""
    return service.list_all()


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
def create_category(
    body: CategoryPayload = Depends(json_payload(CategoryPayload)),
    service: CategoryService = Depends(get_category_service),
) -> Category:
    """Create a new category."""
    return service.create(body.name)


@router.put("", response_model=Category, responses={404: {"model": ErrorResponse}})
def update_category(
    body: CategoryPayload = Depends(json_payload(CategoryPayload)),
    service: CategoryService = Depends(get_category_service),
) -> Category:
    """Rename a category."""
    return service.update(body.id, body.name)


@router.delete("", response_model=MessageResponse, responses={404: {"model": ErrorResponse}})
def delete_category(
    body: IdPayload = Depends(json_payload(IdPayload)),
    service: CategoryService = Depends(get_category_service),
) -> MessageResponse:
    """Delete a category."""
    service.delete(body.id)
    return MessageResponse(message="Category deleted")
