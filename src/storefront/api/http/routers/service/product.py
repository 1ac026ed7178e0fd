"""Product API router with CRUD operations."""

from fastapi import APIRouter, Depends, status

from src.storefront.api.http.deps import get_product_service, json_payload
from src.storefront.api.http.schemas import (
    ErrorResponse,
    IdPayload,
    MessageResponse,
    ProductPayload,
)
from src.storefront.core.services import ProductService
from src.storefront.entities.service.product import Product, ProductDetail

router = APIRouter(
    prefix="/api/products",
    tags=["products"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.get("", response_model=list[ProductDetail])
def list_products(
    service: ProductService = Depends(get_product_service),
) -> list[ProductDetail]:
    """List all products with their category and reviews."""
    return service.list_all()


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    body: ProductPayload = Depends(json_payload(ProductPayload)),
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Create a new product."""
    return service.create(body.name, body.description, body.price, body.category_id)


@router.put("", response_model=Product, responses={404: {"model": ErrorResponse}})
def update_product(
    body: ProductPayload = Depends(json_payload(ProductPayload)),
    service: ProductService = Depends(get_product_service),
) -> Product:
    """Replace a product's name, description, price and category."""
    return service.update(
        body.id, body.name, body.description, body.price, body.category_id
    )


@router.delete("", response_model=MessageResponse, responses={404: {"model": ErrorResponse}})
def delete_product(
    body: IdPayload = Depends(json_payload(IdPayload)),
    service: ProductService = Depends(get_product_service),
) -> MessageResponse:
    """Delete a product."""
    service.delete(body.id)
    return MessageResponse(message="Product deleted")
