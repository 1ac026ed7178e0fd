"""Order API router: list, place and cancel orders."""

from fastapi import APIRouter, Depends, status

from src.storefront.api.http.deps import get_order_service, json_payload
from src.storefront.api.http.schemas import (
    ErrorResponse,
    IdPayload,
    MessageResponse,
    OrderPayload,
)
from src.storefront.core.services import OrderService
from src.storefront.entities.service.order import Order, OrderDetail

router = APIRouter(
    prefix="/api/orders",
    tags=["orders"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.get("", response_model=list[OrderDetail])
def list_orders(
    service: OrderService = Depends(get_order_service),
) -> list[OrderDetail]:
    """List all orders with their product and user."""
    return service.list_all()


@router.post(
    "",
    response_model=Order,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}},
)
def create_order(
    body: OrderPayload = Depends(json_payload(OrderPayload)),
    service: OrderService = Depends(get_order_service),
) -> Order:
    """Place an order; the total is the product price times the quantity."""
    return service.create(body.user_id, body.product_id, body.quantity)


@router.delete("", response_model=MessageResponse, responses={404: {"model": ErrorResponse}})
def delete_order(
    body: IdPayload = Depends(json_payload(IdPayload)),
    service: OrderService = Depends(get_order_service),
) -> MessageResponse:
    """Delete an order."""
    service.delete(body.id)
    return MessageResponse(message="Order deleted")
