"""Registration and login endpoint."""

from fastapi import APIRouter, Depends, Response, status

from src.storefront.api.http.deps import get_auth_service, json_payload
from src.storefront.api.http.schemas import AuthPayload, AuthResponse, ErrorResponse
from src.storefront.core.services import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post(
    "",
    response_model=AuthResponse,
    responses={
        201: {"model": AuthResponse, "description": "User registered"},
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
    },
)
def authenticate(
    response: Response,
    body: AuthPayload = Depends(json_payload(AuthPayload)),
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Register (``type: "register"``) or log in (``type: "login"``).

    Registration answers 201, login 200. The returned user never carries the
    password hash.
    """
    result = service.authenticate(
        body.email, body.password, body.name, auth_type=body.type
    )
    if result.created:
        response.status_code = status.HTTP_201_CREATED
    return AuthResponse(message=result.message, user=result.user)
