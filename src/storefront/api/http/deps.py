"""FastAPI dependency implementations."""

import json
from collections.abc import Awaitable, Callable, Iterator
from typing import TypeVar

from fastapi import Depends, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from sqlmodel import Session

from src.storefront.api.http.app_data import ApplicationDependencies
from src.storefront.api.http.schemas import Payload
from src.storefront.core.security import PasswordHasher
from src.storefront.core.services import (
    AuthService,
    CategoryService,
    OrderService,
    ProductService,
    ReviewService,
)

PayloadT = TypeVar("PayloadT", bound=Payload)


def json_payload(model: type[PayloadT]) -> Callable[[Request], Awaitable[PayloadT]]:
    """Build a dependency that reads the request body as ``model``.

    The body is parsed as JSON whatever its ``Content-Type``, so a browser
    ``fetch`` posting a string (sent as ``text/plain``) is accepted. An empty
    body or a JSON ``null`` yields an all-empty payload.

    Raises:
        RequestValidationError: The body is not JSON or does not fit ``model``.
    """

    async def _read_payload(request: Request) -> PayloadT:
        raw = await request.body()
        if not raw.strip():
            return model()

        try:
            data = await request.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise RequestValidationError(
                [{"type": "json_invalid", "loc": ("body",), "msg": str(e)}]
            ) from e

        if data is None:
            return model()
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise RequestValidationError(e.errors(include_url=False)) from e

    return _read_payload


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session scoped to the request."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_password_hasher(request: Request) -> PasswordHasher:
    """Get the shared password hasher."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    return app_deps.password_hasher


def get_auth_service(
    db: Session = Depends(get_db_session),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    return AuthService(db, hasher)


def get_category_service(db: Session = Depends(get_db_session)) -> CategoryService:
    return CategoryService(db)


def get_product_service(db: Session = Depends(get_db_session)) -> ProductService:
    return ProductService(db)


def get_order_service(db: Session = Depends(get_db_session)) -> OrderService:
    return OrderService(db)


def get_review_service(db: Session = Depends(get_db_session)) -> ReviewService:
    return ReviewService(db)
