"""Helpers shared by the storefront services."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from src.storefront.core.errors import InternalError, ValidationError


def require(message: str, *values: Any) -> None:
    """Raise ``ValidationError(message)`` unless every value is present.

    ``None``, empty strings and zero all count as missing.
    """
    if any(not value for value in values):
        raise ValidationError(message)


@contextmanager
def store_operation(session: Session, failure_message: str) -> Iterator[None]:
    """Translate store failures inside the block into ``InternalError``.

    The session is rolled back so it can be reused; the original exception is
    logged but never shown to the client.
    """
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        logger.bind(error_type=type(e).__name__).exception(failure_message)
        raise InternalError(failure_message) from e
