"""Unit tests for the typed error hierarchy."""

import pytest

from src.storefront.core.errors import (
    ConflictError,
    InternalError,
    NotFoundError,
    StorefrontError,
    UnauthorizedError,
    ValidationError,
)


@pytest.mark.parametrize(
    "error_class,status_code",
    [
        (ValidationError, 400),
        (ConflictError, 400),
        (UnauthorizedError, 401),
        (NotFoundError, 404),
        (InternalError, 500),
    ],
)
def test_status_codes(error_class, status_code):
    error = error_class("boom")

    assert isinstance(error, StorefrontError)
    assert error.status_code == status_code
    assert error.message == "boom"
    assert str(error) == "boom"


def test_default_message():
    assert UnauthorizedError().message == "Invalid email or password"
    assert StorefrontError().message == "Internal Server Error"
