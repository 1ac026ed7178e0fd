"""Typed failures raised by the storefront services.

Each error carries the HTTP status it maps to; the API layer renders any of
them as ``{"error": message}``.
"""


class StorefrontError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = 500
    default_message: str = "Internal Server Error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(StorefrontError):
    """A required field is missing or a value is unusable."""

    status_code = 400
    default_message = "Missing fields"


class ConflictError(StorefrontError):
    """A uniqueness constraint in the store rejected the write."""

    status_code = 400
    default_message = "Resource already exists"


class UnauthorizedError(StorefrontError):
    status_code = 401
    default_message = "Invalid email or password"


class NotFoundError(StorefrontError):
    """The referenced record does not exist."""

    status_code = 404
    default_message = "Not found"


class InternalError(StorefrontError):
    """The store failed for a reason the caller cannot fix."""

    status_code = 500
