"""Error envelope rendering.

Every failure leaves the API as ``{"error": "<message>"}`` with the status of
the typed error; no stack trace or store detail is included.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from loguru import logger
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import JSONResponse

from src.storefront.core.errors import StorefrontError

INVALID_BODY = "Invalid request body"


def error_response(
    status_code: int, message: str, headers: dict[str, str] | None = None
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


async def storefront_error_handler(request: Request, exc: StorefrontError) -> JSONResponse:
    logger.bind(
        status_code=exc.status_code, error_type=type(exc).__name__
    ).info("request.rejected: {}", exc.message)
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.bind(status_code=400, errors=exc.errors()).info("request.invalid_body")
    return error_response(400, INVALID_BODY)


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StorefrontError, storefront_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
