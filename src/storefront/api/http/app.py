"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from loguru import logger

from src.storefront.api.http.app_data import ApplicationDependencies
from src.storefront.api.http.middleware.cors import (
    RouteCORSMiddleware,
    build_cors_policies,
)
from src.storefront.api.http.responses import error_response, register_exception_handlers
from src.storefront.api.http.routers.auth import router as auth_router
from src.storefront.api.http.routers.health import router as health_router
from src.storefront.api.http.routers.service.category import router as category_router
from src.storefront.api.http.routers.service.order import router as order_router
from src.storefront.api.http.routers.service.product import router as product_router
from src.storefront.api.http.routers.service.review import router as review_router
from src.storefront.api.utils.app_startup import configure_logging
from src.storefront.core.security import PasswordHasher
from src.storefront.core.services import DbManageService, DbSessionService
from src.storefront.runtime.context import get_config

# Load configuration
main_config = get_config()


# Initialize logging
configure_logging()


# --- FastAPI app setup ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    await startup()
    try:
        yield
    finally:
        await shutdown()


app = FastAPI(
    title="Storefront API",
    lifespan=lifespan,
    docs_url=None if main_config.app.environment == "production" else "/docs",
    redoc_url=None if main_config.app.environment == "production" else "/redoc",
)

# expose startup for tests
__all__ = ["app", "startup", "shutdown"]

register_exception_handlers(app)


# --- Request logging middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

    xff = request.headers.get("x-forwarded-for")
    client_ip = (
        xff.split(",")[0].strip()
        if xff
        else request.client.host
        if request.client
        else "unknown"
    )

    base_ctx = {
        "request_id": request_id,
        "method": request.method,
        "path": request.url.path,
        "client_ip": client_ip,
        "user_agent": request.headers.get("user-agent", "unknown"),
    }

    start = time.perf_counter()

    # Everything that logs within this block inherits base_ctx
    with logger.contextualize(**base_ctx):
        try:
            logger.info("request.start")
            response = await call_next(request)

            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=response.status_code,
                duration_ms=round(duration_ms, 1),
            ).info("request.end")

            response.headers.setdefault("X-Request-ID", request_id)
            return response

        except Exception as exc:
            # Unhandled failure: log it, answer with the generic envelope so the
            # CORS middleware still sees a response
            duration_ms = (time.perf_counter() - start) * 1000
            logger.bind(
                status_code=500,
                duration_ms=round(duration_ms, 1),
                error_type=type(exc).__name__,
            ).exception("request.error")
            return error_response(
                500, "Internal Server Error", headers={"X-Request-ID": request_id}
            )


# --- CORS configuration ---
# Added last so it wraps every other middleware and sees every response.
app.add_middleware(
    RouteCORSMiddleware,
    policies=build_cors_policies(main_config.app.cors),
)


# --- Router registration ---
app.include_router(health_router)
app.include_router(auth_router)
app.include_router(category_router)
app.include_router(product_router)
app.include_router(order_router)
app.include_router(review_router)


# --- Lifecycle hooks ---
async def startup() -> None:
    config = get_config()
    logger.info("Starting up application in {} environment", config.app.environment)

    database_service = DbSessionService()
    if config.database.create_tables:
        DbManageService(database_service.engine).create_all()

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service,
        password_hasher=PasswordHasher(),
    )


async def shutdown() -> None:
    logger.info("Shutting down application")
    app_dependencies: ApplicationDependencies = app.state.app_dependencies
    app_dependencies.database_service.dispose()
