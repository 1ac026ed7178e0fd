"""Per-route cross-origin resource sharing.

Each API route has its own policy (allowed origin and methods). For a route
with a policy the middleware:

- answers ``OPTIONS`` preflights itself with ``204`` and the policy headers,
  without calling the route;
- sets the same headers on every other response, whatever its status.

Paths without a policy pass through unchanged.
"""

from collections.abc import Mapping
from dataclasses import dataclass

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from src.storefront.runtime.config.config_data import CORSConfig


@dataclass(frozen=True)
class CORSPolicy:
    allowed_origin: str
    allowed_methods: tuple[str, ...]
    allowed_headers: tuple[str, ...] = ("Content-Type",)
    allow_credentials: bool = True

    @property
    def headers(self) -> dict[str, str]:
        """Headers stamped on every response of the route."""
        headers = {
            "Access-Control-Allow-Origin": self.allowed_origin,
            "Access-Control-Allow-Methods": ",".join(self.allowed_methods),
            "Access-Control-Allow-Headers": ",".join(self.allowed_headers),
            "Vary": "Origin",
        }
        if self.allow_credentials:
            headers["Access-Control-Allow-Credentials"] = "true"
        return headers


def build_cors_policies(config: CORSConfig) -> dict[str, CORSPolicy]:
    """Turn the ``app.cors.routes`` configuration into middleware policies."""
    return {
        path.rstrip("/") or "/": CORSPolicy(
            allowed_origin=route.allowed_origin,
            allowed_methods=tuple(route.allowed_methods),
            allowed_headers=tuple(route.allowed_headers),
            allow_credentials=route.allow_credentials,
        )
        for path, route in config.routes.items()
    }


class RouteCORSMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: ASGIApp, policies: Mapping[str, CORSPolicy]) -> None:
        super().__init__(app)
        self._policies = dict(policies)

    def policy_for(self, path: str) -> CORSPolicy | None:
        return self._policies.get(path.rstrip("/") or "/")

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        policy = self.policy_for(request.url.path)
        if policy is None:
            return await call_next(request)

        if request.method == "OPTIONS":
            return Response(status_code=204, headers=policy.headers)

        response = await call_next(request)
        for name, value in policy.headers.items():
            response.headers[name] = value
        return response
