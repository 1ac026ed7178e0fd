"""Unit tests for the per-route CORS middleware."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.storefront.api.http.middleware.cors import (
    CORSPolicy,
    RouteCORSMiddleware,
    build_cors_policies,
)
from src.storefront.api.http.responses import register_exception_handlers
from src.storefront.core.errors import NotFoundError
from src.storefront.runtime.config.config_data import CORSConfig, CORSPolicyConfig

ORIGIN = "http://localhost:3000"


@pytest.fixture
def calls() -> list[str]:
    return []


@pytest.fixture
def cors_client(calls: list[str]) -> TestClient:
    """A small app with one CORS-covered route and one uncovered route."""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/api/things")
    def list_things():
        calls.append("GET")
        return [{"id": 1}]

    @app.options("/api/things")
    def options_things():
        calls.append("OPTIONS")
        return {}

    @app.delete("/api/things")
    def delete_thing():
        raise NotFoundError("Thing not found")

    @app.get("/other")
    def other():
        return {"ok": True}

    app.add_middleware(
        RouteCORSMiddleware,
        policies={"/api/things": CORSPolicy(ORIGIN, ("GET", "DELETE", "OPTIONS"))},
    )
    return TestClient(app)


class TestCORSPolicy:
    def test_headers(self):
        policy = CORSPolicy(ORIGIN, ("GET", "POST", "OPTIONS"))

        assert policy.headers == {
            "Access-Control-Allow-Origin": ORIGIN,
            "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
            "Access-Control-Allow-Headers": "Content-Type",
            "Access-Control-Allow-Credentials": "true",
            "Vary": "Origin",
        }

    def test_without_credentials(self):
        policy = CORSPolicy(ORIGIN, ("GET",), allow_credentials=False)

        assert "Access-Control-Allow-Credentials" not in policy.headers

    def test_build_from_config(self):
        config = CORSConfig(
            routes={
                "/api/things/": CORSPolicyConfig(
                    allowed_origin="https://shop.example.com", allowed_methods=["GET"]
                )
            }
        )

        policies = build_cors_policies(config)

        assert list(policies) == ["/api/things"]
        assert policies["/api/things"].allowed_methods == ("GET",)
        assert policies["/api/things"].allowed_origin == "https://shop.example.com"

    def test_default_routes(self):
        policies = build_cors_policies(CORSConfig())

        assert policies["/api/auth"].allowed_methods == ("POST", "OPTIONS")
        assert policies["/api/orders"].allowed_methods == ("GET", "POST", "DELETE", "OPTIONS")
        assert policies["/api/review"].allowed_origin == ORIGIN


class TestRouteCORSMiddleware:
    def test_preflight_short_circuits(self, cors_client: TestClient, calls: list[str]):
        """OPTIONS is answered by the middleware; the route never runs."""
        response = cors_client.options("/api/things")

        assert response.status_code == 204
        assert response.content == b""
        assert response.headers["access-control-allow-origin"] == ORIGIN
        assert response.headers["access-control-allow-methods"] == "GET,DELETE,OPTIONS"
        assert calls == []

    def test_headers_on_success(self, cors_client: TestClient, calls: list[str]):
        response = cors_client.get("/api/things")

        assert response.status_code == 200
        assert response.json() == [{"id": 1}]
        assert response.headers["access-control-allow-origin"] == ORIGIN
        assert response.headers["access-control-allow-credentials"] == "true"
        assert calls == ["GET"]

    def test_headers_on_error(self, cors_client: TestClient):
        response = cors_client.delete("/api/things")

        assert response.status_code == 404
        assert response.json() == {"error": "Thing not found"}
        assert response.headers["access-control-allow-origin"] == ORIGIN

    def test_headers_on_method_not_allowed(self, cors_client: TestClient):
        response = cors_client.put("/api/things")

        assert response.status_code == 405
        assert response.json() == {"error": "Method Not Allowed"}
        assert response.headers["access-control-allow-methods"] == "GET,DELETE,OPTIONS"

    def test_trailing_slash_matches(self, cors_client: TestClient):
        response = cors_client.options("/api/things/")

        assert response.status_code == 204

    def test_uncovered_path_untouched(self, cors_client: TestClient):
        response = cors_client.get("/other")

        assert response.status_code == 200
        assert "access-control-allow-origin" not in response.headers
