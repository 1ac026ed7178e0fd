"""Unit tests for the error envelope."""

from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.storefront.api.http.responses import (
    INVALID_BODY,
    error_response,
    register_exception_handlers,
)
from src.storefront.api.http.schemas import CategoryPayload, ProductPayload
from src.storefront.core.errors import ConflictError, InternalError


def _client() -> TestClient:
    app = FastAPI()
    register_exception_handlers(app)

    @app.post("/conflict")
    def conflict():
        raise ConflictError("Email already exists")

    @app.post("/internal")
    def internal():
        raise InternalError("Failed to fetch things")

    @app.post("/echo")
    def echo(payload: CategoryPayload | None = None):
        return {"name": (payload or CategoryPayload()).name}

    return TestClient(app)


class TestErrorEnvelope:
    def test_error_response_body(self):
        response = error_response(404, "Order not found")

        assert response.status_code == 404
        assert response.body == b'{"error":"Order not found"}'

    def test_typed_errors_rendered(self):
        client = _client()

        conflict = client.post("/conflict")
        internal = client.post("/internal")

        assert (conflict.status_code, conflict.json()) == (400, {"error": "Email already exists"})
        assert (internal.status_code, internal.json()) == (500, {"error": "Failed to fetch things"})

    def test_malformed_json(self):
        response = _client().post(
            "/echo", content=b"{not json", headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"error": INVALID_BODY}

    def test_wrong_field_type(self):
        response = _client().post("/echo", json={"name": ["not", "a", "string"]})

        assert response.status_code == 400
        assert response.json() == {"error": INVALID_BODY}

    def test_missing_body_is_allowed(self):
        response = _client().post("/echo")

        assert response.status_code == 200
        assert response.json() == {"name": None}

    def test_unknown_route(self):
        response = _client().get("/nowhere")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}


class TestPayloads:
    def test_camel_case_and_snake_case_accepted(self):
        camel = ProductPayload.model_validate({"categoryId": 3, "price": 1})
        snake = ProductPayload.model_validate({"category_id": 3, "price": 1})

        assert camel.category_id == snake.category_id == 3

    def test_unknown_keys_ignored(self):
        payload = CategoryPayload.model_validate({"name": "Shirts", "colour": "red"})

        assert payload.name == "Shirts"
