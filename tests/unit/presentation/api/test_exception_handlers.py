"""Unit tests for the API exception handlers."""

from uuid import UUID, uuid4

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from thoughtline.domain.content import (
    InvalidContentError,
    NotThoughtOwnerError,
    ThoughtNotFoundError,
)
from thoughtline.domain.shared.exceptions import (
    AuthenticationError,
    DomainException,
    ErrorCode,
    InternalError,
    NotFoundError,
    ValidationError,
)
from thoughtline.domain.user import EmailAlreadyExistsError
from thoughtline.presentation.api.exception_handlers import (
    get_status_for_exception,
    setup_exception_handlers,
)


class TestGetStatusForException:
    @pytest.mark.parametrize(
        ("exc", "expected"),
        [
            (ValidationError("bad"), 400),
            (InvalidContentError("Content cannot be empty"), 400),
            (AuthenticationError(), 401),
            (NotThoughtOwnerError(uuid4(), uuid4()), 403),
            (ThoughtNotFoundError(uuid4()), 404),
            (NotFoundError("Comment not found"), 404),
            (EmailAlreadyExistsError("a@x.com"), 409),
            (InternalError(), 500),
        ],
    )
    def test_status_mapping(self, exc, expected):
        assert get_status_for_exception(exc) == expected

    def test_unknown_code_falls_back_to_type(self):
        exc = NotFoundError("gone")
        exc.code = "SOMETHING_ELSE"  # type: ignore[assignment]

        assert get_status_for_exception(exc) == 404


@pytest.fixture
def client():
    app = FastAPI()
    setup_exception_handlers(app)

    @app.get("/domain")
    async def raise_domain():
        raise EmailAlreadyExistsError("a@x.com")

    @app.get("/boom")
    async def raise_unexpected():
        msg = "database driver exploded: secret detail"
        raise RuntimeError(msg)

    @app.get("/items/{item_id}")
    async def get_item(item_id: UUID):
        return {"id": str(item_id)}

    @app.get("/plain-domain")
    async def raise_plain_domain():
        raise DomainException("Something failed")

    return TestClient(app, raise_server_exceptions=False)


class TestErrorResponses:
    def test_domain_exception_shape(self, client):
        response = client.get("/domain")

        assert response.status_code == 409
        assert response.json() == {
            "error": "An account with this email already exists",
            "code": ErrorCode.EMAIL_ALREADY_EXISTS.value,
        }

    def test_unexpected_exception_is_hidden(self, client):
        response = client.get("/boom")

        assert response.status_code == 500
        body = response.json()
        assert body == {
            "error": "An internal error occurred",
            "code": "INTERNAL_ERROR",
        }
        assert "secret detail" not in response.text

    def test_plain_domain_exception_is_internal(self, client):
        response = client.get("/plain-domain")

        assert response.status_code == 500
        assert response.json()["error"] == "Something failed"

    def test_malformed_path_parameter_is_400(self, client):
        response = client.get("/items/not-a-uuid")

        assert response.status_code == 400
        assert response.json() == {
            "error": "Invalid request",
            "code": "VALIDATION_ERROR",
        }

    def test_unknown_route_is_404(self, client):
        response = client.get("/nope")

        assert response.status_code == 404
        assert response.json()["code"] == "ENTITY_NOT_FOUND"

    def test_wrong_method_is_405(self, client):
        response = client.post("/domain")

        assert response.status_code == 405
        assert "error" in response.json()
