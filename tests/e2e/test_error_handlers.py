"""End-to-end tests for the exception-to-status mapping."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from gather.domain.error import ForbiddenError, NotFoundError, ValidationError
from gather.interface.api.errors import register_error_handlers


@pytest.fixture
def client():
    app_instance = FastAPI()
    register_error_handlers(app_instance)

    @app_instance.get("/invalid")
    async def invalid():
        raise ValidationError("No valid invitee email")

    @app_instance.get("/forbidden")
    async def forbidden():
        raise ForbiddenError()

    @app_instance.get("/missing")
    async def missing():
        raise NotFoundError("Event", "evt-1")

    @app_instance.get("/bug")
    async def bug():
        raise ValueError("internal model construction failed")

    return TestClient(app_instance, raise_server_exceptions=False)


class TestErrorHandlers:
    def test_domain_validation_is_bad_request(self, client):
        response = client.get("/invalid")

        assert response.status_code == 400
        assert response.json() == {"detail": "No valid invitee email"}

    def test_forbidden(self, client):
        assert client.get("/forbidden").status_code == 403

    def test_not_found(self, client):
        response = client.get("/missing")

        assert response.status_code == 404
        assert response.json() == {"detail": "Event not found: evt-1"}

    def test_bare_value_error_is_server_error(self, client):
        response = client.get("/bug")

        assert response.status_code == 500
        assert "internal model construction failed" not in response.text
