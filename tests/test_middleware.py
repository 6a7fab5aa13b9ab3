"""Tests for the error handling middleware and error builder."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from fastapi_pagelinks.core.errors import (
    InvalidPolicy,
    PaginationErrorBuilder,
    URLResolutionError,
)
from fastapi_pagelinks.middleware import ErrorHandlerMiddleware
from fastapi_pagelinks.schemas import PaginationErrorDocument


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    app.add_middleware(ErrorHandlerMiddleware)

    @app.get("/ok")
    def ok():
        return {"ok": True}

    @app.get("/policy")
    def policy():
        raise InvalidPolicy("inner_window must be non-negative, got -1.")

    @app.get("/boom")
    def boom():
        raise RuntimeError("boom")

    return TestClient(app)


class TestErrorHandlerMiddleware:
    def test_passes_through_success(self, client):
        response = client.get("/ok")
        assert response.status_code == 200
        assert response.json() == {"ok": True}

    def test_pagination_errors_keep_their_code(self, client):
        response = client.get("/policy")
        assert response.status_code == 500
        document = PaginationErrorDocument.model_validate(response.json())
        assert document.errors[0]["code"] == "INVALID_POLICY"
        assert document.errors[0]["title"] == "Invalid Pagination Policy"

    def test_other_errors_are_generic(self, client, caplog):
        with caplog.at_level("ERROR", logger="fastapi_pagelinks.middleware.error_handler"):
            response = client.get("/boom")
        assert response.status_code == 500
        error = response.json()["errors"][0]
        assert error == {
            "status": "500",
            "code": "INTERNAL_ERROR",
            "title": "Internal Server Error",
            "detail": "boom",
        }
        assert "Unhandled error on /boom" in caplog.text


class TestPaginationErrorBuilder:
    def test_from_pagination_error(self):
        error = PaginationErrorBuilder().from_exception(URLResolutionError("bad route"))
        assert error == {
            "status": "500",
            "code": "URL_RESOLUTION_ERROR",
            "title": "URL Resolution Failed",
            "detail": "bad route",
        }

    def test_empty_detail_is_omitted(self):
        error = PaginationErrorBuilder().from_exception(URLResolutionError())
        assert "detail" not in error

    def test_error_object_requires_a_field(self):
        with pytest.raises(ValueError):
            PaginationErrorBuilder().error_object()

    def test_error_document(self):
        builder = PaginationErrorBuilder()
        errors = [builder.error_object(code="X")]
        assert builder.error_document(errors) == {"errors": [{"code": "X"}]}
