import asyncio

import pytest
from fastapi import HTTPException

from exceptions import ApplicationError, NotFoundError, ValidationError
from utils.error_handlers import handle_api_errors, to_http_exception


def test_validation_error_is_bad_request():
    error = to_http_exception("List items", ValidationError("Unknown item type 'quiz'"))

    assert error.status_code == 400
    assert error.detail == "Unknown item type 'quiz'"


def test_not_found_error():
    error = to_http_exception("Get item", NotFoundError("post", "p-404"))

    assert error.status_code == 404
    assert error.detail == "Post 'p-404' not found"


def test_other_application_errors_are_server_errors():
    error = to_http_exception("Get item", ApplicationError("row unreadable"))

    assert error.status_code == 500
    assert error.detail == "Get item failed: row unreadable"


def test_unexpected_errors_hide_details():
    error = to_http_exception("Get item", RuntimeError("secret"))

    assert error.status_code == 500
    assert "secret" not in error.detail


def test_decorator_converts_sync_errors():
    @handle_api_errors("Get item")
    def endpoint():
        raise NotFoundError("link", "l-1")

    with pytest.raises(HTTPException) as exc:
        endpoint()
    assert exc.value.status_code == 404


def test_decorator_passes_http_exceptions_through():
    original = HTTPException(status_code=418, detail="teapot")

    @handle_api_errors("Brew")
    async def endpoint():
        raise original

    with pytest.raises(HTTPException) as exc:
        asyncio.run(endpoint())
    assert exc.value is original
