from __future__ import annotations

import logging

import httpx
import pydantic
import pytest

from lemonsqueezy import LemonSqueezy, get_store
from lemonsqueezy.adapters.fetch import MISSING_API_KEY_MESSAGE, build_url, fetch
from lemonsqueezy.core.config import lemon_squeezy_setup
from lemonsqueezy.core.domain.models import LemonSqueezyResponse
from lemonsqueezy.core.errors import (
    ConfigurationError,
    ErrorKind,
    TransportError,
    UpstreamApiError,
)

STORE = {
    "jsonapi": {"version": "1.0"},
    "links": {"self": "https://api.lemonsqueezy.com/v1/stores/1"},
    "data": {
        "type": "stores",
        "id": "1",
        "attributes": {"name": "Lemons", "currency": "USD"},
        "relationships": {},
        "links": {"self": "https://api.lemonsqueezy.com/v1/stores/1"},
    },
}


class ErrorSpy:
    def __init__(self) -> None:
        self.calls: list[Exception] = []

    def __call__(self, error: Exception) -> None:
        self.calls.append(error)


@pytest.mark.asyncio
async def test_success_envelope(api) -> None:
    lemon_squeezy_setup(api_key="test-key")
    api.respond(201, STORE)

    response = await fetch({"path": "/v1/stores/1"})

    assert response.status_code == 201
    assert response.data == STORE
    assert response.error is None
    assert response.ok
    parsed = response.parse(LemonSqueezyResponse)
    assert parsed is not None
    assert parsed.data.attributes["name"] == "Lemons"


@pytest.mark.asyncio
async def test_request_headers(api) -> None:
    lemon_squeezy_setup(api_key="test-key")

    await fetch({"path": "/v1/users/me"})

    request = api.last
    assert request.method == "GET"
    assert str(request.url) == "https://api.lemonsqueezy.com/v1/users/me"
    assert request.headers["Accept"] == "application/vnd.api+json"
    assert request.headers["Content-Type"] == "application/vnd.api+json"
    assert request.headers["Authorization"] == "Bearer test-key"


@pytest.mark.asyncio
async def test_no_authorization_header_when_key_not_needed(api) -> None:
    api.respond(200, {"valid": True})

    response = await fetch(
        {"path": "/v1/licenses/validate", "method": "POST", "body": {"license_key": "abc"}},
        False,
    )

    assert response.error is None
    assert "Authorization" not in api.last.headers
    assert api.last_json() == {"license_key": "abc"}


@pytest.mark.asyncio
async def test_upstream_error_uses_errors_as_cause(api) -> None:
    spy = ErrorSpy()
    lemon_squeezy_setup(api_key="test-key", on_error=spy)
    errors = [{"detail": "The requested resource was not found.", "status": "404"}]
    api.respond(404, {"errors": errors})

    response = await fetch({"path": "/v1/stores/999"})

    assert response.status_code == 404
    assert response.data is None
    assert isinstance(response.error, UpstreamApiError)
    assert response.error.kind is ErrorKind.UPSTREAM
    assert response.error.message == "Not Found"
    assert response.error.cause == errors
    assert response.error.status_code == 404
    assert spy.calls == [response.error]


@pytest.mark.asyncio
async def test_missing_api_key_skips_network(api) -> None:
    spy = ErrorSpy()
    lemon_squeezy_setup(on_error=spy)

    response = await fetch({"path": "/v1/users/me"})

    assert api.requests == []
    assert response.status_code is None
    assert response.data is None
    assert isinstance(response.error, ConfigurationError)
    assert response.error.message == MISSING_API_KEY_MESSAGE
    assert response.error.cause == "Missing API key"
    assert len(spy.calls) == 1


@pytest.mark.asyncio
async def test_missing_setup_behaves_like_missing_key(api) -> None:
    response = await fetch({"path": "/v1/users/me"})

    assert api.requests == []
    assert isinstance(response.error, ConfigurationError)


@pytest.mark.asyncio
async def test_query_values_are_stringified(api) -> None:
    lemon_squeezy_setup(api_key="test-key")

    await fetch({"path": "/v1/orders", "query": {"filter[store_id]": 5, "test": True}})

    params = api.last.url.params
    assert params["filter[store_id]"] == "5"
    assert params["test"] == "true"


@pytest.mark.asyncio
async def test_query_merges_with_query_in_path(api) -> None:
    lemon_squeezy_setup(api_key="test-key")

    await fetch({"path": "/v1/stores/1?include=products", "query": {"page[size]": 10}})

    params = api.last.url.params
    assert params["include"] == "products"
    assert params["page[size]"] == "10"


@pytest.mark.asyncio
async def test_empty_body_on_delete(api) -> None:
    lemon_squeezy_setup(api_key="test-key")
    api.respond(204)

    response = await fetch({"path": "/v1/webhooks/3", "method": "DELETE"})

    assert response.status_code == 204
    assert response.data is None
    assert response.error is None
    assert api.last.content == b""


@pytest.mark.asyncio
async def test_body_not_sent_on_get(api) -> None:
    lemon_squeezy_setup(api_key="test-key")

    await fetch({"path": "/v1/stores", "body": {"ignored": True}})

    assert api.last.content == b""


@pytest.mark.asyncio
async def test_license_error_keeps_body(api) -> None:
    spy = ErrorSpy()
    lemon_squeezy_setup(on_error=spy)
    body = {"valid": False, "error": "license_key not found.", "license_key": None}
    api.respond(400, body)

    response = await fetch(
        {"path": "/v1/licenses/validate", "method": "POST", "body": {"license_key": "x"}},
        False,
    )

    assert response.status_code == 400
    assert response.data == body
    assert isinstance(response.error, UpstreamApiError)
    assert response.error.cause == "license_key not found."
    assert len(spy.calls) == 1


@pytest.mark.asyncio
async def test_transport_error(api) -> None:
    spy = ErrorSpy()
    lemon_squeezy_setup(api_key="test-key", on_error=spy)

    def boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    api.handler = boom

    response = await fetch({"path": "/v1/stores"})

    assert response.status_code is None
    assert response.data is None
    assert isinstance(response.error, TransportError)
    assert isinstance(response.error.__cause__, httpx.ConnectError)
    assert spy.calls == [response.error]


@pytest.mark.asyncio
async def test_invalid_json_keeps_status_code(api) -> None:
    spy = ErrorSpy()
    lemon_squeezy_setup(api_key="test-key", on_error=spy)
    api.respond(200, content=b"<html>oops</html>")

    response = await fetch({"path": "/v1/stores"})

    assert response.status_code == 200
    assert response.data is None
    assert isinstance(response.error, TransportError)
    assert response.error.status_code == 200
    assert len(spy.calls) == 1


@pytest.mark.asyncio
async def test_failing_on_error_hook_does_not_escape(api, caplog: pytest.LogCaptureFixture) -> None:
    def broken_hook(error: Exception) -> None:
        raise RuntimeError("hook failed")

    lemon_squeezy_setup(api_key="test-key", on_error=broken_hook)
    api.respond(500, {"message": "Server Error"})

    with caplog.at_level(logging.ERROR, logger="lemonsqueezy.adapters.fetch"):
        response = await fetch({"path": "/v1/stores"})

    assert isinstance(response.error, UpstreamApiError)
    assert response.error.cause == "Server Error"
    assert "on_error callback failed" in caplog.text


@pytest.mark.asyncio
async def test_api_key_never_logged(api, caplog: pytest.LogCaptureFixture) -> None:
    lemon_squeezy_setup(api_key="super-secret-key")
    api.respond(401, {"errors": [{"detail": "Unauthenticated."}]})

    with caplog.at_level(logging.DEBUG, logger="lemonsqueezy"):
        await fetch({"path": "/v1/users/me"})

    assert caplog.records
    assert "super-secret-key" not in caplog.text


@pytest.mark.asyncio
async def test_same_call_is_repeatable(api) -> None:
    lemon_squeezy_setup(api_key="test-key")
    api.respond(200, STORE)
    options = {"path": "/v1/stores/1"}

    first = await fetch(options)
    second = await fetch(options)

    assert first.data == second.data
    assert first.status_code == second.status_code
    assert len(api.requests) == 2


@pytest.mark.asyncio
async def test_raise_for_error(api) -> None:
    lemon_squeezy_setup(api_key="test-key")
    api.respond(422, {"errors": [{"detail": "invalid"}]})

    response = await fetch({"path": "/v1/discounts", "method": "POST", "body": {}})

    with pytest.raises(UpstreamApiError):
        response.raise_for_error()


@pytest.mark.asyncio
async def test_invalid_options_raise() -> None:
    with pytest.raises(pydantic.ValidationError):
        await fetch({"path": "/stores"})
    with pytest.raises(pydantic.ValidationError):
        await fetch({"path": "/v1/stores", "method": "PUT"})


def test_build_url() -> None:
    url = build_url("/v1/stores", {"page[number]": 2, "archived": False})
    assert url.params["page[number]"] == "2"
    assert url.params["archived"] == "false"
    assert url.path == "/v1/stores"


@pytest.mark.asyncio
async def test_invalid_url_is_reported_in_envelope(api) -> None:
    spy = ErrorSpy()
    lemon_squeezy_setup(api_key="test-key", on_error=spy)

    response = await get_store("1\x00")

    assert api.requests == []
    assert response.status_code is None
    assert isinstance(response.error, TransportError)
    assert isinstance(response.error.__cause__, httpx.InvalidURL)
    assert response.error.cause == "InvalidURL"
    assert spy.calls == [response.error]


@pytest.mark.asyncio
async def test_closed_shared_client_is_reported_in_envelope() -> None:
    spy = ErrorSpy()
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={}))
    )
    await http_client.aclose()

    ls = LemonSqueezy(api_key="test-key", on_error=spy, http_client=http_client)
    response = await ls.call(get_store, 1)

    assert response.status_code is None
    assert response.data is None
    assert isinstance(response.error, TransportError)
    assert isinstance(response.error.__cause__, RuntimeError)
    assert spy.calls == [response.error]
