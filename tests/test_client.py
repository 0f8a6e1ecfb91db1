from __future__ import annotations

import asyncio

import httpx
import pytest

from lemonsqueezy import LemonSqueezy, get_config, get_store, lemon_squeezy_setup
from lemonsqueezy.core.errors import ConfigurationError


@pytest.mark.asyncio
async def test_call_uses_instance_key_without_touching_global(api) -> None:
    lemon_squeezy_setup(api_key="global-key")
    ls = LemonSqueezy(api_key="instance-key")

    response = await ls.call(get_store, 1)

    assert response.error is None
    assert api.last.headers["Authorization"] == "Bearer instance-key"
    config = get_config()
    assert config is not None
    assert config.api_key == "global-key"


@pytest.mark.asyncio
async def test_concurrent_clients_keep_their_own_keys(api) -> None:
    first = LemonSqueezy(api_key="key-a")
    second = LemonSqueezy(api_key="key-b")

    await asyncio.gather(first.call(get_store, 1), second.call(get_store, 2))

    sent = {request.url.path: request.headers["Authorization"] for request in api.requests}
    assert sent == {"/v1/stores/1": "Bearer key-a", "/v1/stores/2": "Bearer key-b"}
    assert get_config() is None


@pytest.mark.asyncio
async def test_instance_on_error_hook(api) -> None:
    errors: list[Exception] = []
    ls = LemonSqueezy(on_error=errors.append)

    response = await ls.call(get_store, 1)

    assert isinstance(response.error, ConfigurationError)
    assert errors == [response.error]
    assert api.requests == []


@pytest.mark.asyncio
async def test_injected_http_client_is_not_closed() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"data": {}})

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    async with LemonSqueezy(api_key="k", http_client=http_client) as ls:
        await ls.call(get_store, 3)

    assert not http_client.is_closed
    assert [request.url.path for request in seen] == ["/v1/stores/3"]
    await http_client.aclose()


@pytest.mark.asyncio
async def test_context_manager_closes_owned_client(api) -> None:
    async with LemonSqueezy(api_key="k") as ls:
        owned = ls._http_client
        assert owned is not None
        await ls.call(get_store, 1)

    assert owned.is_closed
    assert ls._http_client is None
