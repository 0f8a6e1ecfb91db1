from __future__ import annotations

import json
from collections.abc import Callable, Iterator
from contextvars import ContextVar
from typing import Any

import httpx
import pytest

from lemonsqueezy import client as client_module
from lemonsqueezy.adapters import http_client
from lemonsqueezy.core import config


@pytest.fixture(autouse=True)
def reset_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setattr(config, "_KV", {})
    monkeypatch.delenv("LEMONSQUEEZY_API_KEY", raising=False)
    config.get_default_settings.cache_clear()
    yield
    config.get_default_settings.cache_clear()


class ApiRecorder:
    """Transport spy: guarda cada request y responde con la respuesta programada."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = lambda request: httpx.Response(
            200, json={"data": {}}
        )

    def respond(self, status_code: int = 200, body: Any = None, *, content: bytes | None = None) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            if body is None:
                return httpx.Response(status_code)
            return httpx.Response(status_code, json=body)

        self.handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def api(monkeypatch: pytest.MonkeyPatch) -> ApiRecorder:
    recorder = ApiRecorder()
    client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    # Cliente compartido por defecto en cualquier contexto (incluido el loop de pytest-asyncio).
    monkeypatch.setattr(
        http_client, "_shared_client", ContextVar("test_http_client", default=client)
    )
    monkeypatch.setattr(
        client_module,
        "build_async_client",
        lambda settings=None, **kwargs: httpx.AsyncClient(transport=httpx.MockTransport(recorder)),
    )
    return recorder
