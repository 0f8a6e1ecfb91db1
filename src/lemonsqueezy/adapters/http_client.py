"""Wrapper de httpx.

Responsabilidad:
- Construir el `httpx.AsyncClient` con timeouts y headers JSON:API.
- Permitir un cliente compartido (propiedad del llamador) por contexto;
  sin él, el pipeline abre y cierra un cliente por request.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from contextlib import asynccontextmanager, contextmanager
from contextvars import ContextVar

import httpx

from lemonsqueezy.core.config import ClientSettings, get_default_settings

JSON_API_MEDIA_TYPE = "application/vnd.api+json"

_shared_client: ContextVar[httpx.AsyncClient | None] = ContextVar(
    "lemonsqueezy_http_client", default=None
)


def build_async_client(
    settings: ClientSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con defaults del API.

    Sin `settings` usa `get_default_settings()`: el entorno se lee una vez por proceso.
    """

    settings = settings or get_default_settings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": JSON_API_MEDIA_TYPE,
        "Content-Type": JSON_API_MEDIA_TYPE,
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
    )


@contextmanager
def use_http_client(client: httpx.AsyncClient | None) -> Iterator[httpx.AsyncClient | None]:
    """Comparte `client` con todas las requests del contexto actual."""

    token = _shared_client.set(client)
    try:
        yield client
    finally:
        _shared_client.reset(token)


@asynccontextmanager
async def open_client(settings: ClientSettings | None = None) -> AsyncIterator[httpx.AsyncClient]:
    """Cliente compartido si existe; si no, uno efímero que se cierra al salir."""

    shared = _shared_client.get()
    if shared is not None:
        yield shared
        return
    async with build_async_client(settings) as client:
        yield client
