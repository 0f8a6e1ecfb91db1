"""Cliente con configuración propia.

`lemon_squeezy_setup` instala una configuración global (última escritura gana).
`LemonSqueezy` permite varios clientes independientes en el mismo proceso:
cada `call` aplica su `Config` solo al contexto de esa llamada.

Uso:
    async with LemonSqueezy(api_key="...") as ls:
        response = await ls.call(get_store, 1)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx

from lemonsqueezy.adapters.http_client import build_async_client, use_http_client
from lemonsqueezy.core.config import ClientSettings, Config, use_config
from lemonsqueezy.core.domain.models import ApiCall, FetchResponse


class LemonSqueezy:
    def __init__(
        self,
        api_key: str | None = None,
        on_error: Callable[[Exception], Any] | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
        settings: ClientSettings | None = None,
    ) -> None:
        self.config = Config(api_key=api_key, on_error=on_error)
        self._settings = settings
        self._http_client = http_client
        self._owns_client = False

    @classmethod
    def from_settings(
        cls,
        settings: ClientSettings | None = None,
        on_error: Callable[[Exception], Any] | None = None,
    ) -> LemonSqueezy:
        """Cliente con la API key de `LEMONSQUEEZY_API_KEY` (env / .env)."""

        settings = settings or ClientSettings()
        return cls(settings.api_key, on_error, settings=settings)

    async def call(
        self,
        operation: Callable[..., ApiCall],
        *args: Any,
        **kwargs: Any,
    ) -> FetchResponse[Any]:
        """Ejecuta una función de `lemonsqueezy.resources` con esta configuración."""

        with use_config(self.config):
            if self._http_client is not None:
                with use_http_client(self._http_client):
                    return await operation(*args, **kwargs)
            async with build_async_client(self._settings) as client:
                with use_http_client(client):
                    return await operation(*args, **kwargs)

    async def aclose(self) -> None:
        if self._owns_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_client = False

    async def __aenter__(self) -> LemonSqueezy:
        if self._http_client is None:
            self._http_client = build_async_client(self._settings)
            self._owns_client = True
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
