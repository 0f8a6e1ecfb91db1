"""Pipeline request/response.

Único punto por el que pasan todas las llamadas HTTP:
1. Lee la configuración vigente.
2. Sin API key (y si hace falta) devuelve un `ConfigurationError` sin tocar la red.
3. Construye URL + headers JSON:API + Bearer, serializa el body en POST/PATCH.
4. Parsea el JSON de la respuesta siempre (el API devuelve JSON también en error).
5. Normaliza a `FetchResponse` y dispara `on_error` una vez si hay error.

No hay reintentos: cada fallo se reporta exactamente una vez.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

import httpx

from lemonsqueezy.adapters.http_client import JSON_API_MEDIA_TYPE, open_client
from lemonsqueezy.core.config import API_BASE_URL, ClientSettings, get_config
from lemonsqueezy.core.domain.models import FetchOptions, FetchResponse
from lemonsqueezy.core.errors import (
    ConfigurationError,
    LemonSqueezyError,
    TransportError,
    UpstreamApiError,
)
from lemonsqueezy.core.params import stringify

logger = logging.getLogger(__name__)

MISSING_API_KEY_MESSAGE = (
    "Please provide your Lemon Squeezy API key. "
    "Create a new API key: https://app.lemonsqueezy.com/settings/api"
)

_PAYLOAD_METHODS = frozenset({"POST", "PATCH"})


def build_url(path: str, query: Mapping[str, Any] | None = None) -> httpx.URL:
    url = httpx.URL(f"{API_BASE_URL}{path}")
    for key, value in (query or {}).items():
        url = url.copy_add_param(key, stringify(value))
    return url


def build_headers(api_key: str | None, need_api_key: bool) -> dict[str, str]:
    headers = {
        "Accept": JSON_API_MEDIA_TYPE,
        "Content-Type": JSON_API_MEDIA_TYPE,
    }
    if need_api_key:
        headers["Authorization"] = f"Bearer {api_key}"
    return headers


def _parse_body(response: httpx.Response) -> Any:
    # DELETE suele responder 204 sin cuerpo.
    if not response.content.strip():
        return None
    return json.loads(response.content)


def _upstream_error(response: httpx.Response, data: Any) -> UpstreamApiError:
    cause: Any = None
    if isinstance(data, dict):
        cause = data.get("errors") or data.get("error") or data.get("message")
    return UpstreamApiError(
        response.reason_phrase,
        cause=cause or "unknown cause",
        status_code=response.status_code,
    )


def _notify(hook: Any, error: LemonSqueezyError) -> None:
    if hook is None:
        return
    try:
        hook(error)
    except Exception:
        logger.exception("on_error callback failed")


async def fetch(
    options: FetchOptions | Mapping[str, Any],
    need_api_key: bool = True,
    *,
    settings: ClientSettings | None = None,
) -> FetchResponse[Any]:
    """Ejecuta una request y devuelve `FetchResponse(status_code, data, error)`.

    `options` inválidas (path fuera de `/v1/`, método desconocido) lanzan
    `pydantic.ValidationError`: son errores del llamador, no del API.
    """

    if not isinstance(options, FetchOptions):
        options = FetchOptions.model_validate(dict(options))

    config = get_config()
    api_key = config.api_key if config else None
    on_error = config.on_error if config else None

    if need_api_key and not api_key:
        error = ConfigurationError(MISSING_API_KEY_MESSAGE, cause="Missing API key")
        logger.warning("Lemon Squeezy request to %s skipped: %s", options.path, error)
        _notify(on_error, error)
        return FetchResponse(status_code=None, data=None, error=error)

    status_code: int | None = None
    data: Any = None
    error: LemonSqueezyError | None = None

    try:
        url = build_url(options.path, options.query)
        content: str | None = None
        if options.method in _PAYLOAD_METHODS and options.body is not None:
            content = json.dumps(options.body)

        logger.debug("Lemon Squeezy request: %s %s", options.method, url)
        async with open_client(settings) as client:
            response = await client.request(
                options.method,
                url,
                headers=build_headers(api_key, need_api_key),
                content=content,
            )
        status_code = response.status_code
        logger.debug("Lemon Squeezy response: %s %s -> %s", options.method, url, status_code)

        body = _parse_body(response)
        if response.is_success:
            data = body
        else:
            error = _upstream_error(response, body)
            if isinstance(body, dict) and "error" in body:
                data = body
    except httpx.HTTPError as exc:
        error = TransportError(str(exc) or exc.__class__.__name__, cause=exc.__class__.__name__)
        error.__cause__ = exc
    except (TypeError, ValueError) as exc:
        # JSON inválido en la respuesta o body no serializable.
        error = TransportError(str(exc), cause=exc.__class__.__name__, status_code=status_code)
        error.__cause__ = exc
    except Exception as exc:
        # URL inválida (httpx.InvalidURL), cliente compartido ya cerrado, etc.
        error = TransportError(
            str(exc) or exc.__class__.__name__,
            cause=exc.__class__.__name__,
            status_code=status_code,
        )
        error.__cause__ = exc

    if error is not None:
        logger.warning("Lemon Squeezy %s %s failed: %s", options.method, options.path, error)
        _notify(on_error, error)

    return FetchResponse(status_code=status_code, data=data, error=error)
