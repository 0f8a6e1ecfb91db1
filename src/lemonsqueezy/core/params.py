"""Conversión de parámetros al formato del API.

El API usa snake_case, `filter[...]`/`page[...]` en el query string e
`include` separado por comas. Estas funciones son puras (sin I/O).
"""

from __future__ import annotations

import base64
import re
import time
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from lemonsqueezy.core.errors import RequiredParameterError

_UPPER_RE = re.compile(r"[A-Z]")


class _Unset:
    """Marca de "valor no definido" (distinto de `None`, que es `null` en JSON)."""

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def is_object(value: Any) -> bool:
    """True solo para mappings planos (`dict`)."""

    return isinstance(value, dict)


def camel_to_underscore(key: str) -> str:
    return _UPPER_RE.sub(lambda match: f"_{match.group(0).lower()}", key)


def _strict_equal(left: Any, right: Any) -> bool:
    if left is right:
        return True
    if type(left) is not type(right):
        return False
    if isinstance(left, (dict, list, set)):
        return False
    return left == right


def convert_keys(obj: Mapping[str, Any], excluded_value: Any = UNSET) -> dict[str, Any]:
    """Pasa las keys a snake_case recursivamente y descarta `excluded_value`.

    Solo se recorre en dicts anidados: las listas (y los dicts que contengan)
    se copian tal cual.
    """

    converted: dict[str, Any] = {}
    for key, value in obj.items():
        if _strict_equal(value, excluded_value):
            continue
        converted[camel_to_underscore(key)] = (
            convert_keys(value, excluded_value) if is_object(value) else value
        )
    return converted


def stringify(value: Any) -> str:
    """Representación de un valor en el query string (`true`/`false`/`null`)."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(item) for item in value)
    return str(value)


def convert_include_to_query_string(include: list[str] | tuple[str, ...] | None) -> str:
    if not include or not isinstance(include, (list, tuple)):
        return ""
    return f"?include={','.join(include)}"


def convert_list_params_to_query_string(params: Mapping[str, Any] | None) -> str:
    """`{filter, page, include}` -> `?filter[store_id]=1&page[number]=2&include=a,b`."""

    params = params or {}
    include = params.get("include") or []
    converted = convert_keys(
        {
            "filter": params.get("filter") or {},
            "page": params.get("page") or {},
            "include": ",".join(include),
        }
    )

    search_params: dict[str, str] = {}
    for key, value in converted.items():
        if is_object(value):
            for inner_key, inner_value in value.items():
                search_params[f"{key}[{inner_key}]"] = stringify(inner_value)
        elif value != "":
            search_params[key] = stringify(value)

    query_string = urlencode(search_params)
    return f"?{query_string}" if query_string else ""


def convert_to_query_string(params: Mapping[str, Any] | None) -> str:
    """Query string plano (sin corchetes) a partir de un mapping camel/snake."""

    converted = convert_keys(params or {})
    query_string = urlencode({key: stringify(value) for key, value in converted.items()})
    return f"?{query_string}" if query_string else ""


def required_check(checked: Mapping[str, Any]) -> None:
    """Lanza `RequiredParameterError` con el primer valor falsy (orden de inserción)."""

    for key, value in checked.items():
        if not value:
            raise RequiredParameterError(key)


def generate_discount() -> str:
    """Código de descuento de 8 caracteres (A-Z, 0-9).

    Sale del timestamp en milisegundos: dos llamadas en el mismo instante
    devuelven el mismo código. No usar como identificador único.
    """

    encoded = base64.b64encode(str(int(time.time() * 1000)).encode("ascii")).decode("ascii")
    return encoded[-10:-2].upper()


def to_relationship(resource_type: str, resource_id: Any) -> dict[str, Any]:
    """`{"data": {"type": ..., "id": "<str>"}}` para `relationships`."""

    return {"data": {"type": resource_type, "id": str(resource_id)}}


def pick_attributes(
    obj: Mapping[str, Any] | None,
    keys: tuple[str, ...],
    defaults: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Toma `keys` (snake_case) de `obj`, con defaults; lo ausente no se envía."""

    source = convert_keys(obj or {})
    defaults = defaults or {}
    return convert_keys({key: source.get(key, defaults.get(key, UNSET)) for key in keys})
