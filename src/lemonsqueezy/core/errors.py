"""Jerarquía de errores del cliente.

Canales:
- `ValidationError` se lanza (síncrono) cuando falta un parámetro requerido.
- El resto viaja dentro de `FetchResponse.error` y dispara `on_error`.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Origen de un error devuelto o lanzado por la librería."""

    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    TRANSPORT = "transport"
    UPSTREAM = "upstream"


class LemonSqueezyError(Exception):
    """Base de todos los errores de la librería.

    `cause` conserva el detalle del API (lista de errores JSON:API o un string);
    no confundir con `__cause__`, que encadena excepciones Python.
    """

    name = "Lemon Squeezy Error"
    kind: ErrorKind = ErrorKind.UPSTREAM

    def __init__(
        self,
        message: str,
        cause: Any = "unknown",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class ValidationError(LemonSqueezyError, ValueError):
    kind = ErrorKind.VALIDATION


class RequiredParameterError(ValidationError):
    """Un parámetro obligatorio llegó vacío (falsy)."""

    def __init__(self, parameter: str) -> None:
        super().__init__(
            f"Please provide the required parameter: {parameter}.",
            cause=parameter,
        )
        self.parameter = parameter


class ConfigurationError(LemonSqueezyError):
    kind = ErrorKind.CONFIGURATION


class TransportError(LemonSqueezyError):
    """Fallo de red o cuerpo de respuesta ilegible."""

    kind = ErrorKind.TRANSPORT


class UpstreamApiError(LemonSqueezyError):
    """Respuesta HTTP fuera del rango 2xx."""

    kind = ErrorKind.UPSTREAM
