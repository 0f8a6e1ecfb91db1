"""License API (activar/validar/desactivar).

Estos endpoints no usan API key ni JSON:API: el cuerpo es plano y el API
responde con cuerpo también en error (`{"error": "...", ...}`), por eso el
envelope puede traer `data` y `error` a la vez.
"""

from __future__ import annotations

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall
from lemonsqueezy.core.params import UNSET, convert_keys, required_check


def activate_license(license_key: str, instance_name: str) -> ApiCall:
    """Respuesta: `activated`, `error`, `license_key`, `instance`, `meta`."""

    required_check({"license_key": license_key, "instance_name": instance_name})
    return fetch(
        {
            "path": "/v1/licenses/activate",
            "method": "POST",
            "body": convert_keys({"license_key": license_key, "instance_name": instance_name}),
        },
        False,
    )


def validate_license(license_key: str, instance_id: str | None = None) -> ApiCall:
    """Valida una key, o una instancia concreta si llega `instance_id`.

    Sin `instance_id` la respuesta trae `"instance": null`.
    """

    required_check({"license_key": license_key})
    return fetch(
        {
            "path": "/v1/licenses/validate",
            "method": "POST",
            "body": convert_keys(
                {
                    "license_key": license_key,
                    "instance_id": instance_id if instance_id is not None else UNSET,
                }
            ),
        },
        False,
    )


def deactivate_license(license_key: str, instance_id: str) -> ApiCall:
    required_check({"license_key": license_key, "instance_id": instance_id})
    return fetch(
        {
            "path": "/v1/licenses/deactivate",
            "method": "POST",
            "body": convert_keys({"license_key": license_key, "instance_id": instance_id}),
        },
        False,
    )
