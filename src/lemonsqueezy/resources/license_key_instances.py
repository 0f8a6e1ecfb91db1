"""License key instances: solo lectura."""

from __future__ import annotations

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall, GetParams, ListParams, ResourceId
from lemonsqueezy.core.params import (
    convert_include_to_query_string,
    convert_list_params_to_query_string,
    required_check,
)


def get_license_key_instance(
    license_key_instance_id: ResourceId,
    params: GetParams | None = None,
) -> ApiCall:
    """Una activación de la license key (una por dispositivo/nombre de instancia)."""

    required_check({"license_key_instance_id": license_key_instance_id})
    query = convert_include_to_query_string((params or {}).get("include"))
    return fetch({"path": f"/v1/license-key-instances/{license_key_instance_id}{query}"})


def list_license_key_instances(params: ListParams | None = None) -> ApiCall:
    """Filtros: `license_key_id`."""

    return fetch(
        {"path": f"/v1/license-key-instances{convert_list_params_to_query_string(params)}"}
    )
