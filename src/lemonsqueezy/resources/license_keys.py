"""License keys: lectura y edición."""

from __future__ import annotations

from typing import TypedDict

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall, GetParams, ListParams, ResourceId
from lemonsqueezy.core.params import (
    convert_include_to_query_string,
    convert_list_params_to_query_string,
    pick_attributes,
    required_check,
)


class UpdateLicenseKey(TypedDict, total=False):
    """`activation_limit=None` es ilimitado; `expires_at=None` no expira nunca."""

    activation_limit: int | None
    disabled: bool
    expires_at: str | None


def get_license_key(license_key_id: ResourceId, params: GetParams | None = None) -> ApiCall:
    required_check({"license_key_id": license_key_id})
    include = (params or {}).get("include")
    return fetch(
        {"path": f"/v1/license-keys/{license_key_id}{convert_include_to_query_string(include)}"}
    )


def list_license_keys(params: ListParams | None = None) -> ApiCall:
    """Filtros: `store_id`, `order_id`, `order_item_id`, `product_id`, `status`."""

    return fetch({"path": f"/v1/license-keys{convert_list_params_to_query_string(params)}"})


def update_license_key(license_key_id: ResourceId, license_key: UpdateLicenseKey) -> ApiCall:
    required_check({"license_key_id": license_key_id})
    attributes = pick_attributes(
        license_key,
        ("activation_limit", "disabled", "expires_at"),
        defaults={"disabled": False},
    )
    return fetch(
        {
            "path": f"/v1/license-keys/{license_key_id}",
            "method": "PATCH",
            "body": {
                "data": {
                    "type": "license-keys",
                    "id": str(license_key_id),
                    "attributes": attributes,
                }
            },
        }
    )
