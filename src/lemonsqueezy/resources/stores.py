"""Stores: solo lectura."""

from __future__ import annotations

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall, GetParams, ListParams, ResourceId
from lemonsqueezy.core.params import (
    convert_include_to_query_string,
    convert_list_params_to_query_string,
    required_check,
)


def get_store(store_id: ResourceId, params: GetParams | None = None) -> ApiCall:
    """Una store. `params.include`: recursos relacionados."""

    required_check({"store_id": store_id})
    include = (params or {}).get("include")
    return fetch({"path": f"/v1/stores/{store_id}{convert_include_to_query_string(include)}"})


def list_stores(params: ListParams | None = None) -> ApiCall:
    """Listado paginado de stores (orden por nombre)."""

    return fetch({"path": f"/v1/stores{convert_list_params_to_query_string(params)}"})
