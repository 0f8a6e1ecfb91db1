"""Prices: solo lectura."""

from __future__ import annotations

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall, GetParams, ListParams, ResourceId
from lemonsqueezy.core.params import (
    convert_include_to_query_string,
    convert_list_params_to_query_string,
    required_check,
)


def get_price(price_id: ResourceId, params: GetParams | None = None) -> ApiCall:
    required_check({"price_id": price_id})
    include = (params or {}).get("include")
    return fetch({"path": f"/v1/prices/{price_id}{convert_include_to_query_string(include)}"})


def list_prices(params: ListParams | None = None) -> ApiCall:
    """Filtros: `variant_id`."""

    return fetch({"path": f"/v1/prices{convert_list_params_to_query_string(params)}"})
