"""Products: solo lectura."""

from __future__ import annotations

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall, GetParams, ListParams, ResourceId
from lemonsqueezy.core.params import (
    convert_include_to_query_string,
    convert_list_params_to_query_string,
    required_check,
)


def get_product(product_id: ResourceId, params: GetParams | None = None) -> ApiCall:
    required_check({"product_id": product_id})
    include = (params or {}).get("include")
    return fetch({"path": f"/v1/products/{product_id}{convert_include_to_query_string(include)}"})


def list_products(params: ListParams | None = None) -> ApiCall:
    """Filtros: `store_id`."""

    return fetch({"path": f"/v1/products{convert_list_params_to_query_string(params)}"})
