"""Variants: solo lectura."""

from __future__ import annotations

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall, GetParams, ListParams, ResourceId
from lemonsqueezy.core.params import (
    convert_include_to_query_string,
    convert_list_params_to_query_string,
    required_check,
)


def get_variant(variant_id: ResourceId, params: GetParams | None = None) -> ApiCall:
    required_check({"variant_id": variant_id})
    include = (params or {}).get("include")
    return fetch({"path": f"/v1/variants/{variant_id}{convert_include_to_query_string(include)}"})


def list_variants(params: ListParams | None = None) -> ApiCall:
    """Filtros: `product_id`, `status`."""

    return fetch({"path": f"/v1/variants{convert_list_params_to_query_string(params)}"})
