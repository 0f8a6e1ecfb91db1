"""Discount redemptions: solo lectura."""

from __future__ import annotations

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall, GetParams, ListParams, ResourceId
from lemonsqueezy.core.params import (
    convert_include_to_query_string,
    convert_list_params_to_query_string,
    required_check,
)


def get_discount_redemption(
    discount_redemption_id: ResourceId,
    params: GetParams | None = None,
) -> ApiCall:
    required_check({"discount_redemption_id": discount_redemption_id})
    query = convert_include_to_query_string((params or {}).get("include"))
    return fetch({"path": f"/v1/discount-redemptions/{discount_redemption_id}{query}"})


def list_discount_redemptions(params: ListParams | None = None) -> ApiCall:
    """Filtros: `discount_id`, `order_id`."""

    return fetch(
        {"path": f"/v1/discount-redemptions{convert_list_params_to_query_string(params)}"}
    )
