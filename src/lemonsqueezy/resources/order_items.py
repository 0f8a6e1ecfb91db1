"""Order items: solo lectura."""

from __future__ import annotations

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall, GetParams, ListParams, ResourceId
from lemonsqueezy.core.params import (
    convert_include_to_query_string,
    convert_list_params_to_query_string,
    required_check,
)


def get_order_item(order_item_id: ResourceId, params: GetParams | None = None) -> ApiCall:
    required_check({"order_item_id": order_item_id})
    include = (params or {}).get("include")
    return fetch(
        {"path": f"/v1/order-items/{order_item_id}{convert_include_to_query_string(include)}"}
    )


def list_order_items(params: ListParams | None = None) -> ApiCall:
    """Filtros: `order_id`, `product_id`, `variant_id`."""

    return fetch({"path": f"/v1/order-items{convert_list_params_to_query_string(params)}"})
