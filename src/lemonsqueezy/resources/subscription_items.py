"""Subscription items: lectura, uso actual (usage-based) y cantidad."""

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


class UpdateSubscriptionItem(TypedDict, total=False):
    quantity: int
    invoice_immediately: bool
    disable_prorations: bool


def get_subscription_item(
    subscription_item_id: ResourceId,
    params: GetParams | None = None,
) -> ApiCall:
    required_check({"subscription_item_id": subscription_item_id})
    include = (params or {}).get("include")
    return fetch(
        {
            "path": f"/v1/subscription-items/{subscription_item_id}"
            f"{convert_include_to_query_string(include)}"
        }
    )


def get_subscription_item_current_usage(subscription_item_id: ResourceId) -> ApiCall:
    """Uso del período de facturación actual (solo items por uso).

    Las cifras vienen en el `meta` de la respuesta (`period_start`, `quantity`, ...).
    """

    required_check({"subscription_item_id": subscription_item_id})
    return fetch({"path": f"/v1/subscription-items/{subscription_item_id}/current-usage"})


def list_subscription_items(params: ListParams | None = None) -> ApiCall:
    """Filtros: `subscription_id`, `price_id`."""

    return fetch({"path": f"/v1/subscription-items{convert_list_params_to_query_string(params)}"})


def update_subscription_item(
    subscription_item_id: ResourceId,
    update: int | UpdateSubscriptionItem,
) -> ApiCall:
    """Cambia la cantidad; `update` es la cantidad o un mapping."""

    required_check({"subscription_item_id": subscription_item_id})
    if isinstance(update, int):
        attributes = {"quantity": update}
    else:
        attributes = pick_attributes(
            update,
            ("quantity", "invoice_immediately", "disable_prorations"),
            defaults={"invoice_immediately": False, "disable_prorations": False},
        )
    return fetch(
        {
            "path": f"/v1/subscription-items/{subscription_item_id}",
            "method": "PATCH",
            "body": {
                "data": {
                    "type": "subscription-items",
                    "id": str(subscription_item_id),
                    "attributes": attributes,
                }
            },
        }
    )
