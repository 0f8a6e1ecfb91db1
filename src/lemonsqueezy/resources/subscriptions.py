"""Subscriptions: lectura, cambios de plan/pausa y cancelación."""

from __future__ import annotations

from typing import Literal, TypedDict

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall, GetParams, ListParams, ResourceId
from lemonsqueezy.core.params import (
    convert_include_to_query_string,
    convert_list_params_to_query_string,
    pick_attributes,
    required_check,
)

_UPDATABLE = (
    "variant_id",
    "cancelled",
    "billing_anchor",
    "invoice_immediately",
    "disable_prorations",
    "pause",
    "trial_ends_at",
)


class Pause(TypedDict, total=False):
    mode: Literal["void", "free"]
    resumes_at: str | None


class UpdateSubscription(TypedDict, total=False):
    """`pause=None` reanuda una suscripción pausada; `cancelled=False` revierte la cancelación."""

    variant_id: int
    cancelled: bool
    billing_anchor: int | None
    invoice_immediately: bool
    disable_prorations: bool
    pause: Pause | None
    trial_ends_at: str | None


def get_subscription(subscription_id: ResourceId, params: GetParams | None = None) -> ApiCall:
    required_check({"subscription_id": subscription_id})
    include = (params or {}).get("include")
    return fetch(
        {"path": f"/v1/subscriptions/{subscription_id}{convert_include_to_query_string(include)}"}
    )


def update_subscription(subscription_id: ResourceId, update: UpdateSubscription) -> ApiCall:
    required_check({"subscription_id": subscription_id})
    return fetch(
        {
            "path": f"/v1/subscriptions/{subscription_id}",
            "method": "PATCH",
            "body": {
                "data": {
                    "type": "subscriptions",
                    "id": str(subscription_id),
                    "attributes": pick_attributes(update, _UPDATABLE),
                }
            },
        }
    )


def cancel_subscription(subscription_id: ResourceId) -> ApiCall:
    """Cancela al final del período (la suscripción entra en período de gracia)."""

    required_check({"subscription_id": subscription_id})
    return fetch({"path": f"/v1/subscriptions/{subscription_id}", "method": "DELETE"})


def list_subscriptions(params: ListParams | None = None) -> ApiCall:
    """Filtros: `store_id`, `order_id`, `order_item_id`, `product_id`, `variant_id`,
    `user_email`, `status`.
    """

    return fetch({"path": f"/v1/subscriptions{convert_list_params_to_query_string(params)}"})
