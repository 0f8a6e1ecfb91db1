"""Webhooks: alta, edición, borrado y lectura."""

from __future__ import annotations

from typing import Literal, TypedDict

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall, GetParams, ListParams, ResourceId
from lemonsqueezy.core.params import (
    convert_include_to_query_string,
    convert_list_params_to_query_string,
    pick_attributes,
    required_check,
    to_relationship,
)

WebhookEvent = Literal[
    "order_created",
    "order_refunded",
    "subscription_created",
    "subscription_updated",
    "subscription_cancelled",
    "subscription_resumed",
    "subscription_expired",
    "subscription_paused",
    "subscription_unpaused",
    "subscription_payment_success",
    "subscription_payment_failed",
    "subscription_payment_recovered",
    "subscription_payment_refunded",
    "license_key_created",
    "license_key_updated",
]


class UpdateWebhook(TypedDict, total=False):
    url: str
    events: list[WebhookEvent]
    secret: str


class NewWebhook(UpdateWebhook, total=False):
    test_mode: bool


def create_webhook(store_id: ResourceId, webhook: NewWebhook) -> ApiCall:
    required_check({"store_id": store_id})
    return fetch(
        {
            "path": "/v1/webhooks",
            "method": "POST",
            "body": {
                "data": {
                    "type": "webhooks",
                    "attributes": pick_attributes(webhook, ("url", "events", "secret", "test_mode")),
                    "relationships": {"store": to_relationship("stores", store_id)},
                }
            },
        }
    )


def get_webhook(webhook_id: ResourceId, params: GetParams | None = None) -> ApiCall:
    required_check({"webhook_id": webhook_id})
    include = (params or {}).get("include")
    return fetch({"path": f"/v1/webhooks/{webhook_id}{convert_include_to_query_string(include)}"})


def update_webhook(webhook_id: ResourceId, webhook: UpdateWebhook) -> ApiCall:
    required_check({"webhook_id": webhook_id})
    return fetch(
        {
            "path": f"/v1/webhooks/{webhook_id}",
            "method": "PATCH",
            "body": {
                "data": {
                    "id": str(webhook_id),
                    "type": "webhooks",
                    "attributes": pick_attributes(webhook, ("url", "events", "secret")),
                }
            },
        }
    )


def delete_webhook(webhook_id: ResourceId) -> ApiCall:
    required_check({"webhook_id": webhook_id})
    return fetch({"path": f"/v1/webhooks/{webhook_id}", "method": "DELETE"})


def list_webhooks(params: ListParams | None = None) -> ApiCall:
    """Filtros: `store_id`."""

    return fetch({"path": f"/v1/webhooks{convert_list_params_to_query_string(params)}"})
