"""Usage records (facturación por uso)."""

from __future__ import annotations

from typing import Literal, TypedDict

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall, GetParams, ListParams, ResourceId
from lemonsqueezy.core.params import (
    convert_include_to_query_string,
    convert_keys,
    convert_list_params_to_query_string,
    required_check,
    to_relationship,
)


class _NewUsageRecordRequired(TypedDict):
    quantity: int
    subscription_item_id: ResourceId


class NewUsageRecord(_NewUsageRecordRequired, total=False):
    action: Literal["increment", "set"]


def get_usage_record(usage_record_id: ResourceId, params: GetParams | None = None) -> ApiCall:
    required_check({"usage_record_id": usage_record_id})
    include = (params or {}).get("include")
    return fetch(
        {"path": f"/v1/usage-records/{usage_record_id}{convert_include_to_query_string(include)}"}
    )


def list_usage_records(params: ListParams | None = None) -> ApiCall:
    """Filtros: `subscription_item_id`."""

    return fetch({"path": f"/v1/usage-records{convert_list_params_to_query_string(params)}"})


def create_usage_record(usage_record: NewUsageRecord) -> ApiCall:
    record = convert_keys(usage_record)
    subscription_item_id = record.get("subscription_item_id")
    required_check({"subscription_item_id": subscription_item_id})
    return fetch(
        {
            "path": "/v1/usage-records",
            "method": "POST",
            "body": {
                "data": {
                    "type": "usage-records",
                    "attributes": {
                        "quantity": record.get("quantity"),
                        "action": record.get("action", "increment"),
                    },
                    "relationships": {
                        "subscription-item": to_relationship(
                            "subscription-items", subscription_item_id
                        ),
                    },
                }
            },
        }
    )
