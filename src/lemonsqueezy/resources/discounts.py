"""Discounts: alta, borrado y lectura."""

from __future__ import annotations

from typing import Literal, TypedDict

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall, GetParams, ListParams, ResourceId
from lemonsqueezy.core.params import (
    convert_include_to_query_string,
    convert_keys,
    convert_list_params_to_query_string,
    generate_discount,
    pick_attributes,
    required_check,
    to_relationship,
)

_ATTRIBUTES = (
    "name",
    "amount",
    "amount_type",
    "code",
    "is_limited_redemptions",
    "is_limited_to_products",
    "max_redemptions",
    "starts_at",
    "expires_at",
    "duration",
    "duration_in_months",
    "test_mode",
)


class _NewDiscountRequired(TypedDict):
    store_id: ResourceId
    name: str
    amount: int
    amount_type: Literal["percent", "fixed"]


class NewDiscount(_NewDiscountRequired, total=False):
    variant_ids: list[ResourceId]
    code: str
    is_limited_to_products: bool
    is_limited_redemptions: bool
    max_redemptions: int
    starts_at: str | None
    expires_at: str | None
    duration: Literal["once", "repeating", "forever"]
    duration_in_months: int
    test_mode: bool


def create_discount(discount: NewDiscount) -> ApiCall:
    """Alta de un descuento.

    Sin `code` se sugiere uno derivado del timestamp (ver `generate_discount`);
    no se garantiza que sea único.
    """

    source = convert_keys(discount)
    store_id = source.get("store_id")
    required_check({"store_id": store_id})

    attributes = pick_attributes(
        source,
        _ATTRIBUTES,
        defaults={
            "code": generate_discount(),
            "is_limited_to_products": False,
            "is_limited_redemptions": False,
            "max_redemptions": 0,
            "starts_at": None,
            "expires_at": None,
            "duration": "once",
            "duration_in_months": 1,
        },
    )
    variant_ids = source.get("variant_ids") or []

    return fetch(
        {
            "path": "/v1/discounts",
            "method": "POST",
            "body": {
                "data": {
                    "type": "discounts",
                    "attributes": attributes,
                    "relationships": {
                        "store": to_relationship("stores", store_id),
                        "variants": {
                            "data": [
                                {"type": "variants", "id": str(variant_id)}
                                for variant_id in variant_ids
                            ]
                        },
                    },
                }
            },
        }
    )


def list_discounts(params: ListParams | None = None) -> ApiCall:
    """Filtros: `store_id`."""

    return fetch({"path": f"/v1/discounts{convert_list_params_to_query_string(params)}"})


def get_discount(discount_id: ResourceId, params: GetParams | None = None) -> ApiCall:
    required_check({"discount_id": discount_id})
    include = (params or {}).get("include")
    return fetch({"path": f"/v1/discounts/{discount_id}{convert_include_to_query_string(include)}"})


def delete_discount(discount_id: ResourceId) -> ApiCall:
    """En éxito el envelope trae `data=None` (204 sin cuerpo)."""

    required_check({"discount_id": discount_id})
    return fetch({"path": f"/v1/discounts/{discount_id}", "method": "DELETE"})
