"""Checkouts: URLs de compra personalizadas."""

from __future__ import annotations

from typing import Any, TypedDict

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall, GetParams, ListParams, ResourceId
from lemonsqueezy.core.params import (
    UNSET,
    convert_include_to_query_string,
    convert_keys,
    convert_list_params_to_query_string,
    required_check,
    to_relationship,
)


class ProductOptions(TypedDict, total=False):
    name: str
    description: str
    media: list[str]
    redirect_url: str
    receipt_button_text: str
    receipt_link_url: str
    receipt_thank_you_note: str
    enabled_variants: list[int]
    confirmation_title: str
    confirmation_message: str
    confirmation_button_text: str


class CheckoutOptions(TypedDict, total=False):
    embed: bool
    media: bool
    logo: bool
    desc: bool
    discount: bool
    skip_trial: bool
    quantity: int
    dark: bool
    subscription_preview: bool
    button_color: str


class VariantQuantity(TypedDict):
    variant_id: int
    quantity: int


class CheckoutData(TypedDict, total=False):
    """`custom` vuelve en los webhooks y en el meta de la orden."""

    email: str
    name: str
    billing_address: dict[str, str]
    tax_number: str
    discount_code: str
    custom: dict[str, Any]
    variant_quantities: list[VariantQuantity]


class NewCheckout(TypedDict, total=False):
    custom_price: int | None
    product_options: ProductOptions
    checkout_options: CheckoutOptions
    checkout_data: CheckoutData
    expires_at: str | None
    preview: bool
    test_mode: bool


def create_checkout(
    store_id: ResourceId,
    variant_id: ResourceId,
    checkout: NewCheckout | None = None,
) -> ApiCall:
    required_check({"store_id": store_id, "variant_id": variant_id})

    source = convert_keys(checkout or {})
    checkout_data = dict(source.get("checkout_data") or {})
    variant_quantities = checkout_data.get("variant_quantities")
    # convert_keys no entra en listas: cada item se convierte aparte.
    checkout_data["variant_quantities"] = (
        [convert_keys(item) for item in variant_quantities] if variant_quantities else UNSET
    )

    attributes = convert_keys(
        {
            "custom_price": source.get("custom_price", UNSET),
            "expires_at": source.get("expires_at", UNSET),
            "preview": source.get("preview", UNSET),
            "test_mode": source.get("test_mode", UNSET),
            "product_options": source.get("product_options", UNSET),
            "checkout_options": source.get("checkout_options", UNSET),
            "checkout_data": checkout_data,
        }
    )

    return fetch(
        {
            "path": "/v1/checkouts",
            "method": "POST",
            "body": {
                "data": {
                    "type": "checkouts",
                    "attributes": attributes,
                    "relationships": {
                        "store": to_relationship("stores", store_id),
                        "variant": to_relationship("variants", variant_id),
                    },
                }
            },
        }
    )


def get_checkout(checkout_id: ResourceId, params: GetParams | None = None) -> ApiCall:
    required_check({"checkout_id": checkout_id})
    include = (params or {}).get("include")
    return fetch({"path": f"/v1/checkouts/{checkout_id}{convert_include_to_query_string(include)}"})


def list_checkouts(params: ListParams | None = None) -> ApiCall:
    """Filtros: `store_id`, `variant_id`."""

    return fetch({"path": f"/v1/checkouts{convert_list_params_to_query_string(params)}"})
