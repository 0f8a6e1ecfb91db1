"""Subscription invoices: lectura, factura descargable y reembolsos."""

from __future__ import annotations

from typing import TypedDict

from lemonsqueezy.adapters.fetch import fetch
from lemonsqueezy.core.domain.models import ApiCall, GetParams, ListParams, ResourceId
from lemonsqueezy.core.params import (
    convert_include_to_query_string,
    convert_keys,
    convert_list_params_to_query_string,
    convert_to_query_string,
    required_check,
)


class GenerateSubscriptionInvoiceParams(TypedDict, total=False):
    name: str
    address: str
    city: str
    state: str
    zip_code: str
    country: str
    notes: str
    locale: str


def get_subscription_invoice(
    subscription_invoice_id: ResourceId,
    params: GetParams | None = None,
) -> ApiCall:
    required_check({"subscription_invoice_id": subscription_invoice_id})
    include = (params or {}).get("include")
    return fetch(
        {
            "path": f"/v1/subscription-invoices/{subscription_invoice_id}"
            f"{convert_include_to_query_string(include)}"
        }
    )


def list_subscription_invoices(params: ListParams | None = None) -> ApiCall:
    """Filtros: `store_id`, `status`, `refunded`, `subscription_id`."""

    return fetch(
        {"path": f"/v1/subscription-invoices{convert_list_params_to_query_string(params)}"}
    )


def generate_subscription_invoice(
    subscription_invoice_id: ResourceId,
    params: GenerateSubscriptionInvoiceParams | None = None,
) -> ApiCall:
    required_check({"subscription_invoice_id": subscription_invoice_id})
    query = convert_to_query_string(params)
    return fetch(
        {
            "path": f"/v1/subscription-invoices/{subscription_invoice_id}/generate-invoice{query}",
            "method": "POST",
        }
    )


def issue_subscription_invoice_refund(subscription_invoice_id: ResourceId, amount: int) -> ApiCall:
    """Reembolso parcial de una factura de suscripción (`amount` en centavos)."""

    required_check({"subscription_invoice_id": subscription_invoice_id, "amount": amount})
    return fetch(
        {
            "path": f"/v1/subscription-invoices/{subscription_invoice_id}/refund",
            "method": "POST",
            "body": {
                "data": {
                    "type": "subscription-invoices",
                    "id": str(subscription_invoice_id),
                    "attributes": convert_keys({"amount": amount}),
                }
            },
        }
    )
