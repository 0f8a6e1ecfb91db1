"""Orders: lectura, facturas y reembolsos."""

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


class GenerateOrderInvoiceParams(TypedDict, total=False):
    name: str
    address: str
    city: str
    state: str
    zip_code: str
    country: str
    notes: str
    locale: str


def get_order(order_id: ResourceId, params: GetParams | None = None) -> ApiCall:
    required_check({"order_id": order_id})
    include = (params or {}).get("include")
    return fetch({"path": f"/v1/orders/{order_id}{convert_include_to_query_string(include)}"})


def list_orders(params: ListParams | None = None) -> ApiCall:
    """Filtros: `store_id`, `user_email`. Orden: `created_at` descendente."""

    return fetch({"path": f"/v1/orders{convert_list_params_to_query_string(params)}"})


def generate_order_invoice(order_id: ResourceId, params: GenerateOrderInvoiceParams) -> ApiCall:
    """Genera una factura; los datos de facturación viajan en el query string.

    La respuesta trae un link firmado en `meta.urls.download_invoice`.
    """

    required_check({"order_id": order_id})
    query = convert_to_query_string(params)
    return fetch(
        {
            "path": f"/v1/orders/{order_id}/generate-invoice{query}",
            "method": "POST",
        }
    )


def issue_order_refund(order_id: ResourceId, amount: int) -> ApiCall:
    """Reembolso parcial. `amount` en centavos, menor que el total de la orden."""

    required_check({"order_id": order_id, "amount": amount})
    return fetch(
        {
            "path": f"/v1/orders/{order_id}/refund",
            "method": "POST",
            "body": {
                "data": {
                    "type": "orders",
                    "id": str(order_id),
                    "attributes": convert_keys({"amount": amount}),
                }
            },
        }
    )
