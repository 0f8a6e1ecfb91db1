"""Customers: alta, edición, archivado y lectura."""

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


class NewCustomer(TypedDict, total=False):
    name: str
    email: str
    city: str
    region: str
    country: str


class UpdateCustomer(NewCustomer, total=False):
    status: Literal["archived"]


def create_customer(store_id: ResourceId, customer: NewCustomer) -> ApiCall:
    """Alta de un customer en `store_id`. El API exige `name` y `email`."""

    required_check({"store_id": store_id})
    return fetch(
        {
            "path": "/v1/customers",
            "method": "POST",
            "body": {
                "data": {
                    "type": "customers",
                    "attributes": convert_keys(customer),
                    "relationships": {"store": to_relationship("stores", store_id)},
                }
            },
        }
    )


def update_customer(customer_id: ResourceId, customer: UpdateCustomer) -> ApiCall:
    required_check({"customer_id": customer_id})
    return fetch(
        {
            "path": f"/v1/customers/{customer_id}",
            "method": "PATCH",
            "body": {
                "data": {
                    "type": "customers",
                    "id": str(customer_id),
                    "attributes": convert_keys(customer),
                }
            },
        }
    )


def archive_customer(customer_id: ResourceId) -> ApiCall:
    required_check({"customer_id": customer_id})
    return fetch(
        {
            "path": f"/v1/customers/{customer_id}",
            "method": "PATCH",
            "body": {
                "data": {
                    "type": "customers",
                    "id": str(customer_id),
                    "attributes": {"status": "archived"},
                }
            },
        }
    )


def get_customer(customer_id: ResourceId, params: GetParams | None = None) -> ApiCall:
    required_check({"customer_id": customer_id})
    include = (params or {}).get("include")
    return fetch({"path": f"/v1/customers/{customer_id}{convert_include_to_query_string(include)}"})


def list_customers(params: ListParams | None = None) -> ApiCall:
    """Filtros: `store_id`, `email`. Orden: `created_at` descendente."""

    return fetch({"path": f"/v1/customers{convert_list_params_to_query_string(params)}"})
