"""Módulos por recurso del API.

Cada función valida los ids obligatorios (lanza `RequiredParameterError` al
llamarla) y devuelve la corrutina del pipeline: `await get_store(1)`.
"""

from lemonsqueezy.resources.checkouts import create_checkout, get_checkout, list_checkouts
from lemonsqueezy.resources.customers import (
    archive_customer,
    create_customer,
    get_customer,
    list_customers,
    update_customer,
)
from lemonsqueezy.resources.discount_redemptions import (
    get_discount_redemption,
    list_discount_redemptions,
)
from lemonsqueezy.resources.discounts import (
    create_discount,
    delete_discount,
    get_discount,
    list_discounts,
)
from lemonsqueezy.resources.files import get_file, list_files
from lemonsqueezy.resources.license import activate_license, deactivate_license, validate_license
from lemonsqueezy.resources.license_key_instances import (
    get_license_key_instance,
    list_license_key_instances,
)
from lemonsqueezy.resources.license_keys import get_license_key, list_license_keys, update_license_key
from lemonsqueezy.resources.order_items import get_order_item, list_order_items
from lemonsqueezy.resources.orders import (
    generate_order_invoice,
    get_order,
    issue_order_refund,
    list_orders,
)
from lemonsqueezy.resources.prices import get_price, list_prices
from lemonsqueezy.resources.products import get_product, list_products
from lemonsqueezy.resources.stores import get_store, list_stores
from lemonsqueezy.resources.subscription_invoices import (
    generate_subscription_invoice,
    get_subscription_invoice,
    issue_subscription_invoice_refund,
    list_subscription_invoices,
)
from lemonsqueezy.resources.subscription_items import (
    get_subscription_item,
    get_subscription_item_current_usage,
    list_subscription_items,
    update_subscription_item,
)
from lemonsqueezy.resources.subscriptions import (
    cancel_subscription,
    get_subscription,
    list_subscriptions,
    update_subscription,
)
from lemonsqueezy.resources.usage_records import (
    create_usage_record,
    get_usage_record,
    list_usage_records,
)
from lemonsqueezy.resources.users import get_authenticated_user
from lemonsqueezy.resources.variants import get_variant, list_variants
from lemonsqueezy.resources.webhooks import (
    create_webhook,
    delete_webhook,
    get_webhook,
    list_webhooks,
    update_webhook,
)

__all__ = [
    "activate_license",
    "archive_customer",
    "cancel_subscription",
    "create_checkout",
    "create_customer",
    "create_discount",
    "create_usage_record",
    "create_webhook",
    "deactivate_license",
    "delete_discount",
    "delete_webhook",
    "generate_order_invoice",
    "generate_subscription_invoice",
    "get_authenticated_user",
    "get_checkout",
    "get_customer",
    "get_discount",
    "get_discount_redemption",
    "get_file",
    "get_license_key",
    "get_license_key_instance",
    "get_order",
    "get_order_item",
    "get_price",
    "get_product",
    "get_store",
    "get_subscription",
    "get_subscription_invoice",
    "get_subscription_item",
    "get_subscription_item_current_usage",
    "get_usage_record",
    "get_variant",
    "get_webhook",
    "issue_order_refund",
    "issue_subscription_invoice_refund",
    "list_checkouts",
    "list_customers",
    "list_discount_redemptions",
    "list_discounts",
    "list_files",
    "list_license_key_instances",
    "list_license_keys",
    "list_order_items",
    "list_orders",
    "list_prices",
    "list_products",
    "list_stores",
    "list_subscription_invoices",
    "list_subscription_items",
    "list_subscriptions",
    "list_usage_records",
    "list_variants",
    "list_webhooks",
    "update_customer",
    "update_license_key",
    "update_subscription",
    "update_subscription_item",
    "update_webhook",
    "validate_license",
]
