"""
OrderDesk data transformation.
Foxy transaction payload -> OrderDesk order, inventory item validation,
and OrderDesk inventory item -> canonical item.

Order fields whose source value is absent are left out of the order body
rather than sent as null.
"""

from typing import Any

import structlog

from orderdesk_datastore.datastore.base import CanonicalItem
from orderdesk_datastore.datastore.exceptions import OrderMappingError

logger = structlog.get_logger()

SOURCE_NAME = "Foxy.io"
UPDATE_SOURCE = "Foxy-Orderdesk-Webhook"

# Rendering of an absent card expiration part inside cc_exp.
ABSENT_PART = "undefined"

# OrderDesk order field -> Foxy transaction field
ORDER_TOTALS = {
    "product_total": "total_item_price",
    "shipping_total": "total_shipping",
    "tax_total": "total_tax",
    "discount_total": "total_discount",
    "order_total": "total_order",
}

# OrderDesk order field -> Foxy payment field
PAYMENT_FIELDS = {
    "cc_number_masked": "cc_number_masked",
    "processor_response": "processor_response",
    "payment_type": "cc_type",
}

REQUIRED_ITEM_FIELDS = ("id", "name", "code")
NUMERIC_ITEM_FIELDS = ("price", "stock")


def _copy_field(target: dict[str, Any], target_key: str, source: dict[str, Any], source_key: str) -> None:
    if source_key in source:
        target[target_key] = source[source_key]


def _first_entry(embedded: dict[str, Any], relation: str) -> dict[str, Any]:
    entries = embedded.get(relation)
    if not entries:
        return {}
    return entries[0] or {}


def _render_part(payment: dict[str, Any], key: str) -> str:
    if key not in payment:
        return ABSENT_PART
    value = payment[key]
    if value is None:
        return "null"
    return str(value)


def _present_or_zero(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return bool(value) or value == 0


class OrderDeskTransformer:
    """Transform Foxy and OrderDesk data between vendor and canonical shapes."""

    @staticmethod
    def build_order(foxy_order: dict[str, Any]) -> dict[str, Any]:
        """
        Build an OrderDesk order from a Foxy transaction payload.

        Only the first shipment and first payment are used. The shipment is
        copied without its _links navigation metadata; the payload itself is
        never modified.

        Args:
            foxy_order: Foxy transaction with _embedded fx:customer, fx:shipments, fx:payments, fx:items

        Returns:
            OrderDesk order body

        Raises:
            OrderMappingError: If the payload has no embedded customer
        """
        embedded = foxy_order.get("_embedded") or {}
        fx_customer = embedded.get("fx:customer")
        if fx_customer is None:
            raise OrderMappingError(
                f"Order {foxy_order.get('id')} has no embedded fx:customer"
            )

        fx_shipment = _first_entry(embedded, "fx:shipments")
        fx_payment = _first_entry(embedded, "fx:payments")

        customer: dict[str, Any] = {}
        _copy_field(customer, "first_name", fx_customer, "first_name")
        _copy_field(customer, "last_name", fx_customer, "last_name")

        shipping = {key: value for key, value in fx_shipment.items() if key != "_links"}

        order: dict[str, Any] = {}
        _copy_field(order, "id", foxy_order, "id")
        _copy_field(order, "email", foxy_order, "customer_email")
        order["customer"] = customer
        order["shipping"] = shipping
        order["source_name"] = SOURCE_NAME
        _copy_field(order, "customer_id", fx_customer, "id")
        for order_key, foxy_key in ORDER_TOTALS.items():
            _copy_field(order, order_key, foxy_order, foxy_key)
        for order_key, payment_key in PAYMENT_FIELDS.items():
            _copy_field(order, order_key, fx_payment, payment_key)
        order["cc_exp"] = (
            f"{_render_part(fx_payment, 'cc_exp_month')}/{_render_part(fx_payment, 'cc_exp_year')}"
        )
        # Reads the order being built, which never carries a status.
        _copy_field(order, "payment_sattus", order, "status")
        _copy_field(order, "order_items", embedded, "fx:items")

        logger.debug(
            "Built OrderDesk order",
            order_id=order.get("id"),
            has_shipment=bool(shipping),
            has_payment=bool(fx_payment),
            item_count=len(order.get("order_items") or []),
        )
        return order

    @staticmethod
    def validate_inventory_item(item: dict[str, Any]) -> bool:
        """
        Check an inventory item has what OrderDesk needs for an update.

        id, name and code must be non-empty; price and stock must be set,
        where 0 counts as set.

        Returns:
            True if the item can be sent to OrderDesk
        """
        if not isinstance(item, dict):
            return False
        if not all(item.get(field) for field in REQUIRED_ITEM_FIELDS):
            return False
        return all(_present_or_zero(item.get(field)) for field in NUMERIC_ITEM_FIELDS)

    @staticmethod
    def find_invalid_inventory_items(items: list[dict[str, Any]]) -> list[dict[str, Any]]:
        """Return the items that fail validate_inventory_item, in input order."""
        return [item for item in items if not OrderDeskTransformer.validate_inventory_item(item)]

    @staticmethod
    def convert_to_canonical(item: dict[str, Any]) -> CanonicalItem:
        """
        Convert an OrderDesk inventory item into a canonical item.

        No field is renamed or dropped; inventory mirrors stock.
        """
        return {
            **item,
            "update_source": UPDATE_SOURCE,
            "inventory": item.get("stock"),
        }
