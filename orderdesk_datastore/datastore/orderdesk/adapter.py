"""
OrderDesk datastore adapter.
Implements DataStoreBase for OrderDesk inventory and order creation.
"""

from typing import Any

import httpx
import structlog

from orderdesk_datastore.config import Settings, settings as default_settings
from orderdesk_datastore.datastore.base import CanonicalItem, DataStoreBase
from orderdesk_datastore.datastore.exceptions import InventoryValidationError
from orderdesk_datastore.datastore.orderdesk.api_client import OrderDeskAPIClient
from orderdesk_datastore.datastore.orderdesk.credentials import resolve_credentials
from orderdesk_datastore.datastore.orderdesk.models import Credentials
from orderdesk_datastore.datastore.orderdesk.transformer import OrderDeskTransformer

logger = structlog.get_logger()


class OrderDeskDataStore(DataStoreBase):
    """OrderDesk datastore implementing DataStoreBase."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize the OrderDesk datastore. Credentials are resolved once, here.

        Args:
            settings: Settings to read credentials and API location from (defaults to global settings)
            transport: Optional httpx transport (used by tests)

        Raises:
            DataStoreConfigurationError: If the store id or API key cannot be resolved
        """
        self.settings = settings or default_settings
        self.transformer = OrderDeskTransformer()
        self.credentials: Credentials | None = None
        self.set_credentials()
        self.client = OrderDeskAPIClient(
            credentials=self.credentials,
            domain=self.settings.orderdesk_domain,
            api_prefix=self.settings.orderdesk_api_prefix,
            timeout=self.settings.http_timeout_seconds,
            transport=transport,
        )

    def get_name(self) -> str:
        """Return datastore name."""
        return "orderdesk"

    def set_credentials(self) -> None:
        """Resolve OrderDesk credentials from settings."""
        self.credentials = resolve_credentials(self.settings)

    def get_default_header(self) -> dict[str, str]:
        """Return the headers needed to issue requests to OrderDesk."""
        return self.client.get_default_header()

    def build_endpoint(self, path: str) -> str:
        """Return the full URL of an OrderDesk endpoint path."""
        return self.client.build_endpoint(path)

    async def fetch_inventory_items(self, codes: list[str]) -> list[dict[str, Any]]:
        """
        Fetch inventory items from OrderDesk.

        GET inventory-items?code=SKU1,SKU2

        Args:
            codes: Item codes to fetch

        Returns:
            Items retrieved from OrderDesk, empty if none matched
        """
        data = await self.client.get("inventory-items", params={"code": ",".join(codes)})
        items = (data.get("inventory_items") if isinstance(data, dict) else None) or []
        logger.info("Fetched OrderDesk inventory items", requested=len(codes), found=len(items))
        return items

    async def update_inventory_items(self, items: list[dict[str, Any]]) -> Any:
        """
        Update inventory items in OrderDesk with one batch request.

        PUT batch-inventory-items

        Args:
            items: Inventory items to update

        Returns:
            Parsed OrderDesk response

        Raises:
            InventoryValidationError: If any item is invalid. Nothing is sent in that case.
        """
        invalid = self.transformer.find_invalid_inventory_items(items)
        if invalid:
            logger.warning(
                "Rejected OrderDesk inventory update",
                item_count=len(items),
                invalid_count=len(invalid),
            )
            raise InventoryValidationError(invalid)

        result = await self.client.put("batch-inventory-items", json_body=items)
        logger.info("Updated OrderDesk inventory items", item_count=len(items))
        return result

    async def create_order(self, order: dict[str, Any]) -> Any:
        """
        Create an order in OrderDesk from a Foxy transaction.

        POST orders

        Args:
            order: Foxy transaction payload

        Returns:
            Parsed OrderDesk response

        Raises:
            OrderMappingError: If the transaction has no embedded customer
        """
        body = self.transformer.build_order(order)
        result = await self.client.post("orders", json_body=body)
        logger.info("Created OrderDesk order", order_id=body.get("id"))
        return result

    def convert_to_canonical(self, item: dict[str, Any]) -> CanonicalItem:
        """Convert an OrderDesk inventory item into a canonical item."""
        return self.transformer.convert_to_canonical(item)

    def validate_inventory_item(self, item: dict[str, Any]) -> bool:
        """Return True if the item can be sent in a batch update."""
        return self.transformer.validate_inventory_item(item)

    async def close(self) -> None:
        """Close the OrderDesk HTTP client."""
        await self.client.close()
