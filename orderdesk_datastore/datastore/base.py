"""
Base datastore interface.
All datastore integrations must implement this interface to be usable by the
webhook and cart validation layers.
"""

from abc import ABC, abstractmethod
from typing import Any

# Canonical item consumed by the cart validator. Vendor fields pass through
# verbatim; every integration adds update_source and inventory.
CanonicalItem = dict[str, Any]


class DataStoreBase(ABC):
    """Base class that all datastore integrations must implement."""

    @abstractmethod
    def get_name(self) -> str:
        """
        Return datastore name.

        Returns:
            Datastore name (e.g., 'orderdesk')
        """
        pass

    @abstractmethod
    def set_credentials(self) -> None:
        """
        Resolve vendor credentials from configuration and store them on the instance.

        Raises:
            DataStoreConfigurationError: If credentials cannot be resolved
        """
        pass

    @abstractmethod
    def get_default_header(self) -> dict[str, str]:
        """Return the headers needed to authenticate a request to the vendor."""
        pass

    @abstractmethod
    def build_endpoint(self, path: str) -> str:
        """Return the full URL of a vendor endpoint path."""
        pass

    @abstractmethod
    async def fetch_inventory_items(self, codes: list[str]) -> list[dict[str, Any]]:
        """
        Fetch inventory items from the vendor.

        Args:
            codes: Item codes (SKUs) to fetch

        Returns:
            Vendor inventory items
        """
        pass

    @abstractmethod
    async def update_inventory_items(self, items: list[dict[str, Any]]) -> Any:
        """
        Update inventory items in the vendor.

        Args:
            items: Vendor inventory items to update

        Returns:
            Parsed vendor response
        """
        pass

    @abstractmethod
    async def create_order(self, order: dict[str, Any]) -> Any:
        """
        Create an order in the vendor from an upstream transaction payload.

        Args:
            order: Upstream order payload

        Returns:
            Parsed vendor response
        """
        pass

    @abstractmethod
    def convert_to_canonical(self, item: dict[str, Any]) -> CanonicalItem:
        """Convert a vendor inventory item into a canonical item."""
        pass

    async def close(self) -> None:
        """Release transport resources. Override if the integration holds any."""
        return None

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
