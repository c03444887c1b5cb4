"""
Datastore error taxonomy.
"""

from typing import Any


class DataStoreError(Exception):
    """Base exception for datastore integrations."""
    pass


class DataStoreConfigurationError(DataStoreError):
    """Raised when a datastore cannot be built from the current configuration."""
    pass


class OrderMappingError(DataStoreError):
    """Raised when an upstream order payload cannot be mapped to a vendor order."""
    pass


class InventoryValidationError(DataStoreError):
    """Raised when inventory items fail validation before a batch update."""

    def __init__(self, invalid_items: list[dict[str, Any]]):
        self.invalid_items = invalid_items
        labels = ", ".join(_describe(item) for item in invalid_items)
        super().__init__(f"Invalid inventory items for update: {labels}")


def _describe(item: Any) -> str:
    if not isinstance(item, dict):
        return repr(item)
    return str(item.get("code") or item.get("id") or item.get("name") or item)
