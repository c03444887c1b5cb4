"""
Pydantic models for OrderDesk credentials and inventory items.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class Credentials(BaseModel):
    """OrderDesk store credentials. Immutable once resolved."""

    model_config = ConfigDict(frozen=True)

    id: str
    key: str


class OrderDeskItem(BaseModel):
    """
    OrderDesk inventory item.
    id, date_added and date_updated are managed by OrderDesk.
    variation_list and metadata are ordered key => value lists, e.g. {"Size": "Large", "Color": "Red"}.
    Values are validated strictly so the batch reaches OrderDesk exactly as sent.
    """

    model_config = ConfigDict(extra="allow", strict=True)

    id: str | int | None = None  # Read-only, assigned by OrderDesk
    name: str | None = None
    price: int | float | None = 0.00
    quantity: int | None = 1
    weight: int | float | None = None
    code: str | None = None  # SKU, unique per catalog
    delivery_type: Literal["ship", "noship", "download", "future"] | None = "ship"
    category_code: str | None = None
    variation_list: dict[str, Any] | list[Any] | None = None
    metadata: dict[str, Any] | list[Any] | None = None
    stock: int | float | None = None
    date_added: str | None = None
    date_updated: str | None = None


class InventoryBatchUpdate(BaseModel):
    """Body of a batch inventory update request."""

    items: list[OrderDeskItem] = Field(default_factory=list)

    def to_payload(self) -> list[dict[str, Any]]:
        """Return items as plain dicts, keeping only the fields the caller sent."""
        return [item.model_dump(exclude_unset=True) for item in self.items]
