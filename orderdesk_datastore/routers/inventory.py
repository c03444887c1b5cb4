"""
API router for datastore inventory.
Fetches items as canonical items for cart validation and forwards batch updates.
"""

from typing import Any

import httpx
import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from orderdesk_datastore.datastore.base import DataStoreBase
from orderdesk_datastore.datastore.exceptions import InventoryValidationError
from orderdesk_datastore.datastore.orderdesk.models import InventoryBatchUpdate
from orderdesk_datastore.routers.dependencies import get_datastore

logger = structlog.get_logger()

router = APIRouter(prefix="/inventory-items", tags=["inventory"])


@router.get("")
async def get_inventory_items(
    codes: str = Query(..., description="Comma separated item codes"),
    datastore: DataStoreBase = Depends(get_datastore),
) -> list[dict[str, Any]]:
    """Fetch inventory items by code, converted to canonical items."""
    code_list = [code.strip() for code in codes.split(",") if code.strip()]
    try:
        items = await datastore.fetch_inventory_items(code_list)
    except httpx.HTTPStatusError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Datastore API error: {e.response.status_code}",
        )
    return [datastore.convert_to_canonical(item) for item in items]


@router.put("")
async def update_inventory_items(
    update: InventoryBatchUpdate,
    datastore: DataStoreBase = Depends(get_datastore),
):
    """Update inventory items in one batch. Rejects the whole batch if any item is invalid."""
    try:
        return await datastore.update_inventory_items(update.to_payload())
    except InventoryValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": str(e), "invalid_items": e.invalid_items},
        )
    except httpx.HTTPStatusError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Datastore API error: {e.response.status_code}",
        )
