"""
Foxy webhook router.
Receives Foxy transaction webhooks and creates the matching order in the datastore.
"""

import hashlib
import hmac
import json
from typing import Callable, Optional

import httpx
import structlog
from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

from orderdesk_datastore.config import settings
from orderdesk_datastore.datastore.base import DataStoreBase
from orderdesk_datastore.datastore.exceptions import OrderMappingError
from orderdesk_datastore.routers.dependencies import get_datastore_factory

logger = structlog.get_logger()

router = APIRouter(prefix="/webhooks", tags=["webhooks"])

ORDER_EVENTS = {"transaction/created"}


def verify_foxy_signature(payload: bytes, signature: Optional[str], key: str) -> bool:
    """
    Verify a Foxy webhook signature (hex HMAC-SHA256 of the raw body).

    Args:
        payload: Raw request body bytes
        signature: Foxy-Webhook-Signature header value
        key: Foxy webhook encryption key

    Returns:
        True if signature is valid, False otherwise
    """
    if not signature:
        return False

    calculated = hmac.new(key.encode("utf-8"), payload, hashlib.sha256).hexdigest()
    return hmac.compare_digest(calculated, signature)


@router.post("/foxy")
async def handle_foxy_webhook(
    request: Request,
    foxy_webhook_event: Optional[str] = Header(None, alias="Foxy-Webhook-Event"),
    foxy_webhook_signature: Optional[str] = Header(None, alias="Foxy-Webhook-Signature"),
    datastore_factory: Callable[[], DataStoreBase] = Depends(get_datastore_factory),
):
    """
    Handle a Foxy webhook.

    transaction/created events become datastore orders; other events are acknowledged and ignored.
    """
    body_bytes = await request.body()

    if settings.foxy_webhook_encryption_key and not verify_foxy_signature(
        body_bytes, foxy_webhook_signature, settings.foxy_webhook_encryption_key
    ):
        logger.warning("Invalid webhook signature", event_type=foxy_webhook_event)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid webhook signature",
        )

    if foxy_webhook_event not in ORDER_EVENTS:
        logger.info("Ignoring Foxy webhook", event_type=foxy_webhook_event)
        return {"status": "ignored", "event_type": foxy_webhook_event}

    try:
        payload = json.loads(body_bytes.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid JSON payload: {str(e)}",
        )
    if not isinstance(payload, dict):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Transaction payload must be a JSON object",
        )

    try:
        async with datastore_factory() as datastore:
            logger.info(
                "Processing webhook",
                datastore=datastore.get_name(),
                event_type=foxy_webhook_event,
                transaction_id=payload.get("id"),
            )
            result = await datastore.create_order(payload)
    except OrderMappingError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )
    except httpx.HTTPStatusError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Datastore API error: {e.response.status_code}",
        )

    return {"status": "created", "event_type": foxy_webhook_event, "result": result}
