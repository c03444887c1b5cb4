"""
Shared FastAPI dependencies.
"""

from typing import AsyncIterator, Callable

import structlog
from fastapi import HTTPException, status

from orderdesk_datastore.config import settings
from orderdesk_datastore.datastore.base import DataStoreBase
from orderdesk_datastore.datastore.exceptions import DataStoreConfigurationError
from orderdesk_datastore.datastore.registry import datastore_registry

logger = structlog.get_logger()


def build_datastore() -> DataStoreBase:
    """Build the configured datastore; a configuration error becomes a 503."""
    try:
        return datastore_registry.create_datastore(settings)
    except DataStoreConfigurationError as e:
        logger.error("Datastore is not configured", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )


def get_datastore_factory() -> Callable[[], DataStoreBase]:
    """Return the datastore builder, for routes that only need a datastore on some paths."""
    return build_datastore


async def get_datastore() -> AsyncIterator[DataStoreBase]:
    """Build the configured datastore for one request and close it afterwards."""
    async with build_datastore() as datastore:
        yield datastore
