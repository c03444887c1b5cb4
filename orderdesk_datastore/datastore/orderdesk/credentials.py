"""
OrderDesk credential resolution.
Credentials come from one of two configuration shapes, tried in order:
a combined "Store ID 12345 API Key abc123" string, then the discrete store id / API key fields.
"""

import re

import structlog

from orderdesk_datastore.config import Settings
from orderdesk_datastore.datastore.exceptions import DataStoreConfigurationError
from orderdesk_datastore.datastore.orderdesk.models import Credentials

logger = structlog.get_logger()

COMBINED_CREDENTIALS_PATTERN = re.compile(r"Store ID (\d{5}) API Key ([A-Za-z0-9]+)\Z")


class CombinedStringResolver:
    """Reads store id and API key from the combined datastore credentials string."""

    source = "datastore_credentials"

    def resolve(self, settings: Settings) -> tuple[str, str] | None:
        raw = settings.datastore_credentials
        if not raw:
            return None
        matched = COMBINED_CREDENTIALS_PATTERN.search(raw)
        if not matched or len(matched.groups()) != 2:
            return None
        return matched.group(1), matched.group(2)


class DiscreteFieldsResolver:
    """Reads store id and API key from their own settings fields."""

    source = "orderdesk_store_id/orderdesk_api_key"

    def resolve(self, settings: Settings) -> tuple[str, str] | None:
        return settings.orderdesk_store_id, settings.orderdesk_api_key


DEFAULT_RESOLVERS = (CombinedStringResolver(), DiscreteFieldsResolver())


def resolve_credentials(settings: Settings, resolvers=DEFAULT_RESOLVERS) -> Credentials:
    """
    Resolve OrderDesk credentials from settings.

    The first resolver that recognises its configuration shape wins; a malformed
    combined string falls through to the discrete fields.

    Args:
        settings: Application settings
        resolvers: Ordered resolver strategies

    Returns:
        Resolved credentials

    Raises:
        DataStoreConfigurationError: If the store id or API key is missing
    """
    store_id, api_key = "", ""
    for resolver in resolvers:
        resolved = resolver.resolve(settings)
        if resolved is not None:
            store_id, api_key = resolved
            logger.debug("Resolved OrderDesk credentials", source=resolver.source)
            break

    if not store_id or not api_key:
        raise DataStoreConfigurationError(
            "Environment variables for OrderDesk store id and/or API key are missing."
        )
    return Credentials(id=store_id, key=api_key)
