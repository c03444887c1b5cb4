"""
Datastore registry.
Maps datastore provider names to their adapter classes and builds the configured one.
"""

import structlog

from orderdesk_datastore.config import Settings, settings as default_settings
from orderdesk_datastore.datastore.base import DataStoreBase
from orderdesk_datastore.datastore.exceptions import DataStoreConfigurationError

logger = structlog.get_logger()


class DataStoreRegistry:
    """Registry that manages and provides access to datastore integrations."""

    def __init__(self):
        """Initialize the datastore registry."""
        self._datastores: dict[str, type[DataStoreBase]] = {}
        self._load_datastores()

    def _load_datastores(self):
        """Load all available datastores."""
        try:
            from orderdesk_datastore.datastore.orderdesk.adapter import OrderDeskDataStore

            self.register("orderdesk", OrderDeskDataStore)
        except ImportError as e:
            logger.warning("Could not load OrderDesk datastore", error=str(e))

    def register(self, name: str, datastore_class: type[DataStoreBase]):
        """
        Register a datastore class.

        Args:
            name: Provider name used in settings.datastore_provider
            datastore_class: DataStoreBase subclass
        """
        name = name.lower()
        if name in self._datastores:
            logger.warning("Datastore already registered, replacing", datastore_name=name)
        self._datastores[name] = datastore_class
        logger.debug("Registered datastore", datastore_name=name)

    def get_datastore_class(self, name: str) -> type[DataStoreBase] | None:
        """Return the datastore class for a provider name, or None if unknown."""
        return self._datastores.get(name.lower())

    def list_available(self) -> list[str]:
        """List all available datastore provider names."""
        return list(self._datastores.keys())

    def create_datastore(self, settings: Settings | None = None, **kwargs) -> DataStoreBase:
        """
        Build the datastore named by settings.datastore_provider.

        Raises:
            DataStoreConfigurationError: If the provider is unknown or its credentials are missing
        """
        settings = settings or default_settings
        datastore_class = self.get_datastore_class(settings.datastore_provider)
        if datastore_class is None:
            raise DataStoreConfigurationError(
                f"Unknown datastore provider '{settings.datastore_provider}'. "
                f"Available datastores: {self.list_available()}"
            )
        return datastore_class(settings=settings, **kwargs)


# Global registry instance
datastore_registry = DataStoreRegistry()
