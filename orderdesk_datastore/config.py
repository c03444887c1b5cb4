"""
Configuration management using Pydantic settings.
Loads environment variables for the OrderDesk datastore and Foxy webhooks.
"""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    # Datastore selection
    datastore_provider: str = "orderdesk"

    # Combined credentials string: "Store ID 12345 API Key abcDEF123"
    datastore_credentials: str = ""

    # OrderDesk discrete credentials (used when the combined string is absent or malformed)
    orderdesk_store_id: str = ""
    orderdesk_api_key: str = ""

    # OrderDesk API location
    orderdesk_domain: str = "app.orderdesk.me"
    orderdesk_api_prefix: str = "api/v2/"

    # Foxy webhook verification
    foxy_webhook_encryption_key: str = ""  # Optional for testing, required for signature verification

    # HTTP transport
    http_timeout_seconds: float = 30.0

    # Application Configuration
    app_environment: str = "development"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()
