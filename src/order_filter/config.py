"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ShipStation (legacy camel-case Azure app setting names are accepted)
    shipstation_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("shipstation_api_key", "ShipStationApiKey"),
    )
    shipstation_client_secret: str = Field(
        default="",
        validation_alias=AliasChoices("shipstation_client_secret", "ShipStationClientSecret"),
    )
    shipstation_base_url: str = "https://ssapi.shipstation.com"

    # Order Event Handler
    order_event_handler_url: str = (
        "https://igniashopify.azurewebsites.net/ShipStation/OrderFilter/Shared/Handlers/OrderEventHandler.ashx"
    )

    # Outbound HTTP
    request_timeout_seconds: float = 300.0

    # Scheduler
    scheduler_secret: str = ""

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 8080


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
