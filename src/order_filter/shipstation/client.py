"""Async ShipStation HTTP client singleton.

Creates a cached httpx.AsyncClient configured with HTTP Basic credentials
(``api_key:client_secret``) and the outbound request timeout from
application settings. The instance is reused across scheduler ticks and
closed by the application lifespan on shutdown.
"""

import httpx

from order_filter.config import Settings, get_settings

_client: httpx.AsyncClient | None = None


def build_shipstation_client(settings: Settings) -> httpx.AsyncClient:
    """Build a new ShipStation client from the given settings."""
    return httpx.AsyncClient(
        auth=httpx.BasicAuth(settings.shipstation_api_key, settings.shipstation_client_secret),
        timeout=httpx.Timeout(settings.request_timeout_seconds),
    )


def get_shipstation_client() -> httpx.AsyncClient:
    """Return a cached ShipStation client instance.

    Creates the client on first call using credentials from settings.
    Subsequent calls return the cached instance.
    """
    global _client
    if _client is None:
        _client = build_shipstation_client(get_settings())
    return _client


async def close_client() -> None:
    """Close and drop the cached client, if any."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


def reset_client() -> None:
    """Reset the cached client instance. Used for testing."""
    global _client
    _client = None
