"""Async Order Event Handler HTTP client singleton.

Same lazy-init pattern as shipstation/client.py, without credentials. One
client is shared by every concurrent dispatch task of a run.
"""

import httpx

from order_filter.config import Settings, get_settings

_client: httpx.AsyncClient | None = None


def build_handler_client(settings: Settings) -> httpx.AsyncClient:
    """Build a new handler client from the given settings."""
    return httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout_seconds))


def get_handler_client() -> httpx.AsyncClient:
    """Return a cached handler client instance.

    Creates the client on first call. Subsequent calls return the cached instance.
    """
    global _client
    if _client is None:
        _client = build_handler_client(get_settings())
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
