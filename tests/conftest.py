"""Shared test fixtures."""

from collections.abc import Callable, Iterable
from unittest.mock import AsyncMock

import httpx
import pytest
from fastapi.testclient import TestClient

from order_filter.app import app
from order_filter.config import Settings

SHIPSTATION_URL = "https://ssapi.example.com"
HANDLER_URL = "https://handler.example.com/OrderEventHandler.ashx"


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def settings() -> Settings:
    """Settings with fake credentials and endpoints, isolated from any .env file."""
    return Settings(
        _env_file=None,
        shipstation_api_key="test-key",
        shipstation_client_secret="test-secret",
        shipstation_base_url=SHIPSTATION_URL,
        order_event_handler_url=HANDLER_URL,
        scheduler_secret="scheduler-secret",
    )


@pytest.fixture
def make_handler_client() -> Callable[..., AsyncMock]:
    """Factory for a mocked handler client.

    Pages in ``status_failures`` answer 500; pages in ``network_failures``
    raise ConnectError. Everything else answers 200.
    """

    def _make(
        status_failures: Iterable[int] = (),
        network_failures: Iterable[int] = (),
    ) -> AsyncMock:
        status_failures = set(status_failures)
        network_failures = set(network_failures)

        async def post(url: str, json: dict | None = None, **kwargs) -> httpx.Response:
            page = int(httpx.URL(json["resource_url"]).params["page"])
            request = httpx.Request("POST", url)
            if page in network_failures:
                raise httpx.ConnectError("connection refused", request=request)
            status = 500 if page in status_failures else 200
            return httpx.Response(status, request=request)

        handler_client = AsyncMock()
        handler_client.post = AsyncMock(side_effect=post)
        return handler_client

    return _make


def make_shipstation_client(body: str, status_code: int = 200) -> AsyncMock:
    """Build a mocked ShipStation client whose GET returns ``body``."""
    shipstation_client = AsyncMock()
    shipstation_client.get = AsyncMock(
        return_value=httpx.Response(
            status_code,
            text=body,
            request=httpx.Request("GET", f"{SHIPSTATION_URL}/orders"),
        )
    )
    return shipstation_client


@pytest.fixture
def shipstation_client_for() -> Callable[..., AsyncMock]:
    """Factory fixture wrapping make_shipstation_client."""
    return make_shipstation_client
