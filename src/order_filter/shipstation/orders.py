"""ShipStation orders listing URLs and the metadata request."""

import logging

import httpx

logger = logging.getLogger(__name__)

# Unshipped orders, newest first
_LISTING_QUERY = "orderStatus=awaiting_shipment&sortDir=DESC"


def build_orders_url(base_url: str, page: int | None = None) -> str:
    """Build the awaiting-shipment orders listing URL.

    Without ``page`` the URL requests a single-item page (``pageSize=1``), which
    is the cheapest way to read the ``total`` count. With ``page`` it addresses
    that 1-based page at the default page size.
    """
    selector = "pageSize=1" if page is None else f"page={page}"
    return f"{base_url.rstrip('/')}/orders?{_LISTING_QUERY}&{selector}"


async def fetch_orders_metadata(client: httpx.AsyncClient, base_url: str) -> str:
    """GET the orders metadata and return the raw response body.

    The HTTP status is logged but not acted on; the caller parses whatever
    came back. Transport errors (httpx.HTTPError) propagate.
    """
    url = build_orders_url(base_url)
    response = await client.get(url)
    logger.info(
        "Fetched ShipStation orders metadata",
        extra={"status_code": response.status_code, "resource_url": url},
    )
    return response.text
