"""ShipStation input: orders metadata fetch and page-count resolution."""

from order_filter.shipstation.client import close_client, get_shipstation_client, reset_client
from order_filter.shipstation.models import OrdersMetadata
from order_filter.shipstation.orders import build_orders_url, fetch_orders_metadata
from order_filter.shipstation.pages import (
    PAGE_SIZE,
    MetadataParseError,
    compute_page_count,
    resolve_page_count,
)

__all__ = [
    "build_orders_url",
    "close_client",
    "compute_page_count",
    "fetch_orders_metadata",
    "get_shipstation_client",
    "MetadataParseError",
    "OrdersMetadata",
    "PAGE_SIZE",
    "reset_client",
    "resolve_page_count",
]
