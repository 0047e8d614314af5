"""Order Event Handler output: notification fan-out and drain."""

from order_filter.handler.client import close_client, get_handler_client, reset_client
from order_filter.handler.dispatcher import (
    DispatchError,
    build_notification,
    dispatch_notification,
    dispatch_pages,
)

__all__ = [
    "build_notification",
    "close_client",
    "dispatch_notification",
    "dispatch_pages",
    "DispatchError",
    "get_handler_client",
    "reset_client",
]
