"""Concurrent notification dispatch with incremental draining.

One notification is posted per ShipStation page. All posts are submitted as
asyncio tasks up front, then drained one completion at a time: wait for the
first pending task to finish, drop it from the pending set, log its outcome,
repeat until nothing is pending. Failures are captured per task and never
stop the drain; nothing is retried.
"""

import asyncio
import logging

import httpx

from order_filter.models.notification import NotificationPayload
from order_filter.models.run import DispatchReport
from order_filter.shipstation.orders import build_orders_url

logger = logging.getLogger(__name__)


class DispatchError(Exception):
    """A single page notification could not be delivered."""

    def __init__(self, page: int, resource_url: str, cause: Exception):
        super().__init__(f"Dispatch failed for page {page}: {cause}")
        self.page = page
        self.resource_url = resource_url
        self.cause = cause


def build_notification(base_url: str, page: int) -> NotificationPayload:
    """Build the handler notification for one ShipStation page."""
    return NotificationPayload(resource_url=build_orders_url(base_url, page=page))


async def dispatch_notification(
    client: httpx.AsyncClient,
    handler_url: str,
    page: int,
    payload: NotificationPayload,
) -> int:
    """POST one notification to the handler and return its page number.

    The response body is ignored; only success matters. Non-2xx responses,
    transport errors and serialization faults are raised as DispatchError.
    """
    try:
        response = await client.post(handler_url, json=payload.model_dump(mode="json"))
        response.raise_for_status()
    except (httpx.HTTPError, ValueError) as exc:
        raise DispatchError(page, payload.resource_url, exc) from exc
    return page


async def dispatch_pages(
    client: httpx.AsyncClient,
    handler_url: str,
    base_url: str,
    page_count: int,
) -> DispatchReport:
    """Fan out one notification per page and drain until every task completes.

    Pages are submitted from ``page_count`` down to 1. Completion order is
    arbitrary. There is no cap on in-flight requests: the fan-out equals
    ``page_count``.
    """
    report = DispatchReport()
    pending: dict[asyncio.Task[int], int] = {}

    for page in range(page_count, 0, -1):
        payload = build_notification(base_url, page)
        task = asyncio.create_task(dispatch_notification(client, handler_url, page, payload))
        pending[task] = page

    report.submitted = len(pending)
    logger.info("Dispatch tasks submitted", extra={"submitted": report.submitted})

    while pending:
        done, _ = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
        for task in done:
            page = pending.pop(task)
            report.completed += 1
            exc = task.exception()
            if exc is None:
                logger.debug("Dispatched page %d", page)
                continue

            report.failed += 1
            report.failed_pages.append(page)
            report.last_error = str(exc)
            if isinstance(exc, DispatchError):
                logger.warning(
                    "Dispatch failed",
                    extra={"page": page, "resource_url": exc.resource_url, "error": str(exc.cause)},
                )
            else:
                logger.warning("Dispatch task raised unexpectedly", extra={"page": page, "error": str(exc)})

    return report
