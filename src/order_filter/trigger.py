"""Order filter run: count awaiting-shipment pages and notify the handler.

One invocation per scheduler tick. Fetches the ShipStation orders metadata,
derives the page count, fans out one handler notification per page and
drains them. Every failure path ends with a logged error and a summary;
nothing is raised to the scheduler.
"""

import logging
from datetime import datetime, timezone

import httpx

from order_filter.config import Settings, get_settings
from order_filter.handler.client import get_handler_client
from order_filter.handler.dispatcher import dispatch_pages
from order_filter.models.run import RunStatus, RunSummary
from order_filter.shipstation.client import get_shipstation_client
from order_filter.shipstation.orders import fetch_orders_metadata
from order_filter.shipstation.pages import MetadataParseError, resolve_page_count

logger = logging.getLogger(__name__)


async def run_order_filter(
    settings: Settings | None = None,
    shipstation_client: httpx.AsyncClient | None = None,
    handler_client: httpx.AsyncClient | None = None,
) -> RunSummary:
    """Run one order filter pass.

    Args:
        settings: Application settings; defaults to the cached settings.
        shipstation_client: Client for the metadata GET; defaults to the shared instance.
        handler_client: Client for the handler POSTs; defaults to the shared instance.

    Returns:
        RunSummary describing what was dispatched and what failed.
    """
    settings = settings or get_settings()
    shipstation_client = shipstation_client or get_shipstation_client()
    handler_client = handler_client or get_handler_client()

    logger.info(
        "Order filter trigger executed",
        extra={"tick": datetime.now(timezone.utc).isoformat()},
    )

    # Metadata: how many orders are waiting
    try:
        body = await fetch_orders_metadata(shipstation_client, settings.shipstation_base_url)
    except httpx.HTTPError as e:
        logger.error("Failed to fetch ShipStation orders metadata", extra={"error": str(e)})
        return RunSummary(status=RunStatus.ABORTED, error=f"Failed to fetch orders metadata: {e}")

    try:
        page_count = resolve_page_count(body)
    except MetadataParseError as e:
        logger.error("ShipStation orders metadata parse error", extra={"error": str(e)})
        return RunSummary(status=RunStatus.ABORTED, error=str(e))

    logger.info("Pages to dispatch", extra={"pages": page_count})

    # Fan out and drain
    report = await dispatch_pages(
        handler_client,
        settings.order_event_handler_url,
        settings.shipstation_base_url,
        page_count,
    )

    failed_pages = sorted(report.failed_pages)
    if report.failed:
        logger.error(
            "Error processing Order Event Handler POSTs",
            extra={
                "pages": page_count,
                "failed": report.failed,
                "failed_pages": failed_pages,
                "error": report.last_error,
            },
        )
        status = RunStatus.COMPLETED_WITH_ERRORS
    else:
        logger.info(
            "Order filter run complete",
            extra={"pages": page_count, "dispatched": report.succeeded},
        )
        status = RunStatus.COMPLETED

    return RunSummary(
        status=status,
        pages=page_count,
        dispatched=report.succeeded,
        failed=report.failed,
        failed_pages=failed_pages,
        error=report.last_error,
    )
