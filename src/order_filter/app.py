"""FastAPI application with lifespan, health endpoint and the scheduler trigger."""

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request

from order_filter.config import get_settings
from order_filter.handler.client import close_client as close_handler_client
from order_filter.logging_config import configure_logging
from order_filter.shipstation.client import close_client as close_shipstation_client
from order_filter.trigger import run_order_filter

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging and load config on startup, close clients on shutdown."""
    settings = get_settings()
    configure_logging(settings.log_level)
    app.state.settings = settings
    yield
    await close_shipstation_client()
    await close_handler_client()


app = FastAPI(
    title="Order Filter",
    lifespan=lifespan,
)


async def verify_scheduler(request: Request) -> None:
    """Verify the scheduler secret header for protected endpoints.

    Compares the X-Scheduler-Secret header against the configured secret.
    Raises HTTPException 403 if the header is missing, empty, or mismatched.
    """
    settings = get_settings()
    secret = request.headers.get("X-Scheduler-Secret", "")
    if not settings.scheduler_secret or secret != settings.scheduler_secret:
        raise HTTPException(status_code=403, detail="Invalid scheduler secret")


@app.get("/health")
async def health():
    """Health check endpoint for Cloud Run and local development."""
    return {
        "status": "ok",
        "service": "order-filter",
        "version": "0.1.0",
    }


@app.post("/order-filter")
async def order_filter_endpoint(_: None = Depends(verify_scheduler)):
    """Scheduler tick (every 15 minutes): notify the handler of each awaiting-shipment page.

    Always answers 200 so the scheduler records the run as complete.
    """
    try:
        summary = await run_order_filter()
    except Exception as e:
        logger.error("Order filter run failed", extra={"error": str(e)}, exc_info=True)
        return {"status": "error", "error": str(e)}
    return summary.model_dump(mode="json")
