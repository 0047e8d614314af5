"""Data models for the order filter run."""

from order_filter.models.notification import RESOURCE_TYPE, NotificationPayload
from order_filter.models.run import DispatchReport, RunStatus, RunSummary

__all__ = [
    "RESOURCE_TYPE",
    "NotificationPayload",
    "DispatchReport",
    "RunStatus",
    "RunSummary",
]
