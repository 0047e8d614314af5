"""Notification payload sent to the Order Event Handler."""

from pydantic import BaseModel, ConfigDict

# Tag the handler uses to identify where a notification came from
RESOURCE_TYPE = "OrderFilterTimerTrigger"


class NotificationPayload(BaseModel):
    """One page of awaiting-shipment orders, referenced by its ShipStation URL.

    Immutable once constructed. Serializes to the JSON body the handler expects:
    ``{"resource_url": "...", "resource_type": "OrderFilterTimerTrigger"}``.
    """

    model_config = ConfigDict(frozen=True)

    resource_url: str
    resource_type: str = RESOURCE_TYPE
