"""Page-count resolution from the orders metadata body."""

import math

from pydantic import ValidationError

from order_filter.shipstation.models import OrdersMetadata

# Orders per page on the ShipStation listing
PAGE_SIZE = 100


class MetadataParseError(ValueError):
    """Raised when the orders metadata body cannot be parsed into a total."""


def compute_page_count(total: float) -> int:
    """Return the number of pages needed for ``total`` orders.

    A partial last page counts as a full page. Never negative.
    """
    return max(0, math.ceil(total / PAGE_SIZE))


def resolve_page_count(body: str) -> int:
    """Parse the metadata body and derive the page count.

    Returns 0 when ``total`` is absent or null. Raises MetadataParseError when
    the body is not a JSON object or ``total`` is not a usable number.
    """
    try:
        metadata = OrdersMetadata.model_validate_json(body)
    except ValidationError as exc:
        raise MetadataParseError(f"Invalid orders metadata: {exc.errors()[0]['msg']}") from exc

    if metadata.total is None:
        return 0
    return compute_page_count(metadata.total)
