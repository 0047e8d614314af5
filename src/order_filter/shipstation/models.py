"""ShipStation response models."""

from typing import Annotated

from pydantic import BaseModel, Field


class OrdersMetadata(BaseModel):
    """The subset of an orders listing response needed to count pages.

    Only ``total`` is read. It may be missing or null (no orders to page
    through); numeric strings are coerced and a negative total yields no
    pages. Any other field is ignored.
    """

    total: Annotated[float, Field(allow_inf_nan=False)] | None = None
