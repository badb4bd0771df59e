"""
Pydantic models for bids.

A bid references a deal through ``product``, the deal identifier as a
plain string.  The reference is never checked against the deals
collection, so bids for deleted or unknown deals are valid.  Like
deals, bids are schema‑less and stored exactly as sent; ``bid_price``
is only used for ordering.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class BidBase(BaseModel):
    model_config = ConfigDict(extra="allow")

    buyer_email: Optional[Any] = Field(None, description="Buyer email", examples=["buyer@example.com"])
    bid_price: Optional[Any] = Field(None, description="Offered price", examples=[150])
    product: Optional[Any] = Field(
        None, description="Deal identifier", examples=["66f1c0a2e4b0a1b2c3d4e5f6"]
    )


class BidCreate(BidBase):
    """Schema for placing a bid."""
    pass


class BidRead(BidBase):
    """Schema for reading a bid from the API."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Any = Field(..., alias="_id")
