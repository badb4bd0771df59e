"""
Pydantic models for deals (product listings).

``DealBase`` names the fields the API itself relies on.  Deals are
schema‑less: these fields are not type checked or coerced, and any
other field sent by a client is accepted, so a document is stored and
returned exactly as it was sent.  ``DealRead`` adds the store
identifier, exposed to clients under ``_id``.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class DealBase(BaseModel):
    model_config = ConfigDict(extra="allow")

    email: Optional[Any] = Field(None, description="Owner email", examples=["seller@example.com"])
    # Only used for ordering the latest deals.
    created_at: Optional[Any] = Field(
        None, description="Listing time", examples=["2025-09-01T10:00:00Z"]
    )


class DealCreate(DealBase):
    """Schema for creating a deal."""
    pass


class DealUpdate(DealBase):
    """Schema for updating a deal.

    Only the fields present in the request body are written; everything
    else on the stored document is left untouched.
    """
    pass


class DealRead(DealBase):
    """Schema for reading a deal from the API."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: Any = Field(..., alias="_id")
