"""
Bid endpoints.

Bids are listed per buyer (or all at once), per product, placed and
withdrawn.  There is no route for editing a bid.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from smart_deals_api.app.core.db import MongoStore, get_store
from smart_deals_api.app.schemas.bid import BidCreate, BidRead
from smart_deals_api.app.schemas.common import DeleteAck, InsertAck
from smart_deals_api.app.services.bid_service import BidService

router = APIRouter()


def get_bid_service(store: MongoStore = Depends(get_store)) -> BidService:
    return BidService(store)


@router.get("/bids", response_model=List[BidRead], response_model_exclude_unset=True)
def list_bids(
    email: Optional[str] = Query(None, description="Buyer email to filter by"),
    service: BidService = Depends(get_bid_service),
) -> List[Dict[str, Any]]:
    """Return the bids placed by ``email``, highest price first.

    Without ``email`` every bid is returned, unsorted.
    """
    return service.list_bids(buyer_email=email)


@router.get(
    "/product/bids/{product_id}",
    response_model=List[BidRead],
    response_model_exclude_unset=True,
)
def list_product_bids(product_id: str, service: BidService = Depends(get_bid_service)) -> List[Dict[str, Any]]:
    """Return the bids on one product, highest price first."""
    return service.list_for_product(product_id)


@router.post("/bids", response_model=InsertAck)
def create_bid(bid: BidCreate, service: BidService = Depends(get_bid_service)) -> InsertAck:
    return service.create_bid(bid)


@router.delete("/bids/{bid_id}", response_model=DeleteAck)
def delete_bid(bid_id: str, service: BidService = Depends(get_bid_service)) -> DeleteAck:
    return service.delete_bid(bid_id)
