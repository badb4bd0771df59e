"""
Deal endpoints.

CRUD routes for product listings plus two filtered views: the deals
owned by one seller (``/myProduct``) and the six most recent deals
(``/latestProduct``).  Handlers are synchronous; FastAPI runs them in
its worker thread pool so a slow store call only holds up its own
request.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from smart_deals_api.app.core.db import MongoStore, get_store
from smart_deals_api.app.core.errors import MissingQueryParameter
from smart_deals_api.app.schemas.common import DeleteAck, InsertAck, UpdateAck
from smart_deals_api.app.schemas.deal import DealCreate, DealRead, DealUpdate
from smart_deals_api.app.services.deal_service import DealService

router = APIRouter()


def get_deal_service(store: MongoStore = Depends(get_store)) -> DealService:
    return DealService(store)


@router.get("/deals", response_model=List[DealRead], response_model_exclude_unset=True)
def list_deals(service: DealService = Depends(get_deal_service)) -> List[Dict[str, Any]]:
    """Return every deal."""
    return service.list_deals()


@router.get("/myProduct", response_model=List[DealRead], response_model_exclude_unset=True)
def list_my_products(
    email: Optional[str] = Query(None, description="Owner email to filter by"),
    service: DealService = Depends(get_deal_service),
) -> List[Dict[str, Any]]:
    """Return the deals listed by ``email``.

    The parameter is required; a request without it is answered with
    HTTP 400 before the store is queried.
    """
    if not email:
        raise MissingQueryParameter("Email query is required")
    return service.list_by_owner(email)


@router.get("/latestProduct", response_model=List[DealRead], response_model_exclude_unset=True)
def list_latest_products(service: DealService = Depends(get_deal_service)) -> List[Dict[str, Any]]:
    """Return up to six deals, newest ``created_at`` first."""
    return service.list_latest()


@router.get("/deals/{deal_id}", response_model=Optional[DealRead], response_model_exclude_unset=True)
def get_deal(deal_id: str, service: DealService = Depends(get_deal_service)) -> Optional[Dict[str, Any]]:
    """Retrieve a single deal.

    An unknown id yields ``null`` rather than 404; a malformed id yields
    HTTP 400.
    """
    return service.get_deal(deal_id)


@router.post("/deals", response_model=InsertAck)
def create_deal(deal: DealCreate, service: DealService = Depends(get_deal_service)) -> InsertAck:
    return service.create_deal(deal)


@router.put("/deals/{deal_id}", response_model=UpdateAck)
def update_deal(
    deal_id: str,
    updates: DealUpdate,
    service: DealService = Depends(get_deal_service),
) -> UpdateAck:
    """Update the given fields of a deal; other fields keep their values."""
    return service.update_deal(deal_id, updates)


@router.delete("/deals/{deal_id}", response_model=DeleteAck)
def delete_deal(deal_id: str, service: DealService = Depends(get_deal_service)) -> DeleteAck:
    return service.delete_deal(deal_id)
