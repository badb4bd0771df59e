"""
Top‑level API router.

Neither resource router carries a prefix: the deal routes include
``/myProduct`` and ``/latestProduct`` and the bid routes include
``/product/bids/{product_id}``, so each router declares its full paths.
"""

from fastapi import APIRouter

from .endpoints import bids, deals

router = APIRouter()

router.include_router(deals.router, tags=["deals"])
router.include_router(bids.router, tags=["bids"])
