"""
Business logic for bids.

Bids can be placed, listed and withdrawn; there is no update.  Listings
scoped to a buyer or a product are ordered by ``bid_price``, highest
first.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from pymongo import DESCENDING

from smart_deals_api.app.core.db import MongoStore, parse_object_id, serialize_document
from smart_deals_api.app.schemas.bid import BidCreate
from smart_deals_api.app.schemas.common import DeleteAck, InsertAck

logger = logging.getLogger(__name__)


class BidService:
    """Service for managing bids in the document store."""

    def __init__(self, store: MongoStore) -> None:
        self.collection = store.bids

    def list_bids(self, buyer_email: Optional[str] = None) -> List[Dict[str, Any]]:
        """Return the bids of one buyer, or all bids.

        With ``buyer_email`` the result is sorted by ``bid_price``
        descending; without it every bid is returned in store order.
        """
        if buyer_email:
            logger.debug("Listing bids placed by %s", buyer_email)
            cursor = self.collection.find({"buyer_email": buyer_email}).sort("bid_price", DESCENDING)
        else:
            cursor = self.collection.find()
        return [self._to_document(doc) for doc in cursor]

    def list_for_product(self, product_id: str) -> List[Dict[str, Any]]:
        """Return the bids on ``product_id``, highest ``bid_price`` first.

        ``product_id`` is compared as a plain string and is not required
        to name an existing deal.
        """
        cursor = self.collection.find({"product": product_id}).sort("bid_price", DESCENDING)
        return [self._to_document(doc) for doc in cursor]

    def create_bid(self, data: BidCreate) -> InsertAck:
        result = self.collection.insert_one(data.model_dump(exclude_unset=True))
        logger.info("Created bid %s on product %s", result.inserted_id, data.product)
        return InsertAck(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))

    def delete_bid(self, bid_id: str) -> DeleteAck:
        result = self.collection.delete_one({"_id": parse_object_id(bid_id)})
        if result.deleted_count:
            logger.info("Deleted bid %s", bid_id)
        return DeleteAck(acknowledged=result.acknowledged, deleted_count=result.deleted_count)

    @staticmethod
    def _to_document(doc: Mapping[str, Any]) -> Dict[str, Any]:
        return serialize_document(doc)
