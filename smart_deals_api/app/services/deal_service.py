"""
Business logic for deals.

``DealService`` reads and writes the deals collection.  Documents are
stored exactly as the client sent them; updates use ``$set`` so that
fields not present in the request keep their stored values.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from pymongo import DESCENDING

from smart_deals_api.app.core.db import MongoStore, parse_object_id, serialize_document
from smart_deals_api.app.schemas.common import DeleteAck, InsertAck, UpdateAck
from smart_deals_api.app.schemas.deal import DealCreate, DealUpdate

logger = logging.getLogger(__name__)

Document = Dict[str, Any]

# Number of deals returned by ``list_latest``.
LATEST_DEALS_LIMIT = 6


class DealService:
    """Service for managing deals in the document store."""

    def __init__(self, store: MongoStore) -> None:
        self.collection = store.deals

    def list_deals(self) -> List[Document]:
        """Return every deal in the collection's natural order."""
        return [self._to_document(doc) for doc in self.collection.find()]

    def list_by_owner(self, email: str) -> List[Document]:
        """Return the deals whose ``email`` equals ``email``."""
        logger.debug("Listing deals owned by %s", email)
        return [self._to_document(doc) for doc in self.collection.find({"email": email})]

    def get_deal(self, deal_id: str) -> Optional[Document]:
        """Retrieve a single deal, or ``None`` if it does not exist."""
        doc = self.collection.find_one({"_id": parse_object_id(deal_id)})
        if doc is None:
            logger.debug("Deal %s not found", deal_id)
            return None
        return self._to_document(doc)

    def create_deal(self, data: DealCreate) -> InsertAck:
        """Insert the deal and acknowledge with its generated id."""
        document = data.model_dump(exclude_unset=True)
        result = self.collection.insert_one(document)
        logger.info("Created deal %s", result.inserted_id)
        return InsertAck(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))

    def update_deal(self, deal_id: str, data: DealUpdate) -> UpdateAck:
        """Overwrite the supplied fields of a deal.

        A missing deal is not an error; the acknowledgement then reports
        zero matched and modified documents.
        """
        query = {"_id": parse_object_id(deal_id)}
        fields = data.model_dump(exclude_unset=True)
        # The identifier is immutable in MongoDB.
        fields.pop("_id", None)
        if not fields:
            # MongoDB rejects an empty ``$set``; report the match only.
            matched = self.collection.find_one(query, {"_id": 1}) is not None
            return UpdateAck(matched_count=int(matched), modified_count=0)
        result = self.collection.update_one(query, {"$set": fields})
        logger.info(
            "Updated deal %s (matched=%s, modified=%s)",
            deal_id,
            result.matched_count,
            result.modified_count,
        )
        return UpdateAck(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=1 if result.upserted_id is not None else 0,
            upserted_id=str(result.upserted_id) if result.upserted_id is not None else None,
        )

    def delete_deal(self, deal_id: str) -> DeleteAck:
        """Delete a deal by id; deleting a missing deal reports zero."""
        result = self.collection.delete_one({"_id": parse_object_id(deal_id)})
        if result.deleted_count:
            logger.info("Deleted deal %s", deal_id)
        return DeleteAck(acknowledged=result.acknowledged, deleted_count=result.deleted_count)

    def list_latest(self, limit: int = LATEST_DEALS_LIMIT) -> List[Document]:
        """Return the most recent deals ordered by ``created_at`` descending."""
        cursor = self.collection.find().sort("created_at", DESCENDING).limit(limit)
        return [self._to_document(doc) for doc in cursor]

    @staticmethod
    def _to_document(doc: Mapping[str, Any]) -> Document:
        # Stored documents are returned as they are, whatever their fields hold.
        return serialize_document(doc)
