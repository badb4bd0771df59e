"""
MongoDB integration.

This module provides ``MongoStore``, the single owner of the
``pymongo.MongoClient`` used by the application, together with
helpers shared by the service layer:

* ``get_store`` is a FastAPI dependency returning the store attached
  to the running application;
* ``parse_object_id`` turns a path parameter into an ``ObjectId``;
* ``serialize_document`` makes a raw document JSON friendly.

The store is constructed once in the application lifespan (or passed
in explicitly to ``create_app``) and closed on shutdown.  ``MongoClient``
keeps its own thread‑safe connection pool, so the same instance is
shared by every request handler.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Request
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .config import Settings
from .errors import InvalidIdentifier

logger = logging.getLogger(__name__)


class MongoStore:
    """Explicitly owned handle on the deals and bids collections."""

    def __init__(
        self,
        client: MongoClient,
        db_name: str,
        deals_collection: str = "SmartDeals",
        bids_collection: str = "Bids",
    ) -> None:
        self.client = client
        self.db: Database = client[db_name]
        self.deals: Collection = self.db[deals_collection]
        self.bids: Collection = self.db[bids_collection]

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoStore":
        """Create a store from application settings.

        ``MongoClient`` connects lazily, so constructing the store never
        blocks; use ``ping`` to check that the server is reachable.
        """
        client: MongoClient = MongoClient(settings.resolve_mongodb_uri())
        return cls(
            client,
            settings.db_name,
            deals_collection=settings.deals_collection,
            bids_collection=settings.bids_collection,
        )

    def ping(self) -> bool:
        """Send ``ping`` to the server and report whether it answered.

        Failures are logged rather than raised: the HTTP server keeps
        running and individual requests report store errors as they
        happen.
        """
        try:
            self.client.admin.command("ping")
        except PyMongoError:
            logger.exception("MongoDB connection failed")
            return False
        logger.info("Successfully connected to MongoDB database '%s'", self.db.name)
        return True

    def close(self) -> None:
        self.client.close()
        logger.info("MongoDB client closed")


def get_store(request: Request) -> MongoStore:
    """FastAPI dependency returning the application's store."""
    return request.app.state.store


def parse_object_id(value: str) -> ObjectId:
    """Convert ``value`` into an ``ObjectId``.

    Raises ``InvalidIdentifier`` for anything that is not a 24 character
    hexadecimal string.
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise InvalidIdentifier(value) from exc


def serialize_document(document: Optional[Mapping[str, Any]]) -> Optional[Dict[str, Any]]:
    """Return a copy of ``document`` with ``ObjectId`` values as strings."""
    if document is None:
        return None
    return {key: _serialize_value(value) for key, value in document.items()}


def _serialize_value(value: Any) -> Any:
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, Mapping):
        return {key: _serialize_value(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_serialize_value(item) for item in value]
    return value
