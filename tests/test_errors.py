from unittest.mock import MagicMock

import mongomock
import pytest
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError, ServerSelectionTimeoutError

from smart_deals_api.app.core.db import MongoStore
from smart_deals_api.app.main import create_app


@pytest.fixture
def broken_store() -> MongoStore:
    store = MongoStore(mongomock.MongoClient(), "SmartDB")
    store.deals = MagicMock()
    store.bids = MagicMock()
    store.deals.find.side_effect = ServerSelectionTimeoutError("no servers available")
    store.bids.find.side_effect = PyMongoError("boom")
    return store


def test_bids_store_error_is_reported_as_500(broken_store):
    client = TestClient(create_app(store=broken_store))
    response = client.get("/bids", params={"email": "a@x.com"})
    assert response.status_code == 500
    assert response.json() == {"message": "Server Error", "error": "boom"}


def test_deals_store_error_is_reported_as_500(broken_store):
    client = TestClient(create_app(store=broken_store))
    response = client.get("/deals")
    assert response.status_code == 500
    assert response.json()["message"] == "Server Error"


def test_missing_email_never_reaches_the_store(broken_store):
    client = TestClient(create_app(store=broken_store))
    response = client.get("/myProduct")
    assert response.status_code == 400
    broken_store.deals.find.assert_not_called()


def test_store_error_is_logged(broken_store, caplog):
    client = TestClient(create_app(store=broken_store))
    with caplog.at_level("ERROR"):
        client.get("/product/bids/p1")
    assert "Store operation failed for GET /product/bids/p1" in caplog.text
