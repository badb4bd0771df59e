import mongomock
import pytest
from fastapi.testclient import TestClient

from smart_deals_api.app.core.db import MongoStore
from smart_deals_api.app.main import create_app


@pytest.fixture
def store() -> MongoStore:
    return MongoStore(mongomock.MongoClient(), "SmartDB")


@pytest.fixture
def client(store: MongoStore) -> TestClient:
    return TestClient(create_app(store=store))
