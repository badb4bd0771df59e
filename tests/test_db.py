from unittest.mock import MagicMock

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import ServerSelectionTimeoutError

from smart_deals_api.app.core.config import Settings
from smart_deals_api.app.core.db import MongoStore, parse_object_id, serialize_document
from smart_deals_api.app.core.errors import InvalidIdentifier
from smart_deals_api.app.main import create_app


def test_parse_object_id_accepts_hex():
    oid = ObjectId()
    assert parse_object_id(str(oid)) == oid


@pytest.mark.parametrize("value", ["", "abc", "zzzzzzzzzzzzzzzzzzzzzzzz", "0" * 25])
def test_parse_object_id_rejects_malformed(value):
    with pytest.raises(InvalidIdentifier) as excinfo:
        parse_object_id(value)
    assert excinfo.value.status_code == 400
    assert excinfo.value.value == value


def test_serialize_document_stringifies_object_ids():
    oid, other = ObjectId(), ObjectId()
    doc = {"_id": oid, "nested": {"ref": other}, "refs": [other], "n": 1}
    assert serialize_document(doc) == {
        "_id": str(oid),
        "nested": {"ref": str(other)},
        "refs": [str(other)],
        "n": 1,
    }
    assert serialize_document(None) is None


def test_ping_failure_is_logged_not_raised(caplog):
    client = MagicMock()
    client.admin.command.side_effect = ServerSelectionTimeoutError("down")
    store = MongoStore(client, "SmartDB")
    assert store.ping() is False
    assert "MongoDB connection failed" in caplog.text


def test_ping_success():
    client = MagicMock()
    store = MongoStore(client, "SmartDB")
    assert store.ping() is True
    client.admin.command.assert_called_once_with("ping")


def test_lifespan_owns_store_and_survives_failed_ping(monkeypatch):
    mongo_client = MagicMock()
    mongo_client.admin.command.side_effect = ServerSelectionTimeoutError("down")
    owned = MongoStore(mongo_client, "SmartDB")
    monkeypatch.setattr(MongoStore, "from_settings", classmethod(lambda cls, settings: owned))

    app = create_app(settings=Settings(mongodb_uri="mongodb://unused/"))
    with TestClient(app) as client:
        assert app.state.store is owned
        assert client.get("/").status_code == 200
    mongo_client.close.assert_called_once()
    assert app.state.store is None


def test_injected_store_is_not_closed(store):
    store.client = MagicMock()
    app = create_app(store=store)
    with TestClient(app):
        pass
    store.client.close.assert_not_called()
    assert app.state.store is store


def test_lifespan_pings_off_the_event_loop(monkeypatch):
    from smart_deals_api.app import main

    mongo_client = MagicMock()
    owned = MongoStore(mongo_client, "SmartDB")
    monkeypatch.setattr(MongoStore, "from_settings", classmethod(lambda cls, settings: owned))

    offloaded = []
    run_sync = main.to_thread.run_sync

    async def recording_run_sync(func, *args, **kwargs):
        offloaded.append(func)
        return await run_sync(func, *args, **kwargs)

    monkeypatch.setattr(main.to_thread, "run_sync", recording_run_sync)

    app = create_app(settings=Settings(mongodb_uri="mongodb://unused/"))
    with TestClient(app):
        assert owned.ping in offloaded
    assert owned.close in offloaded
    mongo_client.admin.command.assert_called_once_with("ping")
