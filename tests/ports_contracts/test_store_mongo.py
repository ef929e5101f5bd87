from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

from adapters.store_mongo import MongoDocumentStore
from ports.store import DocumentStorePort

from apps.confcache.compose import build_store
from apps.confcache.settings import CacheSettings


def _store() -> tuple[MongoDocumentStore, MagicMock]:
    col = MagicMock()
    return MongoDocumentStore(col), col


def test_update_wraps_fields_in_set():
    store, col = _store()
    col.update_many.return_value = SimpleNamespace(modified_count=3)
    query = {"key": {"$in": ["a"]}, "environment": "dev"}

    assert store.update_many(query, {"ignore": "true"}) == 3
    col.update_many.assert_called_once_with(query, {"$set": {"ignore": "true"}})


def test_find_hides_object_id():
    store, col = _store()
    col.find.return_value = [{"key": "a"}]

    assert list(store.find({"key": "a"})) == [{"key": "a"}]
    col.find.assert_called_once_with({"key": "a"}, {"_id": False})


def test_insert_copies_documents():
    store, col = _store()
    col.insert_many.return_value = SimpleNamespace(inserted_ids=[1, 2])
    docs = [{"key": "a"}, {"key": "b"}]

    assert store.insert_many(docs) == 2
    sent = col.insert_many.call_args.args[0]
    assert sent == docs
    assert sent[0] is not docs[0]


def test_delete_distinct_count():
    store, col = _store()
    col.delete_many.return_value = SimpleNamespace(deleted_count=4)
    col.distinct.return_value = ["dev", "prod"]
    col.count_documents.return_value = 7

    assert store.delete_many({"node": "n1"}) == 4
    assert store.distinct("environment") == ["dev", "prod"]
    col.distinct.assert_called_once_with("environment", {})
    assert store.count({"ignore": "true"}) == 7
    col.count_documents.assert_called_once_with({"ignore": "true"})


def test_compose_mongo_store_is_lazy():
    # MongoClient does not connect until the first operation
    settings = CacheSettings(store_impl="mongo", mongo_uri="mongodb://127.0.0.1:1")
    store = build_store(settings)
    assert isinstance(store, DocumentStorePort)
    assert isinstance(store, MongoDocumentStore)
    store.close()
