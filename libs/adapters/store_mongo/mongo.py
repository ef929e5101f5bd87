from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from ports.store import DocumentStorePort, Query
from pymongo import MongoClient
from pymongo.collection import Collection


class MongoDocumentStore(DocumentStorePort):
    """
    Thin wrapper over one pymongo collection.
    Connection lifecycle, pooling and retries stay with the driver.
    """

    def __init__(self, collection: Collection) -> None:
        self._col = collection

    @classmethod
    def connect(cls, uri: str, database: str, collection: str) -> MongoDocumentStore:
        client: MongoClient = MongoClient(uri)
        return cls(client[database][collection])

    @classmethod
    def from_settings(cls, settings) -> MongoDocumentStore:
        return cls.connect(settings.mongo_uri, settings.database, settings.collection)

    def delete_many(self, query: Query) -> int:
        return self._col.delete_many(dict(query)).deleted_count

    def insert_many(self, docs: Iterable[Mapping[str, Any]]) -> int:
        # copies so pymongo's injected _id never leaks back into caller dicts
        result = self._col.insert_many([dict(d) for d in docs])
        return len(result.inserted_ids)

    def find(self, query: Query) -> Iterator[dict[str, Any]]:
        return iter(self._col.find(dict(query), {"_id": False}))

    def update_many(self, query: Query, fields: Mapping[str, Any]) -> int:
        return self._col.update_many(dict(query), {"$set": dict(fields)}).modified_count

    def distinct(self, field: str, query: Query | None = None) -> list[Any]:
        return list(self._col.distinct(field, dict(query or {})))

    def count(self, query: Query | None = None) -> int:
        return self._col.count_documents(dict(query or {}))

    def close(self) -> None:
        self._col.database.client.close()
