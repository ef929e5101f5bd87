from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from ports.store import DocumentStorePort, Query


def _matches(doc: Mapping[str, Any], query: Query) -> bool:
    for name, expected in query.items():
        if name not in doc:
            return False
        if isinstance(expected, Mapping):
            if set(expected) != {"$in"}:
                raise ValueError(f"Unsupported query operator for {name!r}: {dict(expected)!r}")
            if doc[name] not in set(expected["$in"]):
                return False
        elif doc[name] != expected:
            return False
    return True


class InMemoryDocumentStore(DocumentStorePort):
    """List-backed collection; equality and $in only."""

    @classmethod
    def create(cls) -> InMemoryDocumentStore:
        return cls()

    def __init__(self) -> None:
        self.docs: list[dict[str, Any]] = []

    def delete_many(self, query: Query) -> int:
        kept = [d for d in self.docs if not _matches(d, query)]
        removed = len(self.docs) - len(kept)
        self.docs = kept
        return removed

    def insert_many(self, docs: Iterable[Mapping[str, Any]]) -> int:
        batch = [dict(d) for d in docs]
        if not batch:
            # pymongo refuses empty batches; mirror that
            raise ValueError("insert_many requires at least one document")
        self.docs.extend(batch)
        return len(batch)

    def find(self, query: Query) -> Iterator[dict[str, Any]]:
        return iter([dict(d) for d in self.docs if _matches(d, query)])

    def update_many(self, query: Query, fields: Mapping[str, Any]) -> int:
        n = 0
        for d in self.docs:
            if _matches(d, query):
                d.update(fields)
                n += 1
        return n

    def distinct(self, field: str, query: Query | None = None) -> list[Any]:
        seen: dict[Any, None] = {}
        for d in self.docs:
            if field in d and _matches(d, query or {}):
                seen.setdefault(d[field], None)
        return list(seen)

    def count(self, query: Query | None = None) -> int:
        return sum(1 for d in self.docs if _matches(d, query or {}))
