from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

# Equality mapping; a value may also be {"$in": [...]} for set membership.
Query = Mapping[str, Any]


class DocumentStorePort(ABC):
    """Flat property documents, one collection."""

    @abstractmethod
    def delete_many(self, query: Query) -> int: ...

    @abstractmethod
    def insert_many(self, docs: Iterable[Mapping[str, Any]]) -> int: ...

    @abstractmethod
    def find(self, query: Query) -> Iterator[dict[str, Any]]: ...

    @abstractmethod
    def update_many(self, query: Query, fields: Mapping[str, Any]) -> int: ...

    @abstractmethod
    def distinct(self, field: str, query: Query | None = None) -> list[Any]: ...

    @abstractmethod
    def count(self, query: Query | None = None) -> int: ...
