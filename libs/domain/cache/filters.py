from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

HIERARCHY: Final = ("environment", "fabric", "node")
FILE_LEVELS: Final = frozenset({"filename", "path", "extension"})


@dataclass(frozen=True)
class Filter:
    """
    Partial metadata mapping selecting a scope of property records.
    Stored as a sorted (level, value) tuple so equal filters hash equal.
    """

    fields: tuple[tuple[str, str], ...] = ()

    @classmethod
    def from_metadata(cls, metadata: Mapping[str, str] | None) -> Filter:
        if not metadata:
            return cls()
        return cls(tuple(sorted((str(k), str(v)) for k, v in metadata.items())))

    @classmethod
    def from_location(cls, location: str) -> Filter:
        """'env/fabric/node[/.../file]' -> hierarchy levels (+ file levels if deeper)."""
        parts = [p for p in location.strip().strip("/").split("/") if p]
        meta = dict(zip(HIERARCHY, parts))
        if len(parts) > len(HIERARCHY):
            name = parts[-1]
            meta["path"] = "/".join(parts)
            meta["filename"] = name
            meta["extension"] = name.rsplit(".", 1)[1] if "." in name else ""
        return cls.from_metadata(meta)

    def scoped(self) -> Filter:
        """Directory-level scope: file levels removed."""
        return Filter(tuple((k, v) for k, v in self.fields if k not in FILE_LEVELS))

    def as_query(self) -> dict[str, str]:
        return dict(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __bool__(self) -> bool:
        return bool(self.fields)

    def __str__(self) -> str:
        if not self.fields:
            return "<all>"
        return ", ".join(f"{k}={v}" for k, v in self.fields)
