from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from pydantic import BaseModel, Field

CORE_FIELDS = ("key", "value", "ignore")
IgnoreFlag = Literal["true", "false"]


def ignore_flag(on: bool) -> IgnoreFlag:
    return "true" if on else "false"


class PropertyRecord(BaseModel):
    """One config key/value pair at one location."""

    key: str
    value: str
    ignore: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)

    def to_document(self) -> dict[str, Any]:
        """Storage layout: metadata levels sit beside key/value/ignore."""
        doc: dict[str, Any] = {
            "key": self.key,
            "value": self.value,
            "ignore": ignore_flag(self.ignore),
        }
        doc.update(self.metadata)
        return doc

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> PropertyRecord:
        return cls(
            key=doc["key"],
            value=doc["value"],
            ignore=doc.get("ignore") == "true",
            metadata={
                k: str(v) for k, v in doc.items() if k not in CORE_FIELDS and k != "_id"
            },
        )
