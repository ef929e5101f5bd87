from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ParsedFile:
    metadata: dict[str, str]
    data: dict[str, Any] = field(default_factory=dict)
    is_marker: bool = False


class DirectoryParserPort(ABC):
    """Walks an environment/fabric/node tree and yields parsed files in order."""

    @abstractmethod
    def parse(self, root: Path) -> Iterator[ParsedFile]: ...
