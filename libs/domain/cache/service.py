from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Final

from ports.parser import DirectoryParserPort
from ports.store import DocumentStorePort
from shared.contracts.v1.info import CacheInfo

from . import ignore, pipeline, reporting
from .filters import Filter
from .tree import FILE_LEVEL, DirTree, build_tree


class ConfigCache:
    """Public surface of the cache; store and parser are injected."""

    def __init__(
        self,
        store: DocumentStorePort,
        parser: DirectoryParserPort,
        echo: Callable[[str], None] = print,
    ) -> None:
        self.store: Final = store
        self.parser: Final = parser
        self.echo = echo

    def populate(self, root: Path | str) -> int:
        return pipeline.populate(self.store, self.parser, root)

    def toggle(self, flt: Filter | None, keys: Iterable[str], on: bool) -> str | None:
        return ignore.toggle_ignore(self.store, flt, keys, on)

    def toggle_location(self, location: str | None, keys: Iterable[str], on: bool) -> str | None:
        return ignore.toggle_location(self.store, location, keys, on)

    def tree(self) -> DirTree:
        return build_tree(self.store)

    def print_structure(self, path: str | None = None, level: int = FILE_LEVEL) -> None:
        """Raises UnknownPathError when ``path`` is not in the cache."""
        self.echo(self.tree().render(path, level))

    def info(self) -> CacheInfo:
        return reporting.collect_info(self.store)

    def print_info(self) -> None:
        self.echo(reporting.format_info(self.info()))

    def get_ignored(self) -> set[str]:
        return reporting.get_ignored(self.store)
