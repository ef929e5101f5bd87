from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from ports.parser import DirectoryParserPort, ParsedFile


class FakeDirectoryParser(DirectoryParserPort):
    """Yields a canned list of parsed files, ignoring the root."""

    def __init__(self, files: Iterable[ParsedFile] = ()) -> None:
        self.files: list[ParsedFile] = list(files)
        self.roots: list[Path] = []

    def parse(self, root: Path) -> Iterator[ParsedFile]:
        self.roots.append(root)
        yield from self.files
