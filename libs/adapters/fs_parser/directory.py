from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Final

from ports.parser import DirectoryParserPort, ParsedFile

from .formats import MARKER_EXTENSION, PARSERS, parse_file

LOG: Final = logging.getLogger(__name__)

HIERARCHY: Final = ("environment", "fabric", "node")


def _extension(name: str) -> str:
    # ".ignore" has no stem; its whole name is the extension
    if name.startswith(".") and name.count(".") == 1:
        return name[1:]
    return name.rsplit(".", 1)[1] if "." in name else ""


def file_metadata(root: Path, path: Path) -> dict[str, str]:
    rel = path.relative_to(root).parts
    dirs = rel[:-1]
    meta: dict[str, str] = {}
    for level, segment in zip(HIERARCHY, dirs):
        meta[level] = segment
    meta["filename"] = rel[-1]
    meta["path"] = "/".join(rel)
    meta["extension"] = _extension(rel[-1])
    return meta


class DirectoryParser(DirectoryParserPort):
    """environment/fabric/node/<files...> walker."""

    def __init__(self, extensions: set[str] | None = None) -> None:
        self.extensions = set(extensions) if extensions is not None else set(PARSERS)
        self.extensions.add(MARKER_EXTENSION)

    def _walk(self, dirpath: Path) -> Iterator[Path]:
        for p in sorted(dirpath.iterdir(), key=lambda p: (p.is_dir(), p.name)):
            if p.is_dir():
                if p.name.startswith("."):
                    continue
                yield from self._walk(p)
            elif p.is_file():
                yield p

    def parse(self, root: Path) -> Iterator[ParsedFile]:
        root = Path(root).resolve()
        if not root.is_dir():
            raise NotADirectoryError(f"Not a directory: {root}")
        for path in self._walk(root):
            meta = file_metadata(root, path)
            ext = meta["extension"]
            if ext not in self.extensions:
                LOG.debug("Skipping %s: unsupported extension %r", meta["path"], ext)
                continue
            is_marker = ext == MARKER_EXTENSION
            if not is_marker and "node" not in meta:
                LOG.warning("Skipping %s: data files must sit under a node", meta["path"])
                continue
            yield ParsedFile(metadata=meta, data=parse_file(path, ext), is_marker=is_marker)
