from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Final

from ports.store import DocumentStorePort

ENV_LEVEL: Final = 1
FABRIC_LEVEL: Final = 2
NODE_LEVEL: Final = 3
FILE_LEVEL: Final = 4


class UnknownPathError(LookupError):
    def __init__(self, path: str) -> None:
        super().__init__(f"Path not in cache: {path}")
        self.path = path


@dataclass
class TreeNode:
    name: str
    children: dict[str, TreeNode] = field(default_factory=dict)

    @property
    def is_leaf(self) -> bool:
        return not self.children


def _segments(path: str) -> list[str]:
    return [s for s in path.strip().strip("/").split("/") if s]


class DirTree:
    """
    environment/fabric/node/file hierarchy rebuilt from stored paths.
    Level 0 is the root; files are leaves at level 4 or deeper.
    """

    def __init__(self, paths: Iterable[str] = ()) -> None:
        self.root = TreeNode(name="")
        for p in paths:
            self.insert(p)

    def insert(self, path: str) -> None:
        node = self.root
        for seg in _segments(path):
            node = node.children.setdefault(seg, TreeNode(name=seg))

    def find(self, path: str | None) -> TreeNode | None:
        node = self.root
        for seg in _segments(path or ""):
            child = node.children.get(seg)
            if child is None:
                return None
            node = child
        return node

    def count_nodes(self, node: TreeNode, level: int, stop_at_level: bool) -> int:
        """
        With ``stop_at_level`` count nodes exactly ``level`` hops below ``node``;
        otherwise count the leaves at or below that depth.
        """
        if level <= 0:
            if stop_at_level:
                return 1
            if node.is_leaf:
                return 1
            return sum(self.count_nodes(c, 0, False) for c in node.children.values())
        return sum(self.count_nodes(c, level - 1, stop_at_level) for c in node.children.values())

    def iter_lines(self, scope: str | None = None, level: int = FILE_LEVEL) -> Iterator[str]:
        start = self.find(scope)
        if start is None:
            raise UnknownPathError(scope or "")

        def walk(node: TreeNode, prefix: str, depth: int) -> Iterator[str]:
            if depth > level:
                return
            entries = sorted(node.children.values(), key=lambda n: (not n.is_leaf, n.name))
            count = len(entries)
            for i, child in enumerate(entries):
                last = i == count - 1
                yield f"{prefix}{'└── ' if last else '├── '}{child.name}"
                yield from walk(child, prefix + ("    " if last else "│   "), depth + 1)

        yield "/".join(_segments(scope or "")) or "/"
        yield from walk(start, "", 1)

    def render(self, scope: str | None = None, level: int = FILE_LEVEL) -> str:
        return "\n".join(self.iter_lines(scope, level))


def build_tree(store: DocumentStorePort) -> DirTree:
    """Fresh snapshot from the store's distinct ``path`` values."""
    return DirTree(str(p) for p in store.distinct("path"))
