from .filters import Filter
from .ignore import INVALID_PATH, NO_MATCH, toggle_ignore, toggle_location
from .pipeline import populate
from .service import ConfigCache
from .tree import DirTree, TreeNode, UnknownPathError, build_tree

__all__ = [
    "ConfigCache",
    "DirTree",
    "Filter",
    "INVALID_PATH",
    "NO_MATCH",
    "TreeNode",
    "UnknownPathError",
    "build_tree",
    "populate",
    "toggle_ignore",
    "toggle_location",
]
