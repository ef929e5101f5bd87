from .parser import DirectoryParserPort, ParsedFile
from .store import DocumentStorePort, Query

__all__ = [
    "DocumentStorePort",
    "Query",
    "DirectoryParserPort",
    "ParsedFile",
]
