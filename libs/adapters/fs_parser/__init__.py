from .directory import DirectoryParser, file_metadata
from .fakes import FakeDirectoryParser
from .formats import ParseError, flatten

__all__ = ["DirectoryParser", "FakeDirectoryParser", "ParseError", "file_metadata", "flatten"]
