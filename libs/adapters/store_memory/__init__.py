from .memory import InMemoryDocumentStore

__all__ = ["InMemoryDocumentStore"]
