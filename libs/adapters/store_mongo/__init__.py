from .mongo import MongoDocumentStore

__all__ = ["MongoDocumentStore"]
