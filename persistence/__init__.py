from __future__ import annotations

from .collection_store import CollectionStore, coerce_id
from .disk_store import DiskJsonDocumentStore
from .interfaces import DocumentStore, KeyValueDocumentStore, Record
from .records import CATEGORIES, PRODUCTS, USERS, Role, UserRecord
from .repositories import AsyncCollectionStore, AsyncDocumentStore

__all__ = [
    "CollectionStore",
    "coerce_id",
    "DiskJsonDocumentStore",
    "DocumentStore",
    "KeyValueDocumentStore",
    "Record",
    "AsyncCollectionStore",
    "AsyncDocumentStore",
    "Role",
    "UserRecord",
    "USERS",
    "CATEGORIES",
    "PRODUCTS",
]
