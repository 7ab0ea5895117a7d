from __future__ import annotations

import asyncio
from typing import Any, Mapping, Protocol

from .collection_store import CollectionStore
from .interfaces import Record


class AsyncDocumentStore(Protocol):
    async def get_all(self, collection: str) -> list[Record]: ...
    async def get_by_id(self, collection: str, record_id: Any) -> Record | None: ...
    async def create(self, collection: str, fields: Mapping[str, Any]) -> Record: ...
    async def create_unique(
        self, collection: str, fields: Mapping[str, Any], unique: tuple[str, ...]
    ) -> Record | None: ...
    async def update(self, collection: str, record_id: Any, patch: Mapping[str, Any]) -> Record | None: ...
    async def delete(self, collection: str, record_id: Any) -> bool: ...
    async def find_one(self, collection: str, predicate: Mapping[str, Any]) -> Record | None: ...


class AsyncCollectionStore(AsyncDocumentStore):
    """
    Async wrapper around the disk-backed collection store.
    Uses asyncio.to_thread to avoid blocking the event loop on file I/O.
    """

    def __init__(self, store: CollectionStore) -> None:
        self._store = store

    @property
    def sync(self) -> CollectionStore:
        return self._store

    async def get_all(self, collection: str) -> list[Record]:
        return await asyncio.to_thread(self._store.get_all, collection)

    async def get_by_id(self, collection: str, record_id: Any) -> Record | None:
        return await asyncio.to_thread(self._store.get_by_id, collection, record_id)

    async def create(self, collection: str, fields: Mapping[str, Any]) -> Record:
        return await asyncio.to_thread(self._store.create, collection, dict(fields))

    async def create_unique(
        self, collection: str, fields: Mapping[str, Any], unique: tuple[str, ...]
    ) -> Record | None:
        return await asyncio.to_thread(self._store.create_unique, collection, dict(fields), tuple(unique))

    async def update(self, collection: str, record_id: Any, patch: Mapping[str, Any]) -> Record | None:
        return await asyncio.to_thread(self._store.update, collection, record_id, dict(patch))

    async def delete(self, collection: str, record_id: Any) -> bool:
        return await asyncio.to_thread(self._store.delete, collection, record_id)

    async def find_one(self, collection: str, predicate: Mapping[str, Any]) -> Record | None:
        return await asyncio.to_thread(self._store.find_one, collection, dict(predicate))
