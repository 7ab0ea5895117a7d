from __future__ import annotations

from typing import Any, ContextManager, Mapping, Protocol

Record = dict[str, Any]


class KeyValueDocumentStore(Protocol):
    """
    Minimal DB-friendly interface: a single JSON-like document persisted under a key.
    """

    def load(self) -> dict[str, Any]:
        """Load and return the full document (never None)."""
        ...

    def save(self, doc: dict[str, Any]) -> None:
        """Persist the full document atomically."""
        ...

    def locked(self) -> ContextManager[Any]:
        """Hold exclusive access to the document for a load/save cycle."""
        ...


class DocumentStore(Protocol):
    """Collection-level CRUD over one document."""

    def get_all(self, collection: str) -> list[Record]: ...
    def get_by_id(self, collection: str, record_id: Any) -> Record | None: ...
    def create(self, collection: str, fields: Mapping[str, Any]) -> Record: ...
    def create_unique(
        self, collection: str, fields: Mapping[str, Any], unique: tuple[str, ...]
    ) -> Record | None: ...
    def update(self, collection: str, record_id: Any, patch: Mapping[str, Any]) -> Record | None: ...
    def delete(self, collection: str, record_id: Any) -> bool: ...
    def find_one(self, collection: str, predicate: Mapping[str, Any]) -> Record | None: ...
