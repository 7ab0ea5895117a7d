from __future__ import annotations

import logging
from typing import Any, Mapping, cast

from errors import StorageError

from .interfaces import DocumentStore, KeyValueDocumentStore, Record

logger = logging.getLogger(__name__)

# Reserved top-level key: { "<collection>": <last issued id> }
SEQUENCES_KEY = "_sequences"


def coerce_id(value: Any) -> int | None:
    """
    Numeric coercion for ids arriving from URLs, query strings or JSON bodies.

    Returns None when the value cannot name a record.
    """
    if isinstance(value, bool):  # bool is subclass of int in Python
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip():
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _check_collection_name(collection: str) -> None:
    if not isinstance(collection, str) or not collection:
        raise ValueError("collection name must be a non-empty string")
    if collection.startswith("_"):
        raise ValueError(f"collection names starting with '_' are reserved: {collection}")


def _records(doc: Mapping[str, Any], collection: str) -> list[Record]:
    items = doc.get(collection)
    if items is None:
        return []
    if not isinstance(items, list):
        raise StorageError(f"collection {collection!r} is not a list")
    return items


def _next_id(doc: Mapping[str, Any], collection: str, items: list[Record]) -> int:
    existing = [r["id"] for r in items if isinstance(r, dict) and isinstance(r.get("id"), int)]
    highest = max(existing, default=0)
    sequences = doc.get(SEQUENCES_KEY)
    issued = sequences.get(collection, 0) if isinstance(sequences, dict) else 0
    if not isinstance(issued, int):
        issued = 0
    return max(highest, issued) + 1


def _without_id(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in fields.items() if k != "id"}


class CollectionStore(DocumentStore):
    """
    Generic collection CRUD over a single JSON document.

    Every call reads the whole document first; mutating calls write the whole
    document back. Nothing is cached between calls. A mutating call holds the
    document lock across its read and its write, but separate calls are not
    atomic with respect to each other: the last writer wins.

    Ids are positive integers, assigned as max(existing id, last issued id) + 1
    so a deleted id is never handed out again.
    """

    def __init__(self, documents: KeyValueDocumentStore):
        self._documents = documents

    @property
    def documents(self) -> KeyValueDocumentStore:
        return self._documents

    def get_all(self, collection: str) -> list[Record]:
        _check_collection_name(collection)
        return list(_records(self._documents.load(), collection))

    def get_by_id(self, collection: str, record_id: Any) -> Record | None:
        wanted = coerce_id(record_id)
        if wanted is None:
            return None
        for item in self.get_all(collection):
            if isinstance(item, dict) and item.get("id") == wanted:
                return item
        return None

    def find_one(self, collection: str, predicate: Mapping[str, Any]) -> Record | None:
        for item in self.get_all(collection):
            if isinstance(item, dict) and all(k in item and item[k] == v for k, v in predicate.items()):
                return item
        return None

    def create(self, collection: str, fields: Mapping[str, Any]) -> Record:
        # Without unique fields there is nothing to clash with.
        return cast(Record, self._create(collection, fields, unique=()))

    def create_unique(
        self,
        collection: str,
        fields: Mapping[str, Any],
        unique: tuple[str, ...],
    ) -> Record | None:
        """
        Like `create`, but returns None instead of inserting when an existing
        record already has the same values for every field in `unique`.

        The check and the insert happen under one lock.
        """
        return self._create(collection, fields, unique=unique)

    def _create(self, collection: str, fields: Mapping[str, Any], unique: tuple[str, ...]) -> Record | None:
        _check_collection_name(collection)
        with self._documents.locked():
            doc = self._documents.load()
            items = _records(doc, collection)
            if unique:
                key = {k: fields.get(k) for k in unique}
                clash = any(
                    isinstance(item, dict) and all(k in item and item[k] == v for k, v in key.items())
                    for item in items
                )
                if clash:
                    return None
            new_id = _next_id(doc, collection, items)
            record: Record = {"id": new_id, **_without_id(fields)}
            doc[collection] = [*items, record]
            sequences = doc.get(SEQUENCES_KEY)
            if not isinstance(sequences, dict):
                sequences = {}
            sequences[collection] = new_id
            doc[SEQUENCES_KEY] = sequences
            self._documents.save(doc)
        logger.debug("created %s/%s", collection, new_id)
        return record

    def update(self, collection: str, record_id: Any, patch: Mapping[str, Any]) -> Record | None:
        _check_collection_name(collection)
        wanted = coerce_id(record_id)
        if wanted is None:
            return None
        with self._documents.locked():
            doc = self._documents.load()
            items = _records(doc, collection)
            for index, item in enumerate(items):
                if isinstance(item, dict) and item.get("id") == wanted:
                    break
            else:
                return None
            updated: Record = {**item, **_without_id(patch)}
            items[index] = updated
            doc[collection] = items
            self._documents.save(doc)
        logger.debug("updated %s/%s fields=%s", collection, wanted, sorted(patch.keys()))
        return updated

    def delete(self, collection: str, record_id: Any) -> bool:
        _check_collection_name(collection)
        wanted = coerce_id(record_id)
        if wanted is None:
            return False
        with self._documents.locked():
            doc = self._documents.load()
            items = _records(doc, collection)
            kept = [item for item in items if not (isinstance(item, dict) and item.get("id") == wanted)]
            if len(kept) == len(items):
                return False
            doc[collection] = kept
            self._documents.save(doc)
        logger.debug("deleted %s/%s", collection, wanted)
        return True
