from __future__ import annotations

from typing import Any, Mapping

from errors import NotFound, ValidationError
from persistence.interfaces import Record
from persistence.records import CATEGORIES
from persistence.repositories import AsyncDocumentStore

CATEGORY_NOT_FOUND = "Category not found"


def _check_name(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Category name is required")
    return value.strip()


class CategoryService:
    def __init__(self, store: AsyncDocumentStore):
        self._store = store

    async def get_all(self) -> list[Record]:
        return await self._store.get_all(CATEGORIES)

    async def get_by_id(self, category_id: Any) -> Record:
        category = await self._store.get_by_id(CATEGORIES, category_id)
        if category is None:
            raise NotFound(CATEGORY_NOT_FOUND)
        return category

    async def create(self, data: Mapping[str, Any]) -> Record:
        fields: dict[str, Any] = {"name": _check_name(data.get("name"))}
        if data.get("description") is not None:
            fields["description"] = data["description"]
        return await self._store.create(CATEGORIES, fields)

    async def update(self, category_id: Any, data: Mapping[str, Any]) -> Record:
        patch = dict(data)
        if "name" in patch:
            patch["name"] = _check_name(patch["name"])
        category = await self._store.update(CATEGORIES, category_id, patch)
        if category is None:
            raise NotFound(CATEGORY_NOT_FOUND)
        return category

    async def delete(self, category_id: Any) -> dict[str, str]:
        if not await self._store.delete(CATEGORIES, category_id):
            raise NotFound(CATEGORY_NOT_FOUND)
        return {"message": "Category deleted successfully"}
