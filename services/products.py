"""
Read-only product catalog.

Products reference their category through `categoryId`; every product handed
out carries the category's name under `category` ("Unknown" when the
category is gone).
"""
from __future__ import annotations

from typing import Any

from errors import NotFound
from persistence.collection_store import coerce_id
from persistence.interfaces import Record
from persistence.records import CATEGORIES, PRODUCTS
from persistence.repositories import AsyncDocumentStore

UNKNOWN_CATEGORY = "Unknown"


def _with_category(product: Record, category: Record | None) -> Record:
    name = category.get("name") if category else None
    return {**product, "category": name if name is not None else UNKNOWN_CATEGORY}


def _text(value: Any) -> str:
    return value.lower() if isinstance(value, str) else ""


class ProductService:
    def __init__(self, store: AsyncDocumentStore):
        self._store = store

    async def get_all(self) -> list[Record]:
        products = await self._store.get_all(PRODUCTS)
        categories = {c.get("id"): c for c in await self._store.get_all(CATEGORIES) if isinstance(c, dict)}
        return [_with_category(p, categories.get(coerce_id(p.get("categoryId")))) for p in products]

    async def get_by_id(self, product_id: Any) -> Record:
        product = await self._store.get_by_id(PRODUCTS, product_id)
        if product is None:
            raise NotFound("Product not found")
        category = await self._store.get_by_id(CATEGORIES, product.get("categoryId"))
        return _with_category(product, category)

    async def search(self, query: str | None) -> list[Record]:
        products = await self.get_all()
        if not query:
            return products
        term = query.lower()
        return [p for p in products if term in _text(p.get("name")) or term in _text(p.get("description"))]

    async def filter_by_category(self, category_id: Any) -> list[Record]:
        products = await self.get_all()
        if category_id is None or category_id == "":
            return products
        wanted = coerce_id(category_id)
        return [p for p in products if coerce_id(p.get("categoryId")) == wanted]
