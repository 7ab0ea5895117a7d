from __future__ import annotations

import asyncio

import pytest

from errors import NotFound, ValidationError
from services import CategoryService, ProductService


@pytest.fixture
def categories(async_store):
    return CategoryService(async_store)


@pytest.fixture
def products(async_store, store):
    store.create("categories", {"name": "Books"})
    store.create("categories", {"name": "Games"})
    store.create("products", {"name": "Dune", "description": "Desert planet novel", "price": 9.5, "categoryId": 1})
    store.create("products", {"name": "Chess", "description": "Board game", "price": 20, "categoryId": 2})
    store.create("products", {"name": "Atlas", "description": "Maps of the world", "price": 30, "categoryId": 99})
    return ProductService(async_store)


def test_category_crud(categories):
    async def _run():
        created = await categories.create({"name": "Books", "extra": "dropped"})
        assert created == {"id": 1, "name": "Books"}

        updated = await categories.update("1", {"description": "Lit"})
        assert updated == {"id": 1, "name": "Books", "description": "Lit"}

        assert await categories.get_all() == [updated]
        assert await categories.get_by_id(1) == updated

        assert await categories.delete(1) == {"message": "Category deleted successfully"}
        with pytest.raises(NotFound):
            await categories.get_by_id(1)

    asyncio.run(_run())


def test_category_name_is_required(categories):
    with pytest.raises(ValidationError) as exc:
        asyncio.run(categories.create({"description": "no name"}))
    assert exc.value.message == "Category name is required"


def test_category_update_rejects_blank_name(categories):
    asyncio.run(categories.create({"name": "Books"}))
    with pytest.raises(ValidationError):
        asyncio.run(categories.update(1, {"name": "  "}))


def test_missing_category_is_not_found(categories):
    with pytest.raises(NotFound):
        asyncio.run(categories.update(5, {"name": "x"}))
    with pytest.raises(NotFound):
        asyncio.run(categories.delete(5))


def test_products_carry_category_name(products):
    listed = asyncio.run(products.get_all())
    assert [(p["name"], p["category"]) for p in listed] == [
        ("Dune", "Books"),
        ("Chess", "Games"),
        ("Atlas", "Unknown"),
    ]


def test_product_by_id(products):
    product = asyncio.run(products.get_by_id("2"))
    assert product["name"] == "Chess"
    assert product["category"] == "Games"

    with pytest.raises(NotFound):
        asyncio.run(products.get_by_id(42))


def test_product_search_is_case_insensitive_over_name_and_description(products):
    assert [p["name"] for p in asyncio.run(products.search("DUNE"))] == ["Dune"]
    assert [p["name"] for p in asyncio.run(products.search("game"))] == ["Chess"]
    assert len(asyncio.run(products.search(""))) == 3


def test_product_filter_by_category(products):
    assert [p["name"] for p in asyncio.run(products.filter_by_category("1"))] == ["Dune"]
    assert [p["name"] for p in asyncio.run(products.filter_by_category(2))] == ["Chess"]
    assert asyncio.run(products.filter_by_category("nope")) == []
    assert len(asyncio.run(products.filter_by_category(None))) == 3
