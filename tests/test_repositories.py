from __future__ import annotations

import asyncio


def test_async_collection_store_roundtrip(async_store):
    async def _run():
        c1 = await async_store.create("categories", {"name": "Books"})
        c2 = await async_store.create("categories", {"name": "Games"})
        assert (c1["id"], c2["id"]) == (1, 2)

        got = await async_store.get_by_id("categories", "2")
        assert got == {"id": 2, "name": "Games"}

        found = await async_store.find_one("categories", {"name": "Books"})
        assert found is not None and found["id"] == 1

        updated = await async_store.update("categories", 1, {"description": "Lit"})
        assert updated == {"id": 1, "name": "Books", "description": "Lit"}

        assert await async_store.delete("categories", 2) is True
        assert await async_store.delete("categories", 2) is False
        assert await async_store.get_all("categories") == [updated]

    asyncio.run(_run())


def test_async_create_does_not_keep_reference_to_caller_fields(async_store):
    async def _run():
        fields = {"name": "Books"}
        created = await async_store.create("categories", fields)
        fields["name"] = "changed"
        assert created["name"] == "Books"
        assert (await async_store.get_by_id("categories", 1))["name"] == "Books"

    asyncio.run(_run())
