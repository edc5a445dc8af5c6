import pytest

from product_service.db.seed import seed_database


@pytest.mark.asyncio
async def test_seed_only_empty_table(database, store):
    assert await seed_database(database, count=3) == 3
    assert await seed_database(database, count=3) == 0

    products = await store.list_products(0, 10)
    assert [p.name for p in products] == ["Product 0", "Product 1", "Product 2"]
    assert all(p.changed == 5 for p in products)

