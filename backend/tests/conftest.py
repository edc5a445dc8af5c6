import pytest
from unittest.mock import AsyncMock
from httpx import AsyncClient, ASGITransport
from sqlalchemy import text

from product_service.main import app
from product_service.db.database import Database
from product_service.services.product_store import ProductStore
from product_service.db.seed import sample_products


@pytest.fixture
def mock_store():
    """Mock ProductStore for testing without real DB connection."""
    mock = AsyncMock(spec=ProductStore)
    mock.list_products = AsyncMock(return_value=[])
    mock.list_changed_since = AsyncMock(return_value=[])
    return mock


@pytest.fixture
async def client(mock_store):
    """Async test client with mocked store."""
    app.state.store = mock_store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    del app.state.store


@pytest.fixture
async def database(tmp_path):
    """Fresh SQLite database file with the products table created."""
    db = Database(url=f"sqlite:///{tmp_path / 'products.db'}", db_type="sqlite")
    await db.connect()
    await db.create_tables()
    yield db
    await db.disconnect()


@pytest.fixture
def store(database):
    return ProductStore(database)


@pytest.fixture
async def live_client(store):
    """Async test client backed by a real SQLite store."""
    app.state.store = store

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    del app.state.store


@pytest.fixture
def add_products(database):
    """Insert `count` seed-style products (changed=5, price (i+1)*10)."""
    async def _add(count: int = 1):
        async with database.session() as session:
            session.add_all(sample_products(max(count, 1)))
            await session.commit()
    return _add


@pytest.fixture
def run_sql(database):
    """Execute a raw statement against the test database."""
    async def _run(sql: str):
        async with database.engine.begin() as conn:
            await conn.execute(text(sql))
    return _run
