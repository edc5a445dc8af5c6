import asyncio
import logging
from decimal import Decimal

from sqlalchemy import select, func

from product_service.db.database import Database
from product_service.models import Product

logger = logging.getLogger(__name__)

SEED_COUNT = 5
SEED_CHANGED = 5


def sample_products(count: int) -> list[Product]:
    """Products named 'Product 0'..'Product N-1' priced 10, 20, 30..."""
    return [
        Product(
            name=f"Product {i}",
            description="",
            price=Decimal((i + 1) * 10),
            changed=SEED_CHANGED,
        )
        for i in range(count)
    ]


async def seed_database(database: Database, count: int = SEED_COUNT) -> int:
    """Insert sample products into an empty table. Returns how many were added."""
    await database.create_tables()

    async with database.session() as session:
        existing = await session.scalar(select(func.count()).select_from(Product))
        if existing:
            logger.info("Database already seeded")
            return 0

        session.add_all(sample_products(count))
        await session.commit()

    logger.info(f"Seeded {count} products")
    return count


async def main():
    database = Database()
    await database.connect()
    try:
        await seed_database(database)
    finally:
        await database.disconnect()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
