import logging

from sqlalchemy import select, update, delete
from sqlalchemy.exc import NoResultFound, SQLAlchemyError

from product_service.db.database import Database
from product_service.exceptions import NotFoundError, StoreError
from product_service.models import Product
from product_service.schemas.product import ProductInput

logger = logging.getLogger(__name__)


class ProductStore:
    """Persistence operations for the products table.

    Every method is a single SQL statement, except update which is a guarded
    UPDATE followed by a fresh read. Each call runs in its own session.
    """

    def __init__(self, database: Database):
        self.database = database

    async def fetch(self, product_id: int) -> Product:
        """Read one product by primary key.

        Raises:
            NotFoundError: No row has this id
            StoreError: On any database failure
        """
        try:
            async with self.database.session() as session:
                result = await session.execute(
                    select(Product).where(Product.id == product_id)
                )
                return result.scalar_one()
        except NoResultFound:
            raise NotFoundError("Product not found")
        except SQLAlchemyError as e:
            logger.error(f"Failed to fetch product {product_id}: {e}")
            raise StoreError() from e

    async def create(self, data: ProductInput) -> Product:
        """Insert a new product; the database assigns the id."""
        product = Product(
            name=data.name,
            description=data.description,
            price=data.price,
            changed=data.changed,
        )
        try:
            async with self.database.session() as session:
                session.add(product)
                await session.commit()
                return product
        except SQLAlchemyError as e:
            logger.error(f"Failed to create product: {e}")
            raise StoreError() from e

    async def update(self, product_id: int, data: ProductInput) -> Product:
        """Apply the update only if data.changed is greater than the stored value.

        A rejected guard is not an error: zero rows are touched and the
        current row is returned as-is. The caller can only tell the two
        outcomes apart by comparing the result to what it sent.

        Raises:
            NotFoundError: No row has this id
            StoreError: On any database failure
        """
        stmt = (
            update(Product)
            .where(Product.id == product_id, Product.changed < data.changed)
            .values(
                name=data.name,
                description=data.description,
                price=data.price,
                changed=data.changed,
            )
            .execution_options(synchronize_session=False)
        )
        try:
            async with self.database.session() as session:
                result = await session.execute(stmt)
                applied = result.rowcount
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to update product {product_id}: {e}")
            raise StoreError() from e

        if applied == 0:
            logger.info(f"Update of product {product_id} not applied (changed={data.changed})")

        return await self.fetch(product_id)

    async def delete(self, product_id: int) -> None:
        """Remove a product. Deleting a missing id succeeds."""
        try:
            async with self.database.session() as session:
                await session.execute(delete(Product).where(Product.id == product_id))
                await session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to delete product {product_id}: {e}")
            raise StoreError() from e

    async def list_products(self, start: int, count: int | None = None) -> list[Product]:
        """A page of products ordered by id. A count of None returns every row from start."""
        stmt = select(Product).order_by(Product.id).offset(start)
        if count is not None:
            stmt = stmt.limit(count)
        return await self._fetch_all(stmt)

    async def list_changed_since(self, threshold: int) -> list[Product]:
        """All products whose changed marker is >= threshold."""
        stmt = select(Product).where(Product.changed >= threshold).order_by(Product.id)
        return await self._fetch_all(stmt)

    async def _fetch_all(self, stmt) -> list[Product]:
        try:
            async with self.database.session() as session:
                result = await session.execute(stmt)
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(f"Failed to list products: {e}")
            raise StoreError() from e
