import logging
from fastapi import APIRouter, Depends

from product_service.config import Config
from product_service.deps import get_store
from product_service.schemas.product import ProductInput, ProductOut, DeleteResult
from product_service.services.product_store import ProductStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["products"])


def page_bounds(start: int, count: int | None) -> tuple[int, int | None]:
    """Clamp paging arguments instead of rejecting them. No count means no limit."""
    if count is not None and (count < 1 or count > Config.MAX_PAGE_SIZE):
        count = Config.DEFAULT_PAGE_SIZE
    if start < 0:
        start = 0
    return start, count


@router.get("/products", response_model=list[ProductOut])
async def list_products(
    start: int = 0,
    count: int | None = None,
    store: ProductStore = Depends(get_store),
):
    start, count = page_bounds(start, count)
    return await store.list_products(start, count)


@router.get("/products/{since}", response_model=list[ProductOut])
async def list_changed_products(since: int, store: ProductStore = Depends(get_store)):
    """Products whose changed marker is at least `since`."""
    return await store.list_changed_since(since)


@router.get("/product/{product_id}", response_model=ProductOut)
async def get_product(product_id: int, store: ProductStore = Depends(get_store)):
    return await store.fetch(product_id)


@router.post("/product", response_model=ProductOut, status_code=201)
async def create_product(data: ProductInput, store: ProductStore = Depends(get_store)):
    product = await store.create(data)
    logger.info(f"Created product {product.id}")
    return product


@router.put("/product/{product_id}", response_model=ProductOut)
async def update_product(
    product_id: int,
    data: ProductInput,
    store: ProductStore = Depends(get_store),
):
    """Guarded update.

    Always 200 when the product exists. If `changed` is not greater than the
    stored value the response is the unchanged product.
    """
    return await store.update(product_id, data)


@router.delete("/product/{product_id}", response_model=DeleteResult)
async def delete_product(product_id: int, store: ProductStore = Depends(get_store)):
    # The store delete is idempotent; 404 comes from this lookup
    await store.fetch(product_id)
    await store.delete(product_id)
    logger.info(f"Deleted product {product_id}")
    return DeleteResult()
