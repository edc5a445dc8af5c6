from fastapi import Request

from product_service.services.product_store import ProductStore


def get_store(request: Request) -> ProductStore:
    """The ProductStore built at startup and kept on application state."""
    return request.app.state.store
