from product_service.models.product import Product

__all__ = ["Product"]
