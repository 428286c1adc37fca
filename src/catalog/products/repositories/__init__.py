from catalog.products.repositories.interfaces import IProductRepository

__all__ = ["IProductRepository"]
