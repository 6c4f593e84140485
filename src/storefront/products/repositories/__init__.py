"""Product repositories package."""

from storefront.products.repositories.django_repository import (
    ProductDjangoRepository,
)
from storefront.products.repositories.interfaces import IProductRepository

__all__ = ["IProductRepository", "ProductDjangoRepository"]
