"""Product repository interface (Product Lookup/Update port)."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List
from uuid import UUID

from storefront.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from storefront.products.dtos import StockAdjustmentDTO
    from storefront.products.models import Product


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def find_all_by_id(self, ids: Iterable[UUID]) -> List[Product]:
        """Return the products that exist among *ids*.

        Missing ids are silently omitted; result order is not significant.
        """

    @abstractmethod
    def update_quantity(self, adjustments: Iterable[StockAdjustmentDTO]) -> None:
        """Set the available quantity of each listed product.

        The batch is atomic: an unknown id raises ``ProductNotFound`` and a
        failed conditional write raises ``StockConflict``; in both cases no
        product is changed.
        """
