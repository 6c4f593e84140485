"""Order repository interface (Order Store port).

The Service Layer depends exclusively on this contract (DIP).
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Dict

from storefront.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from storefront.orders.dtos import OrderOutputDTO


class IOrderRepository(IRepository["OrderOutputDTO"]):
    """Repository contract for the Order aggregate root.

    The Order aggregate includes its OrderItem children; creation must
    be atomic.
    """

    @abstractmethod
    def create(self, data: Dict[str, Any]) -> OrderOutputDTO:
        """Create an order with its items atomically.

        ``data`` must include ``customer_id`` and ``items`` (list of dicts
        with ``product_id``, ``quantity``, ``unit_price``).  Returns the
        stored aggregate, including storage-assigned identifiers.
        """
