"""Customer repository interface (Customer Lookup port)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from storefront.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from storefront.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate.

    ``get_by_id`` returns ``None`` when the customer does not exist.
    """
