"""Django ORM implementation of the Customer repository.

Error handling follows the Null Object pattern: methods return ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity into a domain error.
"""

from __future__ import annotations

from typing import Optional

import structlog
from django.core.exceptions import ValidationError

from storefront.customers.models import Customer
from storefront.customers.repositories.interfaces import ICustomerRepository

logger = structlog.get_logger(__name__)


class CustomerDjangoRepository(ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Customer]:
        """Retrieve a live customer by primary key.

        Returns ``None`` for non-existent, soft-deleted or invalid IDs
        (e.g. malformed UUID).
        """
        try:
            customer = Customer.objects.alive().filter(id=id).first()
        except (ValueError, ValidationError):
            customer = None
        if customer is None:
            logger.debug("customer.lookup_missed", customer_id=str(id))
        return customer
