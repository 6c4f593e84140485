"""Django ORM implementation of the Order repository.

Satisfies ``IOrderRepository`` using Django's QuerySet API.
``create`` is wrapped in ``transaction.atomic()`` so the Order
aggregate (Order + OrderItems) is persisted atomically.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Dict, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from storefront.orders.dtos import OrderOutputDTO
from storefront.orders.models import Order, OrderItem
from storefront.orders.repositories.interfaces import IOrderRepository

logger = structlog.get_logger(__name__)


class OrderDjangoRepository(IOrderRepository):
    """Concrete Order repository backed by Django ORM."""

    @transaction.atomic
    def create(self, data: Dict[str, Any]) -> OrderOutputDTO:
        """Create an order with its items atomically.

        ``data`` keys:
        - ``customer_id`` (required)
        - ``items`` (required): list of dicts with ``product_id``,
          ``quantity``, ``unit_price``
        """
        order = Order(customer_id=data["customer_id"])
        order.save()

        total = Decimal("0.00")
        items = data.get("items", [])
        for item_data in items:
            item = OrderItem(
                order=order,
                product_id=item_data["product_id"],
                quantity=item_data["quantity"],
                unit_price=item_data["unit_price"],
            )
            item.save()
            total += item.subtotal

        order.total_amount = total
        order.save(update_fields=["total_amount"])

        logger.info("order.persisted", order_id=str(order.id), item_count=len(items))

        return OrderOutputDTO.from_entity(order)

    def get_by_id(self, id: str) -> Optional[OrderOutputDTO]:
        """Retrieve an order with its items, or ``None``.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            order = Order.objects.prefetch_related("items").filter(id=id).first()
        except (ValueError, ValidationError):
            return None
        if order is None:
            return None
        return OrderOutputDTO.from_entity(order)
