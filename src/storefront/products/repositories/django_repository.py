"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.

Concurrency control for stock:
- ``find_all_by_id`` takes row-level locks (``SELECT FOR UPDATE``) in
  primary-key order, so two order transactions touching the same
  products serialize instead of deadlocking.
- ``update_quantity`` is a compare-and-set on ``stock_quantity``; a
  stale ``expected_quantity`` raises ``StockConflict`` and the whole
  batch is rolled back.
"""

from __future__ import annotations

from typing import Iterable, List, Optional
from uuid import UUID

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from storefront.products.dtos import StockAdjustmentDTO
from storefront.products.exceptions import ProductNotFound, StockConflict
from storefront.products.models import Product
from storefront.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a live product by primary key.

        Returns ``None`` for non-existent, soft-deleted or invalid IDs.
        """
        try:
            return Product.objects.alive().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    @transaction.atomic
    def find_all_by_id(self, ids: Iterable[UUID]) -> List[Product]:
        """Return the live products among *ids*, locked for update."""
        valid_ids = _parse_ids(ids)
        if not valid_ids:
            return []
        products = list(
            Product.objects.alive()
            .select_for_update()
            .filter(id__in=valid_ids)
            .order_by("id")
        )
        logger.info(
            "product.batch_lookup",
            requested=len(valid_ids),
            found=len(products),
        )
        return products

    @transaction.atomic
    def update_quantity(self, adjustments: Iterable[StockAdjustmentDTO]) -> None:
        """Apply a batch of stock levels atomically (compare-and-set)."""
        batch = sorted(adjustments, key=lambda adj: str(adj.product_id))
        if not batch:
            return

        existing = set(
            Product.objects.alive()
            .filter(id__in=[adj.product_id for adj in batch])
            .values_list("id", flat=True)
        )
        unknown = [adj.product_id for adj in batch if adj.product_id not in existing]
        if unknown:
            logger.warning(
                "product.stock_update_rejected",
                unknown_ids=[str(pid) for pid in unknown],
            )
            raise ProductNotFound(unknown)

        now = timezone.now()
        for adj in batch:
            queryset = Product.objects.alive().filter(id=adj.product_id)
            if adj.expected_quantity is not None:
                queryset = queryset.filter(stock_quantity=adj.expected_quantity)
            updated = queryset.update(stock_quantity=adj.quantity, updated_at=now)
            if not updated:
                logger.warning(
                    "product.stock_conflict",
                    product_id=str(adj.product_id),
                    expected=adj.expected_quantity,
                )
                raise StockConflict(adj.product_id, adj.expected_quantity)

            logger.info(
                "product.stock_updated",
                product_id=str(adj.product_id),
                stock_quantity=adj.quantity,
            )


def _parse_ids(ids: Iterable[UUID]) -> List[UUID]:
    parsed = []
    for raw in ids:
        try:
            parsed.append(raw if isinstance(raw, UUID) else UUID(str(raw)))
        except ValueError:
            continue
    return parsed
