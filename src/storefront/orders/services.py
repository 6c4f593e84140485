"""Order service layer (Use Cases).

``CreateOrderService`` validates and commits a purchase order:

1. The customer must exist.
2. The requested products must exist (one batched lookup).
3. Every line must fit in the stock observed by that lookup.
4. Line items snapshot the observed price.
5. The order is persisted, then stock is decremented from the
   persisted line items.

Validation is fail-fast and happens before any write.  The whole use
case is one unit of work (``transaction.atomic``): a failure while
adjusting stock rolls the new order back.  The stock write is
conditional on the quantities observed in step 2, so a concurrent
order that drained the same products surfaces as ``InsufficientStock``
instead of overselling.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Mapping, Sequence
from uuid import UUID

import structlog
from django.db import transaction

from storefront.orders.dtos import CreateOrderDTO
from storefront.orders.exceptions import (
    CustomerNotFound,
    InsufficientStock,
    ProductNotFound,
    ProductsNotFound,
    StockShortage,
)
from storefront.products.dtos import StockAdjustmentDTO
from storefront.products.exceptions import StockConflict

if TYPE_CHECKING:
    from storefront.customers.repositories.interfaces import ICustomerRepository
    from storefront.orders.dtos import CreateOrderItemDTO, OrderOutputDTO
    from storefront.orders.repositories.interfaces import IOrderRepository
    from storefront.products.models import Product
    from storefront.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class CreateOrderService:
    """Application service for the create-order use case.

    Receives its three collaborators via constructor injection (DIP).
    Holds no state between calls.
    """

    def __init__(
        self,
        order_repository: IOrderRepository,
        product_repository: IProductRepository,
        customer_repository: ICustomerRepository,
    ) -> None:
        self._order_repo = order_repository
        self._product_repo = product_repository
        self._customer_repo = customer_repository

    def create_order(
        self, customer_id: Any, products: Iterable[Mapping[str, Any]]
    ) -> OrderOutputDTO:
        """Shortcut for ``execute`` taking ``[{"id": ..., "quantity": ...}]``."""
        return self.execute(CreateOrderDTO.from_request(customer_id, products))

    @transaction.atomic
    def execute(self, dto: CreateOrderDTO) -> OrderOutputDTO:
        """Create an order and decrement stock.

        Raises:
            CustomerNotFound: customer does not exist.
            ProductsNotFound: none of the requested products exist.
            ProductNotFound: some requested products do not exist.
            InsufficientStock: at least one line exceeds available stock,
                either at validation time or after a concurrent update.
        """
        log = logger.bind(customer_id=str(dto.customer_id))
        log.info("order.creation_started", item_count=len(dto.items))

        # 1. Customer
        customer = self._customer_repo.get_by_id(str(dto.customer_id))
        if not customer:
            log.warning("order.customer_not_found")
            raise CustomerNotFound(dto.customer_id)

        # 2. Products, one batched lookup
        found = self._product_repo.find_all_by_id(dto.product_ids)
        if not found:
            log.warning("order.products_not_found")
            raise ProductsNotFound(dto.product_ids)

        products_by_id: Dict[UUID, Product] = {p.id: p for p in found}

        # 3. Missing ids
        missing = [pid for pid in dto.product_ids if pid not in products_by_id]
        if missing:
            log.warning("order.product_not_found", missing=[str(m) for m in missing])
            raise ProductNotFound(missing)

        # 4. Stock sufficiency
        shortages = _find_shortages(dto.items, products_by_id)
        if shortages:
            log.warning("order.insufficient_stock", shortages=len(shortages))
            raise InsufficientStock(shortages)

        # 5. Line items with the observed price
        line_items = [
            {
                "product_id": item.product_id,
                "quantity": item.quantity,
                "unit_price": _observed(products_by_id, item.product_id).price,
            }
            for item in dto.items
        ]

        # 6. Persist
        order = self._order_repo.create(
            {"customer_id": dto.customer_id, "items": line_items}
        )
        log = log.bind(order_id=str(order.id))

        # 7. Decrement stock from the persisted lines
        adjustments = [
            _adjustment(_observed(products_by_id, item.product_id), item.quantity)
            for item in order.items
        ]
        try:
            self._product_repo.update_quantity(adjustments)
        except StockConflict as exc:
            log.warning("order.stock_conflict", product_id=str(exc.product_id))
            self._revalidate_stock(dto.items, exc)
            raise

        log.info(
            "order.created",
            order_number=order.order_number,
            total_amount=str(order.total_amount),
        )
        return order

    def _revalidate_stock(
        self, items: Sequence[CreateOrderItemDTO], conflict: StockConflict
    ) -> None:
        """Re-check stock after a lost conditional write.

        Raises ``InsufficientStock`` when the fresh quantities no longer
        cover the request; returns otherwise so the conflict propagates.
        """
        fresh = self._product_repo.find_all_by_id([item.product_id for item in items])
        available = {p.id: p.stock_quantity for p in fresh}
        shortages = []
        for item in items:
            # A product deleted meanwhile has no stock left to sell.
            in_stock = available.get(item.product_id, 0)
            if in_stock < item.quantity:
                shortages.append(
                    StockShortage(
                        product_id=item.product_id,
                        requested=item.quantity,
                        available=in_stock,
                    )
                )
        if shortages:
            raise InsufficientStock(shortages) from conflict


def _find_shortages(
    items: Sequence[CreateOrderItemDTO], products_by_id: Mapping[UUID, Product]
) -> List[StockShortage]:
    shortages = []
    for item in items:
        available = _observed(products_by_id, item.product_id).stock_quantity
        if available < item.quantity:
            shortages.append(
                StockShortage(
                    product_id=item.product_id,
                    requested=item.quantity,
                    available=available,
                )
            )
    return shortages


def _adjustment(product: Product, ordered: int) -> StockAdjustmentDTO:
    return StockAdjustmentDTO(
        product_id=product.id,
        expected_quantity=product.stock_quantity,
        quantity=product.stock_quantity - ordered,
    )


def _observed(products_by_id: Mapping[UUID, Product], product_id: UUID) -> Product:
    # Existence was established in step 3; a miss here is a bug, not user error.
    product = products_by_id.get(product_id)
    if product is None:
        raise RuntimeError(f"Product {product_id} missing from the validated set.")
    return product
