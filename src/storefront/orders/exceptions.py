"""Order domain exceptions.

Raised by ``CreateOrderService`` when a request fails validation.
Each kind carries the data a caller needs to render its own message;
``str(exc)`` gives a ready-made English one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List
from uuid import UUID


class OrderCreationError(Exception):
    """Base class for order-creation validation failures."""


class CustomerNotFound(OrderCreationError):
    """The customer referenced by the order does not exist."""

    def __init__(self, customer_id: UUID) -> None:
        self.customer_id = customer_id
        super().__init__("Could not find any customer with the given id")


class ProductsNotFound(OrderCreationError):
    """None of the requested products exist."""

    def __init__(self, product_ids: Iterable[UUID]) -> None:
        self.product_ids = list(product_ids)
        super().__init__("Could not find any products with the given ids")


class ProductNotFound(OrderCreationError):
    """Some of the requested products do not exist.

    ``product_ids`` lists every missing id, in request order.
    """

    def __init__(self, product_ids: Iterable[UUID]) -> None:
        self.product_ids = list(product_ids)
        joined = ", ".join(str(pid) for pid in self.product_ids)
        super().__init__(f"Could not find products: [{joined}]")


@dataclass(frozen=True)
class StockShortage:
    product_id: UUID
    requested: int
    available: int


class InsufficientStock(OrderCreationError):
    """One or more lines request more than the available stock.

    ``shortages`` holds every violating line; ``product_id`` and
    ``quantity`` describe the first one.
    """

    def __init__(self, shortages: Iterable[StockShortage]) -> None:
        self.shortages: List[StockShortage] = list(shortages)
        if not self.shortages:
            raise ValueError("InsufficientStock requires at least one shortage.")
        first = self.shortages[0]
        super().__init__(
            f"The quantity {first.requested} is not available for {first.product_id}"
        )

    @property
    def product_id(self) -> UUID:
        return self.shortages[0].product_id

    @property
    def quantity(self) -> int:
        return self.shortages[0].requested
