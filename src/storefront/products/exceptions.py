"""Product repository exceptions.

Raised by the Product Lookup/Update collaborator.  The order service
lets them propagate unchanged, except that a ``StockConflict`` is
re-validated against fresh stock first.
"""

from __future__ import annotations

from typing import Iterable
from uuid import UUID


class ProductNotFound(Exception):
    """A stock update referenced products that do not exist.

    The whole batch is rejected; nothing is written.
    """

    def __init__(self, product_ids: Iterable[UUID]) -> None:
        self.product_ids = list(product_ids)
        joined = ", ".join(str(pid) for pid in self.product_ids)
        super().__init__(f"Cannot update stock of unknown products: [{joined}]")


class StockConflict(Exception):
    """A conditional stock update lost a race with a concurrent writer.

    Raised when the stored quantity no longer matches the quantity the
    caller observed; nothing from the batch is written.
    """

    def __init__(self, product_id: UUID, expected_quantity: int) -> None:
        self.product_id = product_id
        self.expected_quantity = expected_quantity
        super().__init__(
            f"Stock of product {product_id} changed concurrently "
            f"(expected {expected_quantity})."
        )
