"""Order DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs are immutable (``frozen=True``).

- ``CreateOrderItemDTO``: input for a single order line item.
- ``CreateOrderDTO``: input for order creation (nested items).
- ``OrderItemOutputDTO``: a persisted line item.
- ``OrderOutputDTO``: the persisted order aggregate handed back to callers.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Any, Iterable, List, Mapping
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

if TYPE_CHECKING:
    from storefront.orders.models import Order


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateOrderItemDTO(BaseModel):
    """Immutable DTO for a single order item in a creation request.

    The caller sends ``product_id`` and ``quantity``.
    ``unit_price`` is resolved by the Service Layer from the product catalog.
    """

    model_config = ConfigDict(frozen=True)

    product_id: UUID
    quantity: int

    @field_validator("quantity")
    @classmethod
    def quantity_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Quantity must be at least 1.")
        return v


class CreateOrderDTO(BaseModel):
    """Immutable DTO for order creation requests.

    Validates:
    - ``items`` must contain at least one item.
    - Each item quantity must be positive.
    - A product may appear only once per order.
    """

    model_config = ConfigDict(frozen=True)

    customer_id: UUID
    items: List[CreateOrderItemDTO]

    @field_validator("items")
    @classmethod
    def items_must_not_be_empty(
        cls, v: List[CreateOrderItemDTO]
    ) -> List[CreateOrderItemDTO]:
        if not v:
            raise ValueError("Order must have at least one item.")
        return v

    @model_validator(mode="after")
    def no_duplicate_products(self):
        """Prevent duplicate product IDs in the same order."""
        product_ids = [item.product_id for item in self.items]
        if len(product_ids) != len(set(product_ids)):
            raise ValueError("Duplicate product IDs are not allowed in the same order.")
        return self

    @classmethod
    def from_request(
        cls, customer_id: Any, products: Iterable[Mapping[str, Any]]
    ) -> CreateOrderDTO:
        """Build a DTO from ``[{"id": ..., "quantity": ...}]`` style input."""
        return cls(
            customer_id=customer_id,
            items=[
                CreateOrderItemDTO(product_id=p["id"], quantity=p["quantity"])
                for p in products
            ],
        )

    @property
    def product_ids(self) -> List[UUID]:
        return [item.product_id for item in self.items]


# ---------------------------------------------------------------------------
# Output DTOs
# ---------------------------------------------------------------------------


class OrderItemOutputDTO(BaseModel):
    """Immutable DTO for a persisted order line."""

    model_config = ConfigDict(frozen=True)

    product_id: UUID
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


class OrderOutputDTO(BaseModel):
    """Immutable DTO for a persisted order.

    ``items`` are the line items as stored, including the price snapshot.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    order_number: str
    customer_id: UUID
    total_amount: Decimal
    created_at: datetime
    items: List[OrderItemOutputDTO]

    @classmethod
    def from_entity(cls, order: Order) -> OrderOutputDTO:
        """Build an output DTO from an Order model instance."""
        items = [
            OrderItemOutputDTO(
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=item.unit_price,
                subtotal=item.subtotal,
            )
            for item in order.items.all()
        ]
        return cls(
            id=order.id,
            order_number=order.order_number,
            customer_id=order.customer_id,
            total_amount=order.total_amount,
            created_at=order.created_at,
            items=items,
        )
