"""Product DTOs exchanged with the Product Lookup/Update port.

- ``StockAdjustmentDTO``: one entry of a batched stock update.
"""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator


class StockAdjustmentDTO(BaseModel):
    """Immutable request to set a product's available quantity.

    ``quantity`` is the new absolute stock level.  When
    ``expected_quantity`` is given the write is conditional: it only
    applies if the stored stock still equals that value.
    """

    model_config = ConfigDict(frozen=True)

    product_id: UUID
    quantity: int
    expected_quantity: Optional[int] = None

    @field_validator("quantity")
    @classmethod
    def quantity_must_not_be_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Stock quantity cannot be negative.")
        return v
