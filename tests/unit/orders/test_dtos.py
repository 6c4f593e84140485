"""Unit tests for Order DTOs.

Covers:
- CreateOrderItemDTO: quantity validation, frozen immutability.
- CreateOrderDTO: items list validation, duplicate product check,
  mapping-style construction.
"""

from __future__ import annotations

from uuid import uuid4

import pytest
from pydantic import ValidationError

from storefront.orders.dtos import CreateOrderDTO, CreateOrderItemDTO

pytestmark = pytest.mark.unit


# ===========================================================================
# CreateOrderItemDTO
# ===========================================================================


class TestCreateOrderItemDTO:
    def test_valid_item(self):
        dto = CreateOrderItemDTO(product_id=uuid4(), quantity=3)
        assert dto.quantity == 3

    def test_zero_quantity_raises(self):
        with pytest.raises(ValidationError, match="Quantity must be at least 1"):
            CreateOrderItemDTO(product_id=uuid4(), quantity=0)

    def test_negative_quantity_raises(self):
        with pytest.raises(ValidationError, match="Quantity must be at least 1"):
            CreateOrderItemDTO(product_id=uuid4(), quantity=-1)

    def test_is_immutable(self):
        dto = CreateOrderItemDTO(product_id=uuid4(), quantity=2)
        with pytest.raises(ValidationError):
            dto.quantity = 5


# ===========================================================================
# CreateOrderDTO
# ===========================================================================


class TestCreateOrderDTO:
    def test_empty_items_raises(self):
        with pytest.raises(ValidationError, match="at least one item"):
            CreateOrderDTO(customer_id=uuid4(), items=[])

    def test_duplicate_product_ids_raises(self):
        product_id = uuid4()
        with pytest.raises(ValidationError, match="Duplicate product IDs"):
            CreateOrderDTO(
                customer_id=uuid4(),
                items=[
                    CreateOrderItemDTO(product_id=product_id, quantity=1),
                    CreateOrderItemDTO(product_id=product_id, quantity=2),
                ],
            )

    def test_product_ids_keep_request_order(self):
        ids = [uuid4(), uuid4(), uuid4()]
        dto = CreateOrderDTO(
            customer_id=uuid4(),
            items=[CreateOrderItemDTO(product_id=pid, quantity=1) for pid in ids],
        )
        assert dto.product_ids == ids


class TestFromRequest:
    def test_builds_items_from_mappings(self):
        customer_id = uuid4()
        product_id = uuid4()

        dto = CreateOrderDTO.from_request(
            str(customer_id), [{"id": str(product_id), "quantity": 2}]
        )

        assert dto.customer_id == customer_id
        assert dto.items[0].product_id == product_id
        assert dto.items[0].quantity == 2

    def test_rejects_malformed_ids(self):
        with pytest.raises(ValidationError):
            CreateOrderDTO.from_request("not-a-uuid", [{"id": uuid4(), "quantity": 1}])
