"""Unit tests for the order domain exceptions."""

from __future__ import annotations

from uuid import uuid4

import pytest

from storefront.orders.exceptions import (
    CustomerNotFound,
    InsufficientStock,
    OrderCreationError,
    ProductNotFound,
    ProductsNotFound,
    StockShortage,
)

pytestmark = pytest.mark.unit


class TestMessages:
    def test_customer_not_found(self):
        exc = CustomerNotFound(uuid4())
        assert str(exc) == "Could not find any customer with the given id"

    def test_products_not_found(self):
        exc = ProductsNotFound([uuid4()])
        assert str(exc) == "Could not find any products with the given ids"

    def test_product_not_found_joins_ids(self):
        a, b = uuid4(), uuid4()
        exc = ProductNotFound([a, b])
        assert str(exc) == f"Could not find products: [{a}, {b}]"
        assert exc.product_ids == [a, b]

    def test_insufficient_stock_names_first_shortage(self):
        first, second = uuid4(), uuid4()
        exc = InsufficientStock(
            [
                StockShortage(product_id=first, requested=5, available=1),
                StockShortage(product_id=second, requested=3, available=0),
            ]
        )
        assert str(exc) == f"The quantity 5 is not available for {first}"
        assert exc.product_id == first
        assert exc.quantity == 5
        assert len(exc.shortages) == 2


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc",
        [
            CustomerNotFound(uuid4()),
            ProductsNotFound([]),
            ProductNotFound([uuid4()]),
            InsufficientStock([StockShortage(uuid4(), 2, 1)]),
        ],
    )
    def test_all_kinds_are_order_creation_errors(self, exc):
        assert isinstance(exc, OrderCreationError)

    def test_insufficient_stock_requires_a_shortage(self):
        with pytest.raises(ValueError):
            InsufficientStock([])
