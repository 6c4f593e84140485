"""Unit tests for Order and OrderItem models."""

from __future__ import annotations

import re
from decimal import Decimal
from unittest.mock import patch

import pytest
from django.core.exceptions import ValidationError

from storefront.orders.models import Order, OrderItem

pytestmark = pytest.mark.unit

ORDER_NUMBER_RE = re.compile(r"^ORD-\d{8}-[0-9A-F]{6}$")


class TestOrderNumber:
    def test_generated_on_first_save(self, customer):
        order = Order(customer=customer)
        order.save()
        assert ORDER_NUMBER_RE.match(order.order_number)

    def test_kept_on_later_saves(self, customer):
        order = Order.objects.create(customer=customer)
        number = order.order_number
        order.total_amount = Decimal("12.00")
        order.save()
        order.refresh_from_db()
        assert order.order_number == number

    def test_gives_up_after_repeated_collisions(self, customer):
        existing = Order.objects.create(customer=customer)
        with patch.object(
            Order, "generate_order_number", return_value=existing.order_number
        ):
            with pytest.raises(RuntimeError, match="unique order_number"):
                Order(customer=customer).save()


class TestOrderItem:
    def test_subtotal_is_quantity_times_unit_price(self, customer, product_p1):
        order = Order.objects.create(customer=customer)
        item = OrderItem.objects.create(
            order=order, product=product_p1, quantity=3, unit_price=Decimal("10.00")
        )
        assert item.subtotal == Decimal("30.00")

    def test_unit_price_is_not_taken_from_product(self, customer, product_p1):
        order = Order.objects.create(customer=customer)
        with pytest.raises(ValidationError):
            OrderItem(order=order, product=product_p1, quantity=1).save()

    def test_clean_rejects_zero_quantity(self, customer, product_p1):
        order = Order.objects.create(customer=customer)
        item = OrderItem(
            order=order, product=product_p1, quantity=0, unit_price=Decimal("1.00")
        )
        with pytest.raises(ValidationError):
            item.clean()

    def test_snapshot_independent_of_product_price(self, customer, product_p1):
        order = Order.objects.create(customer=customer)
        item = OrderItem.objects.create(
            order=order, product=product_p1, quantity=1, unit_price=product_p1.price
        )
        product_p1.price = Decimal("99.99")
        product_p1.save()

        item.refresh_from_db()
        assert item.unit_price == Decimal("10.00")
