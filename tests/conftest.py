from decimal import Decimal

import pytest

from storefront.customers.models import Customer
from storefront.products.models import Product


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def customer():
    return Customer.objects.create(name="Order Test Customer", email="orders@example.com")


@pytest.fixture()
def product_p1():
    return Product.objects.create(
        sku="P1", name="Product One", price=Decimal("10.00"), stock_quantity=5
    )


@pytest.fixture()
def product_p2():
    return Product.objects.create(
        sku="P2", name="Product Two", price=Decimal("20.00"), stock_quantity=1
    )
