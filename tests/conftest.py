import os
import time
from decimal import Decimal

import pytest

from orders_analyzer.orders.core import Order, OrderLine


def make_order(order_id, creation_date, *quantities):
    lines = tuple(
        OrderLine(100 + i, f"Product {i}", qty, Decimal("1.00"))
        for i, qty in enumerate(quantities)
    )
    return Order(order_id, creation_date, lines)


@pytest.fixture
def order_factory():
    return make_order


@pytest.fixture
def local_zone():
    """Switch the process-local zone to a POSIX TZ string for one test."""
    previous = os.environ.get("TZ")

    def switch(tz_string):
        os.environ["TZ"] = tz_string
        time.tzset()

    yield switch

    if previous is None:
        os.environ.pop("TZ", None)
    else:
        os.environ["TZ"] = previous
    time.tzset()
