"""Order records, timestamp parsing and export loading."""

from orders_analyzer.orders.core import Order, OrderLine, Weekday
from orders_analyzer.orders.dates import DATE_FORMAT, parse_creation_date
from orders_analyzer.orders.loader import load_orders, parse_orders

__all__ = [
    "DATE_FORMAT",
    "Order",
    "OrderLine",
    "Weekday",
    "load_orders",
    "parse_creation_date",
    "parse_orders",
]
