"""
Deserialization of the order export.

The export is a JSON array of orders using camelCase keys (``orderId``,
``creationDate``, ``orderLines``; lines carry ``productId``, ``name``,
``quantity`` and ``unitPrice``). Prices are kept as exact ``Decimal`` values.
"""

import json
import logging
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from orders_analyzer.errors import OrderDataError
from orders_analyzer.orders.core import Order, OrderLine

logger = logging.getLogger(__name__)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _require(record: dict[str, Any], key: str, where: str) -> Any:
    if key not in record:
        raise OrderDataError(f"Missing '{key}' in {where}")
    return record[key]


def _as_int(value: Any, key: str, where: str) -> int:
    # bool is an int subclass but never a valid id or quantity
    if isinstance(value, bool) or not isinstance(value, int):
        raise OrderDataError(f"Expected integer for '{key}' in {where}, got {value!r}")
    if not INT64_MIN <= value <= INT64_MAX:
        raise OrderDataError(
            f"Integer for '{key}' in {where} is outside the 64-bit range: {value}"
        )
    return value


def _as_str(value: Any, key: str, where: str) -> str:
    if not isinstance(value, str):
        raise OrderDataError(f"Expected string for '{key}' in {where}, got {value!r}")
    return value


def _as_decimal(value: Any, key: str, where: str) -> Decimal:
    if isinstance(value, bool) or not isinstance(value, (str, int, Decimal)):
        raise OrderDataError(f"Expected decimal for '{key}' in {where}, got {value!r}")
    try:
        amount = Decimal(value)
    except InvalidOperation:
        raise OrderDataError(
            f"Expected decimal for '{key}' in {where}, got {value!r}"
        ) from None
    if not amount.is_finite():
        raise OrderDataError(f"Expected decimal for '{key}' in {where}, got {value!r}")
    return amount


def parse_order_line(record: Any, where: str) -> OrderLine:
    if not isinstance(record, dict):
        raise OrderDataError(f"Expected object for {where}, got {type(record).__name__}")
    return OrderLine(
        product_id=_as_int(_require(record, "productId", where), "productId", where),
        name=_as_str(_require(record, "name", where), "name", where),
        quantity=_as_int(_require(record, "quantity", where), "quantity", where),
        unit_price=_as_decimal(_require(record, "unitPrice", where), "unitPrice", where),
    )


def parse_order(record: Any, where: str) -> Order:
    if not isinstance(record, dict):
        raise OrderDataError(f"Expected object for {where}, got {type(record).__name__}")

    order_id = _as_int(_require(record, "orderId", where), "orderId", where)
    # creationDate is validated later by the date parser, not here
    creation_date = _as_str(
        _require(record, "creationDate", where), "creationDate", where
    )
    raw_lines = _require(record, "orderLines", where)
    if not isinstance(raw_lines, list):
        raise OrderDataError(
            f"Expected array for 'orderLines' in {where}, got {type(raw_lines).__name__}"
        )

    lines = tuple(
        parse_order_line(line, f"{where}.orderLines[{i}]")
        for i, line in enumerate(raw_lines)
    )
    return Order(order_id=order_id, creation_date=creation_date, order_lines=lines)


def parse_orders(data: Any) -> list[Order]:
    """Convert decoded JSON (a list of order objects) into Order records."""
    if not isinstance(data, list):
        raise OrderDataError(
            f"Expected a JSON array of orders, got {type(data).__name__}"
        )
    return [parse_order(record, f"orders[{i}]") for i, record in enumerate(data)]


def load_orders(path: str | Path) -> list[Order]:
    """
    Read and deserialize the order export at ``path``.

    Raises OrderDataError when the file is not UTF-8 JSON or the records do
    not have the expected shape. A missing file raises FileNotFoundError.
    """
    final_path = Path(path)
    try:
        with open(final_path, encoding="utf-8") as f:
            text = f.read()
        # Non-integer numbers become Decimal so prices never pass through float
        data = json.loads(text, parse_float=Decimal)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise OrderDataError(str(e)) from e

    orders = parse_orders(data)
    logger.info("Loaded %d orders from %s", len(orders), final_path)
    return orders
