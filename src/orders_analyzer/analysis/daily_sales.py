"""
Units sold per weekday.

Each order is dated from its ``creation_date`` and its line quantities are
summed onto that weekday. What happens on an unparseable date is set by
``DatePolicy``:

- TRUNCATE (default): stop at the first bad date and return what was counted
  so far. Later orders are dropped even when well-formed. This reproduces the
  historical report and is most likely a defect; the result carries no sign
  that it was cut short, only a warning in the log.
- SKIP: leave out the bad order and keep going.
- STRICT: raise InvalidCreationDateError.
"""

import enum
import logging
from collections.abc import Sequence
from datetime import tzinfo

import numpy as np
import pandas as pd

from orders_analyzer.errors import InvalidCreationDateError, QuantityOverflowError
from orders_analyzer.orders.core import Order, Weekday
from orders_analyzer.orders.dates import parse_creation_date

logger = logging.getLogger(__name__)

FRAME_COLUMNS = ["order_id", "created_at", "weekday", "quantity"]
INT64 = np.iinfo(np.int64)


class DatePolicy(enum.Enum):
    TRUNCATE = "truncate"
    SKIP = "skip"
    STRICT = "strict"


def daily_sales_frame(
    orders: Sequence[Order],
    policy: DatePolicy = DatePolicy.TRUNCATE,
    source_tz: tzinfo | None = None,
    report_tz: tzinfo | None = None,
) -> pd.DataFrame:
    """Per-order rows behind the weekday totals.

    Args:
        orders: Orders in export order.
        policy: Handling of unparseable creation dates.
        source_tz: Zone the timestamps are written in (None: local zone).
        report_tz: Zone the weekday is read in (None: same as source_tz).

    Returns a DataFrame with columns [order_id, created_at, weekday, quantity],
    one row per order that made it into the totals.
    """
    rows: list[dict[str, object]] = []

    for position, order in enumerate(orders):
        created_at = parse_creation_date(order.creation_date, source_tz, report_tz)

        if created_at is None:
            if policy is DatePolicy.STRICT:
                raise InvalidCreationDateError(order.order_id, order.creation_date)
            if policy is DatePolicy.SKIP:
                logger.warning("Skipping order %s with bad creation date", order.order_id)
                continue
            logger.warning(
                "Stopping at order %s with bad creation date; "
                "%d of %d orders not counted",
                order.order_id,
                len(orders) - position,
                len(orders),
            )
            break

        quantity = order.total_quantity
        if not INT64.min <= quantity <= INT64.max:
            raise QuantityOverflowError(order.order_id, quantity)

        rows.append(
            {
                "order_id": order.order_id,
                "created_at": created_at,
                "weekday": Weekday.of(created_at).name,
                "quantity": quantity,
            }
        )

    frame = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    return frame.astype({"order_id": np.int64, "quantity": np.int64})


def total_daily_sales(
    orders: Sequence[Order],
    policy: DatePolicy = DatePolicy.TRUNCATE,
    source_tz: tzinfo | None = None,
    report_tz: tzinfo | None = None,
) -> dict[Weekday, int]:
    """
    Total units sold per weekday.

    Always returns all seven weekdays, Sunday first, with zero for days
    without sales.
    """
    frame = daily_sales_frame(orders, policy, source_tz, report_tz)
    # Summed as Python ints: weekday totals must not wrap at 64 bits
    totals = {
        weekday: sum(int(q) for q in quantities)
        for weekday, quantities in frame.groupby("weekday")["quantity"]
    }
    return {day: totals.get(day.name, 0) for day in Weekday}


def format_daily_sales(sales: dict[Weekday, int]) -> str:
    """Render totals as ``{SUNDAY=12, MONDAY=5, ...}``, Sunday first."""
    parts = [f"{day.name}={sales[day]}" for day in Weekday if day in sales]
    return "{" + ", ".join(parts) + "}"
