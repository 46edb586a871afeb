import enum
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


class Weekday(enum.Enum):
    # Declaration order is the report order
    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    @classmethod
    def of(cls, moment: datetime) -> "Weekday":
        """Weekday of a datetime, read from its own wall clock."""
        # isoweekday(): Monday=1 .. Sunday=7, so % 7 puts Sunday first
        return list(cls)[moment.isoweekday() % 7]


@dataclass(frozen=True)
class OrderLine:
    """
    One product line of an order.

    Only ``quantity`` feeds the weekday report; the other fields are kept so
    the record matches the export format.
    """

    product_id: int
    name: str
    quantity: int
    unit_price: Decimal


@dataclass(frozen=True)
class Order:
    """
    A customer order as exported by the shop.

    ``creation_date`` stays as text (``YYYY-MM-DDTHH:MM:SS``); it is parsed
    when the order is aggregated.
    """

    order_id: int
    creation_date: str
    order_lines: tuple[OrderLine, ...] = field(default_factory=tuple)

    @property
    def total_quantity(self) -> int:
        """Units sold across all lines of the order."""
        return sum(line.quantity for line in self.order_lines)
