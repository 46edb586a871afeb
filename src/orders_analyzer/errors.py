"""Errors raised while loading and aggregating orders."""


class OrdersAnalyzerError(Exception):
    """Base error for the orders analyzer."""


class OrderDataError(OrdersAnalyzerError, ValueError):
    """Raised when the order file is not valid JSON or has the wrong shape."""


class InvalidCreationDateError(OrdersAnalyzerError, ValueError):
    """Raised under the strict date policy when an order date cannot be parsed."""

    def __init__(self, order_id: int, creation_date: object) -> None:
        super().__init__(
            f"Order {order_id} has unparseable creationDate {creation_date!r}"
        )
        self.order_id = order_id
        self.creation_date = creation_date


class QuantityOverflowError(OrdersAnalyzerError, OverflowError):
    """Raised when an order's total quantity does not fit a 64-bit integer."""

    def __init__(self, order_id: int, quantity: int) -> None:
        super().__init__(
            f"Order {order_id} total quantity {quantity} is outside the 64-bit range"
        )
        self.order_id = order_id
        self.quantity = quantity
