"""
Weekday sales report.

Reads the order export (``source.txt`` in the working directory unless
analyzer_config.json says otherwise), totals units sold per weekday and
prints one line such as ``{SUNDAY=12, MONDAY=5, ...}``.
"""

import logging

from orders_analyzer.analysis.daily_sales import format_daily_sales, total_daily_sales
from orders_analyzer.config.loader import AnalyzerSettings, load_analyzer_config
from orders_analyzer.errors import (
    InvalidCreationDateError,
    OrderDataError,
    QuantityOverflowError,
)
from orders_analyzer.orders.loader import load_orders

logger = logging.getLogger(__name__)

MISSING_FILE_MESSAGE = "Data file does not exists"


def main(config_path: str | None = None) -> int:
    """Run the report once. Returns the process exit status."""
    settings = AnalyzerSettings.from_config(load_analyzer_config(config_path))

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logger.debug("Settings: %s", settings)

    if not settings.source_path.exists():
        print(MISSING_FILE_MESSAGE)
        return 1

    try:
        orders = load_orders(settings.source_path)
    except OrderDataError as e:
        print(e)
        return 1

    try:
        sales = total_daily_sales(
            orders,
            policy=settings.date_policy,
            source_tz=settings.source_timezone,
            report_tz=settings.report_timezone,
        )
    except (InvalidCreationDateError, QuantityOverflowError) as e:
        print(e)
        return 1

    print(format_daily_sales(sales))
    return 0
