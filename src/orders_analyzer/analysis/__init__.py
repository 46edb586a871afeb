"""Aggregations over loaded orders."""

from orders_analyzer.analysis.daily_sales import (
    DatePolicy,
    daily_sales_frame,
    format_daily_sales,
    total_daily_sales,
)

__all__ = ["DatePolicy", "daily_sales_frame", "format_daily_sales", "total_daily_sales"]
