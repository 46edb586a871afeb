"""Orders Analyzer: weekday sales report over a JSON order export."""

__version__ = "0.1.0"
