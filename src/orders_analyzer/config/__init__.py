"""Analyzer configuration (analyzer_config.json and its loader)."""
