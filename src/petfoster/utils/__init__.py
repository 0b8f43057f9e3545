"""Shared helpers: dates, money rounding, formatting and logging."""
