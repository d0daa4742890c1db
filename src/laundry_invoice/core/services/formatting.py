"""Display formatting for amounts and dates (Indian locale conventions)."""

from datetime import datetime
from decimal import Decimal


def format_money(value: Decimal | float | int, prefix: str = "Rs.") -> str:
    return f"{prefix}{Decimal(str(value)):.2f}"


def format_date(value: datetime) -> str:
    """19/10/2026 (day and month not zero-padded)."""
    return f"{value.day}/{value.month}/{value.year}"


def format_timestamp(value: datetime) -> str:
    """19/10/2026, 3:04:05 pm"""
    hour = value.hour % 12 or 12
    meridiem = "am" if value.hour < 12 else "pm"
    return f"{format_date(value)}, {hour}:{value.minute:02d}:{value.second:02d} {meridiem}"
