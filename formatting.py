"""Date formatting for the picker: plain functions, pattern passed per call."""

from __future__ import annotations

from datetime import date, time

from calendar_logic import MonthGrid
from selection import nights, trip_endpoints

PLACEHOLDER = "MMM DD, YYYY"
API_PATTERN = "%d-%m-%Y"
TIME_PATTERN = "%H:%M"


def format_date(d: date, pattern: str) -> str:
    """Format *d* with an strftime pattern."""
    return d.strftime(pattern)


def format_display(d: date | None) -> str:
    """``Mar 5, 2024`` style, or the placeholder when no date is set."""
    if d is None:
        return PLACEHOLDER
    # %-d is not portable, build the unpadded day by hand
    return f"{format_date(d, '%b')} {d.day}, {d.year}"


def format_api_date(d: date, pattern: str = API_PATTERN) -> str:
    """``DD-MM-YYYY`` as the price API expects for departures."""
    return format_date(d, pattern)


def format_time(t: time, pattern: str = TIME_PATTERN) -> str:
    """24-hour ``HH:MM`` by default."""
    return t.strftime(pattern)


def month_label(grid: MonthGrid) -> str:
    """``February 2024`` style title for a month grid."""
    name, year = grid.label
    return f"{name} {year}"


def selection_summary(materialized: list[date], today: date) -> str:
    """Footer line describing the current selection."""
    today_str = f"Today: {format_display(today)}"
    departure, ret = trip_endpoints(materialized)
    if departure is None:
        return today_str
    if ret is None:
        return f"{format_display(departure)}     {today_str}"

    n = nights(materialized)
    total_days = n + 1
    range_str = f"{format_display(departure)} → {format_display(ret)}"
    return (f"{range_str}:  {n} night{'s' if n != 1 else ''}  "
            f"({total_days} days)     {today_str}")
