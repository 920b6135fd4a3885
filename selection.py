"""Tap-driven date-range selection.

The selection is a value: every transition returns a new state and the
caller keeps whichever one is current.  Nothing here knows about widgets.

    Empty --tap--> Single --tap other day--> Range --tap--> Single ...
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum

from loguru import logger

from calendar_logic import as_calendar_date


@dataclass(frozen=True)
class Empty:
    pass


@dataclass(frozen=True)
class Single:
    anchor: date


@dataclass(frozen=True)
class Range:
    start: date
    end: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"range start {self.start} is after end {self.end}")


SelectionState = Empty | Single | Range

EMPTY = Empty()


class DayRole(Enum):
    PLAIN = "plain"
    ENDPOINT = "endpoint"
    IN_RANGE = "in_range"
    PAST = "past"


def select_date(current: SelectionState, tapped: date, today: date) -> SelectionState:
    """Return the selection after the user taps *tapped*.

    Tapping the anchor again leaves a single-day selection unchanged.
    Tapping while a range is committed throws the range away and starts a
    new single-day selection.  Callers are expected not to pass past days.
    """
    tapped = as_calendar_date(tapped)

    if isinstance(current, Single):
        if tapped == current.anchor:
            return current
        start, end = sorted((current.anchor, tapped))
        new: SelectionState = Range(start, end)
    else:
        # Empty and Range both start over
        new = Single(tapped)

    logger.debug("selection {} -> {} (today {})", current, new, as_calendar_date(today))
    return new


def materialize(state: SelectionState, today: date, filter_single: bool = False) -> list[date]:
    """Return the selected dates in chronological order.

    Days of a range before *today* are dropped, so a range reaching into
    the past yields fewer days than its span, possibly none.  A lone
    selected day is returned as-is unless *filter_single* is set.
    """
    today = as_calendar_date(today)

    if isinstance(state, Single):
        if filter_single and state.anchor < today:
            return []
        return [state.anchor]
    if not isinstance(state, Range):
        return []

    days: list[date] = []
    current = max(state.start, today)
    while current <= state.end:
        days.append(current)
        if current == date.max:
            break
        current += timedelta(days=1)
    return days


def role_of(day: date, materialized: list[date], today: date) -> DayRole:
    """Classify *day* for display against the materialized selection."""
    day = as_calendar_date(day)
    if day < as_calendar_date(today):
        return DayRole.PAST
    if not materialized:
        return DayRole.PLAIN

    first, last = materialized[0], materialized[-1]
    if len(materialized) == 1:
        return DayRole.ENDPOINT if day == first else DayRole.PLAIN
    if day == first or day == last:
        return DayRole.ENDPOINT
    if first < day < last:
        return DayRole.IN_RANGE
    return DayRole.PLAIN


def trip_endpoints(materialized: list[date]) -> tuple[date | None, date | None]:
    """Return (departure, return); return is only set for two or more days."""
    if not materialized:
        return None, None
    if len(materialized) < 2:
        return materialized[0], None
    return materialized[0], materialized[-1]


def nights(materialized: list[date]) -> int:
    """Nights between departure and return; 0 without a return date."""
    if len(materialized) < 2:
        return 0
    return (materialized[-1] - materialized[0]).days
