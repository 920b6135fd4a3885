"""Pure calendar calculations — no UI dependencies."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime

DAY_ABBR = ["Mo", "Tu", "We", "Th", "Fr", "Sa", "Su"]


class InvalidDate(ValueError):
    """A date or month computation could not be resolved."""


def as_calendar_date(value: date) -> date:
    """Return *value* as a plain date, dropping any time-of-day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def weekday_index_monday(d: date) -> int:
    """Day-of-week position with Monday = 0 … Sunday = 6."""
    return d.weekday()


def normalize_sunday_first_weekday(native: int) -> int:
    """Map a Sunday-first weekday number (Sunday = 1 … Saturday = 7) to Monday = 0."""
    return (native + 5) % 7


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month, leap years included."""
    try:
        return calendar.monthrange(year, month)[1]
    except (ValueError, calendar.IllegalMonthError) as exc:
        raise InvalidDate(f"no such month: {year}-{month}") from exc


# --- grid cells -------------------------------------------------------------

@dataclass(frozen=True)
class Blank:
    """Padding cell before the first day of the month."""


@dataclass(frozen=True)
class Day:
    date: date


GridCell = Blank | Day

_BLANK = Blank()


@dataclass(frozen=True)
class MonthGrid:
    label: tuple[str, int]
    cells: tuple[GridCell, ...]

    @property
    def leading_blanks(self) -> int:
        return sum(1 for c in self.cells if isinstance(c, Blank))

    @property
    def days_in_month(self) -> int:
        return len(self.cells) - self.leading_blanks

    @property
    def first_day(self) -> date:
        return self.cells[self.leading_blanks].date


def build_month(month_anchor: date) -> MonthGrid:
    """Return the display grid for the month containing *month_anchor*.

    The grid starts with one blank cell per weekday before the 1st (weeks
    start on Monday), followed by one Day cell per day of the month.
    Trailing cells are not padded.
    """
    anchor = as_calendar_date(month_anchor)
    first = anchor.replace(day=1)
    n_days = days_in_month(first.year, first.month)
    leading = weekday_index_monday(first)

    cells: list[GridCell] = [_BLANK] * leading
    cells.extend(Day(first.replace(day=d)) for d in range(1, n_days + 1))
    return MonthGrid(
        label=(calendar.month_name[first.month], first.year),
        cells=tuple(cells),
    )


def grid_rows(grid: MonthGrid) -> list[list[GridCell | None]]:
    """Split a month grid into rows of 7; the last row is padded with None."""
    rows: list[list[GridCell | None]] = []
    for i in range(0, len(grid.cells), 7):
        row: list[GridCell | None] = list(grid.cells[i:i + 7])
        row.extend([None] * (7 - len(row)))
        rows.append(row)
    return rows


# --- month arithmetic -------------------------------------------------------

def prev_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month earlier."""
    if month == 1:
        year, month = year - 1, 12
    else:
        month -= 1
    if year < 1:
        raise InvalidDate("month before January of year 1")
    return year, month


def next_month(year: int, month: int) -> tuple[int, int]:
    """Return (year, month) for one month later."""
    if month == 12:
        year, month = year + 1, 1
    else:
        month += 1
    if year > 9999:
        raise InvalidDate("month after December of year 9999")
    return year, month


def add_months(anchor: date, count: int) -> date:
    """First day of the month *count* months after the anchor's month."""
    anchor = as_calendar_date(anchor)
    index = anchor.year * 12 + (anchor.month - 1) + count
    year, month0 = divmod(index, 12)
    try:
        return date(year, month0 + 1, 1)
    except ValueError as exc:
        raise InvalidDate(f"month offset {count} from {anchor} is out of range") from exc


def months_from(anchor: date, count: int) -> list[date]:
    """First days of *count* consecutive months starting at the anchor's month."""
    return [add_months(anchor, i) for i in range(count)]
