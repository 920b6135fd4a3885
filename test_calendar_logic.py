"""Tests for month grid layout and month arithmetic."""

from datetime import date, datetime

import pytest

from calendar_logic import (
    Blank,
    Day,
    InvalidDate,
    add_months,
    as_calendar_date,
    build_month,
    days_in_month,
    grid_rows,
    months_from,
    next_month,
    normalize_sunday_first_weekday,
    prev_month,
    weekday_index_monday,
)


class TestBuildMonth:
    def test_leap_february(self):
        grid = build_month(date(2024, 2, 17))
        assert grid.label == ("February", 2024)
        assert grid.leading_blanks == 3
        assert grid.days_in_month == 29
        assert len(grid.cells) == 32
        assert grid.first_day == date(2024, 2, 1)

    def test_month_starting_on_monday_has_no_blanks(self):
        grid = build_month(date(2024, 1, 31))
        assert grid.leading_blanks == 0
        assert grid.cells[0] == Day(date(2024, 1, 1))

    def test_month_starting_on_sunday_has_six_blanks(self):
        grid = build_month(date(2024, 9, 1))
        assert grid.leading_blanks == 6
        assert len(grid.cells) == 36

    def test_cells_are_blanks_then_consecutive_days(self):
        grid = build_month(date(2023, 2, 10))
        blanks = grid.cells[:grid.leading_blanks]
        days = grid.cells[grid.leading_blanks:]
        assert all(isinstance(c, Blank) for c in blanks)
        assert [c.date.day for c in days] == list(range(1, 29))

    @pytest.mark.parametrize("year", [1999, 2000, 2023, 2024, 2100])
    def test_every_month_of_year(self, year):
        for month in range(1, 13):
            grid = build_month(date(year, month, 1))
            assert 0 <= grid.leading_blanks <= 6
            assert len(grid.cells) == grid.leading_blanks + days_in_month(year, month)
            assert weekday_index_monday(grid.first_day) == grid.leading_blanks

    def test_datetime_anchor_ignores_time_of_day(self):
        assert build_month(datetime(2024, 2, 29, 23, 59)) == build_month(date(2024, 2, 1))

    def test_is_pure(self):
        assert build_month(date(2025, 6, 3)) == build_month(date(2025, 6, 3))


def test_grid_rows_pads_only_last_row():
    rows = grid_rows(build_month(date(2024, 2, 1)))
    assert len(rows) == 5
    assert all(len(r) == 7 for r in rows)
    assert rows[-1][4:] == [None, None, None]


def test_sunday_first_normalization():
    # Sunday = 1 ... Saturday = 7
    assert normalize_sunday_first_weekday(2) == 0
    assert normalize_sunday_first_weekday(5) == 3
    assert normalize_sunday_first_weekday(1) == 6
    assert normalize_sunday_first_weekday(7) == 5


def test_as_calendar_date():
    assert as_calendar_date(datetime(2024, 3, 10, 8, 30)) == date(2024, 3, 10)
    assert as_calendar_date(date(2024, 3, 10)) == date(2024, 3, 10)


class TestMonthArithmetic:
    def test_prev_next_wrap_years(self):
        assert prev_month(2024, 1) == (2023, 12)
        assert next_month(2024, 12) == (2025, 1)
        assert next_month(2024, 5) == (2024, 6)

    def test_limits_raise(self):
        with pytest.raises(InvalidDate):
            prev_month(1, 1)
        with pytest.raises(InvalidDate):
            next_month(9999, 12)

    def test_add_months(self):
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 1)
        assert add_months(date(2024, 11, 15), 3) == date(2025, 2, 1)
        assert add_months(date(2024, 1, 15), -1) == date(2023, 12, 1)

    def test_add_months_out_of_range(self):
        with pytest.raises(InvalidDate):
            add_months(date(9999, 12, 1), 1)
        with pytest.raises(InvalidDate):
            add_months(date(1, 1, 1), -1)

    def test_months_from(self):
        months = months_from(date(2024, 11, 20), 3)
        assert months == [date(2024, 11, 1), date(2024, 12, 1), date(2025, 1, 1)]
        assert len(months_from(date(2024, 3, 10), 12)) == 12

    def test_days_in_month_invalid(self):
        with pytest.raises(InvalidDate):
            days_in_month(2024, 13)
