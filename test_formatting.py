from datetime import date, time

from calendar_logic import build_month
from formatting import (
    PLACEHOLDER,
    format_api_date,
    format_date,
    format_display,
    format_time,
    month_label,
    selection_summary,
)

TODAY = date(2024, 3, 10)


def test_format_display():
    assert format_display(date(2024, 3, 5)) == "Mar 5, 2024"
    assert format_display(None) == PLACEHOLDER


def test_format_api_date_is_day_month_year():
    assert format_api_date(date(2025, 5, 8)) == "08-05-2025"
    assert format_api_date(date(2025, 5, 8), "%Y-%m-%d") == "2025-05-08"


def test_format_date_uses_given_pattern():
    assert format_date(date(2024, 3, 5), "%d/%m") == "05/03"


def test_format_time():
    assert format_time(time(9, 5)) == "09:05"


def test_month_label():
    assert month_label(build_month(date(2024, 2, 1))) == "February 2024"


class TestSelectionSummary:
    def test_nothing_selected(self):
        assert selection_summary([], TODAY) == "Today: Mar 10, 2024"

    def test_single_day(self):
        assert selection_summary([date(2024, 3, 15)], TODAY) == (
            "Mar 15, 2024     Today: Mar 10, 2024"
        )

    def test_range(self):
        days = [date(2024, 3, d) for d in range(12, 16)]
        assert selection_summary(days, TODAY) == (
            "Mar 12, 2024 → Mar 15, 2024:  3 nights  (4 days)     Today: Mar 10, 2024"
        )

    def test_one_night(self):
        days = [date(2024, 3, 12), date(2024, 3, 13)]
        assert "1 night  (2 days)" in selection_summary(days, TODAY)
