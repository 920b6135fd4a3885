from datetime import date, datetime, time

import pytest

from endpoint_times import NotAnEndpoint, attach_time, combine, prune_times

DAYS = [date(2024, 3, 12), date(2024, 3, 13), date(2024, 3, 14)]


def test_attach_to_endpoints():
    times = attach_time({}, DAYS[0], time(9, 30), DAYS)
    times = attach_time(times, DAYS[-1], time(18, 0), DAYS)
    assert times == {DAYS[0]: time(9, 30), DAYS[-1]: time(18, 0)}


def test_attach_does_not_mutate_input():
    original: dict = {}
    attach_time(original, DAYS[0], time(9, 30), DAYS)
    assert original == {}


def test_attach_to_interior_day_raises():
    with pytest.raises(NotAnEndpoint):
        attach_time({}, DAYS[1], time(9, 30), DAYS)


def test_prune_drops_stale_endpoints():
    times = {DAYS[0]: time(9, 30), DAYS[-1]: time(18, 0)}
    assert prune_times(times, [DAYS[-1]]) == {DAYS[-1]: time(18, 0)}
    assert prune_times(times, []) == {}


def test_combine():
    times = {DAYS[0]: time(9, 30)}
    assert combine(DAYS[0], times) == datetime(2024, 3, 12, 9, 30)
    assert combine(DAYS[-1], times) is None
    assert combine(None, times) is None
