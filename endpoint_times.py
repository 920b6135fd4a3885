"""Optional departure/return times attached to the selection's endpoints."""

from __future__ import annotations

from datetime import date, datetime, time

from selection import trip_endpoints


class NotAnEndpoint(ValueError):
    """A time was attached to a date that is not a selection endpoint."""


def _endpoints(materialized: list[date]) -> set[date]:
    return {d for d in trip_endpoints(materialized) if d is not None}


def attach_time(
    times: dict[date, time], endpoint: date, at: time, materialized: list[date],
) -> dict[date, time]:
    """Return a copy of *times* with *at* set for *endpoint*."""
    if endpoint not in _endpoints(materialized):
        raise NotAnEndpoint(f"{endpoint} is not a departure or return date")
    updated = dict(times)
    updated[endpoint] = at
    return updated


def prune_times(times: dict[date, time], materialized: list[date]) -> dict[date, time]:
    """Drop times whose date stopped being an endpoint."""
    keep = _endpoints(materialized)
    return {d: t for d, t in times.items() if d in keep}


def combine(endpoint: date | None, times: dict[date, time]) -> datetime | None:
    """Return the endpoint joined with its time, or None when no time is set."""
    if endpoint is None or endpoint not in times:
        return None
    return datetime.combine(endpoint, times[endpoint])
