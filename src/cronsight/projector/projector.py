"""Projection of concrete run times for a parsed cron expression.

Candidates are examined minute by minute from the minute following the start
instant. Whole days are skipped when the month or day condition fails and the
rest of an hour when the hour fails; skipped minutes are charged to the scan
budget, so the result is the same as a plain minute-by-minute walk capped at
``scan_limit`` minutes.
"""

from __future__ import annotations

__all__ = ["day_condition", "iter_runs", "matches", "next_runs", "to_cron_weekday"]

from datetime import datetime, timedelta
from typing import TYPE_CHECKING

from cronsight.common import DEFAULT_RUN_COUNT, MAX_SCAN_MINUTES

if TYPE_CHECKING:
    from collections.abc import Iterator

    from cronsight.parser.expression import ParsedCronExpression

_MINUTES_PER_HOUR = 60
_MINUTES_PER_DAY = 24 * _MINUTES_PER_HOUR


def to_cron_weekday(instant: datetime) -> int:
    """Return the cron weekday number of *instant* (Sunday is ``0``)."""
    return (instant.weekday() + 1) % 7


def day_condition(parsed: ParsedCronExpression, day: int, weekday: int) -> bool:
    """Apply the day-of-month / day-of-week rule to a calendar date.

    A field spanning its whole range does not restrict anything. When only one
    of the two fields is restricted that field decides; when both are
    restricted a date matches if it satisfies either of them.
    """
    all_days = parsed.all_days
    all_weekdays = parsed.all_weekdays
    if all_days and all_weekdays:
        return True
    if all_days:
        return weekday in parsed.day_of_week
    if all_weekdays:
        return day in parsed.day_of_month
    return day in parsed.day_of_month or weekday in parsed.day_of_week


def matches(parsed: ParsedCronExpression, instant: datetime) -> bool:
    """Return ``True`` when the wall-clock minute of *instant* satisfies *parsed*."""
    return (
        instant.month in parsed.month
        and day_condition(parsed, instant.day, to_cron_weekday(instant))
        and instant.hour in parsed.hour
        and instant.minute in parsed.minute
    )


def iter_runs(
    parsed: ParsedCronExpression,
    start: datetime | None = None,
    *,
    scan_limit: int = MAX_SCAN_MINUTES,
) -> Iterator[datetime]:
    """Yield matching instants after *start* in ascending order.

    Candidates are wall-clock minutes and no daylight saving adjustment is
    made: a local time skipped by a spring-forward transition, such as 02:30,
    can still be yielded, and a repeated local time is yielded once.

    :param parsed: Expression to project.
    :param start: Reference instant; defaults to the local wall clock.
    :param scan_limit: Number of candidate minutes examined before giving up.
    """
    if start is None:
        start = datetime.now()

    first = start.replace(second=0, microsecond=0) + timedelta(minutes=1)
    months = frozenset(parsed.month)
    hours = frozenset(parsed.hour)
    minutes = frozenset(parsed.minute)

    elapsed = 0
    while elapsed < scan_limit:
        candidate = first + timedelta(minutes=elapsed)

        if candidate.month not in months or not day_condition(
            parsed, candidate.day, to_cron_weekday(candidate)
        ):
            elapsed += _MINUTES_PER_DAY - (candidate.hour * _MINUTES_PER_HOUR + candidate.minute)
            continue

        if candidate.hour not in hours:
            elapsed += _MINUTES_PER_HOUR - candidate.minute
            continue

        if candidate.minute in minutes:
            yield candidate
        elapsed += 1


def next_runs(
    parsed: ParsedCronExpression,
    start: datetime | None = None,
    count: int = DEFAULT_RUN_COUNT,
    *,
    scan_limit: int = MAX_SCAN_MINUTES,
) -> list[datetime]:
    """Return up to *count* upcoming run instants of *parsed*.

    The result is strictly ascending, every instant has zero seconds and lies
    after *start*. Fewer than *count* instants (possibly none) are returned
    when the scan budget runs out, e.g. for ``0 0 31 2 *``.

    :param parsed: Expression to project.
    :param start: Reference instant; defaults to the local wall clock.
    :param count: Maximum number of instants to return.
    :param scan_limit: Number of candidate minutes examined before giving up.
    """
    if count <= 0:
        return []

    runs: list[datetime] = []
    for run in iter_runs(parsed, start, scan_limit=scan_limit):
        runs.append(run)
        if len(runs) >= count:
            break
    return runs
