"""Best-effort English descriptions of cron schedules.

Descriptions are built from the raw field text rather than from resolved
values, since phrasing such as "every 15 minutes" is visible in the syntax and
lost once a field is flattened into integers. Nothing here raises: a field
that cannot be phrased simply contributes no clause.
"""

from __future__ import annotations

__all__ = ["describe", "describe_field"]

from typing import TYPE_CHECKING, Final

from cronsight.common import (
    DAY_OF_WEEK_SPEC,
    MONTH_NAMES,
    MONTH_SPEC,
    WEEKDAY_NAMES,
    WILDCARD,
    CronFieldEnum,
)

if TYPE_CHECKING:
    from cronsight.common import CronFields, FieldSpec

_SINGULAR: Final[dict[CronFieldEnum, str]] = {
    CronFieldEnum.Minute: "minute",
    CronFieldEnum.Hour: "hour",
    CronFieldEnum.DayOfMonth: "day",
    CronFieldEnum.Month: "month",
    CronFieldEnum.DayOfWeek: "day of the week",
}
_PLURAL: Final[dict[CronFieldEnum, str]] = {
    CronFieldEnum.Minute: "minutes",
    CronFieldEnum.Hour: "hours",
    CronFieldEnum.DayOfMonth: "days",
    CronFieldEnum.Month: "months",
    CronFieldEnum.DayOfWeek: "days of the week",
}


def describe(fields: CronFields) -> str:
    """Return a sentence describing the schedule of *fields*.

    The sentence is composed of a time clause, a day clause and a month
    clause, e.g. ``"0 9 * * 1-5"`` reads "Runs at 09:00 on Monday through
    Friday".
    """
    clauses = [
        _time_clause(fields.minute, fields.hour),
        _day_clause(fields.day_of_month, fields.day_of_week),
        _month_clause(fields.month),
    ]
    return " ".join(["Runs", *(clause for clause in clauses if clause)])


def describe_field(raw: str, spec: FieldSpec) -> str:
    """Return a short phrase describing a single field, e.g. ``"every 5 minutes"``."""
    singular = _SINGULAR[spec.name]
    plural = _PLURAL[spec.name]

    if raw == WILDCARD:
        return f"every {singular}"

    base, slash, step = raw.partition("/")
    if slash and _is_number(step) and "," not in base:
        every = _every(step, singular, plural)
        return every if base == WILDCARD else f"{every} from {base}"

    if spec.name is CronFieldEnum.DayOfWeek and (names := _named_phrase(raw, spec, WEEKDAY_NAMES)):
        return f"on {names}"
    if spec.name is CronFieldEnum.Month and (names := _named_phrase(raw, spec, MONTH_NAMES)):
        return f"in {names}"

    if "," in raw:
        return f"{plural} {', '.join(raw.split(','))}"
    if "-" in raw:
        start, _, end = raw.partition("-")
        return f"{plural} {start} through {end}"
    return f"at {singular} {raw}"


def _time_clause(minute: str, hour: str) -> str:
    if minute == WILDCARD and hour == WILDCARD:
        return "every minute"
    if minute == "0" and hour == WILDCARD:
        return "every hour at minute 0"

    hour_phrase = _hour_phrase(hour)
    if _is_plain_step(minute):
        every = _every(minute[2:], "minute", "minutes")
        return f"{every} {hour_phrase}" if hour_phrase else every

    if _is_number(minute) and _is_number(hour):
        return f"at {int(hour):02d}:{int(minute):02d}"

    parts = []
    if minute != WILDCARD:
        parts.append(f"at minute {minute}")
    if hour_phrase:
        parts.append(hour_phrase)
    return " ".join(parts)


def _hour_phrase(hour: str) -> str:
    if hour == WILDCARD:
        return ""
    if _is_plain_step(hour):
        return _every(hour[2:], "hour", "hours")
    return f"during hour {hour}"


def _day_clause(day_of_month: str, day_of_week: str) -> str:
    # Both or neither restricted: no clause.
    if day_of_month != WILDCARD and day_of_week == WILDCARD:
        return f"on day {day_of_month} of the month"
    if day_of_month == WILDCARD and day_of_week != WILDCARD:
        names = _named_phrase(day_of_week, DAY_OF_WEEK_SPEC, WEEKDAY_NAMES)
        return f"on {names}" if names else ""
    return ""


def _month_clause(month: str) -> str:
    if month == WILDCARD:
        return ""
    names = _named_phrase(month, MONTH_SPEC, MONTH_NAMES)
    return f"in {names}" if names else ""


def _named_phrase(raw: str, spec: FieldSpec, names: tuple[str, ...]) -> str | None:
    """Render singles, ranges and lists of a named field, or ``None`` if impossible."""
    if not raw or "/" in raw or WILDCARD in raw:
        return None

    rendered = []
    for item in raw.split(","):
        start, sep, end = item.partition("-")
        first = _name_of(start, spec, names)
        if first is None:
            return None
        if not sep:
            rendered.append(first)
            continue
        last = _name_of(end, spec, names)
        if last is None:
            return None
        rendered.append(f"{first} through {last}")
    return ", ".join(rendered)


def _name_of(atom: str, spec: FieldSpec, names: tuple[str, ...]) -> str | None:
    value = int(atom) if _is_number(atom) else spec.lookup(atom)
    if value is None or not spec.contains(value):
        return None
    return names[value - spec.min]


def _every(step: str, singular: str, plural: str) -> str:
    if step == "1":
        return f"every {singular}"
    return f"every {step} {plural}"


def _is_number(value: str) -> bool:
    return value.isascii() and value.isdigit()


def _is_plain_step(value: str) -> bool:
    """Return ``True`` for ``*/N`` with nothing else in the field."""
    return value.startswith(f"{WILDCARD}/") and _is_number(value[2:])
