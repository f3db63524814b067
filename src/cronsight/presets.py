"""Common schedules and a helper to compose expressions field by field."""

from __future__ import annotations

__all__ = ["COMMON_EXPRESSIONS", "Preset", "build_expression", "get_preset"]

from typing import Final, NamedTuple

from cronsight.common import FIELD_SPECS, WILDCARD, CronFields
from cronsight.errors import PresetNotFoundError
from cronsight.parser.field_parser import parse_field


class Preset(NamedTuple):
    """A ready-made expression with a short label."""

    expression: str
    label: str


COMMON_EXPRESSIONS: Final[tuple[Preset, ...]] = (
    Preset("* * * * *", "Every minute"),
    Preset("*/5 * * * *", "Every 5 minutes"),
    Preset("*/15 * * * *", "Every 15 minutes"),
    Preset("*/30 * * * *", "Every 30 minutes"),
    Preset("0 * * * *", "Every hour"),
    Preset("0 */2 * * *", "Every 2 hours"),
    Preset("0 0 * * *", "Every day at midnight"),
    Preset("0 12 * * *", "Every day at noon"),
    Preset("0 9 * * *", "Every day at 9:00 AM"),
    Preset("0 9 * * 1", "Every Monday at 9:00 AM"),
    Preset("0 9 * * 1-5", "Every weekday at 9:00 AM"),
    Preset("0 0 * * 0", "Every Sunday at midnight"),
    Preset("0 0 1 * *", "First day of every month"),
    Preset("0 0 1 1 *", "Every year on January 1st"),
    Preset("30 4 1,15 * *", "1st and 15th of month at 4:30 AM"),
)


def get_preset(label: str) -> Preset:
    """Return the preset called *label* (case-insensitive).

    :raises PresetNotFoundError: If no preset has that label.
    """
    wanted = label.strip().casefold()
    for preset in COMMON_EXPRESSIONS:
        if preset.label.casefold() == wanted:
            return preset
    msg = f"Preset {label!r} is not defined. Known presets: {[p.label for p in COMMON_EXPRESSIONS]}"
    raise PresetNotFoundError(msg)


def build_expression(
    minute: str = WILDCARD,
    hour: str = WILDCARD,
    day_of_month: str = WILDCARD,
    month: str = WILDCARD,
    day_of_week: str = WILDCARD,
) -> str:
    """Compose an expression from individual fields and validate it.

    Each field is checked on its own, so an empty or malformed field is
    reported against that field rather than as a wrong field count.

    :returns: The fields joined by single spaces.
    :raises CronFieldSyntaxError: If any field is invalid, empty or contains whitespace.
    """
    fields = CronFields(minute, hour, day_of_month, month, day_of_week)
    for raw, spec in zip(fields, FIELD_SPECS):
        parse_field(raw, spec)
    return str(fields)
