"""Cron expression parser.

This module validates the five-field shape of an expression and resolves each
field into explicit integer values.
"""

from __future__ import annotations

__all__ = ["ParsedCronExpression", "parse_expression", "split_expression", "validate_expression"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

from cronsight.common import (
    DAY_OF_MONTH_SPEC,
    DAY_OF_WEEK_SPEC,
    EXPECTED_FIELD_COUNT,
    HOUR_SPEC,
    MINUTE_SPEC,
    MONTH_SPEC,
    WRONG_FIELD_COUNT_MESSAGE,
    CronFieldEnum,
    CronFields,
)
from cronsight.errors import CronsightError, CronStructureError
from cronsight.parser.field_parser import parse_field

if TYPE_CHECKING:
    from cronsight.cron_types import FieldValues


@dataclass(frozen=True, slots=True)
class ParsedCronExpression:
    """Structured representation of a successfully parsed expression.

    Each value attribute contains a sorted tuple of the integers the field
    matches; ``raw`` keeps the text the caller supplied for display and
    description purposes.
    """

    raw: CronFields
    minute: FieldValues
    hour: FieldValues
    day_of_month: FieldValues
    month: FieldValues
    day_of_week: FieldValues
    is_valid: bool = True
    error: str | None = None

    @property
    def all_days(self) -> bool:
        """Return ``True`` when the day-of-month field spans its whole range."""
        return len(self.day_of_month) == DAY_OF_MONTH_SPEC.size

    @property
    def all_weekdays(self) -> bool:
        """Return ``True`` when the day-of-week field spans its whole range."""
        return len(self.day_of_week) == DAY_OF_WEEK_SPEC.size

    def field(self, name: CronFieldEnum | str) -> FieldValues:
        """Return parsed values of the field called *name*."""
        return getattr(self, CronFieldEnum(name).value)

    def __str__(self) -> str:
        return str(self.raw)


def split_expression(expression: str) -> CronFields:
    """Split an expression into its five raw fields.

    :param expression: Raw cron expression using whitespace-separated fields.
    :raises CronStructureError: If the expression does not have exactly five fields.
    """
    parts = expression.split()
    if len(parts) != EXPECTED_FIELD_COUNT:
        raise CronStructureError(WRONG_FIELD_COUNT_MESSAGE)
    return CronFields(*parts)


def parse_expression(expression: str) -> ParsedCronExpression:
    """Parse a cron expression into explicit field values.

    The parser expects the traditional five-field format: minute, hour,
    day of month, month, and day of week. Each field supports single
    values, names, ranges, steps, and comma-separated lists. The
    expression is either valid as a whole or rejected with the first error.

    :param expression: Raw cron expression using whitespace-separated fields.
    :returns: A :class:`ParsedCronExpression` with sorted integer values per field.
    :raises CronStructureError: If the expression does not have exactly five fields.
    :raises CronFieldSyntaxError: If any field has invalid syntax or values.
    """
    fields = split_expression(expression)
    return ParsedCronExpression(
        raw=fields,
        minute=parse_field(fields.minute, MINUTE_SPEC),
        hour=parse_field(fields.hour, HOUR_SPEC),
        day_of_month=parse_field(fields.day_of_month, DAY_OF_MONTH_SPEC),
        month=parse_field(fields.month, MONTH_SPEC),
        day_of_week=parse_field(fields.day_of_week, DAY_OF_WEEK_SPEC),
    )


def validate_expression(expression: str) -> bool:
    """Return ``True`` when *expression* parses successfully."""
    try:
        parse_expression(expression)
    except CronsightError:
        return False
    return True
