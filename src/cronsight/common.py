"""Some common constants and objects which may be used in any modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final, NamedTuple

from cronsight.py_compatibility import StrEnum

EXPECTED_FIELD_COUNT: Final[int] = 5
WRONG_FIELD_COUNT_MESSAGE: Final[str] = (
    "Cron expression must have exactly 5 fields (minute hour day month weekday)"
)

# One leap year of minutes; bounds the scan for expressions which never match.
MAX_SCAN_MINUTES: Final[int] = 366 * 24 * 60
DEFAULT_RUN_COUNT: Final[int] = 5
MAX_RUN_COUNT: Final[int] = 20

WILDCARD: Final[str] = "*"

MONTH_NAMES: Final[tuple[str, ...]] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
WEEKDAY_NAMES: Final[tuple[str, ...]] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


class CronFieldEnum(StrEnum):
    """Enum of the five positional cron fields."""

    Minute = "minute"
    Hour = "hour"
    DayOfMonth = "day_of_month"
    Month = "month"
    DayOfWeek = "day_of_week"


@dataclass(frozen=True, slots=True)
class FieldSpec:
    """Static description of one cron field position.

    :param name: Field identifier.
    :param label: Phrase used for the field in messages and descriptions.
    :param min: Lowest legal value.
    :param max: Highest legal value.
    :param named_values: Ordered names; the first name maps to ``min``.
    """

    name: CronFieldEnum
    label: str
    min: int
    max: int
    named_values: tuple[str, ...] = ()

    @property
    def size(self) -> int:
        """Return the number of legal values of the field."""
        return self.max - self.min + 1

    def lookup(self, name: str) -> int | None:
        """Return the value for a named token (case-insensitive) or ``None``."""
        upper = name.upper()
        for index, candidate in enumerate(self.named_values):
            if candidate == upper:
                return self.min + index
        return None

    def contains(self, value: int) -> bool:
        """Return ``True`` when *value* lies within the legal range."""
        return self.min <= value <= self.max


MINUTE_SPEC: Final = FieldSpec(CronFieldEnum.Minute, "minute", 0, 59)
HOUR_SPEC: Final = FieldSpec(CronFieldEnum.Hour, "hour", 0, 23)
DAY_OF_MONTH_SPEC: Final = FieldSpec(CronFieldEnum.DayOfMonth, "day of month", 1, 31)
MONTH_SPEC: Final = FieldSpec(
    CronFieldEnum.Month,
    "month",
    1,
    12,
    ("JAN", "FEB", "MAR", "APR", "MAY", "JUN", "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"),
)
DAY_OF_WEEK_SPEC: Final = FieldSpec(
    CronFieldEnum.DayOfWeek,
    "day of week",
    0,
    6,
    ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT"),
)

FIELD_SPECS: Final[tuple[FieldSpec, ...]] = (
    MINUTE_SPEC,
    HOUR_SPEC,
    DAY_OF_MONTH_SPEC,
    MONTH_SPEC,
    DAY_OF_WEEK_SPEC,
)


class CronFields(NamedTuple):
    """Raw text of the five cron fields, in positional order."""

    minute: str
    hour: str
    day_of_month: str
    month: str
    day_of_week: str

    def __str__(self) -> str:
        return " ".join(self)
