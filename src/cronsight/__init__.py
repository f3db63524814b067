"""Public interface for the cronsight package."""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from .common import FIELD_SPECS, CronFieldEnum, CronFields, FieldSpec
from .describe.describer import describe, describe_field
from .engine import CronEngine, CronParseResult
from .errors import (
    CronFieldSyntaxError,
    CronsightConfigError,
    CronsightError,
    CronStructureError,
    PresetNotFoundError,
)
from .parser.expression import ParsedCronExpression, parse_expression, validate_expression
from .parser.field_parser import parse_field
from .presets import COMMON_EXPRESSIONS, Preset, build_expression, get_preset
from .projector.projector import matches, next_runs

if TYPE_CHECKING:
    from datetime import datetime

__all__ = [
    "COMMON_EXPRESSIONS",
    "FIELD_SPECS",
    "CronEngine",
    "CronFieldEnum",
    "CronFieldSyntaxError",
    "CronFields",
    "CronParseResult",
    "CronStructureError",
    "CronsightConfigError",
    "CronsightError",
    "FieldSpec",
    "ParsedCronExpression",
    "Preset",
    "PresetNotFoundError",
    "build_expression",
    "describe",
    "describe_field",
    "get_preset",
    "matches",
    "next_runs",
    "parse",
    "parse_expression",
    "parse_field",
    "validate_expression",
]


@lru_cache(maxsize=1)
def _default_engine() -> CronEngine:
    return CronEngine()


def parse(expression: str, *, now: datetime | None = None, count: int | None = None) -> CronParseResult:
    """Parse *expression* with the default engine; never raises on invalid input."""
    return _default_engine().parse(expression, now=now, count=count)
