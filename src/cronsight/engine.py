"""Caller-facing entry point combining parsing, description and projection."""

from __future__ import annotations

__all__ = ["CronEngine", "CronParseResult"]

from dataclasses import dataclass, field
import logging
from typing import TYPE_CHECKING, Any

from typing_extensions import Unpack

from cronsight.common import FIELD_SPECS
from cronsight.describe.describer import describe, describe_field
from cronsight.errors import CronsightError
from cronsight.logging import WithLogger
from cronsight.parser.expression import parse_expression
from cronsight.projector.projector import next_runs
from cronsight.settings import CronsightSettings

if TYPE_CHECKING:
    from datetime import datetime

    from cronsight.common import CronFields
    from cronsight.settings import CronsightSettingsKwargs


@dataclass(slots=True)
class CronParseResult:
    """Outcome of :meth:`CronEngine.parse`.

    :param expression: Expression exactly as supplied by the caller.
    :param is_valid: Whether the expression parsed successfully.
    :param fields: Raw field strings, only set for valid expressions.
    :param description: Sentence describing the schedule, only set for valid expressions.
    :param field_descriptions: Per-field phrases keyed by field name.
    :param next_runs: Upcoming run instants, ascending.
    :param error: Reason the expression was rejected, only set for invalid expressions.
    """

    expression: str
    is_valid: bool
    fields: CronFields | None = None
    description: str | None = None
    field_descriptions: dict[str, str] = field(default_factory=dict)
    next_runs: list[datetime] = field(default_factory=list)
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return the result as plain data with ISO 8601 timestamps."""
        data: dict[str, Any] = {
            "expression": self.expression,
            "is_valid": self.is_valid,
            "field_descriptions": dict(self.field_descriptions),
            "next_runs": [run.isoformat() for run in self.next_runs],
        }
        if self.fields is not None:
            data["fields"] = self.fields._asdict()
        if self.description is not None:
            data["description"] = self.description
        if self.error is not None:
            data["error"] = self.error
        return data


class CronEngine(WithLogger):
    """Parse, describe and project cron expressions without raising on bad input.

    The ``log_level`` setting filters records of this engine only. The shared
    class logger is left untouched, so engines with different levels coexist.
    """

    def __init__(self, **settings: Unpack[CronsightSettingsKwargs]) -> None:
        """Initialize the engine with the given settings.

        :param settings: Keyword overrides passed directly to :meth:`CronsightSettings.load`.
            These overrides take precedence over environment variables and defaults.
        :raises CronsightConfigError: If the resolved settings are invalid.
        """
        self._settings = CronsightSettings.load(**settings)

    @property
    def settings(self) -> CronsightSettings:
        """Return settings the engine was built with."""
        return self._settings

    def parse(
        self,
        expression: str,
        *,
        now: datetime | None = None,
        count: int | None = None,
    ) -> CronParseResult:
        """Parse *expression* and project its upcoming runs.

        Errors in the expression are reported through the result instead of
        being raised.

        :param expression: Raw cron expression.
        :param now: Reference instant for the projection; defaults to the local wall clock.
        :param count: Number of runs to project, clamped to ``[1, max_run_count]``.
        """
        try:
            parsed = parse_expression(expression)
        except CronsightError as exc:
            self._log(logging.DEBUG, "Rejected cron expression %r: %s", expression, exc)
            return CronParseResult(expression=expression, is_valid=False, error=str(exc))

        wanted = self._clamp_count(count)
        runs = next_runs(
            parsed, now, wanted, scan_limit=self._settings.scan_limit_minutes
        )
        if len(runs) < wanted:
            self._log(
                logging.INFO,
                "Found %d of %d runs for %r within %d minutes",
                len(runs),
                wanted,
                expression,
                self._settings.scan_limit_minutes,
            )

        result = CronParseResult(
            expression=expression,
            is_valid=True,
            fields=parsed.raw,
            description=describe(parsed.raw),
            field_descriptions={
                spec.name.value: describe_field(raw, spec)
                for raw, spec in zip(parsed.raw, FIELD_SPECS)
            },
            next_runs=runs,
        )
        self._log(logging.DEBUG, "Parsed cron expression %r: %s", expression, result.description)
        return result

    def _clamp_count(self, count: int | None) -> int:
        if count is None:
            return self._settings.default_run_count
        return max(1, min(count, self._settings.max_run_count))

    def _log(self, level: int, msg: str, *args: Any) -> None:
        if level >= logging.getLevelName(self._settings.log_level.upper()):
            self._logger.log(level, msg, *args)
