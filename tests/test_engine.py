"""Tests for the caller-facing cron engine."""

from __future__ import annotations

from datetime import datetime
import logging

import pytest

import cronsight
from cronsight.common import WRONG_FIELD_COUNT_MESSAGE, CronFields
from cronsight.engine import CronEngine, CronParseResult
from cronsight.errors import CronsightConfigError

NOW = datetime(2024, 1, 15, 8, 0)  # a Monday


@pytest.fixture
def engine() -> CronEngine:
    return CronEngine(log_level="DEBUG")


def test_parse_valid_expression(engine: CronEngine) -> None:
    """A valid expression yields fields, description, per-field phrases and runs."""
    result = engine.parse("0 9 * * 1-5", now=NOW)

    assert result.is_valid is True
    assert result.error is None
    assert result.fields == CronFields("0", "9", "*", "*", "1-5")
    assert result.description == "Runs at 09:00 on Monday through Friday"
    assert result.field_descriptions == {
        "minute": "at minute 0",
        "hour": "at hour 9",
        "day_of_month": "every day",
        "month": "every month",
        "day_of_week": "on Monday through Friday",
    }
    assert result.next_runs == [
        datetime(2024, 1, 15, 9, 0),
        datetime(2024, 1, 16, 9, 0),
        datetime(2024, 1, 17, 9, 0),
        datetime(2024, 1, 18, 9, 0),
        datetime(2024, 1, 19, 9, 0),
    ]


@pytest.mark.parametrize(
    ("expression", "error"),
    [
        pytest.param("* * *", WRONG_FIELD_COUNT_MESSAGE, id="structure"),
        pytest.param("0 25 * * *", "Invalid hour field '25'", id="field"),
        pytest.param("0 5-2 * * *", "reversed", id="reversed-range"),
    ],
)
def test_parse_invalid_expression_does_not_raise(engine: CronEngine, expression: str, error: str) -> None:
    """Invalid expressions are reported through the result."""
    result = engine.parse(expression, now=NOW)

    assert result.is_valid is False
    assert error in (result.error or "")
    assert result.fields is None
    assert result.description is None
    assert result.field_descriptions == {}
    assert result.next_runs == []


@pytest.mark.parametrize(
    ("count", "expected"),
    [
        pytest.param(None, 5, id="default"),
        pytest.param(3, 3, id="explicit"),
        pytest.param(100, 20, id="clamped-high"),
        pytest.param(0, 1, id="clamped-zero"),
        pytest.param(-4, 1, id="clamped-negative"),
    ],
)
def test_count_is_clamped(engine: CronEngine, count: int | None, expected: int) -> None:
    """The number of projected runs stays within the configured bounds."""
    assert len(engine.parse("* * * * *", now=NOW, count=count).next_runs) == expected


def test_settings_overrides_apply() -> None:
    """Engine settings bound the run count and the scan budget."""
    engine = CronEngine(default_run_count=2, max_run_count=3, scan_limit_minutes=60)
    assert engine.settings.max_run_count == 3

    assert len(engine.parse("* * * * *", now=NOW).next_runs) == 2
    assert len(engine.parse("* * * * *", now=NOW, count=10).next_runs) == 3
    assert engine.parse("0 0 * * *", now=NOW).next_runs == []


def test_invalid_settings_raise() -> None:
    """Configuration errors are raised rather than folded into results."""
    with pytest.raises(CronsightConfigError):
        CronEngine(max_run_count=0)


def test_short_projection_is_logged(engine: CronEngine, caplog: pytest.LogCaptureFixture) -> None:
    """Running out of scan budget is logged, the partial result is returned."""
    caplog.set_level(logging.DEBUG)
    result = engine.parse("0 0 31 2 *", now=NOW)

    assert result.is_valid is True
    assert result.next_runs == []
    assert "Found 0 of 5 runs" in caplog.text


def test_rejection_is_logged_at_debug(engine: CronEngine, caplog: pytest.LogCaptureFixture) -> None:
    """Rejected expressions leave a debug record."""
    caplog.set_level(logging.DEBUG)
    engine.parse("nope", now=NOW)

    (record,) = [record for record in caplog.records if record.name == "CronEngine"]
    assert record.levelno == logging.DEBUG
    assert "Rejected cron expression 'nope'" in record.getMessage()


def test_as_dict_valid() -> None:
    """Valid results serialise with ISO timestamps and raw fields."""
    data = CronEngine().parse("30 14 * * *", now=NOW, count=2).as_dict()

    assert data == {
        "expression": "30 14 * * *",
        "is_valid": True,
        "fields": {
            "minute": "30",
            "hour": "14",
            "day_of_month": "*",
            "month": "*",
            "day_of_week": "*",
        },
        "description": "Runs at 14:30",
        "field_descriptions": {
            "minute": "at minute 30",
            "hour": "at hour 14",
            "day_of_month": "every day",
            "month": "every month",
            "day_of_week": "every day of the week",
        },
        "next_runs": ["2024-01-15T14:30:00", "2024-01-16T14:30:00"],
    }


def test_as_dict_invalid() -> None:
    """Invalid results carry the error and no optional keys."""
    data = CronParseResult(expression="x", is_valid=False, error="boom").as_dict()
    assert data == {
        "expression": "x",
        "is_valid": False,
        "field_descriptions": {},
        "next_runs": [],
        "error": "boom",
    }


def test_module_level_parse() -> None:
    """The package exposes a ready-to-use parse function."""
    result = cronsight.parse("0 0 1 1 *", now=NOW, count=1)
    assert result.is_valid is True
    assert "in January" in (result.description or "")
    assert result.next_runs == [datetime(2025, 1, 1, 0, 0)]

    assert cronsight.parse("* * * * * *").error == WRONG_FIELD_COUNT_MESSAGE


def test_engines_keep_their_own_log_level(caplog: pytest.LogCaptureFixture) -> None:
    """An engine built later does not change what an earlier engine logs."""
    caplog.set_level(logging.DEBUG)
    verbose = CronEngine(log_level="DEBUG")
    quiet = CronEngine(log_level="WARNING")

    verbose.parse("nope", now=NOW)
    quiet.parse("still nope", now=NOW)

    messages = [record.getMessage() for record in caplog.records if record.name == "CronEngine"]
    assert messages == ["Rejected cron expression 'nope': " + WRONG_FIELD_COUNT_MESSAGE]
