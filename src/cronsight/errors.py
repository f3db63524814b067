"""Module containing cronsight-related errors."""

from __future__ import annotations


class CronsightError(Exception):
    """Base class for all cronsight-related errors."""


class CronStructureError(CronsightError, ValueError):
    """Raised when an expression does not consist of exactly five fields."""


class CronFieldSyntaxError(CronsightError, ValueError):
    """Raised when a single cron field cannot be resolved to a value set.

    :param message: Human readable description of the failure.
    :param field: Name of the field which failed to parse.
    :param raw: Raw text of the field as supplied by the caller.
    """

    def __init__(self, message: str, *, field: str, raw: str) -> None:
        super().__init__(message)
        self.field = field
        self.raw = raw


class PresetNotFoundError(CronsightError, KeyError):
    """Raised when you try to get a preset which is not defined."""

    def __str__(self) -> str:
        # KeyError quotes its argument, messages should read as plain text.
        return str(self.args[0]) if self.args else ""


class CronsightConfigError(CronsightError, ValueError):
    """Raised when a configured setting has an invalid value."""
