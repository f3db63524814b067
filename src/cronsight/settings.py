"""Settings for the cronsight engine and useful functionality to work with them."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any, TypedDict

from typing_extensions import NotRequired

from cronsight.common import DEFAULT_RUN_COUNT, MAX_RUN_COUNT, MAX_SCAN_MINUTES
from cronsight.errors import CronsightConfigError

ENV_PREFIX = "CRONSIGHT"


class CronsightSettingsKwargs(TypedDict):
    """Kwargs accepted by :meth:`CronsightSettings.load`."""

    default_run_count: NotRequired[int]
    max_run_count: NotRequired[int]
    scan_limit_minutes: NotRequired[int]
    log_level: NotRequired[str]


@dataclasses.dataclass
class CronsightSettings:
    """Strongly typed configuration holder for the cron engine."""

    default_run_count: int
    max_run_count: int
    scan_limit_minutes: int
    log_level: str

    def __post_init__(self) -> None:
        """Reject values the engine cannot work with."""
        for name in ("default_run_count", "max_run_count", "scan_limit_minutes"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                msg = f"{value!r} is not a valid value for {name!r}: must be a positive integer"
                raise CronsightConfigError(msg)
        if self.default_run_count > self.max_run_count:
            msg = (
                f"'default_run_count' ({self.default_run_count}) must not exceed "
                f"'max_run_count' ({self.max_run_count})"
            )
            raise CronsightConfigError(msg)
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            msg = f"{self.log_level!r} is not a valid value for 'log_level'"
            raise CronsightConfigError(msg)

    @classmethod
    def from_defaults(cls) -> dict[str, Any]:
        """Return the canonical default values for all settings fields."""
        return {
            "default_run_count": DEFAULT_RUN_COUNT,
            "max_run_count": MAX_RUN_COUNT,
            "scan_limit_minutes": MAX_SCAN_MINUTES,
            "log_level": "WARNING",
        }

    @classmethod
    def load(cls, **settings: Any) -> CronsightSettings:
        """Load settings from keyword overrides, env vars, and defaults (in that order).

        :param settings: Keyword arguments that override both environment variables and defaults.
        :returns: A fully instantiated :class:`CronsightSettings` object.
        :raises CronsightConfigError: If any resulting value is invalid.
        """
        final_settings = cls.from_defaults()
        final_settings.update(cls.from_envs())
        final_settings.update(settings)
        return cls(**final_settings)

    def update(self, **settings: Any) -> None:
        """Apply keyword overrides to the instance once the result is known to be valid.

        Unknown keys are ignored.

        :raises CronsightConfigError: If the overrides would produce invalid settings.
            The instance is left unchanged in that case.
        """
        names = {field.name for field in dataclasses.fields(self)}
        known = {k: v for k, v in settings.items() if k in names}
        candidate = dataclasses.replace(self, **known)
        for name in known:
            setattr(self, name, getattr(candidate, name))

    def as_dict(self) -> dict[str, Any]:
        """Return specified settings as a plain dictionary for serialisation."""
        return dataclasses.asdict(self)

    @classmethod
    def from_envs(cls) -> dict[str, Any]:
        """Return settings overridden via ``CRONSIGHT_*`` environment variables."""
        coercers: dict[str, Any] = {
            "default_run_count": _to_int,
            "max_run_count": _to_int,
            "scan_limit_minutes": _to_int,
            "log_level": str.upper,
        }

        to_return: dict[str, Any] = {}
        for field in dataclasses.fields(cls):
            env_var = f"{ENV_PREFIX}_{field.name.upper()}"
            if env_var not in os.environ:
                continue
            raw_value = os.environ[env_var]
            if field.name not in coercers:
                to_return[field.name] = raw_value
                continue

            try:
                to_return[field.name] = coercers[field.name](raw_value)
            except ValueError as exc:
                msg = f"{raw_value!r} is not a valid value for {field.name!r}"
                raise CronsightConfigError(msg) from exc
        return to_return


def _to_int(value: str) -> int:
    return int(value.strip())
