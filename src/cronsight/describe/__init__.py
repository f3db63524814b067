"""Human-readable descriptions of cron schedules."""

from .describer import describe, describe_field

__all__ = ["describe", "describe_field"]
