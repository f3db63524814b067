"""Expand a raw cron field into its sorted set of matching values."""

from __future__ import annotations

__all__ = ["parse_field"]

from typing import TYPE_CHECKING

from typing_extensions import assert_never

from cronsight.parser.tokens import Number, Range, Step, Wildcard, field_error, tokenize_segment

if TYPE_CHECKING:
    from cronsight.common import FieldSpec
    from cronsight.cron_types import FieldValues
    from cronsight.parser.tokens import Token


def parse_field(raw: str, spec: FieldSpec) -> FieldValues:
    """Parse one cron field into explicit integers.

    The field is split on commas, every segment is tokenized and expanded, and
    the union of all segments is returned deduplicated and ascending.

    :param raw: Raw field text, e.g. ``"*/15"`` or ``"MON-FRI"``.
    :param spec: Spec of the field position.
    :returns: Sorted tuple of distinct values within ``[spec.min, spec.max]``.
    :raises CronFieldSyntaxError: If any segment does not follow the grammar.
    """
    if not raw:
        raise field_error(spec, raw, "field is empty")

    result: set[int] = set()
    for segment in raw.split(","):
        token = tokenize_segment(segment, spec, raw)
        result.update(_expand(token, spec))
    return tuple(sorted(result))


def _expand(token: Token, spec: FieldSpec) -> range:
    """Turn a token into the values it denotes."""
    match token:
        case Wildcard():
            return range(spec.min, spec.max + 1)
        case Number(value=value):
            return range(value, value + 1)
        case Range(start=start, end=end):
            return range(start, end + 1)
        case Step(base=base, step=step):
            return _expand_step(base, step, spec)
        case _:
            assert_never(token)


def _expand_step(base: Wildcard | Range | Number, step: int, spec: FieldSpec) -> range:
    match base:
        case Wildcard():
            start, end = spec.min, spec.max
        case Range(start=start, end=end):
            pass
        case Number(value=value):
            start, end = value, spec.max
        case _:
            assert_never(base)
    return range(start, end + 1, step)
