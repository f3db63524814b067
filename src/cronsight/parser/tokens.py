"""Tokenizer turning a single comma-separated cron segment into a tagged token.

Every segment of a field is classified into exactly one of four shapes::

    *        -> Wildcard
    5, MON   -> Number
    1-5      -> Range
    */5, 1-10/2, 3/15 -> Step

Named values (``JAN``, ``mon``) are resolved through the field's lookup table
while the atom is read, so they never leak into other fields.
"""

from __future__ import annotations

__all__ = ["Number", "Range", "Step", "Token", "Wildcard", "tokenize_segment"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from cronsight.common import WILDCARD
from cronsight.errors import CronFieldSyntaxError

if TYPE_CHECKING:
    from cronsight.common import FieldSpec


@dataclass(frozen=True, slots=True)
class Wildcard:
    """The full legal range of the field."""


@dataclass(frozen=True, slots=True)
class Number:
    """A single value."""

    value: int


@dataclass(frozen=True, slots=True)
class Range:
    """Every value between ``start`` and ``end`` inclusive."""

    start: int
    end: int


@dataclass(frozen=True, slots=True)
class Step:
    """Values from ``base`` advancing by ``step``.

    ``base`` is a :class:`Wildcard`, a :class:`Range` or a :class:`Number`; a
    number base runs up to the field maximum.
    """

    base: Wildcard | Range | Number
    step: int


Token: TypeAlias = Wildcard | Number | Range | Step


def tokenize_segment(segment: str, spec: FieldSpec, raw: str) -> Token:
    """Classify one comma-separated segment of a field.

    :param segment: Text between two commas.
    :param spec: Spec of the field being parsed.
    :param raw: Whole raw field, used for error reporting.
    :returns: The tagged token.
    :raises CronFieldSyntaxError: If the segment does not follow the grammar.
    """
    if not segment:
        raise field_error(spec, raw, "empty list item")

    if "/" in segment:
        base_expr, _, step_expr = segment.partition("/")
        if "/" in step_expr:
            raise field_error(spec, raw, f"{segment!r} has more than one step")
        return Step(base=_tokenize_base(base_expr, spec, raw), step=_read_step(step_expr, spec, raw))

    return _tokenize_base(segment, spec, raw)


def _tokenize_base(expr: str, spec: FieldSpec, raw: str) -> Wildcard | Range | Number:
    if expr == WILDCARD:
        return Wildcard()
    if "-" in expr:
        start_expr, _, end_expr = expr.partition("-")
        if not start_expr or "-" in end_expr:
            raise field_error(spec, raw, f"{expr!r} is not a valid range")
        start = _read_atom(start_expr, spec, raw)
        end = _read_atom(end_expr, spec, raw)
        if start > end:
            raise field_error(spec, raw, f"range {expr!r} is reversed")
        return Range(start, end)
    return Number(_read_atom(expr, spec, raw))


def _read_atom(atom: str, spec: FieldSpec, raw: str) -> int:
    """Resolve a number or a named value and check it against the legal range."""
    if not atom:
        raise field_error(spec, raw, "missing value")

    if atom.isascii() and atom.isdigit():
        value = int(atom)
    else:
        named = spec.lookup(atom) if atom.isalpha() else None
        if named is None:
            raise field_error(spec, raw, f"{atom!r} is not a number")
        value = named

    if not spec.contains(value):
        reason = f"{atom!r} is out of range {spec.min}-{spec.max}"
        raise field_error(spec, raw, reason)
    return value


def _read_step(step_expr: str, spec: FieldSpec, raw: str) -> int:
    if not (step_expr.isascii() and step_expr.isdigit()):
        raise field_error(spec, raw, f"step {step_expr!r} is not a number")
    step = int(step_expr)
    if step < 1 or step >= spec.size:
        reason = f"step {step} must be between 1 and {spec.size - 1}"
        raise field_error(spec, raw, reason)
    return step


def field_error(spec: FieldSpec, raw: str, reason: str) -> CronFieldSyntaxError:
    """Build a standardised :class:`CronFieldSyntaxError` for a field."""
    return CronFieldSyntaxError(
        f"Invalid {spec.label} field {raw!r}: {reason}", field=spec.name, raw=raw
    )
