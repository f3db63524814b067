"""Parsing of cron fields and expressions."""

from .expression import (
    ParsedCronExpression,
    parse_expression,
    split_expression,
    validate_expression,
)
from .field_parser import parse_field

__all__ = [
    "ParsedCronExpression",
    "parse_expression",
    "parse_field",
    "split_expression",
    "validate_expression",
]
