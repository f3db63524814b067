"""Collection of generic types and type aliases for cronsight."""

__all__ = ["FieldValues"]

from typing import TypeAlias

# Sorted, distinct values a single field resolves to.
FieldValues: TypeAlias = tuple[int, ...]
