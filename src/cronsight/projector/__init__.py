"""Projection of upcoming run times."""

from .projector import day_condition, iter_runs, matches, next_runs

__all__ = ["day_condition", "iter_runs", "matches", "next_runs"]
