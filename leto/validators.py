"""Validators for leto dates."""

from __future__ import annotations

from .periods import CalendarDefinition
from .utils import day_count_of


def validate_date_parts(calendar: CalendarDefinition, year: int, month: int, day: int) -> None:
    """Validate numeric parts of a date in ``calendar``."""
    day_count_of(calendar, year, month, day)
