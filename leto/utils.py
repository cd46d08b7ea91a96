"""Helpers for callers of the engine: date strings, navigation, Gregorian bridge.

Date strings use the displayed numbers of a resolved day: 1-based day and
month within their parent, and the absolute year + 1.  These helpers work with
calendars whose period types include ``DAY``, ``MONTH`` and ``YEAR``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from datetime import date
from enum import IntEnum

from django.core.exceptions import ValidationError

from . import core
from .calendars import gregorian
from .calendars.gregorian import GREGORIAN
from .periods import CalendarDefinition, PeriodInstance

DATE_ERROR = "Date must be in DD-MM-YYYY or YYYY-MM-DD format"

_YMD_RE = re.compile(r"^\s*(\d{3,7})-(\d{1,2})-(\d{1,2})\s*$")
_DMY_RE = re.compile(r"^\s*(\d{1,2})-(\d{1,2})-(\d{1,7})\s*$")


def split_date(value: str | bytes) -> tuple[int, int, int]:
    """Parse ``DD-MM-YYYY`` or ``YYYY-MM-DD`` into ``(year, month, day)``."""

    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationError(DATE_ERROR) from exc
    if not isinstance(value, str):
        raise ValidationError(DATE_ERROR)

    ymd = _YMD_RE.match(value)
    if ymd:
        y, m, d = map(int, ymd.groups())
        return y, m, d
    dmy = _DMY_RE.match(value)
    if not dmy:
        raise ValidationError(DATE_ERROR)
    d, m, y = map(int, dmy.groups())
    return y, m, d


def date_parts(periods: Sequence[PeriodInstance]) -> tuple[int, int, int]:
    """Return the displayed ``(year, month, day)`` of a resolved day.

    An intercalary year-level period (Ден Бехти) continues the month numbering
    of the year it follows.
    """

    types: type[IntEnum] = type(periods[0].period_type)
    year, month, day = periods[types.YEAR], periods[types.MONTH], periods[types.DAY]
    if year.counted:
        return year.absolute_number + 1, month.ordinal, day.ordinal

    if year.number == 0:
        raise ValueError(f"{year.name('en')} does not follow a year")
    parent = periods[types.YEAR + 1]
    previous = parent.structure.children[year.number - 1]
    return year.absolute_number, len(previous.children) + month.ordinal, day.ordinal


def format_date(periods: Sequence[PeriodInstance]) -> str:
    """Return ``DD-MM-YYYY`` for a resolved day."""

    y, m, d = date_parts(periods)
    return f"{d:02d}-{m:02d}-{y:04d}"


def day_count_of(calendar: CalendarDefinition, year: int, month: int, day: int) -> int:
    """Return the day count of the displayed date ``day``-``month``-``year``."""

    types = calendar.period_types
    if year < 1:
        raise ValidationError("Year must be greater than 0")

    start = core.locate(year - 1, types.YEAR, calendar)
    structure = core.resolve(start, calendar)[types.YEAR].structure
    months = structure.children
    offset, index = start, month
    if month > len(months):
        # intercalary periods after the year continue its month numbering
        following = core.resolve(start + structure.length, calendar)[types.YEAR]
        if following.counted:
            raise ValidationError(f"Month must be 1–{len(months)}")
        offset = start + structure.length
        index = month - len(months)
        months = following.structure.children
    if not 1 <= index <= len(months):
        raise ValidationError(f"Month must be 1–{len(months)}")

    target = months[index - 1]
    if not 1 <= day <= target.length:
        raise ValidationError(f"Month {month} has {target.length} days in year {year}")
    return offset + sum(s.length for s in months[: index - 1]) + day - 1


def parse_date(value: str | bytes, calendar: CalendarDefinition) -> int:
    """Return the day count of a ``DD-MM-YYYY`` / ``YYYY-MM-DD`` string.

    Raises :class:`django.core.exceptions.ValidationError` on invalid input.
    """

    y, m, d = split_date(value)
    return day_count_of(calendar, y, m, d)


def step(days: int, calendar: CalendarDefinition, period_type: int | str, direction: int = 1) -> int:
    """Move ``direction`` periods of ``period_type`` from ``days``.

    The step is the length of the period containing ``days`` in both
    directions, so a year forward from a leap year moves 366 days.
    """

    period_type = calendar.period_type(period_type)
    periods = core.resolve(days, calendar)
    return days + direction * periods[period_type].structure.length


def from_gregorian_date(value: date, calendar: CalendarDefinition = GREGORIAN) -> int:
    """Return the day count of a :class:`datetime.date` in ``calendar``."""

    return core.translate(gregorian.from_date(value), GREGORIAN, calendar)


def to_gregorian_date(days: int, calendar: CalendarDefinition = GREGORIAN) -> date:
    """Return the :class:`datetime.date` of a day count of ``calendar``."""

    return gregorian.to_date(core.translate(days, calendar, GREGORIAN))
