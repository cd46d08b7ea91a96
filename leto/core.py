"""Calendar resolution engine.

This module maps a signed day count (days after the epoch of a calendar) to
the period instances that contain it, and back.  It has no knowledge of leap
rules or intercalary days: every irregularity lives in the structures of the
:class:`~leto.periods.CalendarDefinition` and is handled by scanning sibling
structures in order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date, datetime, timedelta
from datetime import timezone as dt_timezone
from enum import IntEnum

from django.conf import settings
from django.utils import timezone

from .exceptions import DayCountOutOfRange, ResolutionGapError
from .periods import MAX_DAYS, CalendarDefinition, PeriodInstance, PeriodStructure

logger = logging.getLogger(__name__)

UNIX_EPOCH = date(1970, 1, 1)
DEFAULT_UTC_OFFSET_HOURS = 2

_Chain = tuple[tuple[PeriodStructure, int, int], ...]


def _check_range(days: int) -> None:
    if not -MAX_DAYS <= days <= MAX_DAYS:
        raise DayCountOutOfRange(f"Day count {days} is outside of ±{MAX_DAYS}")


def _add_counts(absolute: tuple[int, ...], structure: PeriodStructure, times: int) -> tuple[int, ...]:
    return tuple(value + structure.length_in(index) * times for index, value in enumerate(absolute))


def _descend(
    structure: PeriodStructure, remaining: int, elapsed: int, absolute: tuple[int, ...]
) -> tuple[_Chain, tuple[int, ...]]:
    """Scan the children of ``structure`` for the one containing ``remaining``.

    Returns the chain of active ``(structure, number, start)`` entries below
    ``structure`` (coarsest first) and the updated absolute counters.
    """

    if not structure.children:
        return (), absolute
    for number, child in enumerate(structure.children):
        if child.length > remaining:
            chain, absolute = _descend(child, remaining, elapsed, absolute)
            return ((child, number, elapsed),) + chain, absolute
        remaining -= child.length
        elapsed += child.length
        absolute = _add_counts(absolute, child, 1)
    raise ResolutionGapError(
        f"The sub-periods of {structure.key or structure.period_type.name.lower()!r} "
        f"cover {structure.children_length} days, {remaining} day(s) are left over"
    )


def resolve(days: int, calendar: CalendarDefinition) -> list[PeriodInstance]:
    """Split ``days`` after the epoch into the periods of ``calendar``.

    The result holds one :class:`PeriodInstance` per period type, finest
    first.  Negative day counts are resolved with floor division: ``-1`` is
    the last day of the root period numbered ``-1``.
    """

    _check_range(days)
    root = calendar.root
    quotient, remaining = divmod(days, root.length)
    elapsed = quotient * root.length
    absolute = _add_counts((0,) * len(calendar.types), root, quotient)

    chain, absolute = _descend(root, remaining, elapsed, absolute)
    chain = ((root, quotient, elapsed),) + chain

    if len(chain) != len(calendar.types):  # pragma: no cover - guarded by PeriodStructure
        raise ResolutionGapError(f"{calendar.name!r} resolved only {len(chain)} period types")

    periods = [
        PeriodInstance(
            period_type=structure.period_type,
            number=number,
            absolute_number=absolute[structure.period_type],
            structure=structure,
            start=start,
            names=calendar.names,
        )
        for structure, number, start in reversed(chain)
    ]
    logger.debug("Resolved day %s of %s", days, calendar.name)
    return periods


def to_day_count(periods: Sequence[PeriodInstance]) -> int:
    """Return the day count that ``periods`` (as produced by :func:`resolve`) describe.

    The root period contributes ``number * length``; every finer period adds
    the lengths of the siblings that precede it inside its parent.
    """

    if not periods:
        raise ValueError("Cannot compute a day count from an empty period list")
    ordered = list(reversed(periods))
    root = ordered[0]
    days = root.number * root.structure.length
    for parent, child in zip(ordered, ordered[1:]):
        days += parent.structure.offset_of(child.number)
    return days


def locate(number: int, period_type: int, calendar: CalendarDefinition) -> int:
    """Return the first day of the period of ``period_type`` with absolute ``number``."""

    period_type = calendar.period_type(period_type)
    root = calendar.root
    per_root = root.length_in(period_type)
    if per_root <= 0:
        raise ResolutionGapError(
            f"{calendar.name!r} never counts a {period_type.name.lower()} period"
        )
    quotient, rest = divmod(number, per_root)
    days = quotient * root.length
    structure = root
    while structure.period_type > period_type:
        for child in structure.children:
            contained = child.length_in(period_type)
            if contained > rest:
                structure = child
                break
            rest -= contained
            days += child.length
        else:
            raise ResolutionGapError(
                f"Period {number} of type {period_type.name.lower()!r} is not reachable "
                f"inside {structure.key or structure.period_type.name.lower()!r}"
            )
    _check_range(days)
    return days


def translate(days: int, source: CalendarDefinition, target: CalendarDefinition) -> int:
    """Re-express a day count of ``source`` as a day count of ``target``."""

    return days - source.epoch_offset + target.epoch_offset


def utc_offset_hours() -> int:
    return getattr(settings, "LETO_UTC_OFFSET_HOURS", DEFAULT_UTC_OFFSET_HOURS)


def days_today(calendar: CalendarDefinition, now: datetime | None = None) -> int:
    """Day count of the current day, ``LETO_UTC_OFFSET_HOURS`` ahead of UTC."""

    if now is None:
        now = timezone.now()
    if timezone.is_aware(now):
        now = now.astimezone(dt_timezone.utc).replace(tzinfo=None)
    local = now + timedelta(hours=utc_offset_hours())
    return calendar.epoch_offset + (local.date() - UNIX_EPOCH).days


def today(calendar: CalendarDefinition, now: datetime | None = None) -> list[PeriodInstance]:
    """Resolve the current day in ``calendar``."""

    return resolve(days_today(calendar, now), calendar)


def period_of(periods: Sequence[PeriodInstance], period_type: IntEnum | int) -> PeriodInstance:
    """Return the instance of ``period_type`` from a resolved list."""

    return periods[int(period_type)]
