"""Consistency checks for calendar definitions.

``check_definition`` never raises for a defective definition; it returns a
:class:`CheckResult` listing what is wrong.  ``check_calendars`` exposes the
same checks to ``manage.py check`` for every calendar in ``LETO_CALENDARS``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from django.core import checks

from .calendars import configured_calendars
from .core import resolve, to_day_count
from .exceptions import CalendarConfigurationError
from .periods import CalendarDefinition, PeriodStructure, default_locale

logger = logging.getLogger(__name__)


@dataclass
class CheckResult:
    calendar: str
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def _label(structure: PeriodStructure) -> str:
    return structure.key or structure.period_type.name.lower()


def check_definition(calendar: CalendarDefinition) -> CheckResult:
    """Verify the structures of ``calendar`` against each other and its period types."""

    result = CheckResult(calendar.name)
    types = calendar.types
    finest = types[0]
    candidates = {period_type: 0 for period_type in types}

    for structure in calendar.structures():
        label = _label(structure)
        if type(structure.period_type) is not calendar.period_types:
            result.errors.append(f"{label}: period type is not one of {calendar.name} period types")
            continue
        candidates[structure.period_type] += 1

        if structure.children:
            total = structure.children_length
            if total != structure.length:
                result.errors.append(
                    f"{label}: sub-periods cover {total} days, but the period is "
                    f"{structure.length} days long"
                )
            for period_type in types[: structure.period_type]:
                expected = sum(child.length_in(period_type) for child in structure.children)
                if structure.length_in(period_type) != expected:
                    result.errors.append(
                        f"{label}: holds {structure.length_in(period_type)} "
                        f"{period_type.name.lower()} periods, sub-periods add up to {expected}"
                    )
        elif structure.length != 1:
            result.errors.append(
                f"{label}: {finest.name.lower()} periods must be 1 day long, got {structure.length}"
            )

        if structure.length_in(finest) != structure.length:
            result.errors.append(
                f"{label}: counts {structure.length_in(finest)} {finest.name.lower()} periods "
                f"in {structure.length} days"
            )

        if structure.key not in calendar.names:
            result.warnings.append(f"{label}: no display name registered")
        elif default_locale() not in calendar.names.locales(structure.key):
            result.warnings.append(f"{label}: no display name for locale {default_locale()!r}")

    for period_type, count in candidates.items():
        if count == 0:
            result.errors.append(f"{period_type.name.lower()}: no structure defined")
        if calendar.root.length_in(period_type) == 0:
            result.errors.append(
                f"{period_type.name.lower()}: never counted inside {_label(calendar.root)}"
            )
    if candidates[calendar.coarsest] != 1:
        result.errors.append(
            f"{calendar.coarsest.name.lower()}: expected exactly one structure, "
            f"found {candidates[calendar.coarsest]}"
        )

    for message in result.errors:
        logger.warning("Calendar %s: %s", calendar.name, message)
    return result


def verify_round_trip(calendar: CalendarDefinition, start: int, count: int) -> list[str]:
    """Resolve ``count`` consecutive days and report round-trip or counter failures."""

    problems: list[str] = []
    previous = None
    for days in range(start, start + count):
        try:
            periods = resolve(days, calendar)
        except CalendarConfigurationError as exc:
            problems.append(f"day {days}: {exc}")
            previous = None
            continue
        back = to_day_count(periods)
        if back != days:
            problems.append(f"day {days}: resolves back to {back}")
        if previous is not None:
            for before, after in zip(previous, periods):
                step = after.absolute_number - before.absolute_number
                if step not in (0, 1):
                    problems.append(
                        f"day {days}: absolute {after.period_type.name.lower()} "
                        f"moved by {step}"
                    )
        previous = periods
    return problems


def check_calendars(app_configs=None, **kwargs) -> list[checks.CheckMessage]:
    """System check running :func:`check_definition` for the configured calendars."""

    messages: list[checks.CheckMessage] = []
    try:
        calendars = configured_calendars()
    except (ImportError, CalendarConfigurationError) as exc:
        return [checks.Error(f"Cannot load LETO_CALENDARS: {exc}", id="leto.E002")]

    for name, calendar in calendars.items():
        result = check_definition(calendar)
        messages.extend(checks.Error(message, obj=name, id="leto.E001") for message in result.errors)
        messages.extend(
            checks.Warning(message, obj=name, id="leto.W001") for message in result.warnings
        )
    return messages
