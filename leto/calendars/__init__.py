"""Shipped calendar definitions and the ``LETO_CALENDARS`` registry."""

from __future__ import annotations

from django.conf import settings
from django.utils.module_loading import import_string

from ..periods import CalendarDefinition
from .bulgarian import BULGARIAN, BulgarianPeriod
from .gregorian import GREGORIAN, GregorianPeriod

DEFAULT_CALENDARS: dict[str, str] = {
    "bulgarian": "leto.calendars.bulgarian.BULGARIAN",
    "gregorian": "leto.calendars.gregorian.GREGORIAN",
}


def configured_calendars() -> dict[str, CalendarDefinition]:
    """Return the calendars listed in ``LETO_CALENDARS`` keyed by name."""

    paths = getattr(settings, "LETO_CALENDARS", DEFAULT_CALENDARS)
    return {name: import_string(path) for name, path in paths.items()}


def get_calendar(name: str) -> CalendarDefinition:
    calendars = configured_calendars()
    try:
        return calendars[name]
    except KeyError:
        raise LookupError(
            f"Unknown calendar {name!r}; configured: {', '.join(sorted(calendars))}"
        ) from None


__all__ = [
    "BULGARIAN",
    "GREGORIAN",
    "BulgarianPeriod",
    "GregorianPeriod",
    "configured_calendars",
    "get_calendar",
]
