"""Context processors for leto calendars."""

from .calendars import configured_calendars
from .core import today


def leto_today(request):
    """Expose today's resolved periods of every configured calendar."""
    return {"LETO_TODAY": {name: today(calendar) for name, calendar in configured_calendars().items()}}
