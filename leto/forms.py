from __future__ import annotations

from django import forms

from .calendars import get_calendar
from .core import resolve
from .periods import CalendarDefinition
from .utils import format_date, parse_date


class LetoDateFormField(forms.Field):
    """\
    Text field for a date of a leto calendar.
    clean() returns the day count after the calendar epoch (int) or None.
    """

    def __init__(self, *args, calendar: CalendarDefinition | str = "bulgarian", **kwargs):
        self.calendar = get_calendar(calendar) if isinstance(calendar, str) else calendar
        kwargs.setdefault("widget", forms.TextInput(attrs={"placeholder": "DD-MM-YYYY"}))
        super().__init__(*args, **kwargs)

    def to_python(self, value):
        if value in (None, ""):
            return None
        if isinstance(value, int):
            return value
        return parse_date(value, self.calendar)

    def prepare_value(self, value):
        if isinstance(value, int) and not isinstance(value, bool):
            return format_date(resolve(value, self.calendar))
        return value
