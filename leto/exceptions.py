"""Errors raised by the leto calendar engine."""


class CalendarConfigurationError(ValueError):
    """A calendar definition is internally inconsistent.

    Raised while a definition is built, or while resolving against a
    definition whose structures do not cover the requested day.
    """


class ResolutionGapError(CalendarConfigurationError):
    """A sibling scan ran out of children before the remaining days did."""


class DayCountOutOfRange(ValueError):
    """The day count does not fit the supported signed 64-bit range."""
