"""Proleptic Gregorian calendar.

Day ``0`` is Monday 1 January of year 1.  The leap rule is encoded entirely in
the shape of the structures: every four-year period ends with a leap year,
except the last one of the first three centuries of each 400-year cycle.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date
from enum import IntEnum

from ..periods import CalendarDefinition, LocaleNames, PeriodInstance, PeriodStructure


class GregorianPeriod(IntEnum):
    DAY = 0
    MONTH = 1
    YEAR = 2
    FOUR_YEARS = 3
    CENTURY = 4
    FOUR_CENTURIES = 5


# Days from 0001-01-01 to 1970-01-01.
EPOCH_OFFSET: int = 719_162

MONTH_LENGTHS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

MONTH_NAMES: dict[str, list[str]] = {
    "bg": ["Януари", "Февруари", "Март", "Април", "Май", "Юни",
           "Юли", "Август", "Септември", "Октомври", "Ноември", "Декември"],
    "en": ["January", "February", "March", "April", "May", "June",
           "July", "August", "September", "October", "November", "December"],
    "de": ["Januar", "Februar", "März", "April", "Mai", "Juni",
           "Juli", "August", "September", "Oktober", "November", "Dezember"],
    "ru": ["Январь", "Февраль", "Март", "Апрель", "Май", "Июнь",
           "Июль", "Август", "Сентябрь", "Октябрь", "Ноябрь", "Декабрь"],
}

NAMES = LocaleNames(
    {
        "day": {"bg": "Ден", "en": "Day", "de": "Tag", "ru": "День"},
        "year": {"bg": "Година", "en": "Year", "de": "Jahr", "ru": "Год"},
        "year.leap": {
            "bg": "Високосна година",
            "en": "Leap year",
            "de": "Schaltjahr",
            "ru": "Високосный год",
        },
        "four_years": {
            "bg": "Четиригодие",
            "en": "Four year period",
            "de": "Vier Jahre Abschnitt",
            "ru": "Четырёхлетный период",
        },
        "four_years.short": {
            "bg": "Четиригодие без високосна година",
            "en": "Four year period without a leap year",
            "de": "Vier Jahre Abschnitt ohne Schaltjahr",
            "ru": "Четырёхлетный период без високосного года",
        },
        "century": {"bg": "Столетие", "en": "Century", "de": "Jahrhundert", "ru": "Век"},
        "century.long": {
            "bg": "Столетие с високосна последна година",
            "en": "Century ending with a leap year",
            "de": "Jahrhundert mit Schaltjahr am Ende",
            "ru": "Век с високосным последним годом",
        },
        "four_centuries": {
            "bg": "400г. период",
            "en": "400y. period",
            "de": "400 J. Abschnitt",
            "ru": "400 лет период",
        },
        **{
            f"month.{index + 1}": {locale: names[index] for locale, names in MONTH_NAMES.items()}
            for index in range(12)
        },
    }
)

DAY = PeriodStructure(GregorianPeriod.DAY, 1, key="day")


def _month(index: int, length: int) -> PeriodStructure:
    return PeriodStructure(GregorianPeriod.MONTH, length, (DAY,) * length, key=f"month.{index + 1}")


MONTHS = tuple(_month(index, length) for index, length in enumerate(MONTH_LENGTHS))
FEBRUARY_LEAP = _month(1, 29)

COMMON_YEAR = PeriodStructure(GregorianPeriod.YEAR, 365, MONTHS, key="year")
LEAP_YEAR = PeriodStructure(
    GregorianPeriod.YEAR, 366, (MONTHS[0], FEBRUARY_LEAP) + MONTHS[2:], key="year.leap"
)

FOUR_YEARS = PeriodStructure(
    GregorianPeriod.FOUR_YEARS, 1461, (COMMON_YEAR,) * 3 + (LEAP_YEAR,), key="four_years"
)
FOUR_YEARS_SHORT = PeriodStructure(
    GregorianPeriod.FOUR_YEARS, 1460, (COMMON_YEAR,) * 4, key="four_years.short"
)

CENTURY = PeriodStructure(
    GregorianPeriod.CENTURY, 36_524, (FOUR_YEARS,) * 24 + (FOUR_YEARS_SHORT,), key="century"
)
CENTURY_LONG = PeriodStructure(
    GregorianPeriod.CENTURY, 36_525, (FOUR_YEARS,) * 25, key="century.long"
)

FOUR_CENTURIES = PeriodStructure(
    GregorianPeriod.FOUR_CENTURIES,
    146_097,
    (CENTURY,) * 3 + (CENTURY_LONG,),
    key="four_centuries",
)

GREGORIAN = CalendarDefinition(
    name="gregorian",
    period_types=GregorianPeriod,
    root=FOUR_CENTURIES,
    epoch_offset=EPOCH_OFFSET,
    names=NAMES,
)


def from_date(value: date) -> int:
    """Return the Gregorian day count of ``value``."""

    return value.toordinal() - 1


def to_date(days: int) -> date:
    """Return the :class:`datetime.date` of a Gregorian day count (years 1–9999)."""

    return date.fromordinal(days + 1)


def weekday(days: int) -> int:
    """Weekday index of a Gregorian day count (0=Mon .. 6=Sun)."""

    return days % 7


def year_in_century(periods: Sequence[PeriodInstance]) -> int:
    """1-based position of the year inside its century (1..100)."""

    return periods[GregorianPeriod.YEAR].absolute_number % 100 + 1
