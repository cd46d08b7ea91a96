from datetime import date, timedelta

from leto.calendars.gregorian import GREGORIAN, GregorianPeriod, from_date, to_date, weekday, year_in_century
from leto.core import locate, resolve
from leto.utils import date_parts, format_date


def test_matches_datetime_date():
    for days in range(0, 800_000, 37):
        expected = to_date(days)
        assert date_parts(resolve(days, GREGORIAN)) == (expected.year, expected.month, expected.day)


def test_leap_day_2024():
    days = from_date(date(2024, 2, 29))
    periods = resolve(days, GREGORIAN)
    assert periods[GregorianPeriod.DAY].ordinal == 29
    assert periods[GregorianPeriod.MONTH].ordinal == 2
    assert periods[GregorianPeriod.MONTH].length == 29
    assert periods[GregorianPeriod.YEAR].absolute_number == 2023
    assert periods[GregorianPeriod.YEAR].structure.key == "year.leap"
    assert periods[GregorianPeriod.FOUR_CENTURIES].absolute_number == 5
    assert periods[GregorianPeriod.CENTURY].number == 0
    assert periods[GregorianPeriod.CENTURY].absolute_number == 20
    assert periods[GregorianPeriod.FOUR_YEARS].number == 5
    assert periods[GregorianPeriod.FOUR_YEARS].absolute_number == 505
    assert periods[GregorianPeriod.YEAR].number == 3
    assert format_date(periods) == "29-02-2024"

    following = resolve(days + 1, GREGORIAN)
    assert date_parts(following) == (2024, 3, 1)


def test_century_years_are_not_leap():
    for year in (1700, 1800, 1900, 2100):
        periods = resolve(from_date(date(year, 12, 31)), GREGORIAN)
        assert periods[GregorianPeriod.YEAR].length == 365
        assert periods[GregorianPeriod.DAY].start - periods[GregorianPeriod.YEAR].start == 364
    periods = resolve(from_date(date(2000, 12, 31)), GREGORIAN)
    assert periods[GregorianPeriod.YEAR].length == 366


def test_day_before_epoch():
    periods = resolve(-1, GREGORIAN)
    assert date_parts(periods) == (0, 12, 31)
    assert periods[GregorianPeriod.YEAR].absolute_number == -1
    assert periods[GregorianPeriod.YEAR].length == 366
    assert locate(-1, GregorianPeriod.YEAR, GREGORIAN) == -366


def test_locate_year():
    assert locate(2023, "year", GREGORIAN) == from_date(date(2024, 1, 1))
    assert locate(0, GregorianPeriod.MONTH, GREGORIAN) == 0


def test_weekday_and_names():
    days = from_date(date(2024, 2, 29))
    assert weekday(days) == date(2024, 2, 29).weekday()
    periods = resolve(days, GREGORIAN)
    assert periods[GregorianPeriod.MONTH].name("en") == "February"
    assert periods[GregorianPeriod.MONTH].name("de") == "Februar"
    assert periods[GregorianPeriod.YEAR].name("en") == "Leap year"
    assert year_in_century(periods) == 24


def test_to_date_round_trip():
    start = date(1999, 12, 25)
    for offset in range(30):
        value = start + timedelta(days=offset)
        assert to_date(from_date(value)) == value
