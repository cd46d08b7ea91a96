"""Ancient Bulgarian calendar.

The calendar starts on the winter solstice, 21 December 5505 BC (proleptic
Gregorian).  A year has four quarters of 31, 30 and 30 days followed by
"Ден Ени", a day that belongs to no month and no week.  Every four-year period
ends with "Ден Бехти", a day outside of any year, except the last four-year
period of a short star day.  Star cycles:

* star day, 60 years: 14 four-year periods with Бехти, 1 without (21 914 days);
* star week, 420 years: long and short star days alternating, 4 long (153 402 days);
* star month, 1680 years: 3 star weeks and 1 short star week (613 607 days);
* star year, 20 160 years: 12 star months;
* star epoch, 10 080 000 years: 500 star years.

A long star day keeps the Бехти of its last four-year period; a short star
week ends with a short star day instead of a long one.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import IntEnum

from ..periods import CalendarDefinition, LocaleNames, PeriodInstance, PeriodStructure


class BulgarianPeriod(IntEnum):
    DAY = 0
    MONTH = 1
    YEAR = 2
    FOUR_YEARS = 3
    STAR_DAY = 4
    STAR_WEEK = 5
    STAR_MONTH = 6
    STAR_YEAR = 7
    STAR_EPOCH = 8


# Days from 21 December 5505 BC to 1970-01-01.
EPOCH_OFFSET: int = 2_729_467

MONTH_LENGTHS: tuple[int, ...] = (31, 30, 30) * 4

_ORDINALS: dict[str, list[str]] = {
    "bg": ["Първи", "Втори", "Трети", "Четвърти", "Пети", "Шести",
           "Седми", "Осми", "Девети", "Десети", "Единадесети", "Дванадесети"],
    "en": ["First", "Second", "Third", "Fourth", "Fifth", "Sixth",
           "Seventh", "Eighth", "Ninth", "Tenth", "Eleventh", "Twelfth"],
    "de": ["Erster", "Zweiter", "Dritter", "Vierter", "Fünfter", "Sechster",
           "Siebter", "Achter", "Neunter", "Zehnter", "Elfter", "Zwölfter"],
    "ru": ["Первый", "Второй", "Третий", "Четвёртый", "Пятый", "Шестой",
           "Седьмой", "Восьмой", "Девятый", "Десятый", "Одиннадцатый", "Двенадцатый"],
}


def _month_name(locale: str, index: int) -> str:
    ordinal = _ORDINALS[locale][index]
    if locale == "bg":
        return f"Месец {ordinal}"
    if locale == "en":
        return f"{ordinal} Month"
    if locale == "de":
        return f"{ordinal} Monat"
    return f"{ordinal} Месяц"


# (proto-Bulgarian name, meaning) per locale, indexed by absolute year % 12.
YEAR_ANIMALS: dict[str, list[tuple[str, str]]] = {
    "bg": [("Сомор", "Мишка"), ("Шегор", "Вол"), ("Барс", "Тигър"), ("Дуйчем", "Заек"),
           ("Верени", "Дракон"), ("Дилом", "Змия"), ("Морин", "Кон"), ("Теку", "Овен"),
           ("Химер", "Маймуна"), ("Тох", "Петел"), ("Етх", "Куче"), ("Дохс", "Глиган")],
    "en": [("Somor", "Mouse"), ("Shegor", "Ox"), ("Bars", "Tiger"), ("Duychem", "Rabbit"),
           ("Vereni", "Dragon"), ("Dilom", "Snake"), ("Morin", "Horse"), ("Teku", "Ram"),
           ("Himer", "Monkey"), ("Toh", "Rooster"), ("Eth", "Dog"), ("Dohs", "Boar")],
    "de": [("Somor", "Maus"), ("Schegor", "Ochse"), ("Bars", "Tiger"), ("Duitschem", "Hase"),
           ("Vereni", "Drache"), ("Dilom", "Schlange"), ("Morin", "Pferd"), ("Teku", "Widder"),
           ("Himer", "Affe"), ("Toch", "Hahn"), ("Etch", "Hund"), ("Dochs", "Eber")],
    "ru": [("Сомор", "Мышь"), ("Шегор", "Вол"), ("Барс", "Тигр"), ("Дуйчем", "Заяц"),
           ("Верени", "Дракон"), ("Дилом", "Змея"), ("Морин", "Лошадь"), ("Теку", "Баран"),
           ("Химер", "Обезьяна"), ("Тох", "Петух"), ("Етх", "Собака"), ("Дохс", "Кабан")],
}

NAMES = LocaleNames(
    {
        "day": {"bg": "Ден", "en": "Day", "de": "Tag", "ru": "День"},
        "day.eni": {"bg": "Ден Ени", "en": "Day Eni", "de": "Tag Eni", "ru": "День Ени"},
        "day.behti": {"bg": "Ден Бехти", "en": "Day Behti", "de": "Tag Behti", "ru": "День Бехти"},
        "year": {"bg": "Година", "en": "Year", "de": "Jahr", "ru": "Год"},
        "four_years": {
            "bg": "Четиригодие",
            "en": "Four year period",
            "de": "Vier Jahre Abschnitt",
            "ru": "Четырёхлетный период",
        },
        "four_years.short": {
            "bg": "Четиригодие без Ден Бехти",
            "en": "Four year period without Day Behti",
            "de": "Vier Jahre Abschnitt ohne Tag Behti",
            "ru": "Четырёхлетный период без Дня Бехти",
        },
        "star_day": {"bg": "Звезден Ден", "en": "Star Day", "de": "Sterntag", "ru": "Звездный День"},
        "star_day.long": {
            "bg": "Звезден Ден с последен Ден Бехти",
            "en": "Star Day with a final Day Behti",
            "de": "Sterntag mit letztem Tag Behti",
            "ru": "Звездный День с последним Днем Бехти",
        },
        "star_week": {
            "bg": "Звездна Седмица",
            "en": "Star Week",
            "de": "Sternwoche",
            "ru": "Звездная Неделя",
        },
        "star_week.short": {
            "bg": "Кратка Звездна Седмица",
            "en": "Short Star Week",
            "de": "Kurze Sternwoche",
            "ru": "Короткая Звездная Неделя",
        },
        "star_month": {
            "bg": "Звезден Месец",
            "en": "Star Month",
            "de": "Sternmonat",
            "ru": "Звездный Месяц",
        },
        "star_year": {"bg": "Звездна Година", "en": "Star Year", "de": "Sternjahr", "ru": "Звездный Год"},
        "star_epoch": {
            "bg": "Звездна Епоха",
            "en": "Star Epoch",
            "de": "Sternepoche",
            "ru": "Звездная Эпоха",
        },
        **{
            f"month.{index + 1}": {locale: _month_name(locale, index) for locale in _ORDINALS}
            for index in range(12)
        },
    }
)

DAY = PeriodStructure(BulgarianPeriod.DAY, 1, key="day")

MONTHS = tuple(
    PeriodStructure(BulgarianPeriod.MONTH, length, (DAY,) * length, key=f"month.{index + 1}")
    for index, length in enumerate(MONTH_LENGTHS)
)
DAY_ENI = PeriodStructure(BulgarianPeriod.MONTH, 1, (DAY,), key="day.eni", counted=False)

YEAR = PeriodStructure(BulgarianPeriod.YEAR, 365, MONTHS + (DAY_ENI,), key="year")

DAY_BEHTI = PeriodStructure(
    BulgarianPeriod.YEAR,
    1,
    (PeriodStructure(BulgarianPeriod.MONTH, 1, (DAY,), key="day.behti", counted=False),),
    key="day.behti",
    counted=False,
)

FOUR_YEARS = PeriodStructure(
    BulgarianPeriod.FOUR_YEARS, 1461, (YEAR,) * 4 + (DAY_BEHTI,), key="four_years"
)
FOUR_YEARS_SHORT = PeriodStructure(
    BulgarianPeriod.FOUR_YEARS, 1460, (YEAR,) * 4, key="four_years.short"
)

STAR_DAY = PeriodStructure(
    BulgarianPeriod.STAR_DAY, 21_914, (FOUR_YEARS,) * 14 + (FOUR_YEARS_SHORT,), key="star_day"
)
STAR_DAY_LONG = PeriodStructure(
    BulgarianPeriod.STAR_DAY, 21_915, (FOUR_YEARS,) * 15, key="star_day.long"
)

STAR_WEEK = PeriodStructure(
    BulgarianPeriod.STAR_WEEK, 153_402, (STAR_DAY_LONG, STAR_DAY) * 3 + (STAR_DAY_LONG,), key="star_week"
)
STAR_WEEK_SHORT = PeriodStructure(
    BulgarianPeriod.STAR_WEEK,
    153_401,
    (STAR_DAY_LONG, STAR_DAY) * 3 + (STAR_DAY,),
    key="star_week.short",
)

STAR_MONTH = PeriodStructure(
    BulgarianPeriod.STAR_MONTH, 613_607, (STAR_WEEK,) * 3 + (STAR_WEEK_SHORT,), key="star_month"
)
STAR_YEAR = PeriodStructure(
    BulgarianPeriod.STAR_YEAR, 7_363_284, (STAR_MONTH,) * 12, key="star_year"
)
STAR_EPOCH = PeriodStructure(
    BulgarianPeriod.STAR_EPOCH, 3_681_642_000, (STAR_YEAR,) * 500, key="star_epoch"
)

BULGARIAN = CalendarDefinition(
    name="bulgarian",
    period_types=BulgarianPeriod,
    root=STAR_EPOCH,
    epoch_offset=EPOCH_OFFSET,
    names=NAMES,
)


def year_animal(periods: Sequence[PeriodInstance], locale: str = "bg") -> tuple[str, str]:
    """Return ``(name, meaning)`` of the year in the 12-year animal cycle."""

    animals = YEAR_ANIMALS.get(locale, YEAR_ANIMALS["bg"])
    return animals[periods[BulgarianPeriod.YEAR].absolute_number % 12]


def star_day_year(periods: Sequence[PeriodInstance]) -> int:
    """1-based position of the year inside the 60 year star day cycle."""

    return periods[BulgarianPeriod.YEAR].absolute_number % 60 + 1


def weekday(periods: Sequence[PeriodInstance]) -> int:
    """Day of the Bulgarian week (1..7); 0 for Ени and Бехти.

    The 364 days of the twelve months make exactly 52 weeks, so every year
    starts on the first day of the week.
    """

    if not periods[BulgarianPeriod.YEAR].counted or not periods[BulgarianPeriod.MONTH].counted:
        return 0
    day_of_year = periods[BulgarianPeriod.DAY].start - periods[BulgarianPeriod.YEAR].start
    return day_of_year % 7 + 1
