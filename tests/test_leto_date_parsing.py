from datetime import date

import pytest
from django.core.exceptions import ValidationError

from leto.calendars import BULGARIAN, GREGORIAN
from leto.calendars.gregorian import from_date
from leto.utils import DATE_ERROR, day_count_of, parse_date, split_date, step
from leto.validators import validate_date_parts


def test_split_iso_format():
    assert split_date("2025-09-01") == (2025, 9, 1)


def test_split_dd_mm_yyyy():
    assert split_date("01-09-2025") == (2025, 9, 1)


def test_split_bytes():
    assert split_date(b"0004-14-01") == (4, 14, 1)


def test_split_with_dots_rejected():
    with pytest.raises(ValidationError) as excinfo:
        split_date("01.09.2025")
    assert DATE_ERROR in str(excinfo.value)


def test_split_non_string_rejected():
    with pytest.raises(ValidationError):
        split_date(20250901)


def test_parse_gregorian():
    assert parse_date("29-02-2024", GREGORIAN) == from_date(date(2024, 2, 29))
    assert parse_date("0001-01-01", GREGORIAN) == 0


def test_parse_bulgarian_intercalary_days():
    assert parse_date("01-13-0001", BULGARIAN) == 364
    assert parse_date("01-13-0004", BULGARIAN) == 1459
    assert parse_date("01-14-0004", BULGARIAN) == 1460
    assert parse_date("01-01-0005", BULGARIAN) == 1461


def test_behti_only_after_fourth_year():
    with pytest.raises(ValidationError, match="Month must be 1–13"):
        parse_date("01-14-0001", BULGARIAN)


def test_invalid_day_of_month():
    with pytest.raises(ValidationError, match="Month 2 has 28 days in year 2023"):
        day_count_of(GREGORIAN, 2023, 2, 29)
    with pytest.raises(ValidationError, match="Month 13 has 1 days in year 1"):
        day_count_of(BULGARIAN, 1, 13, 2)


def test_invalid_month():
    with pytest.raises(ValidationError, match="Month must be 1–12"):
        day_count_of(GREGORIAN, 2024, 13, 1)
    with pytest.raises(ValidationError, match="Month must be 1–13"):
        day_count_of(BULGARIAN, 3, 0, 1)


def test_year_must_be_positive():
    with pytest.raises(ValidationError):
        validate_date_parts(GREGORIAN, 0, 1, 1)


def test_validator_accepts_valid_date():
    assert validate_date_parts(BULGARIAN, 4, 14, 1) is None


def test_step_uses_current_period_length():
    leap = from_date(date(2024, 1, 1))
    assert step(leap, GREGORIAN, "year") == from_date(date(2025, 1, 1))
    assert step(leap, GREGORIAN, "day") == leap + 1
    assert step(leap, GREGORIAN, "month", -1) == leap - 31
    assert step(0, BULGARIAN, "four_years") == 1461
