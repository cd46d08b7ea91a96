import pytest

from leto.calendars import BULGARIAN, GREGORIAN
from leto.core import locate, resolve, to_day_count, translate
from leto.exceptions import DayCountOutOfRange
from leto.periods import MAX_DAYS

CALENDARS = [GREGORIAN, BULGARIAN]


def assert_odometer(before, after):
    changed = [b.start != a.start for b, a in zip(before, after)]
    assert changed[0]
    first_unchanged = changed.index(False) if False in changed else len(changed)
    assert not any(changed[first_unchanged:])
    for level in range(first_unchanged):
        parent_changed = level + 1 < len(changed) and changed[level + 1]
        if parent_changed:
            assert after[level].number == 0
        else:
            assert after[level].number == before[level].number + 1
    for level in range(first_unchanged, len(changed)):
        assert after[level].number == before[level].number
        assert after[level].structure is before[level].structure


def assert_absolute_steps(before, after):
    for b, a in zip(before, after):
        step = a.absolute_number - b.absolute_number
        if a.start != b.start and b.counted:
            assert step == 1
        else:
            assert step == 0


def day_windows(calendar):
    yield range(-800, 800)
    # around the first star day / first four centuries
    yield range(21_000, 22_700)
    yield range(146_000, 146_200)
    yield range(2_749_000, 2_749_800)


@pytest.mark.parametrize("calendar", CALENDARS, ids=lambda c: c.name)
def test_round_trip(calendar):
    for window in day_windows(calendar):
        for days in window:
            assert to_day_count(resolve(days, calendar)) == days


@pytest.mark.parametrize("calendar", CALENDARS, ids=lambda c: c.name)
def test_round_trip_sparse_over_millennia(calendar):
    for days in range(-3_000_000, 3_000_000, 9_973):
        assert to_day_count(resolve(days, calendar)) == days


@pytest.mark.parametrize("calendar", CALENDARS, ids=lambda c: c.name)
def test_odometer_and_absolute_monotonicity(calendar):
    for window in day_windows(calendar):
        previous = None
        for days in window:
            periods = resolve(days, calendar)
            if previous is not None:
                assert_odometer(previous, periods)
                assert_absolute_steps(previous, periods)
            previous = periods


@pytest.mark.parametrize("calendar", CALENDARS, ids=lambda c: c.name)
def test_result_shape(calendar):
    periods = resolve(12_345, calendar)
    assert len(periods) == len(calendar.types)
    assert [p.period_type for p in periods] == list(calendar.types)
    assert periods[-1].structure is calendar.root
    assert periods[0].start == 12_345
    assert periods[0].absolute_number == 12_345


@pytest.mark.parametrize("calendar", CALENDARS, ids=lambda c: c.name)
def test_day_zero_is_start_of_everything(calendar):
    periods = resolve(0, calendar)
    assert all(p.number == 0 for p in periods)
    assert all(p.absolute_number == 0 for p in periods)
    assert all(p.start == 0 for p in periods)


@pytest.mark.parametrize("calendar", CALENDARS, ids=lambda c: c.name)
def test_negative_days_use_floor_division(calendar):
    periods = resolve(-1, calendar)
    root = periods[-1]
    assert root.number == -1
    assert root.absolute_number == -1
    assert root.start == -calendar.root.length
    assert periods[0].absolute_number == -1
    assert periods[0].start == -1
    assert to_day_count(periods) == -1


@pytest.mark.parametrize("calendar", CALENDARS, ids=lambda c: c.name)
def test_start_of_previous_root_period(calendar):
    days = -calendar.root.length
    periods = resolve(days, calendar)
    assert periods[-1].number == -1
    assert all(p.number == 0 for p in periods[:-1])
    assert to_day_count(periods) == days


def test_out_of_range_day_count():
    with pytest.raises(DayCountOutOfRange):
        resolve(MAX_DAYS + 1, GREGORIAN)
    with pytest.raises(DayCountOutOfRange):
        resolve(-MAX_DAYS - 1, BULGARIAN)


def test_to_day_count_requires_periods():
    with pytest.raises(ValueError):
        to_day_count([])


@pytest.mark.parametrize("calendar", CALENDARS, ids=lambda c: c.name)
def test_locate_matches_absolute_numbers(calendar):
    for days in range(-400, 2_000, 7):
        periods = resolve(days, calendar)
        for period in periods:
            if period.counted:
                assert locate(period.absolute_number, period.period_type, calendar) == period.start


def test_translate_between_calendars():
    assert translate(0, GREGORIAN, BULGARIAN) == BULGARIAN.epoch_offset - GREGORIAN.epoch_offset
    assert translate(translate(1234, BULGARIAN, GREGORIAN), GREGORIAN, BULGARIAN) == 1234
