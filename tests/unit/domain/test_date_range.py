from datetime import timedelta

import pytest

from equipment_rental.domain.errors import InvalidDateRangeError
from equipment_rental.domain.value_objects.date_range import DateRange
from tests.factories import NOW, days_from_now, period


def test_start_must_precede_end():
    with pytest.raises(InvalidDateRangeError):
        DateRange(NOW, NOW)
    with pytest.raises(InvalidDateRangeError):
        DateRange(days_from_now(1), NOW)


@pytest.mark.parametrize("r", [period(0, 1), period(-3, 7), period(0, 0.01)])
def test_range_overlaps_itself(r):
    assert r.overlaps(r)


def test_adjacent_ranges_do_not_overlap():
    first = period(0, 3)
    second = period(3, 5)
    assert not first.overlaps(second)
    assert not second.overlaps(first)


def test_partial_overlap():
    assert period(0, 3).overlaps(period(2, 5))
    assert period(2, 5).overlaps(period(0, 3))
    assert period(0, 10).overlaps(period(2, 3))


def test_contains_is_half_open():
    r = period(0, 2)
    assert r.contains(NOW)
    assert r.contains(days_from_now(1))
    assert not r.contains(days_from_now(2))
    assert not r.contains(days_from_now(-0.001))


def test_day_count_rounds_partial_days_up():
    assert period(0, 7).day_count() == 7
    assert DateRange(NOW, NOW + timedelta(hours=25)).day_count() == 2
    assert DateRange(NOW, NOW + timedelta(minutes=1)).day_count() == 1


def test_days_until_and_past_end():
    r = period(-5, 2)
    assert r.days_until_end(NOW) == 2
    assert r.days_past_end(NOW) == 0
    assert r.days_past_end(days_from_now(4)) == 2
    assert r.days_past_end(days_from_now(2.5)) == 1
    assert r.days_until_end(days_from_now(4)) == -2


def test_started_ended_active():
    r = period(0, 1)
    assert r.has_started(NOW)
    assert r.is_active(NOW)
    assert not r.has_ended(NOW)
    assert r.has_ended(days_from_now(1))
    assert not r.is_active(days_from_now(1))
    assert not period(1, 2).has_started(NOW)


def test_extend_keeps_start():
    r = period(0, 7)
    extended = r.extend(5)
    assert extended.start == r.start
    assert extended.end == days_from_now(12)
    assert r.end == days_from_now(7)


@pytest.mark.parametrize("days", [0, -1])
def test_extend_requires_positive_days(days):
    with pytest.raises(InvalidDateRangeError):
        period(0, 1).extend(days)


def test_equality_and_str():
    assert period(0, 1) == period(0, 1)
    assert str(period(0, 1)) == f"{NOW.isoformat()} -> {days_from_now(1).isoformat()}"
