# tests/test_rules.py

import pytest

from ethiocal.core.errors import InvalidArgumentError
from ethiocal.engines import rules
from ethiocal.engines.constants import EPOCH_OFFSET


def test_leap_years():
    # Leap iff year % 4 == 3
    assert rules.is_leap_year(2015)
    assert rules.is_leap_year(2019)
    assert rules.is_leap_year(2023)
    assert not rules.is_leap_year(2016)
    assert not rules.is_leap_year(2020)

def test_leap_years_negative_use_floor_mod():
    assert rules.is_leap_year(-1)
    assert rules.is_leap_year(-5)
    assert not rules.is_leap_year(0)
    assert not rules.is_leap_year(-2)

def test_days_in_month():
    assert rules.days_in_month(2016, 1) == 30
    assert rules.days_in_month(2016, 12) == 30
    assert rules.days_in_month(2016, 13) == 5
    assert rules.days_in_month(2015, 13) == 6

@pytest.mark.parametrize("month", [0, 14, -1])
def test_days_in_month_rejects_bad_month(month):
    with pytest.raises(InvalidArgumentError, match=rf"month {month} out of range \(valid 1..13\)"):
        rules.days_in_month(2016, month)

def test_days_in_year():
    assert rules.days_in_year(2016) == 365
    assert rules.days_in_year(2015) == 366

def test_is_valid_date():
    assert rules.is_valid_date(2016, 3, 15)
    assert rules.is_valid_date(2015, 13, 6)
    assert not rules.is_valid_date(2016, 13, 6)
    assert not rules.is_valid_date(2016, 14, 1)
    assert not rules.is_valid_date(2016, 1, 31)
    assert not rules.is_valid_date(2016, 1, 0)
    assert not rules.is_valid_date(2016, "1", 1)

def test_validate_date_message_names_field_and_range():
    with pytest.raises(InvalidArgumentError) as exc:
        rules.validate_date(2016, 13, 6)
    msg = str(exc.value)
    assert "day 6" in msg
    assert "month 13 of year 2016" in msg
    assert "valid 1..5" in msg

def test_day_of_year():
    assert rules.day_of_year(3, 15) == 75
    assert rules.day_of_year(13, 6) == 366

def test_month_and_day_from_day_of_year():
    assert rules.month_and_day_from_day_of_year(75) == (3, 15)
    assert rules.month_and_day_from_day_of_year(361) == (13, 1)
    assert rules.month_and_day_from_day_of_year(366, 2015) == (13, 6)

def test_month_and_day_from_day_of_year_checks_year_length():
    with pytest.raises(InvalidArgumentError, match="day of year 366 out of range for year 2016"):
        rules.month_and_day_from_day_of_year(366, 2016)
    with pytest.raises(InvalidArgumentError):
        rules.month_and_day_from_day_of_year(0)
    with pytest.raises(InvalidArgumentError):
        rules.month_and_day_from_day_of_year(367)

def test_unix_epoch_alignment():
    # 1970-01-01 ISO is Tahsas 23, 1962
    assert rules.to_epoch_day(1962, 4, 23) == 0
    assert tuple(rules.from_epoch_day(0)) == (1962, 4, 23)

def test_known_new_years():
    assert rules.to_epoch_day(2016, 1, 1) == 19612  # 2023-09-12
    assert rules.to_epoch_day(2017, 1, 1) == 19977  # 2024-09-11

def test_ethiopic_epoch():
    assert rules.to_epoch_day(1, 1, 1) == -EPOCH_OFFSET
    assert tuple(rules.from_epoch_day(-EPOCH_OFFSET)) == (1, 1, 1)
    assert tuple(rules.from_epoch_day(-EPOCH_OFFSET - 1)) == (0, 13, 5)

def test_pagumen_boundaries():
    # leap year: Pagumen 6 is followed by Meskerem 1
    e = rules.to_epoch_day(2015, 13, 6)
    assert tuple(rules.from_epoch_day(e + 1)) == (2016, 1, 1)
    e = rules.to_epoch_day(2016, 13, 5)
    assert tuple(rules.from_epoch_day(e + 1)) == (2017, 1, 1)

def test_far_negative_epoch_days():
    for y, m, d in [(-1, 13, 6), (-1000, 1, 1), (-999_999, 7, 30), (-4, 13, 5)]:
        assert tuple(rules.from_epoch_day(rules.to_epoch_day(y, m, d))) == (y, m, d)

def test_plus_days_and_days_between():
    assert tuple(rules.plus_days((2016, 1, 28), 5)) == (2016, 2, 3)
    assert tuple(rules.plus_days((2016, 1, 1), -1)) == (2015, 13, 6)
    assert rules.days_between((2016, 1, 1), (2016, 1, 10)) == 9
    assert rules.days_between((2016, 1, 10), (2016, 1, 1)) == -9
    assert rules.days_between((2016, 1, 1), (2017, 1, 1)) == 365
    assert rules.days_between((2015, 1, 1), (2016, 1, 1)) == 366

def test_add_months():
    assert rules.add_months(2016, 13, 1) == (2017, 1)
    assert rules.add_months(2016, 1, -1) == (2015, 13)
    assert rules.add_months(2016, 5, 26) == (2018, 5)
    assert rules.add_months(2016, 5, -27) == (2014, 4)

def test_clamp_day():
    assert rules.clamp_day(2016, 13, 30) == 5
    assert rules.clamp_day(2015, 13, 30) == 6
    assert rules.clamp_day(2016, 2, 30) == 30

def test_day_of_week():
    assert rules.day_of_week(0) == 4       # 1970-01-01 Thursday
    assert rules.day_of_week(19612) == 2   # 2023-09-12 Tuesday
    assert rules.day_of_week(-1) == 3

def test_from_epoch_day_rejects_non_int():
    with pytest.raises(InvalidArgumentError):
        rules.from_epoch_day(1.5)
