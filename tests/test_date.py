# tests/test_date.py

from datetime import date

import pytest

from ethiocal import EthiopicDate, EthiopicEra, FixedClock, InvalidArgumentError, Period


def test_date_creation():
    d = EthiopicDate.of(2016, 3, 15)
    assert (d.year, d.month, d.day) == (2016, 3, 15)
    assert d.day_of_year == 75

def test_construction_validates():
    with pytest.raises(InvalidArgumentError, match=r"month 14 out of range \(valid 1..13\)"):
        EthiopicDate(2016, 14, 1)
    with pytest.raises(InvalidArgumentError, match=r"day 31 out of range for month 2 of year 2016 \(valid 1..30\)"):
        EthiopicDate(2016, 2, 31)
    with pytest.raises(InvalidArgumentError, match=r"day 6 .*valid 1..5"):
        EthiopicDate(2016, 13, 6)
    with pytest.raises(InvalidArgumentError):
        EthiopicDate(2016, 1, 0)
    with pytest.raises(InvalidArgumentError):
        EthiopicDate(2016.0, 1, 1)

def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        EthiopicDate(2016, 0, 1)

def test_pagumen():
    assert EthiopicDate(2016, 13, 5).length_of_month == 5
    leap = EthiopicDate(2015, 13, 6)
    assert leap.is_leap_year
    assert leap.length_of_month == 6
    assert leap.length_of_year == 366
    assert leap.day_of_year == 366

def test_immutable():
    d = EthiopicDate(2016, 3, 15)
    with pytest.raises(AttributeError):
        d.day = 16

def test_of_year_day():
    assert EthiopicDate.of_year_day(2016, 75) == EthiopicDate(2016, 3, 15)
    assert EthiopicDate.of_year_day(2015, 366) == EthiopicDate(2015, 13, 6)
    with pytest.raises(InvalidArgumentError, match="day of year 366 out of range for year 2016"):
        EthiopicDate.of_year_day(2016, 366)

def test_iso_conversion():
    assert EthiopicDate.from_iso(1970, 1, 1) == EthiopicDate(1962, 4, 23)
    assert EthiopicDate.from_iso(2000, 1, 1) == EthiopicDate(1992, 4, 22)
    assert EthiopicDate.from_iso(2024, 1, 7) == EthiopicDate(2016, 4, 28)
    assert EthiopicDate(2016, 1, 1).to_iso_date() == date(2023, 9, 12)
    assert EthiopicDate(2017, 1, 1).to_date() == date(2024, 9, 11)
    assert EthiopicDate.from_date(date(2023, 9, 11)) == EthiopicDate(2015, 13, 6)

def test_iso_conversion_out_of_range():
    with pytest.raises(InvalidArgumentError):
        EthiopicDate.from_iso(2023, 2, 29)
    with pytest.raises(InvalidArgumentError, match="outside datetime.date range"):
        EthiopicDate(-10, 1, 1).to_iso_date()

def test_now_uses_clock():
    assert EthiopicDate.now(FixedClock(0)) == EthiopicDate(1962, 4, 23)
    assert EthiopicDate.now(FixedClock.at(date(2023, 9, 12))) == EthiopicDate(2016, 1, 1)

def test_epoch_day():
    assert EthiopicDate(1962, 4, 23).to_epoch_day() == 0
    assert EthiopicDate.from_epoch_day(19612) == EthiopicDate(2016, 1, 1)

def test_plus_days():
    d = EthiopicDate(2016, 3, 15)
    assert d.plus_days(1) == EthiopicDate(2016, 3, 16)
    assert d.plus_days(16) == EthiopicDate(2016, 4, 1)
    assert d.minus_days(75) == EthiopicDate(2015, 13, 6)
    assert d.plus_weeks(2) == EthiopicDate(2016, 3, 29)
    assert d.minus_weeks(1) == EthiopicDate(2016, 3, 8)
    assert d + 1 == EthiopicDate(2016, 3, 16)
    assert 1 + d == EthiopicDate(2016, 3, 16)
    assert d - 1 == EthiopicDate(2016, 3, 14)

def test_plus_months():
    d = EthiopicDate(2016, 3, 15)
    assert d.plus_months(1) == EthiopicDate(2016, 4, 15)
    assert d.plus_months(11) == EthiopicDate(2017, 1, 15)
    assert d.minus_months(3) == EthiopicDate(2015, 13, 6)
    assert d.minus_months(16) == EthiopicDate(2014, 13, 5)

def test_plus_months_clamps_into_pagumen():
    assert EthiopicDate(2016, 12, 30).plus_months(1) == EthiopicDate(2016, 13, 5)
    assert EthiopicDate(2015, 12, 30).plus_months(1) == EthiopicDate(2015, 13, 6)
    assert EthiopicDate(2016, 13, 5).plus_months(1) == EthiopicDate(2017, 1, 5)

def test_plus_years_clamps():
    assert EthiopicDate(2015, 13, 6).plus_years(1) == EthiopicDate(2016, 13, 5)
    assert EthiopicDate(2015, 13, 6).plus_years(4) == EthiopicDate(2019, 13, 6)
    assert EthiopicDate(2016, 3, 15).plus_years(1) == EthiopicDate(2017, 3, 15)
    assert EthiopicDate(2016, 3, 15).minus_years(2020) == EthiopicDate(-4, 3, 15)

def test_zero_arithmetic_is_identity():
    d = EthiopicDate(2015, 13, 6)
    assert d.plus_days(0) == d
    assert d.plus_months(0) == d
    assert d.plus_years(0) == d

def test_days_until():
    a = EthiopicDate(2016, 1, 1)
    b = EthiopicDate(2016, 1, 10)
    assert a.days_until(b) == 9
    assert b.days_until(a) == -9
    assert b - a == 9

def test_months_until():
    assert EthiopicDate(2016, 1, 20).months_until(EthiopicDate(2016, 3, 10)) == 1
    assert EthiopicDate(2016, 3, 10).months_until(EthiopicDate(2016, 1, 20)) == -1
    assert EthiopicDate(2016, 1, 15).months_until(EthiopicDate(2017, 1, 15)) == 13

def test_period_until():
    assert EthiopicDate(2016, 1, 15).period_until(EthiopicDate(2017, 2, 20)) == Period(1, 1, 5)
    assert EthiopicDate(2017, 2, 20).period_until(EthiopicDate(2016, 1, 15)) == Period(-1, -1, -5)
    assert EthiopicDate(2016, 1, 20).period_until(EthiopicDate(2016, 3, 10)) == Period(0, 1, 20)
    assert Period(1, 1, 5).total_months() == 14

def test_compare_and_ordering():
    a = EthiopicDate(2015, 13, 6)
    b = EthiopicDate(2016, 1, 1)
    assert a.compare(b) == -1
    assert b.compare(a) == 1
    assert a.compare(EthiopicDate(2015, 13, 6)) == 0
    assert a < b <= b
    assert b > a
    assert sorted([b, a]) == [a, b]
    assert max(a, b) is b

def test_hashable():
    assert len({EthiopicDate(2016, 1, 1), EthiopicDate(2016, 1, 1), EthiopicDate(2016, 1, 2)}) == 2

def test_format():
    d = EthiopicDate(2016, 3, 15)
    assert d.format() == "15 Hidar 2016"
    assert d.format("en") == "15 Hidar 2016"
    assert d.format("am") == "15 ኅዳር 2016"
    assert EthiopicDate(2015, 13, 6).format() == "6 Pagumen 2015"
    with pytest.raises(InvalidArgumentError, match="unknown locale"):
        d.format("fr")

def test_month_and_weekday_names():
    d = EthiopicDate(2016, 1, 1)
    assert d.month_name() == "Meskerem"
    assert d.month_name("am") == "መስከረም"
    assert d.day_of_week == 2
    assert d.weekday_name() == "Tuesday"
    assert d.weekday_name("am") == "ማክሰኞ"

def test_isoformat_and_parse():
    assert str(EthiopicDate(2016, 3, 5)) == "2016-03-05"
    assert str(EthiopicDate(-1, 13, 6)) == "-0001-13-06"
    assert EthiopicDate.parse("2016-03-05") == EthiopicDate(2016, 3, 5)
    assert EthiopicDate.parse("-0001-13-06") == EthiopicDate(-1, 13, 6)
    with pytest.raises(InvalidArgumentError, match="cannot parse"):
        EthiopicDate.parse("2016/03/05")
    with pytest.raises(InvalidArgumentError):
        EthiopicDate.parse("2016-13-06")

def test_era():
    assert EthiopicDate(2016, 1, 1).era is EthiopicEra.INCARNATION
    assert EthiopicDate(2016, 1, 1).year_of_era == 2016
    assert EthiopicDate(0, 1, 1).era is EthiopicEra.BEFORE_INCARNATION
    assert EthiopicDate(0, 1, 1).year_of_era == 1
    assert EthiopicDate(-9, 1, 1).year_of_era == 10

def test_range_to():
    r = EthiopicDate(2016, 1, 1).range_to(EthiopicDate(2016, 1, 5))
    assert len(r) == 5
