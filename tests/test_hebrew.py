#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Feb 03 19:58:40 2025

@author: Marcel Hesselberth
"""

from khronos.hebrew import *
from khronos.gregorian import Gregorian
from khronos.constants import HEBREW_EPOCH
from khronos.errors import InvalidDateError
from khronos.jd import DayOfWeek
from khronos.quantities import Days, Months, Years
import pytest


def test_known_dates():
    assert(Hebrew(5784, 7, 1).to_jd() == 2460203.5)
    assert(hebrew_to_jd(5785, 7, 1) == 2460586.5)
    assert(hebrew_to_jd(1, 7, 1) == HEBREW_EPOCH + 2)
    assert(jd_to_hebrew(2460203.5) == (5784, 7, 1, 0, 0, 0))
    assert(Hebrew(5784, 7, 1).to_calendar(Gregorian) == Gregorian(2023, 9, 16))
    assert(Gregorian(2025, 1, 11).to_calendar(Hebrew) == Hebrew(5785, 10, 11))
    assert(Hebrew(5784, 7, 1).day_of_week() == DayOfWeek.SATURDAY)

def test_year():
    leap = [y for y in range(5780, 5800) if is_hebrew_leapyear(y)]
    assert(leap == [5782, 5784, 5787, 5790, 5793, 5795, 5798])
    assert(Hebrew.months_in_year(5784) == 13)
    assert(Hebrew.months_in_year(5785) == 12)
    assert(Hebrew(5784, 1, 1).year_days == 383)
    assert(Hebrew(5784, 1, 1).is_leap)
    assert(hebrew_delay_1(5785) - hebrew_delay_1(5784) in (383, 384, 385))

def test_months():
    assert(hebrew_month_days(8, False, 355) == 30)
    assert(hebrew_month_days(9, False, 353) == 29)
    assert(hebrew_month_days(13, False, 354) == 0)
    assert(Hebrew.days_in_month(13, 5784) == 29)
    assert(Hebrew.days_in_month(12, 5784) == 30)
    assert(Hebrew.days_in_month(12, 5785) == 29)
    Hebrew(5780, 8, 30)
    with pytest.raises(InvalidDateError):
        Hebrew(5781, 8, 30)   # short year, Cheshvan 29 days
    with pytest.raises(InvalidDateError):
        Hebrew(5783, 13, 1)   # common year, no Adar II
    with pytest.raises(InvalidDateError):
        Hebrew(5784, 14, 1)

def test_month_names():
    assert(hebrew_month_name(7) == "Tishrei")
    assert(hebrew_month_name(12) == "Adar")
    assert(hebrew_month_name(12, 5784) == "Adar I")
    assert(hebrew_month_name(12, 5785) == "Adar")
    assert(hebrew_month_name(13, 5784) == "Adar II")

def test_month_order():
    # the year starts at Tishrei (7), Nisan (1) is halfway
    assert(Hebrew(5784, 6, 29) + Days(1) == Hebrew(5785, 7, 1))
    assert(Hebrew(5784, 7, 1) - Days(1) == Hebrew(5783, 6, 29))
    assert(Hebrew(5784, 7, 1) < Hebrew(5784, 1, 1))
    assert(Hebrew(5784, 13, 29) < Hebrew(5784, 1, 1))
    assert(Hebrew(5784, 6, 29) > Hebrew(5784, 1, 1))
    dates = [Hebrew(5783, 6, 29), Hebrew(5784, 7, 1), Hebrew(5784, 12, 1),
             Hebrew(5784, 13, 1), Hebrew(5784, 1, 1), Hebrew(5784, 6, 1)]
    assert(sorted(dates) == dates)
    jds = [d.to_jd() for d in dates]
    assert(all(a < b for a, b in zip(jds, jds[1:])))

def test_add_months():
    assert(Hebrew(5783, 6, 1) + Months(1) == Hebrew(5784, 7, 1))
    assert(Hebrew(5784, 12, 1) + Months(1) == Hebrew(5784, 13, 1))
    assert(Hebrew(5784, 13, 1) + Months(1) == Hebrew(5784, 1, 1))
    assert(Hebrew(5785, 12, 1) + Months(1) == Hebrew(5785, 1, 1))
    assert(Hebrew(5784, 7, 1) + Months(13) == Hebrew(5785, 7, 1))
    assert(Hebrew(5785, 7, 1) + Months(12) == Hebrew(5786, 7, 1))
    assert(Hebrew(5784, 7, 1) + Months(235) == Hebrew(5803, 7, 1))
    assert(Hebrew(5784, 7, 1) - Months(235) == Hebrew(5765, 7, 1))
    assert(Hebrew(5784, 7, 1) - Months(1) == Hebrew(5783, 6, 1))
    assert(Hebrew(5780, 8, 30) + Months(12) == Hebrew(5781, 8, 29))
    assert(Hebrew(5784, 12, 30) + Months(-1) == Hebrew(5784, 11, 30))

def test_add_years():
    assert(Hebrew(5784, 13, 15) + Years(1) == Hebrew(5785, 12, 15))
    assert(Hebrew(5784, 12, 30) + Years(1) == Hebrew(5785, 12, 29))
    assert(Hebrew(5784, 13, 15) + Years(3) == Hebrew(5787, 13, 15))
    assert(Hebrew(5780, 8, 30) + Years(1) == Hebrew(5781, 8, 29))

def test_round_trip():
    start = Hebrew(5700, 7, 1)
    for k in range(0, 36500, 3):
        date = start + Days(k)
        assert(Hebrew.from_jd(date.to_jd()) == date)
    for k in range(-20000, 20000, 7):
        jd = 2460203.5 + k * 9.731
        assert(Hebrew.from_jd(jd).to_jd() == pytest.approx(jd, abs=1e-8))

def test_str():
    assert(str(Hebrew(5784, 7, 1)) ==
           "Saturday, Tishrei 1 5784 A.M., 12:00:00 am")
    assert(repr(Hebrew(5784, 13, 1, 9)) == "Hebrew(5784, 13, 1, 9, 0, 0)")
