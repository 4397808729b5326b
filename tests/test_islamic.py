#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Feb 03 20:20:05 2025

@author: Marcel Hesselberth
"""

from khronos.islamic import *
from khronos.gregorian import Gregorian
from khronos.constants import ISLAMIC_EPOCH
from khronos.errors import InvalidDateError
from khronos.quantities import Days, Months, Years
import pytest


def test_known_dates():
    assert(Islamic(1445, 1, 1).to_jd() == 2460144.5)
    assert(islamic_to_jd(1, 1, 1) == ISLAMIC_EPOCH)
    assert(jd_to_islamic(2460144.5) == (1445, 1, 1, 0, 0, 0))
    assert(Islamic(1445, 1, 1).to_calendar(Gregorian) == Gregorian(2023, 7, 19))
    assert(Gregorian(2023, 7, 19, 18).to_calendar("islamic") ==
           Islamic(1445, 1, 1, 18))

def test_leap():
    assert(Islamic.is_leapyear(1445))
    assert(not Islamic.is_leapyear(1444))
    assert(Islamic(1445, 1, 1).year_days == 355)
    Islamic(1445, 12, 30)
    with pytest.raises(InvalidDateError):
        Islamic(1444, 12, 30)
    with pytest.raises(InvalidDateError):
        Islamic(1445, 2, 30)
    assert(Islamic.days_in_month(1, 1444) == 30)
    assert(Islamic.days_in_month(2, 1444) == 29)

def test_arithmetic():
    assert(Islamic(1445, 12, 30) + Days(1) == Islamic(1446, 1, 1))
    assert(Islamic(1445, 12, 30) + Years(1) == Islamic(1446, 12, 29))
    assert(Islamic(1445, 1, 30) + Months(1) == Islamic(1445, 2, 29))
    assert(Islamic(1445, 12, 1) + Months(1) == Islamic(1446, 1, 1))
    assert(Islamic(1445, 1, 1) + Months(360) == Islamic(1475, 1, 1))
    assert(Islamic(1475, 1, 1) - Islamic(1445, 1, 1) == 10631.0)

def test_round_trip():
    for k in range(-30000, 30000, 7):
        jd = ISLAMIC_EPOCH + k * 17.377
        assert(Islamic.from_jd(jd).to_jd() == pytest.approx(jd, abs=1e-8))
    date = Islamic(-5, 7, 30, 3, 4, 5.25)
    assert(Islamic.from_jd(date.to_jd()) == date)

def test_str():
    assert(Islamic(1445, 9, 1).month_name(9) == "Ramadan")
    assert(str(Islamic(1445, 1, 1)).endswith(" 1445 A.H., 12:00:00 am"))
    assert(str(Islamic(1445, 1, 1)).startswith("Wednesday, Muharram 1 "))

def test_monotonic():
    dates = [Islamic(-30, 12, 29), Islamic(0, 1, 1), Islamic(1, 1, 1),
             Islamic(1444, 12, 29, 23, 59, 59), Islamic(1445, 1, 1),
             Islamic(1445, 12, 30), Islamic(1446, 1, 1, 0, 0, 0.5)]
    assert(sorted(dates) == dates)
    jds = [d.to_jd() for d in dates]
    assert(all(a < b for a, b in zip(jds, jds[1:])))
    start = Islamic(1445, 6, 15)
    jds = [(start + Months(n)).to_jd() for n in range(-600, 600)]
    assert(all(a < b for a, b in zip(jds, jds[1:])))
