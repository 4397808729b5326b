#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Jan 25 12:30:52 2025

@author: Marcel Hesselberth
"""

from khronos.jd import *
from khronos.quantities import Days, Weeks, Months, Years
import pytest


def test_jd():
    jd = Jd(2451545.0)
    assert(jd.jd == 2451545.0)
    assert(float(jd) == 2451545.0)
    assert(jd.jdn == 2451545)
    assert(Jd(2451544.5).jdn == 2451545)
    assert(Jd(2451544.4).jdn == 2451544)
    assert(Jd(jd) == jd)
    with pytest.raises(TypeError):
        Jd("2451545")

def test_arithmetic():
    jd = Jd(2451545.0)
    assert(jd + Weeks(2) == Jd(2451559.0))
    assert(Days(1) + jd == Jd(2451546.0))
    assert(jd - Days(0.5) == Jd(2451544.5))
    assert(jd + Years(1) == Jd(2451545.0 + 365.2425))
    assert(Jd(2451559.0) - jd == 14.0)
    with pytest.raises(TypeError):
        jd + Months(1)
    with pytest.raises(TypeError):
        jd + 1

def test_order():
    assert(Jd(1.0) < Jd(2.0))
    assert(Jd(2.0) >= Jd(2.0))
    assert(Jd(1.0) < 1.5)
    assert(Jd(1.0) == 1)
    assert(sorted([Jd(3.0), Jd(1.0), Jd(2.0)]) == [Jd(1.0), Jd(2.0), Jd(3.0)])
    assert(len({Jd(1.0), Jd(1.0)}) == 1)

def test_day_of_week():
    assert(day_of_week(2451544.5) == DayOfWeek.SATURDAY)   # 2000-01-01
    assert(day_of_week(2451545.0) == DayOfWeek.SATURDAY)   # noon
    assert(day_of_week(2451545.5) == DayOfWeek.SUNDAY)
    assert(day_of_week(2460369.5) == DayOfWeek.THURSDAY)   # 2024-02-29
    assert(Jd(0.0).day_of_week() == DayOfWeek.MONDAY)
    assert(weekday_nr(2451544.5) == 6)
    assert(str(DayOfWeek.MONDAY) == "Monday")
    assert(DayOfWeek.MONDAY == 0 and DayOfWeek.SUNDAY == 6)

def test_split_jd():
    assert(split_jd(2451545.0) == (2451545, 43200.0))
    assert(split_jd(2451544.5) == (2451545, 0.0))
    assert(split_jd(2451544.5 - 2e-9) == (2451545, 0.0))   # carry
    jdn, seconds = split_jd(2451544.75)
    assert(jdn == 2451545 and seconds == 21600.0)

def test_now():
    clock = lambda: (2000, 1, 1, 12, 0, 0)
    assert(Jd.now(clock) == Jd(2451545.0))
    assert(Jd.now(clock, time_of_day=False) == Jd(2451544.5))

def test_str():
    assert(str(Jd(2451545.0)) == "JD 2451545.000000")
    assert(repr(Jd(2451545.0)) == "Jd(2451545.0)")
