#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Feb 02 10:12:51 2025

@author: Marcel Hesselberth

The proleptic Julian calendar: a leap year every 4 years, also before the
year 8 when the leap years were still irregular in practice.
"""

from khronos.calendar import CalendarDate
from khronos.calmath import is_julian_leapyear, civil_days_in_month, \
    julian_jdn, jdn_julian
from khronos.civil import ce_year
from khronos.constants import JULIAN_EPOCH, months


def julian_days_in_month(month, is_leap):
    return civil_days_in_month(month, is_leap)


def julian_to_jd(year, month, day, hour=0, minute=0, second=0):
    """
    Julian day of a Julian calendar date and time.

    julian_to_jd(-4712, 1, 1, 12) == 0.0
    """
    return Julian(year, month, day, hour, minute, second).to_jd()


def jd_to_julian(jd):
    return Julian.from_jd(jd).fields


class Julian(CalendarDate):
    __slots__ = ()

    NAME = "julian"
    EPOCH = JULIAN_EPOCH
    CYCLE_YEARS = 4
    CYCLE_MONTHS = 48
    MONTH_NAMES = months

    _to_jdn = staticmethod(julian_jdn)
    _from_jdn = staticmethod(jdn_julian)

    is_leapyear = staticmethod(is_julian_leapyear)

    @staticmethod
    def days_in_month(month, year):
        return civil_days_in_month(month, is_julian_leapyear(year))

    @staticmethod
    def format_year(year):
        return ce_year(year)
