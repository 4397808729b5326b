#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Feb 03 20:02:37 2025

@author: Marcel Hesselberth

The tabular Islamic calendar.

An arithmetic approximation of the lunar calendar: 12 months of alternately
30 and 29 days, with a 30th day added to the last month in 11 leap years of
a 30 year cycle (10631 days). Day 1 is July 16, 622 CE (Julian).
"""

from khronos.calendar import CalendarDate
from khronos.calmath import is_islamic_leapyear, islamic_days_in_month, \
    islamic_year_days, islamic_jdn, jdn_islamic
from khronos.constants import ISLAMIC_EPOCH, islamic_months


def islamic_to_jd(year, month, day, hour=0, minute=0, second=0):
    return Islamic(year, month, day, hour, minute, second).to_jd()


def jd_to_islamic(jd):
    return Islamic.from_jd(jd).fields


class Islamic(CalendarDate):
    __slots__ = ()

    NAME = "islamic"
    EPOCH = ISLAMIC_EPOCH
    CYCLE_YEARS = 30
    CYCLE_MONTHS = 360
    MONTH_NAMES = islamic_months
    ERA = " A.H."

    _to_jdn = staticmethod(islamic_jdn)
    _from_jdn = staticmethod(jdn_islamic)

    is_leapyear = staticmethod(is_islamic_leapyear)

    @staticmethod
    def days_in_month(month, year):
        return islamic_days_in_month(month, is_islamic_leapyear(year))

    @property
    def year_days(self):
        return islamic_year_days(self._year)
