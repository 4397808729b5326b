#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Feb 03 20:31:44 2025

@author: Marcel Hesselberth

The Vulcan calendar: 12 months of 21 days. The last month, Tasmeen, has a
22nd day every 4th year. Years have no era.
"""

from khronos.calendar import CalendarDate
from khronos.calmath import is_vulcan_leapyear, vulcan_days_in_month, \
    vulcan_jdn, jdn_vulcan
from khronos.constants import VULCAN_EPOCH, vulcan_months


def vulcan_to_jd(year, month, day, hour=0, minute=0, second=0):
    return Vulcan(year, month, day, hour, minute, second).to_jd()


def jd_to_vulcan(jd):
    return Vulcan.from_jd(jd).fields


class Vulcan(CalendarDate):
    __slots__ = ()

    NAME = "vulcan"
    EPOCH = VULCAN_EPOCH
    CYCLE_YEARS = 4
    CYCLE_MONTHS = 48
    MONTH_NAMES = vulcan_months

    _to_jdn = staticmethod(vulcan_jdn)
    _from_jdn = staticmethod(jdn_vulcan)

    is_leapyear = staticmethod(is_vulcan_leapyear)

    @staticmethod
    def days_in_month(month, year):
        return vulcan_days_in_month(month, is_vulcan_leapyear(year))
