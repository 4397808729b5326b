#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Feb 01 17:37:29 2025

@author: Marcel Hesselberth

The proleptic Gregorian calendar, extended backwards before the 1582
reform. Years are astronomical (1 BCE is the year 0).
"""

from khronos.calendar import CalendarDate
from khronos.calmath import is_gregorian_leapyear, civil_days_in_month, \
    gregorian_jdn, jdn_gregorian
from khronos.civil import ce_year
from khronos.constants import GREGORIAN_EPOCH, months


def gregorian_days_in_month(month, is_leap):
    """
    Days in a Gregorian month.

    Parameters
    ----------
    month : int
        1-12
    is_leap : bool
        True in a leap year.

    Returns
    -------
    int
        28-31, 0 if the month does not exist.
    """
    return civil_days_in_month(month, is_leap)


def gregorian_to_jd(year, month, day, hour=0, minute=0, second=0):
    """
    Julian day of a Gregorian date and time.

    gregorian_to_jd(1, 1, 1) == GREGORIAN_EPOCH

    Raises
    ------
    InvalidDateError
        If the date does not exist.
    """
    return Gregorian(year, month, day, hour, minute, second).to_jd()


def jd_to_gregorian(jd):
    """(year, month, day, hour, minute, second) of a Julian day."""
    return Gregorian.from_jd(jd).fields


class Gregorian(CalendarDate):
    __slots__ = ()

    NAME = "gregorian"
    EPOCH = GREGORIAN_EPOCH
    CYCLE_YEARS = 400
    CYCLE_MONTHS = 4800
    MONTH_NAMES = months

    _to_jdn = staticmethod(gregorian_jdn)
    _from_jdn = staticmethod(jdn_gregorian)

    is_leapyear = staticmethod(is_gregorian_leapyear)

    @staticmethod
    def days_in_month(month, year):
        return civil_days_in_month(month, is_gregorian_leapyear(year))

    @staticmethod
    def format_year(year):
        return ce_year(year)
