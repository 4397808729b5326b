#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Feb 03 19:21:08 2025

@author: Marcel Hesselberth

The Hebrew calendar.

A lunisolar calendar with 12 months in a common year and 13 in a leap year
(7 leap years in the 19 year Metonic cycle). The months are numbered from
Nisan (1) as in the Torah, but the year starts at Tishrei (7), so the months
of a year run 7, 8, ..., 12 (13), 1, ..., 6. In a leap year Adar (12) is
called Adar I and the 13th month Adar II.

The new year is placed with the molad of Tishrei and the postponement
rules, see calmath.hebrew_delay_1 and calmath.hebrew_delay_2. The lengths of
Cheshvan and Kislev follow from the length of the year.
"""

from khronos.calendar import CalendarDate
from khronos.calmath import is_hebrew_leapyear, hebrew_months_in_year, \
    hebrew_delay_1, hebrew_delay_2, hebrew_year_days, hebrew_month_length, \
    hebrew_days_in_month, hebrew_month_index, hebrew_month_from_index, \
    hebrew_jdn, jdn_hebrew
from khronos.constants import HEBREW_EPOCH, hebrew_months


def hebrew_month_days(month, is_leap, year_days):
    """
    Days in a Hebrew month.

    Parameters
    ----------
    month : int
        1 (Nisan) - 13 (Adar II)
    is_leap : bool
        True in a leap year.
    year_days : int
        Length of the year, see hebrew_year_days.

    Returns
    -------
    int
        29 or 30, 0 if the month does not exist.
    """
    return hebrew_month_length(month, is_leap, year_days)


def hebrew_month_name(month, year=None):
    """Name of a Hebrew month, Adar is Adar I in a leap year."""
    return Hebrew.month_name(month, year)


def hebrew_to_jd(year, month, day, hour=0, minute=0, second=0):
    """
    Julian day of a Hebrew date and time.

    hebrew_to_jd(1, 7, 1) == HEBREW_EPOCH + 2
    """
    return Hebrew(year, month, day, hour, minute, second).to_jd()


def jd_to_hebrew(jd):
    """(year, month, day, hour, minute, second) of a Julian day."""
    return Hebrew.from_jd(jd).fields


class Hebrew(CalendarDate):
    __slots__ = ()

    NAME = "hebrew"
    EPOCH = HEBREW_EPOCH
    CYCLE_YEARS = 19
    CYCLE_MONTHS = 235
    MONTH_NAMES = hebrew_months
    ERA = " A.M."

    _to_jdn = staticmethod(hebrew_jdn)
    _from_jdn = staticmethod(jdn_hebrew)

    is_leapyear = staticmethod(is_hebrew_leapyear)
    months_in_year = staticmethod(hebrew_months_in_year)
    days_in_month = staticmethod(hebrew_days_in_month)

    @classmethod
    def month_index(cls, month, year):
        return hebrew_month_index(month, hebrew_months_in_year(year))

    @classmethod
    def month_from_index(cls, index, year):
        return hebrew_month_from_index(index, hebrew_months_in_year(year))

    @classmethod
    def month_name(cls, month, year=None):
        name = super().month_name(month, year)
        if month == 12 and year is not None and is_hebrew_leapyear(year):
            name = "Adar I"
        return name

    @property
    def year_days(self):
        return hebrew_year_days(self._year)
