#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Jan 25 11:48:03 2025

@author: Marcel Hesselberth

The Julian day (JD) is the pivot between all calendars. JD 0.0 is noon,
January 1, 4713 BCE in the proleptic Julian calendar. The fraction .0 is
noon and .5 is midnight, so a civil day runs from JDN - 0.5 to JDN + 0.5
where JDN = floor(jd + 0.5) is the Julian day number.
"""

from enum import IntEnum
from functools import total_ordering
from math import floor
from numbers import Real

from khronos.calmath import gregorian_jdn
from khronos.clock import now_fields
from khronos.constants import SPD, PRECISION, EARTH_ORBITAL_PERIOD_DAYS, wdays
from khronos.quantities import Days, Weeks, Years
from khronos.timeofday import tod


class DayOfWeek(IntEnum):
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    def __str__(self):
        return wdays[self.value]


def weekday_nr(jd):
    """
    Weekday number of a (fractional) julian day, 0 is Sunday.

    Parameters
    ----------
    jd : float
        Julian day.

    Returns
    -------
    int
        0: Sunday, 1: Monday, ..., 6: Saturday
    """
    return floor(jd + 1.5) % 7


def day_of_week(jd):
    """
    Day of the week of a julian day.

    This is the weekday algorithm used by all calendars.

    Parameters
    ----------
    jd : float or Jd

    Returns
    -------
    DayOfWeek
    """
    return DayOfWeek((weekday_nr(float(jd)) - 1) % 7)


def split_jd(jd):
    """
    Split a julian day in the civil day number and the time of day.

    The time of day is rounded to the codec precision. If that rounds up to
    midnight the day number is carried.

    Parameters
    ----------
    jd : float
        Julian day.

    Returns
    -------
    jdn : int
        Julian day number, floor(jd + 0.5).
    seconds : float
        Seconds since midnight, [0, 86400).
    """
    jd5 = jd + 0.5
    jdn = floor(jd5)
    seconds = round((jd5 - jdn) * SPD, PRECISION)
    if seconds >= SPD:
        jdn += 1
        seconds -= SPD
    return int(jdn), seconds


def _offset(b):
    if isinstance(b, (Days, Weeks)):
        return b.days
    if isinstance(b, Years):
        return b.value * EARTH_ORBITAL_PERIOD_DAYS
    return None


@total_ordering
class Jd:
    """
    Julian day. Immutable, ordered by value.

    Jd + Days/Weeks/Years -> Jd
    Jd - Jd -> float (days)
    """
    __slots__ = ("_jd",)

    def __init__(self, jd):
        if isinstance(jd, Jd):
            jd = jd.jd
        if not isinstance(jd, Real):
            raise TypeError(f"Jd: real number expected, got {type(jd)}")
        self._jd = float(jd)

    @classmethod
    def now(cls, clock=None, time_of_day=True):
        """
        Julian day of the current (local) time.

        Parameters
        ----------
        clock : callable, optional
            Returns a Gregorian (year, month, day, hour, minute, second)
            tuple. Defaults to the system clock.
        time_of_day : bool, optional
            False for midnight of the current day.
        """
        year, month, day, hour, minute, second = now_fields(clock, time_of_day)
        return cls(gregorian_jdn(year, month, day) - 0.5 +
                   tod(hour, minute, second))

    @property
    def jd(self):
        return self._jd

    @property
    def jdn(self):
        return floor(self._jd + 0.5)

    def day_of_week(self):
        return day_of_week(self._jd)

    def __float__(self):
        return self._jd

    def __add__(self, b):
        offset = _offset(b)
        if offset is None:
            return NotImplemented
        return Jd(self._jd + offset)

    __radd__ = __add__

    def __sub__(self, b):
        if isinstance(b, Jd):
            return self._jd - b._jd
        offset = _offset(b)
        if offset is None:
            return NotImplemented
        return Jd(self._jd - offset)

    def __eq__(self, b):
        if isinstance(b, Jd):
            return self._jd == b._jd
        if isinstance(b, Real):
            return self._jd == b
        return NotImplemented

    def __lt__(self, b):
        if isinstance(b, Jd):
            return self._jd < b._jd
        if isinstance(b, Real):
            return self._jd < b
        return NotImplemented

    def __hash__(self):
        return hash(self._jd)

    def __repr__(self):
        return f"Jd({self._jd!r})"

    def __str__(self):
        return f"JD {self._jd:.6f}"
