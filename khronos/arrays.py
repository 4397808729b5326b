#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Feb 09 15:26:30 2025

@author: Marcel Hesselberth

Conversions of whole arrays of dates. The arguments are broadcast against
each other like numpy ufunc arguments:

    to_jd_array("gregorian", 2025, np.arange(1, 13), 1)
"""

import numpy as np

from khronos.calendar import get_calendar


def to_jd_array(calendar, year, month, day, hour=0, minute=0, second=0):
    """
    Julian days of arrays of dates.

    Parameters
    ----------
    calendar : str or CalendarDate subclass

    year, month, day, hour, minute : array_like of int

    second : array_like of float


    Raises
    ------
    InvalidDateError
        If one of the dates does not exist.

    Returns
    -------
    numpy.ndarray
        Julian days, float64, with the broadcast shape of the arguments.
    """
    cal = get_calendar(calendar)

    def f(y, m, d, h, mi, s):
        return cal(int(y), int(m), int(d), int(h), int(mi), float(s)).to_jd()

    f = np.vectorize(f, otypes=[np.float64])
    return f(year, month, day, hour, minute, second)


def from_jd_array(calendar, jd):
    """
    Dates of an array of Julian days.

    Parameters
    ----------
    calendar : str or CalendarDate subclass

    jd : array_like of float


    Returns
    -------
    tuple of numpy.ndarray
        (year, month, day, hour, minute, second), integer arrays except for
        second which is float64.
    """
    cal = get_calendar(calendar)

    def f(x):
        return cal.from_jd(float(x)).fields

    f = np.vectorize(f, otypes=[np.int64] * 5 + [np.float64])
    return f(jd)


def day_of_week_array(jd):
    """
    Days of the week of an array of Julian days.

    Returns
    -------
    numpy.ndarray
        0: Monday, ..., 6: Sunday
    """
    jd = np.asarray(jd, dtype=np.float64)
    nr = np.mod(np.floor(jd + 1.5), 7).astype(np.int64)  # 0 is Sunday
    return (nr - 1) % 7
