#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Tue Jan 14 13:13:23 2025

@author: Marcel Hesselberth

Time of day codec. A civil day runs from midnight to midnight; the time of
day is the fraction [0, 1) of the day elapsed since midnight.

The inputs are assumed to be valid (hours 0-23, minutes 0-59, seconds in
[0, 60)). Validation is done by the calendar classes.
"""

from khronos.constants import SPD, PRECISION


def tod(hour, minute, second):
    """
    Time of day as a day fraction.

    Parameters
    ----------
    hour : int
        0-23
    minute : int
        0-59
    second : float
        [0, 60)

    Returns
    -------
    float
        Fraction of the day since midnight.
    """
    ssum = (second + minute * 60) + hour * 3600
    return ssum / SPD


def hms_from_seconds(seconds):
    """
    Split the seconds since midnight into hours, minutes and seconds.

    The seconds are rounded to PRECISION decimals first so that values like
    3599.9999999999995 become 1:00:00 instead of 0:59:60. The last
    millisecond of the day is the upper bound, the hour stays below 24.

    Parameters
    ----------
    seconds : float
        Seconds since midnight.

    Returns
    -------
    hour : int

    minute : int

    second : float
    """
    seconds = min(round(seconds, PRECISION), SPD - 10**-PRECISION)
    hour, seconds = divmod(seconds, 3600)
    minute, second = divmod(seconds, 60)
    return int(hour), int(minute), round(second, PRECISION)


def hms(fraction):
    """
    Inverse of tod.

    Parameters
    ----------
    fraction : float
        Time of day [0, 1)

    Returns
    -------
    hour : int

    minute : int

    second : float
    """
    return hms_from_seconds(fraction * SPD)


def am(hour):
    """12-hour clock 'am' hour to a 24-hour clock hour (12 am is 0)."""
    return 0 if hour == 12 else hour


def pm(hour):
    """12-hour clock 'pm' hour to a 24-hour clock hour (12 pm is 12)."""
    return 12 if hour == 12 else hour + 12
