#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Feb 03 20:15:36 2025

@author: Marcel Hesselberth

The wall clock. The calendar classes never read the clock themselves; a
clock is any callable without arguments that returns the local Gregorian
date and time as (year, month, day, hour, minute, second). Passing a fixed
clock makes "now" reproducible:

    Hebrew.now(clock=lambda: (2025, 1, 11, 12, 0, 0))
"""

import time


def system_clock():
    """
    Read the local time of the system clock.

    Returns
    -------
    tuple
        (year, month, day, hour, minute, second) in the Gregorian calendar.
    """
    t = time.time()
    lt = time.localtime(t)
    second = lt.tm_sec + t % 1
    return lt.tm_year, lt.tm_mon, lt.tm_mday, lt.tm_hour, lt.tm_min, second


def now_fields(clock=None, time_of_day=True):
    """
    Read a clock once.

    Parameters
    ----------
    clock : callable, optional
        Clock to read, defaults to system_clock.
    time_of_day : bool, optional
        If False, the time fields are set to zero (midnight).

    Returns
    -------
    tuple
        (year, month, day, hour, minute, second)
    """
    if clock is None:
        clock = system_clock
    year, month, day, hour, minute, second = clock()
    if not time_of_day:
        return year, month, day, 0, 0, 0
    return year, month, day, hour, minute, second
