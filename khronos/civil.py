#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Mon Feb 03 21:02:50 2025

@author: Marcel Hesselberth

Human readable dates:

    "Friday, September 27 2013 CE, 11:05:03 am"

Weekday names are shared by all calendars, month names and the era are
calendar specific.
"""


def ce_year(year):
    """Astronomical year as a CE or BCE year string (0 is 1 BCE)."""
    if year > 0:
        return f"{year} CE"
    return f"{1 - year} BCE"


def hour12(hour):
    """24-hour clock hour to (12-hour clock hour, 'am' or 'pm')."""
    h = hour % 12
    if h == 0:
        h = 12
    return h, "am" if hour < 12 else "pm"


def format_time(hour, minute, second):
    h, ampm = hour12(hour)
    return f"{h}:{minute:02d}:{int(second):02d} {ampm}"


def format_date(weekday, month_name, day, year, hour, minute, second):
    """
    Format a date.

    Parameters
    ----------
    weekday : str
        Name of the day of the week.
    month_name : str

    day : int

    year : str
        Year including the era, if any.
    hour : int

    minute : int

    second : float
        Truncated to whole seconds.

    Returns
    -------
    str
    """
    return f"{weekday}, {month_name} {day} {year}, " \
        f"{format_time(hour, minute, second)}"
