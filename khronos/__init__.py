#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Feb 09 16:05:47 2025

@author: Marcel Hesselberth

Khronos: dates in the Gregorian, Julian, Hebrew, Islamic and Vulcan
calendars, converted through the Julian day.
"""

from khronos.errors import KhronosError, InvalidDateError, DateOverflowError
from khronos.quantities import Days, Weeks, Months, Years, CE, BCE
from khronos.timeofday import tod, hms, am, pm
from khronos.jd import Jd, DayOfWeek, day_of_week
from khronos.calendar import CalendarDate, calendars, get_calendar
from khronos.gregorian import Gregorian
from khronos.julian import Julian
from khronos.hebrew import Hebrew
from khronos.islamic import Islamic
from khronos.vulcan import Vulcan

__version__ = "1.0.0"
