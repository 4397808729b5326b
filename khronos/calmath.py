#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Jan 11 20:57:17 2025

@author: Marcel Hesselberth

Integer calendar math. All kernels in this module work with Julian day
numbers (JDN): the integer floor(jd + 0.5), the number of the civil day that
starts at midnight jd = JDN - 0.5. Time of day is handled by the callers.

Years are astronomical: the year before +1 is the year 0.

The kernels only use integer arithmetic with floor division so they are
valid for negative years as well, and they are compiled with numba when
acceleration is configured (see knumba). Arguments are assumed to be valid;
validation is done by the calendar classes.
"""

from khronos.knumba import knjit
from khronos.constants import HEBREW_EPOCH, ISLAMIC_EPOCH, VULCAN_EPOCH

HEBREW_EPOCH_JDN  = int(HEBREW_EPOCH + 0.5)
ISLAMIC_EPOCH_JDN = int(ISLAMIC_EPOCH + 0.5)
VULCAN_EPOCH_JDN  = int(VULCAN_EPOCH + 0.5)

ISLAMIC_CYCLE_DAYS = 10631  # 30 years: 19 * 354 + 11 * 355
VULCAN_CYCLE_DAYS  = 1009   # 4 years: 3 * 252 + 253


# proleptic Gregorian calendar

@knjit(signature_or_function="boolean(i8)")
def is_gregorian_leapyear(year:int) -> bool:
    """
    Check if a given year is a leap year in the (proleptic) Gregorian calendar

    Parameters
    ----------
    year : int
        Astronomical year.

    Returns
    -------
    Boolean
        True if year is a leap year
    """
    if year % 4 == 0:               # possibly leap
        if year % 400 == 0:         # leap
            leapyear = True
        else:
            if year % 100 == 0:     # common
                leapyear = False
            else:                   # leap
                leapyear = True
    else:
        leapyear = False
    return leapyear


@knjit
def civil_days_in_month(month, leap):
    """
    Days in a month of the Gregorian or Julian calendar.

    Parameters
    ----------
    month : int
        1-12
    leap : bool
        True in a leap year.

    Returns
    -------
    int
        Number of days, 0 if the month does not exist.
    """
    if month < 1 or month > 12:
        return 0
    if month == 2:
        return 29 if leap else 28
    if month == 4 or month == 6 or month == 9 or month == 11:
        return 30
    return 31


@knjit(signature_or_function="i8(i8, i8, i8)")
def gregorian_jdn(year:int, month:int, day:int) -> int:
    """
    Julian day number of a proleptic Gregorian date.

    Fliegel and Van Flandern (1968). The year is shifted such that March is
    the first month of a computational year, putting the leap day at the
    end.

    Parameters
    ----------
    year : int

    month : int

    day : int


    Returns
    -------
    int
        The Julian day number (the day starting at jd = JDN - 0.5).
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 \
        + y // 400 - 32045


@knjit
def jdn_gregorian(jdn):
    """
    Proleptic Gregorian date of a Julian day number.

    gregorian_jdn(*jdn_gregorian(jdn)) == jdn is an invariant.

    Parameters
    ----------
    jdn : int
        Julian day number.

    Returns
    -------
    year : int

    month : int

    day : int
    """
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day


# proleptic Julian calendar

@knjit(signature_or_function="boolean(i8)")
def is_julian_leapyear(year:int) -> bool:
    """
    Check if a given year is a leap year in the (proleptic) Julian calendar

    This funtion assumes counting of BCE years starts at zero.
    1 BCE (0) is a leap year.
    """
    return year % 4 == 0


@knjit(signature_or_function="i8(i8, i8, i8)")
def julian_jdn(year:int, month:int, day:int) -> int:
    """Julian day number of a proleptic Julian date."""
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - 32083


@knjit
def jdn_julian(jdn):
    """Proleptic Julian date (year, month, day) of a Julian day number."""
    c = jdn + 32082
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = d - 4800 + m // 10
    return year, month, day


# Hebrew calendar
#
# Months are numbered from Nisan (1) but the year starts at Tishrei (7).
# Leap years have a 13th month, Adar II.

@knjit(signature_or_function="boolean(i8)")
def is_hebrew_leapyear(year:int) -> bool:
    """
    Leap year test for the Hebrew calendar.

    Years 3, 6, 8, 11, 14, 17 and 19 of the 19 year Metonic cycle are leap
    years. (7 * year + 1) mod 19 < 7 selects exactly those positions.
    """
    return (7 * year + 1) % 19 < 7


@knjit
def hebrew_months_in_year(year):
    if is_hebrew_leapyear(year):
        return 13
    return 12


@knjit(signature_or_function="i8(i8)")
def hebrew_delay_1(year:int) -> int:
    """
    Days from the epoch to the new year (Rosh Hashanah) before the
    second postponement.

    The molad of Tishrei is computed from the number of lunar months
    elapsed since the epoch (a lunar month is 29 days and 13753 parts, a
    day has 25920 parts). If the molad falls on a Sunday, Wednesday or
    Friday the new year is postponed by one day.

    Parameters
    ----------
    year : int
        Hebrew year.

    Returns
    -------
    int
        Day count since the epoch.
    """
    months = (235 * year - 234) // 19
    parts = 12084 + 13753 * months
    day = months * 29 + parts // 25920
    if (3 * (day + 1)) % 7 < 3:
        day += 1
    return day


@knjit
def hebrew_delay_2(year):
    """
    Second postponement of the new year, 0, 1 or 2 days.

    Prevents a year of 356 days, and a leap year of 382 days before it.
    """
    last = hebrew_delay_1(year - 1)
    present = hebrew_delay_1(year)
    coming = hebrew_delay_1(year + 1)
    if coming - present == 356:
        return 2
    if present - last == 382:
        return 1
    return 0


@knjit(signature_or_function="i8(i8)")
def hebrew_new_year_jdn(year:int) -> int:
    """Julian day number of 1 Tishrei of a Hebrew year."""
    return HEBREW_EPOCH_JDN + hebrew_delay_1(year) + hebrew_delay_2(year) + 2


@knjit(signature_or_function="i8(i8)")
def hebrew_year_days(year:int) -> int:
    """Length of a Hebrew year: 353, 354, 355, 383, 384 or 385 days."""
    return hebrew_new_year_jdn(year + 1) - hebrew_new_year_jdn(year)


@knjit
def hebrew_month_length(month, leap, year_days):
    """
    Days in a Hebrew month given the leap status and the length of the
    year.

    Cheshvan (8) has 30 days only in a long year (355 or 385 days),
    Kislev (9) has 29 days only in a short year (353 or 383 days).
    """
    if month < 1 or month > 13:
        return 0
    if month == 13:
        return 29 if leap else 0
    if month == 12:
        return 30 if leap else 29
    if month == 8:
        return 30 if year_days % 10 == 5 else 29
    if month == 9:
        return 29 if year_days % 10 == 3 else 30
    if month == 2 or month == 4 or month == 6 or month == 10:
        return 29
    return 30


@knjit
def hebrew_days_in_month(month, year):
    return hebrew_month_length(month, is_hebrew_leapyear(year),
                               hebrew_year_days(year))


@knjit
def hebrew_month_index(month, months):
    """Position (1-based) of a month in the year, counting from Tishrei."""
    if month >= 7:
        return month - 6
    return month + months - 6


@knjit
def hebrew_month_from_index(index, months):
    """Inverse of hebrew_month_index."""
    if index <= months - 6:
        return index + 6
    return index - months + 6


@knjit(signature_or_function="i8(i8, i8, i8)")
def hebrew_jdn(year:int, month:int, day:int) -> int:
    """
    Julian day number of a Hebrew date.

    Starts at the new year and adds the lengths of the months from Tishrei
    up to the given month, wrapping from the last month of the year to
    Nisan.

    Parameters
    ----------
    year : int

    month : int
        1 (Nisan) - 13 (Adar II)
    day : int


    Returns
    -------
    int
        Julian day number.
    """
    leap = is_hebrew_leapyear(year)
    months = 13 if leap else 12
    year_days = hebrew_year_days(year)
    jdn = hebrew_new_year_jdn(year) + day - 1
    for i in range(1, hebrew_month_index(month, months)):
        m = hebrew_month_from_index(i, months)
        jdn += hebrew_month_length(m, leap, year_days)
    return jdn


@knjit
def jdn_hebrew(jdn):
    """
    Hebrew date (year, month, day) of a Julian day number.

    The year is estimated from the mean year length (35975351 / 98496
    days) and then corrected against the new year days. The month walk
    follows the same order as hebrew_jdn.
    """
    year = ((jdn - HEBREW_EPOCH_JDN) * 98496) // 35975351 - 1
    while jdn >= hebrew_new_year_jdn(year + 1):
        year += 1
    while jdn < hebrew_new_year_jdn(year):
        year -= 1
    leap = is_hebrew_leapyear(year)
    months = 13 if leap else 12
    year_days = hebrew_year_days(year)
    remaining = jdn - hebrew_new_year_jdn(year)
    index = 1
    month = hebrew_month_from_index(index, months)
    length = hebrew_month_length(month, leap, year_days)
    while remaining >= length and index < months:
        remaining -= length
        index += 1
        month = hebrew_month_from_index(index, months)
        length = hebrew_month_length(month, leap, year_days)
    return year, month, remaining + 1


# Islamic (tabular) calendar

@knjit(signature_or_function="boolean(i8)")
def is_islamic_leapyear(year:int) -> bool:
    """
    Leap year test for the Islamic calendar.

    Years 2, 5, 7, 10, 13, 16, 18, 21, 24, 26 and 29 of the 30 year cycle
    are leap years. (11 * year + 14) mod 30 < 11 selects exactly those
    positions.
    """
    return (11 * year + 14) % 30 < 11


@knjit
def islamic_days_in_month(month, leap):
    """Odd months have 30 days, even months 29, Dhu I-Hijja 30 in a leap year."""
    if month < 1 or month > 12:
        return 0
    if month % 2 == 1:
        return 30
    if month == 12 and leap:
        return 30
    return 29


@knjit
def islamic_year_days(year):
    if is_islamic_leapyear(year):
        return 355
    return 354


@knjit(signature_or_function="i8(i8, i8, i8)")
def islamic_jdn(year:int, month:int, day:int) -> int:
    """
    Julian day number of an Islamic date.

    Whole 30 year cycles, then whole years of the current cycle, whole
    months of the current year and the day.
    """
    n = year - 1
    cycles = n // 30
    year_in_cycle = n % 30
    days = cycles * ISLAMIC_CYCLE_DAYS
    for y in range(1, year_in_cycle + 1):
        days += islamic_year_days(y)
    leap = is_islamic_leapyear(year)
    for m in range(1, month):
        days += islamic_days_in_month(m, leap)
    return ISLAMIC_EPOCH_JDN + days + day - 1


@knjit
def jdn_islamic(jdn):
    """
    Islamic date (year, month, day) of a Julian day number.

    Inverse of islamic_jdn, the years and months are subtracted in the
    same order as they are added there.
    """
    days = jdn - ISLAMIC_EPOCH_JDN
    cycles = days // ISLAMIC_CYCLE_DAYS
    remaining = days % ISLAMIC_CYCLE_DAYS
    y = 1
    while remaining >= islamic_year_days(y):
        remaining -= islamic_year_days(y)
        y += 1
    year = 30 * cycles + y
    leap = is_islamic_leapyear(year)
    month = 1
    while month < 12 and remaining >= islamic_days_in_month(month, leap):
        remaining -= islamic_days_in_month(month, leap)
        month += 1
    return year, month, remaining + 1


# Vulcan calendar

@knjit(signature_or_function="boolean(i8)")
def is_vulcan_leapyear(year:int) -> bool:
    return year % 4 == 0


@knjit
def vulcan_days_in_month(month, leap):
    """12 months of 21 days, the last month has 22 days in a leap year."""
    if month < 1 or month > 12:
        return 0
    if month == 12 and leap:
        return 22
    return 21


@knjit
def vulcan_year_days(year):
    if is_vulcan_leapyear(year):
        return 253
    return 252


@knjit(signature_or_function="i8(i8, i8, i8)")
def vulcan_jdn(year:int, month:int, day:int) -> int:
    """Julian day number of a Vulcan date."""
    n = year - 1
    days = 252 * n + n // 4
    leap = is_vulcan_leapyear(year)
    for m in range(1, month):
        days += vulcan_days_in_month(m, leap)
    return VULCAN_EPOCH_JDN + days + day - 1


@knjit
def jdn_vulcan(jdn):
    """Vulcan date (year, month, day) of a Julian day number."""
    days = jdn - VULCAN_EPOCH_JDN
    cycles = days // VULCAN_CYCLE_DAYS
    remaining = days % VULCAN_CYCLE_DAYS
    year = 4 * cycles + 1
    while remaining >= vulcan_year_days(year):
        remaining -= vulcan_year_days(year)
        year += 1
    leap = is_vulcan_leapyear(year)
    month = 1
    while month < 12 and remaining >= vulcan_days_in_month(month, leap):
        remaining -= vulcan_days_in_month(month, leap)
        month += 1
    return year, month, remaining + 1
