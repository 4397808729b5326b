#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sat Feb 01 14:40:12 2025

@author: Marcel Hesselberth

Calendar base class and date arithmetic.

A calendar date is stored as its fields (year, month, day, hour, minute,
second). The Julian day is derived from the fields when needed and all
conversions between calendars go through it:

    Hebrew(5784, 7, 1).to_calendar(Gregorian)  ->  Gregorian(2023, 9, 16)

Each calendar is a subclass of CalendarDate that supplies the calendar
rules (leap years, month lengths, month order) and the two day number
kernels from calmath. Subclasses with a NAME are registered and can be
looked up by name with get_calendar.

Arithmetic:
    date + Days(n), date + Weeks(n)   exact shift of the time line
    date + Months(n)                  month field, day clamped to the month
    date + Years(x)                   year field, then fraction * 365.2425 days
    date - date                       days (float)
"""

import logging
from functools import total_ordering
from math import floor, isfinite
from numbers import Real
from operator import index as _index

from khronos.calmath import gregorian_jdn
from khronos.clock import now_fields
from khronos.constants import SPD, PRECISION, MINYEAR, MAXYEAR, \
    EARTH_ORBITAL_PERIOD_DAYS
from khronos.civil import format_date
from khronos.errors import InvalidDateError, DateOverflowError
from khronos.jd import Jd, day_of_week, split_jd
from khronos.quantities import Quantity, Days, Weeks, Months, Years
from khronos.timeofday import tod, hms_from_seconds

logger = logging.getLogger(__name__)

JDN_LIMIT = 10**9  # beyond any day of the supported years

_FIELDS = ("year", "month", "day", "hour", "minute", "second")

_calendars = {}


class CalendarMeta(type):
    def __init__(cls, name, bases, dct):
        cls.cname = name
        super().__init__(name, bases, dct)
        if dct.get("NAME"):
            _calendars[dct["NAME"]] = cls


def calendars():
    """Names of the registered calendars."""
    return list(_calendars)


def get_calendar(name):
    """
    Look up a calendar class.

    Parameters
    ----------
    name : str or CalendarDate subclass
        Registered name (case insensitive). A calendar class is returned
        as is.

    Raises
    ------
    KeyError
        If no calendar with that name is registered.

    Returns
    -------
    type
        The CalendarDate subclass.
    """
    if isinstance(name, type) and issubclass(name, CalendarDate):
        return name
    try:
        return _calendars[name.lower()]
    except (KeyError, AttributeError):
        raise KeyError(f"unknown calendar {name!r}, available: "
                       f"{', '.join(_calendars)}") from None


def _check_jdn(jdn):
    if not -JDN_LIMIT <= jdn <= JDN_LIMIT:
        raise DateOverflowError(f"day number {jdn} out of range")


@total_ordering
class CalendarDate(metaclass=CalendarMeta):
    """
    Date and time of day in a calendar.

    Immutable. Equal dates of the same calendar have equal fields; dates
    of different calendars are compared by converting one of them with
    to_calendar.
    """
    __slots__ = ("_year", "_month", "_day", "_hour", "_minute", "_second")

    NAME = None
    EPOCH = None         # JD of day 1 (midnight)
    CYCLE_YEARS = 1      # years in a cycle of
    CYCLE_MONTHS = 12    # a whole number of months
    MONTH_NAMES = {}
    ERA = ""

    # day number kernels, (year, month, day) <-> JDN
    _to_jdn = None
    _from_jdn = None

    def __init__(self, year, month=1, day=1, hour=0, minute=0, second=0):
        try:
            year = _index(year)
            month = _index(month)
            day = _index(day)
            hour = _index(hour)
            minute = _index(minute)
        except TypeError:
            raise TypeError(f"{self.cname}: integer type expected") from None
        if isinstance(second, bool) or not isinstance(second, Real):
            raise TypeError(f"{self.cname}: real number expected for second")
        if not MINYEAR <= year <= MAXYEAR:
            raise DateOverflowError(
                f"{self.cname}: year must be in {MINYEAR}..{MAXYEAR}", year)
        months = self.months_in_year(year)
        if not 1 <= month <= months:
            raise InvalidDateError(
                f"{self.cname}: month must be in 1..{months}", month)
        dmax = self.days_in_month(month, year)
        if not 1 <= day <= dmax:
            raise InvalidDateError(
                f"{self.cname}: day must be in 1..{dmax}", day)
        if not 0 <= hour < 24:
            raise InvalidDateError(f"{self.cname}: hour must be in 0..23",
                                   hour)
        if not 0 <= minute < 60:
            raise InvalidDateError(f"{self.cname}: minute must be in 0..59",
                                   minute)
        if not 0 <= second < 60:
            raise InvalidDateError(f"{self.cname}: second must be in [0, 60)",
                                   second)
        self._year = year
        self._month = month
        self._day = day
        self._hour = hour
        self._minute = minute
        self._second = second

    # calendar rules, supplied by the subclasses

    @classmethod
    def is_leapyear(cls, year):
        raise NotImplementedError(f"{cls.cname}.is_leapyear")

    @classmethod
    def months_in_year(cls, year):
        return 12

    @classmethod
    def days_in_month(cls, month, year):
        raise NotImplementedError(f"{cls.cname}.days_in_month")

    @classmethod
    def month_name(cls, month, year=None):
        if month not in cls.MONTH_NAMES:
            raise InvalidDateError(f"{cls.cname}: no month {month}", month)
        return cls.MONTH_NAMES[month]

    @classmethod
    def month_index(cls, month, year):
        """Position (1-based) of a month in the year."""
        return month

    @classmethod
    def month_from_index(cls, index, year):
        """Month at a position (1-based) in the year."""
        return index

    @classmethod
    def format_year(cls, year):
        return f"{year}{cls.ERA}"

    # fields

    @property
    def year(self):
        return self._year

    @property
    def month(self):
        return self._month

    @property
    def day(self):
        return self._day

    @property
    def hour(self):
        return self._hour

    @property
    def minute(self):
        return self._minute

    @property
    def second(self):
        return self._second

    @property
    def fields(self):
        """(year, month, day, hour, minute, second)"""
        return (self._year, self._month, self._day,
                self._hour, self._minute, self._second)

    @property
    def is_leap(self):
        return bool(self.is_leapyear(self._year))

    def seconds_of_day(self):
        return (self._second + self._minute * 60) + self._hour * 3600

    # Julian day

    @property
    def jdn(self):
        """Julian day number of the civil day."""
        return self._to_jdn(self._year, self._month, self._day)

    def to_jd(self):
        """
        Julian day of the date and time.

        Returns
        -------
        float
            jdn - 0.5 + time of day
        """
        return self.jdn - 0.5 + tod(self._hour, self._minute, self._second)

    @property
    def jd(self):
        return Jd(self.to_jd())

    @classmethod
    def from_jd(cls, jd):
        """
        Date of a Julian day.

        Parameters
        ----------
        jd : float or Jd

        Raises
        ------
        DateOverflowError
            If the date is outside of the supported years.

        Returns
        -------
        CalendarDate
            Date with the time of day rounded to PRECISION decimals of a
            second. A Julian day has no leap second, second is in [0, 60).
        """
        jd = float(jd)
        if not isfinite(jd):
            raise DateOverflowError(f"{cls.cname}: invalid julian day {jd}")
        _check_jdn(jd)
        jdn, seconds = split_jd(jd)
        return cls._from_jdn_seconds(jdn, seconds)

    @classmethod
    def _from_jdn_seconds(cls, jdn, seconds):
        seconds = round(seconds, PRECISION)
        carry, seconds = divmod(seconds, SPD)
        jdn = int(jdn) + int(carry)
        _check_jdn(jdn)
        year, month, day = cls._from_jdn(jdn)
        hour, minute, second = hms_from_seconds(seconds)
        return cls(year, month, day, hour, minute, second)

    @classmethod
    def now(cls, clock=None, time_of_day=True):
        """
        The current date.

        Parameters
        ----------
        clock : callable, optional
            Returns a Gregorian (year, month, day, hour, minute, second)
            tuple, see khronos.clock. Defaults to the system clock.
        time_of_day : bool, optional
            False for midnight of the current day.
        """
        year, month, day, hour, minute, second = now_fields(clock,
                                                            time_of_day)
        seconds = (second + minute * 60) + hour * 3600
        return cls._from_jdn_seconds(gregorian_jdn(year, month, day),
                                     seconds)

    def to_calendar(self, calendar):
        """
        The same moment in another calendar.

        Parameters
        ----------
        calendar : CalendarDate subclass or str

        Returns
        -------
        CalendarDate
        """
        calendar = get_calendar(calendar)
        return calendar._from_jdn_seconds(self.jdn, self.seconds_of_day())

    def day_of_week(self):
        return day_of_week(self.jdn)

    # arithmetic

    def _shift(self, days):
        if not isfinite(days):
            raise DateOverflowError(f"{self.cname}: invalid offset {days}")
        whole = floor(days)
        _check_jdn(whole)
        seconds = self.seconds_of_day() + (days - whole) * SPD
        return self._from_jdn_seconds(self.jdn + whole, seconds)

    def add_days(self, days):
        return self._shift(days)

    def add_weeks(self, weeks):
        return self._shift(7 * weeks)

    def add_months(self, months):
        """
        Add a number of months.

        Months are counted in the order of the calendar year, the year is
        carried and the day is clamped to the length of the new month.

        Parameters
        ----------
        months : int

        Returns
        -------
        CalendarDate
        """
        months = _index(months)
        year = self._year
        index = self.month_index(self._month, year) + months
        cycles, index = divmod(index - 1, self.CYCLE_MONTHS)
        year += cycles * self.CYCLE_YEARS
        index += 1
        if not MINYEAR - self.CYCLE_YEARS <= year <= MAXYEAR:
            raise DateOverflowError(
                f"{self.cname}: year must be in {MINYEAR}..{MAXYEAR}", year)
        n = self.months_in_year(year)
        while index > n:
            index -= n
            year += 1
            n = self.months_in_year(year)
        month = self.month_from_index(index, year)
        day = self._clamp_day(month, year)
        return type(self)(year, month, day,
                          self._hour, self._minute, self._second)

    def add_years(self, years):
        """
        Add a (fractional) number of years.

        The whole years change the year field. A month or day that does not
        exist in the new year degrades to the last month or day. The
        fraction is added as fraction * 365.2425 days.

        Parameters
        ----------
        years : float

        Returns
        -------
        CalendarDate
        """
        if isinstance(years, bool) or not isinstance(years, Real):
            raise TypeError(f"{self.cname}: real number expected")
        if not isfinite(years):
            raise DateOverflowError(f"{self.cname}: invalid offset {years}")
        whole = int(years)
        fraction = years - whole
        year = self._year + whole
        if not MINYEAR <= year <= MAXYEAR:
            raise DateOverflowError(
                f"{self.cname}: year must be in {MINYEAR}..{MAXYEAR}", year)
        month = min(self._month, self.months_in_year(year))
        if month != self._month:
            logger.debug("%s: month %d clamped to %d in year %d", self.cname,
                         self._month, month, year)
        day = self._clamp_day(month, year)
        date = type(self)(year, month, day,
                          self._hour, self._minute, self._second)
        if fraction:
            date = date._shift(fraction * EARTH_ORBITAL_PERIOD_DAYS)
        return date

    def _clamp_day(self, month, year):
        day = min(self._day, self.days_in_month(month, year))
        if day != self._day:
            logger.debug("%s: day %d clamped to %d in %d-%d", self.cname,
                         self._day, day, year, month)
        return day

    def __add__(self, b):
        if isinstance(b, (Days, Weeks)):
            return self._shift(b.days)
        if isinstance(b, Months):
            return self.add_months(b.value)
        if isinstance(b, Years):
            return self.add_years(b.value)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, b):
        if isinstance(b, CalendarDate):
            days = self.jdn - b.jdn
            return days + (self.seconds_of_day() - b.seconds_of_day()) / SPD
        if isinstance(b, Quantity):
            return self + (-b)
        return NotImplemented

    # comparison

    def _key(self):
        return (self._year, self.month_index(self._month, self._year),
                self._day, self._hour, self._minute, self._second)

    def __eq__(self, b):
        if type(b) is not type(self):
            return NotImplemented
        return self.fields == b.fields

    def __lt__(self, b):
        if type(b) is not type(self):
            return NotImplemented
        return self._key() < b._key()

    def __hash__(self):
        return hash((self.cname,) + self.fields)

    def replace(self, **kwargs):
        """Copy with some of the fields replaced, validated as a new date."""
        fields = dict(zip(_FIELDS, self.fields))
        for key in kwargs:
            if key not in fields:
                raise TypeError(f"{self.cname}.replace: no field {key!r}")
        fields.update(kwargs)
        return type(self)(**fields)

    # formatting

    def to_string(self):
        """
        Human readable date, for example

            Saturday, January 1 2000 CE, 12:00:00 am
        """
        return format_date(str(self.day_of_week()),
                           self.month_name(self._month, self._year),
                           self._day, self.format_year(self._year),
                           self._hour, self._minute, self._second)

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"{self.cname}({self._year}, {self._month}, {self._day}, " \
            f"{self._hour}, {self._minute}, {self._second!r})"
