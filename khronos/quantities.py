#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Wed Jan 22 19:02:45 2025

@author: Marcel Hesselberth

Typed amounts of time. They only serve as operands for date arithmetic:

    Gregorian(2024, 1, 31) + Months(1)   -> Gregorian(2024, 2, 29)
    Jd(2451545.0) + Weeks(2)             -> Jd(2451559.0)

Days, weeks and years may be fractional, months are whole.
"""

from numbers import Real
from operator import index as _index


class Quantity:
    __slots__ = ("value",)

    def __init__(self, value=1):
        if not isinstance(value, Real):
            raise TypeError(f"{type(self).__name__}: real number expected")
        self.value = value

    def __neg__(self):
        return type(self)(-self.value)

    def __pos__(self):
        return self

    def __mul__(self, b):
        if isinstance(b, Quantity):
            raise TypeError(f"Incompatible types for * : <{type(self).__name__}>, {type(b)}")
        return type(self)(self.value * b)

    __rmul__ = __mul__

    def __eq__(self, b):
        if type(b) is not type(self):
            return NotImplemented
        return self.value == b.value

    def __hash__(self):
        return hash((type(self).__name__, self.value))

    def __repr__(self):
        return f"{type(self).__name__}({self.value!r})"


class Days(Quantity):
    __slots__ = ()

    @property
    def days(self):
        return self.value


class Weeks(Quantity):
    __slots__ = ()

    @property
    def days(self):
        return 7 * self.value


class Months(Quantity):
    __slots__ = ()

    def __init__(self, value=1):
        super().__init__(_index(value))

    def __mul__(self, b):
        return Months(self.value * _index(b))

    __rmul__ = __mul__


class Years(Quantity):
    __slots__ = ()


def CE(year):
    """Year of the common era as an astronomical year."""
    return _index(year)


def BCE(year):
    """Year before the common era as an astronomical year (1 BCE is 0)."""
    return 1 - _index(year)
