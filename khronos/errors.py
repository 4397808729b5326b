#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Fri Feb 07 21:40:12 2025

@author: Marcel Hesselberth
"""


class KhronosError(Exception):
    """Base error."""


class InvalidDateError(KhronosError, ValueError):
    """A date field is out of range for its calendar."""


class DateOverflowError(KhronosError, OverflowError):
    """The year is outside the range supported by the day number kernels."""
