#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Created on Sun Jan 05 16:02:11 2025

@author: Marcel Hesselberth

Numba configuration for khronos.

The integer day number kernels in calmath are decorated with knjit. Whether
they are compiled is read from khronos.ini (next to this file) or from the
file named by the KHRONOS_CONFIG environment variable.
"""

import os
import logging
from configparser import ConfigParser

import numba

logger = logging.getLogger(__name__)

path = os.path.dirname(os.path.abspath(__file__))
config_filename = os.environ.get("KHRONOS_CONFIG",
                                 os.path.join(path, "khronos.ini"))
config = ConfigParser()
config.read_dict({"numba": {"enabled": "yes", "cache": "no"}})
config.read(config_filename)

numba_acc = config.getboolean("numba", "enabled")
numba_cache = config.getboolean("numba", "cache")

logger.debug("numba %s, acceleration %s, cache %s", numba.__version__,
             "on" if numba_acc else "off", "on" if numba_cache else "off")


def knjit(signature_or_function=None, **kwargs):
    """
    Compile a function in nopython mode if acceleration is configured.

    Can be used bare (@knjit) or with numba arguments
    (@knjit('i8(i8)') or @knjit(inline='always')).

    Parameters
    ----------
    signature_or_function : str, callable or None
        Numba signature, or the function when used as a bare decorator.
    **kwargs :
        Passed on to numba.njit.

    Returns
    -------
    callable
        The compiled dispatcher, or the function itself when numba
        acceleration is switched off.
    """
    kwargs.setdefault("cache", numba_cache)

    def decorate(func):
        if not numba_acc:
            return func
        if signature_or_function is None or callable(signature_or_function):
            return numba.njit(**kwargs)(func)
        return numba.njit(signature_or_function, **kwargs)(func)

    if callable(signature_or_function):
        return decorate(signature_or_function)
    return decorate
