#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Conditional numba compilation.

cnjit behaves like numba.njit when acceleration is switched on in
cnumba.ini and returns the plain python function otherwise. Both
paths give identical results; the python path is useful for debugging
and coverage.
"""

import os
import logging
from configparser import ConfigParser
import numba

logger = logging.getLogger(__name__)

path, ext = os.path.splitext(__file__)
config_filename = f"{path}.ini"
config = ConfigParser()
config.read(config_filename)

numba_acc   = config.getboolean("Numba", "jit", fallback=True)
numba_cache = config.getboolean("Numba", "cache", fallback=False)

logger.debug("numba %s, jit=%s, cache=%s", numba.__version__, numba_acc,
             numba_cache)


def cnjit(signature_or_function=None, **kwargs):
    """
    Decorator compiling a function in nopython mode.

    Parameters
    ----------
    signature_or_function : str, callable or None
        Numba signature for eager compilation, or the function itself
        when used as a bare decorator.
    **kwargs :
        Passed on to numba.njit.

    Returns
    -------
    callable
        The compiled dispatcher, or the function itself if acceleration
        is disabled.
    """
    if callable(signature_or_function):
        return cnjit()(signature_or_function)

    def decorator(func):
        if not numba_acc:
            return func
        kwargs.setdefault("cache", numba_cache)
        if signature_or_function is None:
            return numba.njit(**kwargs)(func)
        return numba.njit(signature_or_function, **kwargs)(func)
    return decorator
