#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Julian day numbers of proleptic Gregorian dates.

A Julian day number (JDN) counts days from the start of the Julian period.
JDN 0 is January 1, -4712 in the proleptic Julian calendar, which is
November 24, -4713 in the proleptic Gregorian calendar used here. The JDN
of a date is the number of the Julian day starting at noon of that date.

Years use astronomical numbering: the year before +1 is the year 0 and
1 BC = 0, 2 BC = -1 etc. The Gregorian leap year rule is applied to all
years, there is no calendar reform.

The algorithm is the integer form of Fliegel and Van Flandern. The year is
shifted to start on March 1 so that the leap day is the last day of the
computational year. All divisions are floor divisions, which makes the
formulas valid for negative years as well. No floating point is involved,
the results are exact for all years from MINYEAR to MAXYEAR.
"""

import numpy as np
from collections import namedtuple
from operator import index as _index
from julianday.constants import (mdays, MINYEAR, MAXYEAR, Y0, JDN_OFS,
                                 DAYS_400Y, DAYS_4Y)
from julianday.cnumba import cnjit

DateTuple = namedtuple("DateTuple", ["year", "month", "day"])


@cnjit(signature_or_function='i8(i8, i8, i8)')
def _jdn(year, month, day):
    a = (14 - month) // 12                  # 1 for January and February
    y = year + Y0 - a
    m = month + 12 * a - 3                  # March = 0
    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 \
        + y // 400 - JDN_OFS


@cnjit(signature_or_function='UniTuple(i8, 3)(i8)')
def _rjdn(jdn):
    a = jdn + JDN_OFS - 1
    b = (4 * a + 3) // DAYS_400Y            # centuries
    c = a - DAYS_400Y * b // 4
    d = (4 * c + 3) // DAYS_4Y              # years in century
    e = c - DAYS_4Y * d // 4                # day in computational year
    m = (5 * e + 2) // 153                  # March = 0
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - Y0 + m // 10
    return year, month, day


@cnjit(signature_or_function='i8[:](i8[:], i8[:], i8[:])')
def _jdn_array(years, months, days):
    n = years.shape[0]
    jdn = np.empty(n, dtype=np.int64)
    for i in range(n):
        jdn[i] = _jdn(years[i], months[i], days[i])
    return jdn


@cnjit(signature_or_function='UniTuple(i8[:], 3)(i8[:])')
def _rjdn_array(jdn):
    n = jdn.shape[0]
    years = np.empty(n, dtype=np.int64)
    months = np.empty(n, dtype=np.int64)
    days = np.empty(n, dtype=np.int64)
    for i in range(n):
        y, m, d = _rjdn(jdn[i])
        years[i] = y
        months[i] = m
        days[i] = d
    return years, months, days


MINJD = int(_jdn(MINYEAR, 1, 1))
MAXJD = int(_jdn(MAXYEAR, 12, 31))


def is_leapyear(year):
    """
    Check if a year is a leap year in the proleptic Gregorian calendar.

    Parameters
    ----------
    year : int
        Astronomical year, 0 is 1 BC.

    Returns
    -------
    bool
        True if February has 29 days.
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year, month):
    """Number of days in the given month of the given year."""
    year = _index(year)
    month = _index(month)
    if not 1 <= month <= 12:
        raise ValueError('month must be in 1..12', month)
    if month == 2 and is_leapyear(year):
        return 29
    return mdays[month]


def check_date_fields(year, month, day):
    """
    Validate a proleptic Gregorian date.

    Parameters
    ----------
    year : int

    month : int

    day : int


    Raises
    ------
    TypeError
        A field is not integral.
    OverflowError
        The year is outside MINYEAR..MAXYEAR.
    ValueError
        The month or the day does not exist. Dates are never normalized,
        February 29 of a common year is an error.

    Returns
    -------
    DateTuple
        The fields as plain ints.
    """
    year = _index(year)
    month = _index(month)
    day = _index(day)
    if not MINYEAR <= year <= MAXYEAR:
        raise OverflowError('year must be in %d..%d' %
                            (MINYEAR, MAXYEAR), year)
    dmax = days_in_month(year, month)
    if not 1 <= day <= dmax:
        raise ValueError('day must be in 1..%d' % dmax, day)
    return DateTuple(year, month, day)


def check_jdn(jdn):
    """Validate a Julian day number and return it as an int."""
    jdn = _index(jdn)
    if not MINJD <= jdn <= MAXJD:
        raise OverflowError('julian day number must be in %d..%d' %
                            (MINJD, MAXJD), jdn)
    return jdn


def date_to_jdn(year, month, day):
    """
    Julian day number of a proleptic Gregorian date.

    Parameters
    ----------
    year : int
        Astronomical year from MINYEAR to MAXYEAR.
    month : int
        Month (1-12).
    day : int
        Day of the month.

    Raises
    ------
    TypeError, ValueError, OverflowError
        See check_date_fields.

    Returns
    -------
    int
        The Julian day number. Consecutive dates have consecutive numbers.
    """
    year, month, day = check_date_fields(year, month, day)
    return int(_jdn(year, month, day))


def jdn_to_date(jdn):
    """
    Reverse Julian day number.

    jdn_to_date(date_to_jdn(y, m, d)) == (y, m, d) for every valid date
    and date_to_jdn(*jdn_to_date(n)) == n for every n in MINJD..MAXJD.

    Parameters
    ----------
    jdn : int
        Julian day number from MINJD to MAXJD.

    Raises
    ------
    TypeError
        jdn is not integral.
    OverflowError
        jdn is out of range.

    Returns
    -------
    DateTuple
        (year, month, day)
    """
    jdn = check_jdn(jdn)
    year, month, day = _rjdn(jdn)
    return DateTuple(int(year), int(month), int(day))


def weekday(jdn):
    """Day of the week, 0 is Sunday ... 6 is Saturday."""
    return (_index(jdn) + 1) % 7


def isoweekday(jdn):
    """ISO day of the week, 1 is Monday ... 7 is Sunday."""
    return _index(jdn) % 7 + 1


# vectorized versions

_mdays_table = np.array([0] + [mdays[m] for m in range(1, 13)], dtype=np.int64)
_INT64_MAX = int(np.iinfo(np.int64).max)


def _int_array(a, name):
    a = np.asarray(a)
    if a.dtype.kind not in "iu":
        raise TypeError(f"{name}: integer array expected", a.dtype)
    if a.dtype.kind == "u" and a.size and int(a.max()) > _INT64_MAX:
        raise OverflowError(f"{name}: value exceeds int64", int(a.max()))
    return a.astype(np.int64)


def _first(a, mask):
    return a[mask][0]


def date_to_jdn_array(years, months, days):
    """
    Julian day numbers of arrays of proleptic Gregorian dates.

    The arguments are broadcast against each other. All dates are validated
    before anything is converted; the first invalid field is reported the
    same way as by date_to_jdn.

    Parameters
    ----------
    years : array_like of int

    months : array_like of int

    days : array_like of int


    Returns
    -------
    numpy.ndarray
        int64 Julian day numbers with the broadcast shape.
    """
    years = _int_array(years, "years")
    months = _int_array(months, "months")
    days = _int_array(days, "days")
    years, months, days = np.broadcast_arrays(years, months, days)
    shape = years.shape

    bad = (years < MINYEAR) | (years > MAXYEAR)
    if bad.any():
        raise OverflowError('year must be in %d..%d' %
                            (MINYEAR, MAXYEAR), int(_first(years, bad)))
    bad = (months < 1) | (months > 12)
    if bad.any():
        raise ValueError('month must be in 1..12', int(_first(months, bad)))
    leap = (years % 4 == 0) & ((years % 100 != 0) | (years % 400 == 0))
    dmax = _mdays_table[months] + ((months == 2) & leap)
    bad = (days < 1) | (days > dmax)
    if bad.any():
        raise ValueError('day must be in 1..%d' % int(_first(dmax, bad)),
                         int(_first(days, bad)))

    jdn = _jdn_array(np.ascontiguousarray(years).ravel(),
                     np.ascontiguousarray(months).ravel(),
                     np.ascontiguousarray(days).ravel())
    return jdn.reshape(shape)


def jdn_to_date_array(jdn):
    """
    Proleptic Gregorian dates of an array of Julian day numbers.

    Parameters
    ----------
    jdn : array_like of int
        Julian day numbers from MINJD to MAXJD.

    Returns
    -------
    years, months, days : numpy.ndarray
        int64 arrays with the shape of jdn.
    """
    jdn = _int_array(jdn, "jdn")
    shape = jdn.shape
    bad = (jdn < MINJD) | (jdn > MAXJD)
    if bad.any():
        raise OverflowError('julian day number must be in %d..%d' %
                            (MINJD, MAXJD), int(_first(jdn, bad)))
    years, months, days = _rjdn_array(np.ascontiguousarray(jdn).ravel())
    return years.reshape(shape), months.reshape(shape), days.reshape(shape)
