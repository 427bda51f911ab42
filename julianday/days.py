#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
JulianDay and ModifiedJulianDay value types.

Both wrap a single integer day count. A JulianDay holds the Julian day
number (JDN), a ModifiedJulianDay holds MJD = JDN - MJD0 with MJD0 = 2400001,
so that MJD 0 is 1858-11-17. Conversion to and from calendar dates goes
through julianday.jdn.

Calendar dates are accepted from anything with integer year, month and day
attributes (datetime.date, DateTuple) or from a (year, month, day) sequence.
The fields are validated here, validity is never taken from the host type.

Values are immutable, hashable and totally ordered. Values of different
types never compare equal and can not be ordered against each other.
"""

import datetime
import numpy as np
from functools import total_ordering
from operator import index as _index
from julianday.constants import MJD0, MJD_UNIX_EPOCH
from julianday.jdn import (DateTuple, date_to_jdn, jdn_to_date, check_jdn,
                           weekday, isoweekday)


def _ymd(date):
    if hasattr(date, "year") and hasattr(date, "month") \
            and hasattr(date, "day"):
        return date.year, date.month, date.day
    try:
        year, month, day = date
    except (TypeError, ValueError):
        raise TypeError(f"not a (year, month, day) date: {date!r}") from None
    return year, month, day


class DayMeta(type):
    def __init__(cls, name, bases, dct):
        cls.cname = name
        super().__init__(name, bases, dct)


@total_ordering
class DayNumber(metaclass=DayMeta):
    """
    Base class of the day count types.

    Subclasses set offset, the JDN of day count 0.
    """
    __slots__ = ("_value",)
    offset = 0

    def __init__(self, value):
        value = _index(value)
        check_jdn(value + self.offset)
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.cname} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.cname} is immutable")

    @classmethod
    def from_date(cls, date):
        """
        Day count of a calendar date.

        Parameters
        ----------
        date : date-like or (year, month, day)
            Proleptic Gregorian date.

        Raises
        ------
        TypeError
            date is not date-like or has non-integral fields.
        ValueError
            The date does not exist.
        OverflowError
            The year is out of range.
        """
        return cls(date_to_jdn(*_ymd(date)) - cls.offset)

    @classmethod
    def from_ymd(cls, year, month, day):
        return cls(date_to_jdn(year, month, day) - cls.offset)

    @classmethod
    def from_datetime64(cls, dt64):
        """Day count of the date part of a numpy datetime64."""
        if isinstance(dt64, str):
            raise TypeError(f"{cls.cname}: datetime64 expected, not str")
        dt64 = np.datetime64(dt64, "D")
        if np.isnat(dt64):
            raise ValueError(f"{cls.cname}: NaT has no day number")
        mjd = int(dt64.astype(np.int64)) + MJD_UNIX_EPOCH
        return cls(mjd + MJD0 - cls.offset)

    @property
    def value(self):
        """The wrapped integer."""
        return self._value

    @property
    def jdn(self):
        return self._value + self.offset

    def to_date(self):
        """
        Calendar date of this day.

        Returns
        -------
        DateTuple
            (year, month, day) in the proleptic Gregorian calendar.
        """
        return jdn_to_date(self.jdn)

    def to_pydate(self):
        """The date as datetime.date, which only supports years 1..9999."""
        return datetime.date(*self.to_date())

    def to_datetime64(self):
        return np.datetime64(self.jdn - MJD0 - MJD_UNIX_EPOCH, "D")

    def weekday(self):
        """0 is Sunday ... 6 is Saturday."""
        return weekday(self.jdn)

    def isoweekday(self):
        """1 is Monday ... 7 is Sunday."""
        return isoweekday(self.jdn)

    def __int__(self):
        return self._value

    def __hash__(self):
        return hash((self.offset, self._value))

    def __eq__(self, b):
        if type(b) is not type(self):
            return NotImplemented
        return self._value == b._value

    def __lt__(self, b):
        if type(b) is not type(self):
            return NotImplemented
        return self._value < b._value

    def __add__(self, b):
        if isinstance(b, DayNumber) or not hasattr(b, "__index__"):
            return NotImplemented
        return type(self)(self._value + _index(b))

    __radd__ = __add__

    def __sub__(self, b):
        if type(b) is type(self):
            return self._value - b._value
        if isinstance(b, DayNumber) or not hasattr(b, "__index__"):
            return NotImplemented
        return type(self)(self._value - _index(b))

    def __reduce__(self):
        return (type(self), (self._value,))

    def __str__(self):
        return str(self._value)

    def __repr__(self):
        return f"{self.cname}({self._value})"


class JulianDay(DayNumber):
    """
    Julian day number.

    JulianDay(2451545) is 2000-01-01. Any integer from MINJD to MAXJD is
    a valid Julian day number.
    """
    __slots__ = ()
    offset = 0

    @classmethod
    def from_modified(cls, mjd):
        if not isinstance(mjd, ModifiedJulianDay):
            raise TypeError(f"{cls.cname}: ModifiedJulianDay expected, "
                            f"not {type(mjd).__name__}")
        return mjd.to_julianday()

    def to_modified(self):
        return ModifiedJulianDay.from_julianday(self)


class ModifiedJulianDay(DayNumber):
    """
    Modified Julian day, MJD = JDN - 2400001.

    The astronomical definition MJD = JD - 2400000.5 counts from midnight.
    For whole days the half day is part of the epoch: the civil day
    1858-11-17 has MJD 0 and JDN 2400001.
    """
    __slots__ = ()
    offset = MJD0

    @classmethod
    def from_julianday(cls, jd):
        """Exact conversion from a JulianDay, never fails."""
        if not isinstance(jd, JulianDay):
            raise TypeError(f"{cls.cname}: JulianDay expected, "
                            f"not {type(jd).__name__}")
        return cls(jd.value - MJD0)

    def to_julianday(self):
        return JulianDay(self._value + MJD0)
