#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Constants for Julian day number arithmetic.
"""

mdays   = {1:31,2:28, 3:31, 4:30, 5:31, 6:30, 7:31, 8:31, 9:30, 10:31,
           11:30, 12:31}

# Civil day 1858-11-17 (MJD 0) has JDN 2400001 at noon. The half day of
# MJD = JD - 2400000.5 is folded into this integer epoch.
MJD0    = 2400001
MJD_UNIX_EPOCH = 40587         # 1970-01-01

# Supported years. Every intermediate of the int64 kernels stays below 2**40.
MINYEAR = -5000000
MAXYEAR =  5000000

# Fliegel - Van Flandern epoch: the computational year starts in March,
# counted from -4800.
Y0      = 4800
JDN_OFS = 32045

DAYS_400Y = 146097
DAYS_4Y   = 1461
