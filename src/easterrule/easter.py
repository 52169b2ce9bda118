# -*- coding: utf-8 -*-
"""
This module computes Easter Sunday for any given year, using the Julian
algorithm up to and including 1583 and the Gregorian one afterwards.
"""

import datetime

from ._common import yearday

__all__ = ["easter_sunday", "julian_easter", "gregorian_easter",
           "julian_to_gregorian", "valid_offset_range", "easter_offset",
           "CUTOVER_YEAR", "MAX_EASTER_OFFSET"]

CUTOVER_YEAR = 1583

# Days between March 22nd, the earliest possible Easter Sunday, and
# December 31st.
MAX_EASTER_OFFSET = 284


def easter_sunday(year):
    """
    Return Easter Sunday of ``year`` as a proleptic Gregorian
    :class:`datetime.date`.

    Years up to and including :data:`CUTOVER_YEAR` are computed in the Julian
    calendar and converted, later years with the Gregorian algorithm. The
    returned date does not record which algorithm produced it.

    >>> easter_sunday(2024)
    datetime.date(2024, 3, 31)
    """
    if year <= CUTOVER_YEAR:
        return julian_easter(year)
    return gregorian_easter(year)


def julian_easter(year):
    """
    Easter Sunday computed in the Julian calendar, converted to the
    proleptic Gregorian calendar.

    >>> julian_easter(2024)
    datetime.date(2024, 5, 5)
    """
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19*c + 15) % 30
    e = (2*a + 4*b - d + 34) % 7
    month, day = divmod(d + e + 114, 31)
    return julian_to_gregorian(year, month, day + 1)


def gregorian_easter(year):
    """
    Easter Sunday computed in the Gregorian calendar (Meeus/Jones/Butcher).

    >>> gregorian_easter(2019)
    datetime.date(2019, 4, 21)
    """
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19*a + b - d - g + 15) % 30
    i, j = divmod(c, 4)
    k = (32 + 2*e + 2*i - h - j) % 7
    m = (a + 11*h + 22*k) // 451
    month, day = divmod(h + k - 7*m + 114, 31)
    return datetime.date(year, month, day + 1)


def julian_to_gregorian(year, month, day):
    """
    Convert a Julian calendar date to a proleptic Gregorian
    :class:`datetime.date`, going through its Julian Day Number.

    >>> julian_to_gregorian(1582, 10, 5)
    datetime.date(1582, 10, 15)
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12*a - 3
    jdn = day + (153*m + 2) // 5 + 365*y + y // 4 - 32083
    # JDN 1721426 is 0001-01-01, proleptic ordinal 1
    return datetime.date.fromordinal(jdn - 1721425)


def valid_offset_range():
    """
    The inclusive range ``[0, 284]`` of day distances an Easter Sunday can
    have to the end of its year.
    """
    return range(0, MAX_EASTER_OFFSET + 1)


def easter_offset(dt):
    """
    Signed number of days between ``dt`` and Easter Sunday of the same year,
    negative before Easter.

    >>> easter_offset(datetime.date(2024, 3, 29))
    -2
    """
    return yearday(dt) - yearday(easter_sunday(dt.year))
