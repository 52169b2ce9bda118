# -*- coding: utf-8 -*-
"""
Day-of-year arithmetic shared by the easter and rrule modules.
"""
import calendar
import datetime

MAX_DAYS_PER_YEAR = 366


def yearday(dt):
    """
    Return the 1-based day of the year of a date or datetime, taken from its
    own (wall clock) fields.
    """
    return dt.toordinal() - datetime.date(dt.year, 1, 1).toordinal() + 1


def days_in_year(year):
    return 365 + calendar.isleap(year)


def from_yearday(year, yday, like):
    """
    Return the date at ordinal day ``yday`` of ``year``, expressed with the
    same type as ``like``.

    :param like:
        A :class:`datetime.date` or :class:`datetime.datetime`. Any time of
        day, ``tzinfo`` and ``fold`` it carries are kept on the result.
    """
    target = datetime.date.fromordinal(
        datetime.date(year, 1, 1).toordinal() + yday - 1)
    return like.replace(year=target.year, month=target.month, day=target.day)
