# -*- coding: utf-8 -*-
"""
The BYEASTER recurrence rule part: dates given as day offsets from Easter
Sunday, applied to the candidate dates produced by a recurrence engine the
same way BYYEARDAY and BYMONTHDAY are.
"""
import logging

from six import integer_types

from ._common import MAX_DAYS_PER_YEAR, days_in_year, from_yearday, yearday
from .easter import easter_sunday

__all__ = ["byeaster", "YEARLY", "MONTHLY", "WEEKLY", "DAILY",
           "HOURLY", "MINUTELY", "SECONDLY", "FREQNAMES", "TRACE"]

(YEARLY,
 MONTHLY,
 WEEKLY,
 DAILY,
 HOURLY,
 MINUTELY,
 SECONDLY) = list(range(7))

FREQNAMES = ['YEARLY', 'MONTHLY', 'WEEKLY', 'DAILY',
             'HOURLY', 'MINUTELY', 'SECONDLY']

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

logger = logging.getLogger(__name__)


class byeaster(object):
    """
    Applies a set of Easter offsets to candidate dates.

    :param byeaster:
        An offset or a sequence of offsets, in days relative to Easter Sunday
        (``0`` is Easter Sunday, ``-2`` Good Friday, ``1`` Easter Monday).
        Duplicates are dropped, the first-seen order is kept. Offsets outside
        ``[-366, 366]`` are accepted but never produce a date.

    :param freq:
        The frequency of the owning recurrence rule. With :data:`YEARLY` the
        rule expands every candidate into the matching dates of its year,
        with any other frequency it limits the candidates to those matching
        one of the offsets.

    >>> import datetime
    >>> byeaster((-2, 1)).transform([datetime.date(2024, 1, 1)])
    [datetime.date(2024, 3, 29), datetime.date(2024, 4, 1)]
    """

    def __init__(self, byeaster, freq=YEARLY):
        if isinstance(byeaster, integer_types):
            byeaster = (byeaster,)

        offsets = []
        for offset in byeaster:
            if (not isinstance(offset, integer_types) or
                    isinstance(offset, bool)):
                msg = "Non-integer value passed for byeaster: {value_type}"
                raise TypeError(msg.format(value_type=type(offset).__name__))
            if offset not in offsets:
                offsets.append(offset)

        if (not isinstance(freq, integer_types) or isinstance(freq, bool) or
                freq not in range(len(FREQNAMES))):
            raise ValueError("invalid frequency")

        self._byeaster = tuple(offsets)
        self._freq = freq

    @property
    def byeaster(self):
        return self._byeaster

    @property
    def freq(self):
        return self._freq

    def transform(self, dates, log=None):
        """
        Apply the rule to a sequence of candidate dates.

        :param dates:
            :class:`datetime.date` or :class:`datetime.datetime` instances.

        :param log:
            Where diagnostics go, any object with the ``isEnabledFor`` and
            ``log`` methods of :class:`logging.Logger`. Defaults to this
            module's logger.

        :return:
            ``dates`` itself when the rule holds no offsets, otherwise a new
            list. Expanded dates keep the time of day and type of the date
            they were built from.
        """
        if not self._byeaster:
            return dates

        if log is None:
            log = logger

        # Easter day of year, per year seen in this call
        easter_days = {}
        result = []
        for dt in dates:
            year = dt.year
            if year not in easter_days:
                easter_days[year] = yearday(easter_sunday(year))

            if self._freq == YEARLY:
                result.extend(self._expand(dt, easter_days[year], log))
            elif yearday(dt) - easter_days[year] in self._byeaster:
                result.append(dt)

        return result

    def _expand(self, dt, easter_yday, log):
        year = dt.year
        min_offset = 1 - easter_yday
        max_offset = days_in_year(year) - easter_yday

        for offset in self._byeaster:
            if offset < -MAX_DAYS_PER_YEAR or offset > MAX_DAYS_PER_YEAR:
                if log.isEnabledFor(TRACE):
                    log.log(TRACE, "Invalid day relative to easter sunday: %d",
                            offset)
                continue

            if offset < min_offset or offset > max_offset:
                # Not applicable for this year
                continue

            yield from_yearday(year, easter_yday + offset, dt)

    def __eq__(self, other):
        if not isinstance(other, byeaster):
            return NotImplemented
        return (self._freq == other._freq and
                set(self._byeaster) == set(other._byeaster))

    def __hash__(self):
        return hash((self.__class__, self._freq, frozenset(self._byeaster)))

    def __repr__(self):
        return "%s(%r, freq=%s)" % (self.__class__.__name__,
                                    list(self._byeaster),
                                    FREQNAMES[self._freq])
