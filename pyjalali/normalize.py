"""Carry propagation for Persian date and time fields.

(C) Copyright 2025 The pyjalali Authors.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Any tuple of integers is accepted: negative seconds, month 13 or day 0
are carried into the neighbouring fields, so a caller can add or subtract
freely and normalize once.  Carries run from nanoseconds up to years; the
day carry is the only one whose base changes, since it depends on the
month length of the (possibly carried) year.
"""

__all__ = ['NANOS_PER_SECOND', 'norm', 'norm_day', 'normalize',
           'weekday_of']

from typing import Tuple  # pylint: disable=unused-import

from .calendar import days_in_month, persian_to_jdn, jdn_weekday
from .calendar import DAYS_IN_33_YEARS

NANOS_PER_SECOND = 1000000000

# date.weekday() numbering (Monday is 0) to the Persian week (Saturday is 0)
_PLATFORM_TO_PERSIAN = (2, 3, 4, 5, 6, 0, 1)


def norm(hi, lo, base):
    # type: (int, int, int) -> Tuple[int, int]
    """Return nhi, nlo such that

        hi * base + lo == nhi * base + nlo
        0 <= nlo < base

    The quotient is floored, so a negative lo borrows from hi.
    """
    carry, lo = divmod(lo, base)
    return hi + carry, lo


def norm_day(year, month, day):
    # type: (int, int, int) -> Tuple[int, int, int]
    """Carry day into month and year using the real month lengths.

    month must already be within 1-12.  Whole 33 year cycles are removed
    first; each holds exactly DAYS_IN_33_YEARS days whatever the starting
    month, which bounds the month by month walk that follows.
    """
    cycles, day = divmod(day - 1, DAYS_IN_33_YEARS)
    year += 33 * cycles
    day += 1

    while True:
        last = days_in_month(year, month)
        if day <= last:
            break
        day -= last
        year, m = norm(year, month, 12)
        month = m + 1

    return year, month, day


def normalize(year, month, day, hour=0, minute=0, second=0, nanosecond=0):
    # type: (int, int, int, int, int, int, int) -> Tuple[int, int, int, int, int, int, int]
    """Return the canonical (year, month, day, hour, minute, second,
    nanosecond) equal to the given, possibly out of range, fields.

    Normalizing an already canonical tuple returns it unchanged.
    """
    second, nanosecond = norm(second, nanosecond, NANOS_PER_SECOND)
    minute, second = norm(minute, second, 60)
    hour, minute = norm(hour, minute, 60)
    day, hour = norm(day, hour, 24)

    year, m = norm(year, month - 1, 12)
    year, month, day = norm_day(year, m + 1, day)
    year, m = norm(year, month - 1, 12)

    return year, m + 1, day, hour, minute, second, nanosecond


def weekday_of(year, month, day):
    # type: (int, int, int) -> int
    """Persian weekday (Shanbeh is 0) of a canonical Persian date."""
    return _PLATFORM_TO_PERSIAN[jdn_weekday(persian_to_jdn(year, month, day))]
