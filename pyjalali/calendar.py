"""A module to convert dates to and from Julian Day Numbers.
This uses the Gregorian Calendar for dates from 10/15/1582,
the Julian Calendar for dates before 10/4/1582 and the 33-year
cycle arithmetic of the Persian (Solar Hijri) Calendar.

(C) Copyright 2025 The pyjalali Authors.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Calendar functions for computing year,month,day relative to a Julian
Day Number (JDN), the continuous count of days used to move between
calendars:
  - Gregorian Calendar for dates from and including 10/15/1582.
  - Julian Calendar for dates before and including 10/4/1582.
  - Persian Calendar for any year, positive or not.

Python datetime uses a proleptic Gregorian calendar; these functions
instead follow the civil calendar in force on each side of the reform.
None of the conversion functions validate their input; an illegal
month or day simply produces the JDN the arithmetic implies.

   +---------+---------------------+--------------------+
   |     jdn | Gregorian (y,m,d)   | Persian (y,m,d)    |
   |---------+---------------------+--------------------|
   | 2299160 | (1582,10,4) Julian  | (961,7,22)         |
   | 2299161 | (1582,10,15)        | (961,7,23)         |
   | 2440588 | (1970,1,1)          | (1348,10,11)       |
   | 2460755 | (2025,3,20)         | (1403,12,30)       |
   +---------+---------------------+--------------------+
"""

__all__ = ['GREGORIAN_REFORM_JDN', 'UNIX_EPOCH_JDN',
           'gregorian_to_jdn', 'jdn_to_gregorian',
           'persian_to_jdn', 'jdn_to_persian',
           'gregorian_to_persian', 'persian_to_gregorian',
           'persian2day', 'day2persian',
           'is_leap', 'days_in_month', 'days_in_year', 'year_day',
           'jdn_weekday', 'validate_date']

from typing import Tuple  # pylint: disable=unused-import

from .exception import InvalidDateError

JULIAN_END = (1582, 10, 14)

# First day numbered by the Gregorian formulas (1582-10-15).
GREGORIAN_REFORM_JDN = 2299161
UNIX_EPOCH_JDN = 2440588

# Persian years are shifted so that year -1595 opens a 33-year cycle.
PERSIAN_YEAR_SHIFT = 1595
PERSIAN_EPOCH = 1365392        # JDN of the day before (-1595, 1, 1)
DAYS_IN_33_YEARS = 12053       # 33 * 365 + 8 leap days
DAYS_IN_4_YEARS = 1461
FIRST_HALF_DAYS = 186          # months 1-6, 31 days each

# {days, leap days, days before start}
MONTH_DAYS = (
    (31, 31, 0),    # Farvardin
    (31, 31, 31),   # Ordibehesht
    (31, 31, 62),   # Khordad
    (31, 31, 93),   # Tir
    (31, 31, 124),  # Mordad
    (31, 31, 155),  # Shahrivar
    (30, 30, 186),  # Mehr
    (30, 30, 216),  # Aban
    (30, 30, 246),  # Azar
    (30, 30, 276),  # Dey
    (30, 30, 306),  # Bahman
    (29, 30, 336),  # Esfand
)


def _month_entry(month):
    # type: (int) -> Tuple[int, int, int]
    if month < 1:
        return MONTH_DAYS[0]
    if month > 12:
        return MONTH_DAYS[11]
    return MONTH_DAYS[month - 1]


def gregorian_to_jdn(year, month, day):
    # type: (int, int, int) -> int
    """
    Converts given year, month, day to a Julian Day Number.
      year  - any proleptic year (1 BC is year 0)
      month - 1 - 12
      day   - 1 - 31 (depending upon month and year)
    The calculation will be based upon:
      - Gregorian Calendar for dates after 10/14/1582.
      - Julian Calendar for dates up to and including 10/14/1582.

    Both formulas count years from March of -4800 so that the leap day
    falls at the end of the counting year:
      - a     : 1 for January and February, which belong to the
                previous counting year, else 0.
      - y     : the counting year.
      - m     : months since March.
      - (153 * m + 2) // 5 : days in the months before m.
      - y // 4 : the four year leap cycle correction.
      - y // 100 - y // 400 : the Gregorian century correction.
    """
    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3
    jdn = day + (153 * m + 2) // 5 + 365 * y + y // 4
    if (year, month, day) > JULIAN_END:
        return jdn - y // 100 + y // 400 - 32045
    return jdn - 32083


def jdn_to_gregorian(jdn):
    # type: (int) -> Tuple[int, int, int]
    """
    Converts given Julian Day Number to a tuple (year,month,day).

    Day numbers from GREGORIAN_REFORM_JDN on use the Gregorian Calendar,
    earlier ones the Julian Calendar, so 10/5/1582 - 10/14/1582 are never
    produced.
    """
    if jdn >= GREGORIAN_REFORM_JDN:
        # peel off 400 year cycles and the century within the cycle
        a = jdn + 32044
        b = (4 * a + 3) // 146097
        c = a - (146097 * b) // 4
    else:
        b = 0
        c = jdn + 32082

    d = (4 * c + 3) // DAYS_IN_4_YEARS
    e = c - (DAYS_IN_4_YEARS * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10
    return year, month, day


def persian_to_jdn(year, month, day):
    # type: (int, int, int) -> int
    """
    Converts given Persian year, month, day to a Julian Day Number.

    Every 33 year cycle holds 8 leap years.  The count of leap days before
    a year is 8 per whole cycle plus (year in cycle + 3) // 4 for the
    cycle in progress.  Months 1-6 are 31 days long, months 7-12 are 30.
    """
    shifted = year + PERSIAN_YEAR_SHIFT
    cycles, in_cycle = divmod(shifted, 33)
    leap_days = cycles * 8 + (in_cycle + 3) // 4

    if month < 7:
        before = (month - 1) * 31
    else:
        before = (month - 7) * 30 + FIRST_HALF_DAYS

    return PERSIAN_EPOCH + 365 * shifted + leap_days + before + day


def jdn_to_persian(jdn):
    # type: (int) -> Tuple[int, int, int]
    """
    Converts given Julian Day Number to a Persian tuple (year,month,day).

    The 33 year cycle is located first, then the 4 year sub-cycle (a leap
    year followed by three common years), then the year holding the
    residual day.  Day 186 of a year separates the two six month halves.
    """
    days = jdn - PERSIAN_EPOCH - 1

    cycles, days = divmod(days, DAYS_IN_33_YEARS)
    year = 33 * cycles - PERSIAN_YEAR_SHIFT

    quads, days = divmod(days, DAYS_IN_4_YEARS)
    year += 4 * quads

    # the leap year opens the sub-cycle
    if days > 365:
        year += (days - 1) // 365
        days = (days - 1) % 365

    if days < FIRST_HALF_DAYS:
        month = 1 + days // 31
        day = 1 + days % 31
    else:
        month = 7 + (days - FIRST_HALF_DAYS) // 30
        day = 1 + (days - FIRST_HALF_DAYS) % 30

    return year, month, day


def gregorian_to_persian(year, month, day):
    # type: (int, int, int) -> Tuple[int, int, int]
    """Converts a Gregorian (Julian before the reform) date to Persian."""
    return jdn_to_persian(gregorian_to_jdn(year, month, day))


def persian_to_gregorian(year, month, day):
    # type: (int, int, int) -> Tuple[int, int, int]
    """Converts a Persian date to Gregorian (Julian before the reform)."""
    return jdn_to_gregorian(persian_to_jdn(year, month, day))


def persian2day(year, month, day):
    # type: (int, int, int) -> int
    """Converts a Persian date to the number of days since 1/1/1970."""
    return persian_to_jdn(year, month, day) - UNIX_EPOCH_JDN


def day2persian(daynum):
    # type: (int) -> Tuple[int, int, int]
    """
    Converts given day number relative to 1970-01-01 to a Persian tuple
    (year,month,day).

       +---------+------------------+
       |  daynum | (year,month,day) |
       |---------+------------------|
       |       0 | (1348,10,11)     |
       |   16879 | (1394,12,29)     |
       |   16880 | (1395,1,1)       |
       +---------+------------------+
    """
    return jdn_to_persian(daynum + UNIX_EPOCH_JDN)


def is_leap(year):
    # type: (int) -> bool
    """True if the Persian year has 366 days (Esfand has 30 days)."""
    return (25 * year + 11) % 33 < 8


def days_in_month(year, month):
    # type: (int, int) -> int
    """Length of a Persian month; months outside 1-12 are clamped."""
    return _month_entry(month)[1 if is_leap(year) else 0]


def days_in_year(year):
    # type: (int) -> int
    return 366 if is_leap(year) else 365


def year_day(month, day):
    # type: (int, int) -> int
    """Ordinal day of the Persian year, Farvardin 1 being 1."""
    return _month_entry(month)[2] + day


def jdn_weekday(jdn):
    # type: (int) -> int
    """Day of the week for a JDN, Monday being 0 as in date.weekday()."""
    return jdn % 7


def validate_date(year, month, day):
    # type: (int, int, int) -> None
    """
    Checks that year, month, day name a real Persian day.

    Normalizing constructors never call this; it is the explicit check
    for callers that must reject rather than carry out of range fields.

    :raises InvalidDateError: If the month or the day is out of range.
    """
    if month < 1 or month > 12:
        raise InvalidDateError("Invalid date: month %d is not between 1 and 12"
                               % (month))
    last = days_in_month(year, month)
    if day < 1 or day > last:
        raise InvalidDateError("Invalid date: day %d is not between 1 and %d"
                               " for %d/%d" % (day, last, year, month))
