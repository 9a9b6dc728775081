# -*- coding: utf-8 -*-
"""Month, weekday and 12-hour marker names of the Persian calendar.

(C) Copyright 2025 The pyjalali Authors.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Month -- Month of the year, Farvardin is 1.
Weekday -- Day of the week, Shanbeh (Saturday) is 0.
AmPm -- 12-hour marker.
DayTime -- Part of the day, one per three hours.

Exported Functions:
month_name -- Persian or Dari name of a month number.
weekday_name -- Full or short name of a weekday number.
month_from_name -- Month for a Persian or Dari name.
weekday_from_name -- Weekday for a full or short name.
ampm_from_name -- AmPm for a full or short marker.

Name lookups by number never fail: values outside a table clamp to its
first or last entry.
"""

__all__ = ['Month', 'Weekday', 'AmPm', 'DayTime',
           'FARVARDIN', 'ORDIBEHESHT', 'KHORDAD', 'TIR', 'MORDAD',
           'SHAHRIVAR', 'MEHR', 'ABAN', 'AZAR', 'DEY', 'BAHMAN', 'ESFAND',
           'HAMAL', 'SUR', 'JAUZA', 'SARATAN', 'ASAD', 'SONBOLEH', 'MIZAN',
           'AQRAB', 'QOS', 'JADY', 'DOLV', 'HUT',
           'month_name', 'weekday_name', 'ampm_name', 'daytime_name',
           'month_from_name', 'weekday_from_name', 'ampm_from_name']

from enum import IntEnum
from typing import Dict, Sequence, Tuple  # pylint: disable=unused-import

from .exception import ParseError

ZWNJ = '\u200c'

MONTHS = (
    'فروردین',
    'اردیبهشت',
    'خرداد',
    'تیر',
    'مرداد',
    'شهریور',
    'مهر',
    'آبان',
    'آذر',
    'دی',
    'بهمن',
    'اسفند',
)

DARI_MONTHS = (
    'حمل',
    'ثور',
    'جوزا',
    'سرطان',
    'اسد',
    'سنبله',
    'میزان',
    'عقرب',
    'قوس',
    'جدی',
    'دلو',
    'حوت',
)

WEEKDAYS = (
    'شنبه',
    'یک' + ZWNJ + 'شنبه',
    'دوشنبه',
    'سه' + ZWNJ + 'شنبه',
    'چهارشنبه',
    'پنج' + ZWNJ + 'شنبه',
    'جمعه',
)

SHORT_WEEKDAYS = ('ش', 'ی', 'د', 'س', 'چ', 'پ', 'ج')

AMPM = ('قبل از ظهر', 'بعد از ظهر')

SHORT_AMPM = ('ق.ظ', 'ب.ظ')

DAYTIMES = (
    'نیمه' + ZWNJ + 'شب',
    'سحر',
    'صبح',
    'قبل از ظهر',
    'ظهر',
    'بعد از ظهر',
    'عصر',
    'شب',
)


def _clamped(table, index):
    # type: (Sequence[str], int) -> str
    if index < 0:
        return table[0]
    if index >= len(table):
        return table[-1]
    return table[index]


def month_name(month, dari=False):
    # type: (int, bool) -> str
    """Return the name of month 1-12 in the Persian or the Dari register."""
    return _clamped(DARI_MONTHS if dari else MONTHS, month - 1)


def weekday_name(weekday, short=False):
    # type: (int, bool) -> str
    return _clamped(SHORT_WEEKDAYS if short else WEEKDAYS, weekday)


def ampm_name(ampm, short=False):
    # type: (int, bool) -> str
    return _clamped(SHORT_AMPM if short else AMPM, ampm)


def daytime_name(daytime):
    # type: (int) -> str
    return _clamped(DAYTIMES, daytime)


class Month(IntEnum):
    """A month of the Persian year, starting from Farvardin = 1."""

    FARVARDIN = 1
    ORDIBEHESHT = 2
    KHORDAD = 3
    TIR = 4
    MORDAD = 5
    SHAHRIVAR = 6
    MEHR = 7
    ABAN = 8
    AZAR = 9
    DEY = 10
    BAHMAN = 11
    ESFAND = 12

    def persian(self):
        # type: () -> str
        return month_name(self.value)

    def dari(self):
        # type: () -> str
        return month_name(self.value, dari=True)

    def __str__(self):
        return self.persian()


class Weekday(IntEnum):
    """A day of the Persian week, starting from Shanbeh = 0."""

    SHANBEH = 0
    YEKSHANBEH = 1
    DOSHANBEH = 2
    SESHANBEH = 3
    CHARSHANBEH = 4
    PANJSHANBEH = 5
    JOMEH = 6

    def persian(self):
        # type: () -> str
        return weekday_name(self.value)

    def short(self):
        # type: () -> str
        return weekday_name(self.value, short=True)

    def __str__(self):
        return self.persian()


class AmPm(IntEnum):
    AM = 0
    PM = 1

    def persian(self):
        # type: () -> str
        return ampm_name(self.value)

    def short(self):
        # type: () -> str
        return ampm_name(self.value, short=True)

    def __str__(self):
        return self.persian()


class DayTime(IntEnum):
    """Part of the day; hours [3n, 3n + 3) map to value n."""

    MIDNIGHT = 0
    DAWN = 1
    MORNING = 2
    BEFORE_NOON = 3
    NOON = 4
    AFTER_NOON = 5
    EVENING = 6
    NIGHT = 7

    def persian(self):
        # type: () -> str
        return daytime_name(self.value)

    def __str__(self):
        return self.persian()


FARVARDIN = Month.FARVARDIN
ORDIBEHESHT = Month.ORDIBEHESHT
KHORDAD = Month.KHORDAD
TIR = Month.TIR
MORDAD = Month.MORDAD
SHAHRIVAR = Month.SHAHRIVAR
MEHR = Month.MEHR
ABAN = Month.ABAN
AZAR = Month.AZAR
DEY = Month.DEY
BAHMAN = Month.BAHMAN
ESFAND = Month.ESFAND

# Dari names of the same months.
HAMAL = Month.FARVARDIN
SUR = Month.ORDIBEHESHT
JAUZA = Month.KHORDAD
SARATAN = Month.TIR
ASAD = Month.MORDAD
SONBOLEH = Month.SHAHRIVAR
MIZAN = Month.MEHR
AQRAB = Month.ABAN
QOS = Month.AZAR
JADY = Month.DEY
DOLV = Month.BAHMAN
HUT = Month.ESFAND


def _fold(name):
    # type: (str) -> str
    """Reduce spelling variants of a name to one lookup key."""
    key = name.strip()
    # Arabic yeh, alef maksura and kaf
    key = key.replace('\u064a', '\u06cc').replace('\u0649', '\u06cc')
    key = key.replace('\u0643', '\u06a9')
    key = key.replace(ZWNJ, '').replace(' ', '')
    return key


def _reverse(*tables):
    # type: (*Tuple[Sequence[str], int]) -> Dict[str, int]
    lookup = {}  # type: Dict[str, int]
    for table, base in tables:
        for i, name in enumerate(table):
            lookup.setdefault(_fold(name), i + base)
    return lookup


_MONTH_LOOKUP = _reverse((MONTHS, 1), (DARI_MONTHS, 1))
_WEEKDAY_LOOKUP = _reverse((WEEKDAYS, 0), (SHORT_WEEKDAYS, 0))
_AMPM_LOOKUP = _reverse((AMPM, 0), (SHORT_AMPM, 0))


def month_from_name(name):
    # type: (str) -> Month
    """Return the Month named in either the Persian or the Dari register.

    :raises ParseError: If the name is in neither table.
    """
    value = _MONTH_LOOKUP.get(_fold(name))
    if value is None:
        raise ParseError('unknown month name "%s"' % (name))
    return Month(value)


def weekday_from_name(name):
    # type: (str) -> Weekday
    """Return the Weekday for a full or a one letter weekday name.

    :raises ParseError: If the name is not a weekday name.
    """
    value = _WEEKDAY_LOOKUP.get(_fold(name))
    if value is None:
        raise ParseError('unknown weekday name "%s"' % (name))
    return Weekday(value)


def ampm_from_name(name):
    # type: (str) -> AmPm
    """Return the AmPm for a full or a short 12-hour marker.

    :raises ParseError: If the name is not a 12-hour marker.
    """
    value = _AMPM_LOOKUP.get(_fold(name))
    if value is None:
        raise ParseError('unknown 12-hour marker "%s"' % (name))
    return AmPm(value)
