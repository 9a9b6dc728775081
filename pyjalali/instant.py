"""The Persian calendar instant.

(C) Copyright 2025 The pyjalali Authors.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
JalaliTime -- An immutable Persian date and wall clock time in a zone.

A JalaliTime always holds canonical fields: whatever is passed in is
carried (nanoseconds into seconds, ... , months into years) until every
field is in range.  Arithmetic on calendar fields (add_date, replace,
tomorrow) works on the wall clock; arithmetic on durations (add, since,
astimezone) works on absolute time, so it honours the zone's transitions.
"""

__all__ = ['JalaliTime']

import time
from datetime import datetime, timedelta

from typing import Optional, Tuple, Union  # pylint: disable=unused-import

from . import calendar
from . import formatting
from . import names
from . import zone as zones
from .exception import InvalidZoneError
from .normalize import NANOS_PER_SECOND, norm, normalize, weekday_of

SECONDS_PER_DAY = 86400
ISO_LAYOUT = '2006-01-02T15:04:05.000000000-07:00'


def _duration_nanos(duration):
    # type: (Union[timedelta, int]) -> int
    if isinstance(duration, timedelta):
        seconds = duration.days * SECONDS_PER_DAY + duration.seconds
        return seconds * NANOS_PER_SECOND + duration.microseconds * 1000
    return int(duration)


class JalaliTime(object):
    """A Persian (Solar Hijri) date and time of day in a zone.

    All fields may be given out of range; they are normalized.  The zone
    is required: a Zone, a tzinfo or a zone name.

    >>> t = JalaliTime(1394, 12, 30, zone='Asia/Tehran')
    >>> t.date()
    (1395, <Month.FARVARDIN: 1>, 1)
    """

    __slots__ = ('__year', '__month', '__day', '__hour', '__minute',
                 '__second', '__nanosecond', '__zone', '__weekday')

    def __init__(self, year, month, day, hour=0, minute=0, second=0,
                 nanosecond=0, zone=None):
        # type: (int, int, int, int, int, int, int, object) -> None
        self.__zone = zones.as_zone(zone, "JalaliTime")
        (self.__year, self.__month, self.__day, self.__hour, self.__minute,
         self.__second, self.__nanosecond) = normalize(
             year, month, day, hour, minute, second, nanosecond)
        self.__weekday = weekday_of(self.__year, self.__month, self.__day)

    # Construction

    @classmethod
    def from_unix(cls, seconds, nanoseconds=0, zone=None):
        # type: (int, int, object) -> JalaliTime
        """The instant seconds + nanoseconds after 1970-01-01 00:00 UTC."""
        zone = zones.as_zone(zone, "from_unix")
        seconds, nanoseconds = norm(seconds, nanoseconds, NANOS_PER_SECOND)
        local = seconds + zone.offset_at(seconds)
        days, rest = divmod(local, SECONDS_PER_DAY)
        year, month, day = calendar.day2persian(days)
        return cls(year, month, day, 0, 0, rest, nanoseconds, zone)

    @classmethod
    def from_datetime(cls, dt, zone=None, nanosecond=None):
        # type: (datetime, object, Optional[int]) -> JalaliTime
        """Convert a datetime.

        The fields of dt are read as a civil date: Julian calendar up to
        1582-10-14, Gregorian after.  An aware dt given a different zone
        is first moved into that zone; a naive dt takes the zone as is.
        nanosecond, if given, replaces the microsecond of dt.
        """
        if zone is None:
            zone = dt.tzinfo
        zone = zones.as_zone(zone, "from_datetime")
        if dt.tzinfo is not None and dt.tzinfo is not zone.tzinfo:
            dt = dt.astimezone(zone.tzinfo)
        if nanosecond is None:
            nanosecond = dt.microsecond * 1000
        year, month, day = calendar.gregorian_to_persian(dt.year, dt.month,
                                                         dt.day)
        return cls(year, month, day, dt.hour, dt.minute, dt.second,
                   nanosecond, zone)

    @classmethod
    def now(cls, zone=None):
        # type: (object) -> JalaliTime
        """The current instant, in the host zone unless zone is given."""
        if zone is None:
            zone = zones.local()
        seconds, nanoseconds = divmod(time.time_ns(), NANOS_PER_SECOND)
        return cls.from_unix(seconds, nanoseconds, zone)

    @classmethod
    def parse(cls, text, template, zone=None):
        # type: (str, str, object) -> JalaliTime
        """Read text laid out by a pattern template (see format)."""
        fields, found = formatting.parse_time(text, template, zone)
        return cls(*fields, zone=found)

    # Fields

    @property
    def year(self):
        # type: () -> int
        return self.__year

    @property
    def month(self):
        # type: () -> names.Month
        return names.Month(self.__month)

    @property
    def day(self):
        # type: () -> int
        return self.__day

    @property
    def hour(self):
        # type: () -> int
        return self.__hour

    @property
    def minute(self):
        # type: () -> int
        return self.__minute

    @property
    def second(self):
        # type: () -> int
        return self.__second

    @property
    def nanosecond(self):
        # type: () -> int
        return self.__nanosecond

    @property
    def zone(self):
        # type: () -> zones.Zone
        return self.__zone

    @property
    def weekday(self):
        # type: () -> names.Weekday
        return names.Weekday(self.__weekday)

    @property
    def hour12(self):
        # type: () -> int
        """The hour in the range [0, 11]."""
        return self.__hour - 12 if self.__hour >= 12 else self.__hour

    def date(self):
        # type: () -> Tuple[int, names.Month, int]
        return self.__year, self.month, self.__day

    def clock(self):
        # type: () -> Tuple[int, int, int]
        return self.__hour, self.__minute, self.__second

    def _fields(self):
        # type: () -> Tuple[int, int, int, int, int, int, int]
        return (self.__year, self.__month, self.__day, self.__hour,
                self.__minute, self.__second, self.__nanosecond)

    # Derived values

    def ampm(self):
        # type: () -> names.AmPm
        """PM from 12:00:01 on; noon itself is AM."""
        if self.__hour > 12 or (self.__hour == 12 and
                                (self.__minute > 0 or self.__second > 0)):
            return names.AmPm.PM
        return names.AmPm.AM

    def daytime(self):
        # type: () -> names.DayTime
        """
        Part of the day:

           [0,3)   -> midnight
           [3,6)   -> dawn
           [6,9)   -> morning
           [9,12)  -> before noon
           [12,15) -> noon
           [15,18) -> afternoon
           [18,21) -> evening
           [21,24) -> night
        """
        return names.DayTime(self.__hour // 3)

    def is_leap(self):
        # type: () -> bool
        return calendar.is_leap(self.__year)

    def year_day(self):
        # type: () -> int
        return calendar.year_day(self.__month, self.__day)

    def remaining_year_days(self):
        # type: () -> int
        return calendar.days_in_year(self.__year) - self.year_day()

    def remaining_month_days(self):
        # type: () -> int
        return calendar.days_in_month(self.__year, self.__month) - self.__day

    def month_week(self):
        # type: () -> int
        """Week of the month; weeks start on Shanbeh."""
        first = weekday_of(self.__year, self.__month, 1)
        return -(-(self.__day + first) // 7)

    def year_week(self):
        # type: () -> int
        """Week of the year; weeks start on Shanbeh."""
        first = weekday_of(self.__year, 1, 1)
        return -(-(self.year_day() + first) // 7)

    def remaining_year_weeks(self):
        # type: () -> int
        return 52 - self.year_week()

    def julian_day(self):
        # type: () -> int
        return calendar.persian_to_jdn(self.__year, self.__month, self.__day)

    def gregorian(self):
        # type: () -> Tuple[int, int, int]
        """The civil Gregorian date (Julian before 1582-10-15)."""
        return calendar.jdn_to_gregorian(self.julian_day())

    # Absolute time

    def _local_seconds(self):
        # type: () -> int
        days = self.julian_day() - calendar.UNIX_EPOCH_JDN
        return (days * SECONDS_PER_DAY + self.__hour * 3600 +
                self.__minute * 60 + self.__second)

    def unix(self):
        # type: () -> int
        """Seconds since 1970-01-01 00:00 UTC."""
        local = self._local_seconds()
        return local - self.__zone.offset_at_wall(local)

    def unix_nano(self):
        # type: () -> int
        return self.unix() * NANOS_PER_SECOND + self.__nanosecond

    def to_datetime(self):
        # type: () -> datetime
        """An aware datetime with the same civil fields and zone.

        Nanoseconds are truncated to microseconds.

        :raises ValueError: If the Gregorian year is outside 1 - 9999.
        """
        year, month, day = self.gregorian()
        dt = datetime(year, month, day, self.__hour, self.__minute,
                      self.__second, self.__nanosecond // 1000)
        return self.__zone.attach(dt)

    def zone_info(self):
        # type: () -> Tuple[str, int]
        """The zone name and its offset in seconds east of UTC."""
        return self.__zone.name, self.__zone.offset_at_wall(
            self._local_seconds())

    def zone_offset(self, layout=formatting.DEFAULT_OFFSET_LAYOUT):
        # type: (str) -> str
        """The zone offset as -07:00, -0700, -07, Z0700 or Z07:00."""
        return formatting.format_offset(self.zone_info()[1], layout)

    # Arithmetic

    def replace(self, year=None, month=None, day=None, hour=None,
                minute=None, second=None, nanosecond=None, zone=None):
        """Return a copy with the given fields replaced, then normalized.

        A new zone keeps the wall clock; see astimezone.
        """
        return JalaliTime(
            self.__year if year is None else year,
            self.__month if month is None else month,
            self.__day if day is None else day,
            self.__hour if hour is None else hour,
            self.__minute if minute is None else minute,
            self.__second if second is None else second,
            self.__nanosecond if nanosecond is None else nanosecond,
            self.__zone if zone is None else zone)

    def in_zone(self, zone):
        # type: (object) -> JalaliTime
        """The same wall clock in another zone."""
        if zone is None:
            raise InvalidZoneError(
                "pyjalali: the zone must not be None in call to in_zone")
        return self.replace(zone=zone)

    def astimezone(self, zone):
        # type: (object) -> JalaliTime
        """The same absolute instant seen from another zone."""
        zone = zones.as_zone(zone, "astimezone")
        return JalaliTime.from_unix(self.unix(), self.__nanosecond, zone)

    def add_date(self, years=0, months=0, days=0):
        # type: (int, int, int) -> JalaliTime
        return JalaliTime(self.__year + years, self.__month + months,
                          self.__day + days, self.__hour, self.__minute,
                          self.__second, self.__nanosecond, self.__zone)

    def add(self, duration):
        # type: (Union[timedelta, int]) -> JalaliTime
        """Add a timedelta, or a number of nanoseconds, of absolute time."""
        return JalaliTime.from_unix(
            0, self.unix_nano() + _duration_nanos(duration), self.__zone)

    def since(self, other):
        # type: (JalaliTime) -> int
        """Whole seconds between self and other, never negative."""
        return abs(other.unix() - self.unix())

    def yesterday(self):
        # type: () -> JalaliTime
        return self.add_date(days=-1)

    def tomorrow(self):
        # type: () -> JalaliTime
        return self.add_date(days=1)

    def beginning_of_week(self):
        # type: () -> JalaliTime
        return self.first_week_day().replace(hour=0, minute=0, second=0,
                                              nanosecond=0)

    def beginning_of_month(self):
        # type: () -> JalaliTime
        return JalaliTime(self.__year, self.__month, 1, zone=self.__zone)

    def beginning_of_year(self):
        # type: () -> JalaliTime
        return JalaliTime(self.__year, 1, 1, zone=self.__zone)

    def first_week_day(self):
        # type: () -> JalaliTime
        return self.add_date(days=names.Weekday.SHANBEH - self.__weekday)

    def last_week_day(self):
        # type: () -> JalaliTime
        return self.add_date(days=names.Weekday.JOMEH - self.__weekday)

    def first_month_day(self):
        # type: () -> JalaliTime
        return self.replace(day=1)

    def last_month_day(self):
        # type: () -> JalaliTime
        return self.replace(day=calendar.days_in_month(self.__year,
                                                        self.__month))

    def first_year_day(self):
        # type: () -> JalaliTime
        return self.replace(month=1, day=1)

    def last_year_day(self):
        # type: () -> JalaliTime
        return self.replace(month=12,
                            day=calendar.days_in_month(self.__year, 12))

    # Comparison, on the calendar fields only

    def compare(self, other):
        # type: (JalaliTime) -> int
        """-1, 0 or 1 as self is before, equal to or after other."""
        mine, theirs = self._fields(), other._fields()
        if mine < theirs:
            return -1
        if mine > theirs:
            return 1
        return 0

    def before(self, other):
        # type: (JalaliTime) -> bool
        return self.compare(other) < 0

    def after(self, other):
        # type: (JalaliTime) -> bool
        return self.compare(other) > 0

    def equal(self, other):
        # type: (JalaliTime) -> bool
        return self.compare(other) == 0

    def __eq__(self, other):
        if not isinstance(other, JalaliTime):
            return NotImplemented
        return self._fields() == other._fields()

    def __ne__(self, other):
        if not isinstance(other, JalaliTime):
            return NotImplemented
        return self._fields() != other._fields()

    def __lt__(self, other):
        if not isinstance(other, JalaliTime):
            return NotImplemented
        return self._fields() < other._fields()

    def __le__(self, other):
        if not isinstance(other, JalaliTime):
            return NotImplemented
        return self._fields() <= other._fields()

    def __gt__(self, other):
        if not isinstance(other, JalaliTime):
            return NotImplemented
        return self._fields() > other._fields()

    def __ge__(self, other):
        if not isinstance(other, JalaliTime):
            return NotImplemented
        return self._fields() >= other._fields()

    def __hash__(self):
        return hash(self._fields())

    # Text

    def format(self, template):
        # type: (str) -> str
        """Render through a pattern template such as 'yyyy/MM/dd HH:mm'.

        See pyjalali.formatting for the tokens.
        """
        return formatting.format_time(self, template)

    def time_format(self, layout):
        # type: (str) -> str
        """Render through a layout template such as '2006-01-02 15:04'."""
        return formatting.format_layout(self, layout)

    def __str__(self):
        return self.time_format(ISO_LAYOUT)

    def __repr__(self):
        return "JalaliTime(%d, %d, %d, %d, %d, %d, %d, zone=%r)" % (
            self._fields() + (self.__zone.name,))
