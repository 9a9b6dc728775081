"""Time zones as seen by the Persian calendar.

(C) Copyright 2025 The pyjalali Authors.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Exported Classes:
Zone -- Wraps a tzinfo and answers UTC offset and display name queries.

Exported Functions:
as_zone -- Coerce a Zone, tzinfo or zone name into a Zone.
lookup -- Resolve a zone name, zoneinfo first and pytz second.
fixed -- A zone with a constant offset.
utc -- The UTC zone.
local -- The host zone, as reported by tzlocal.
iran -- Asia/Tehran, or a fixed +03:30 zone if it cannot be resolved.
afghanistan -- Asia/Kabul, or a fixed +04:30 zone if it cannot be resolved.

Offsets are asked for by epoch seconds.  Instants outside the range of
datetime (years 1 - 9999) are answered with the offset of the nearest
instant datetime can represent.
"""

__all__ = ['Zone', 'as_zone', 'lookup', 'fixed', 'utc', 'local',
           'iran', 'afghanistan']

import logging
from datetime import datetime, timedelta, timezone, tzinfo

from typing import Optional, Union  # pylint: disable=unused-import

import pytz
import tzlocal

try:
    from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
except ImportError:
    ZoneInfo = None  # type: ignore

from .exception import InvalidZoneError, UnknownZoneError, require_zone

_log = logging.getLogger("pyjalali")

EPOCH = datetime(1970, 1, 1)
ONE_SECOND = timedelta(seconds=1)

# leave a day of margin so that astimezone() stays within datetime's range
MIN_SECONDS = (datetime(1, 1, 2) - EPOCH) // ONE_SECOND
MAX_SECONDS = (datetime(9999, 12, 30) - EPOCH) // ONE_SECOND

IRAN_OFFSET = 12600         # +03:30
AFGHANISTAN_OFFSET = 16200  # +04:30


def _wall(seconds):
    # type: (int) -> datetime
    """Naive datetime for seconds since the epoch, clamped into range."""
    seconds = min(max(seconds, MIN_SECONDS), MAX_SECONDS)
    return EPOCH + timedelta(seconds=seconds)


def _zone_name(tz):
    # type: (tzinfo) -> str
    # zoneinfo.ZoneInfo has key, pytz has zone, datetime.timezone has a tzname
    for attr in ('key', 'zone'):
        name = getattr(tz, attr, None)
        if name:
            return name
    name = tz.tzname(None)
    return name if name else str(tz)


class Zone(object):
    """An opaque time zone: a display name and a UTC offset per instant.

    Both pytz zones, which need localize() to attach to a wall clock, and
    PEP 495 zones (zoneinfo, datetime.timezone, tzlocal) are accepted.
    Zones compare equal when their names do.
    """

    __slots__ = ('__tzinfo', '__name')

    def __init__(self, tz, name=None):
        # type: (tzinfo, Optional[str]) -> None
        require_zone(tz, "Zone")
        if not isinstance(tz, tzinfo):
            raise InvalidZoneError("expected a tzinfo, got %r" % (tz,))
        self.__tzinfo = tz
        self.__name = name if name else _zone_name(tz)

    @property
    def tzinfo(self):
        # type: () -> tzinfo
        return self.__tzinfo

    @property
    def name(self):
        # type: () -> str
        return self.__name

    def offset_at(self, seconds):
        # type: (int) -> int
        """Offset east of UTC, in seconds, at seconds since the epoch."""
        when = _wall(seconds).replace(tzinfo=timezone.utc)
        return when.astimezone(self.__tzinfo).utcoffset() // ONE_SECOND

    def offset_at_wall(self, seconds):
        # type: (int) -> int
        """Offset east of UTC, in seconds, in force at a local wall clock.

        seconds counts the wall clock as if it were UTC.  A wall clock that
        is repeated when clocks fall back resolves to its first (daylight)
        occurrence; one skipped when clocks spring forward uses the offset
        in force before the transition.
        """
        return self.attach(_wall(seconds)).utcoffset() // ONE_SECOND

    def attach(self, dt):
        # type: (datetime) -> datetime
        """Attach this zone to a naive datetime without moving its fields.

        Repeated and skipped wall clocks resolve as offset_at_wall
        describes, whichever tzinfo protocol the zone follows.
        """
        localize = getattr(self.__tzinfo, 'localize', None)
        if localize is None:
            return dt.replace(tzinfo=self.__tzinfo, fold=0)
        try:
            return localize(dt, is_dst=None)
        except pytz.AmbiguousTimeError:
            return localize(dt, is_dst=True)
        except pytz.NonExistentTimeError:
            return localize(dt, is_dst=False)

    def __eq__(self, other):
        if not isinstance(other, Zone):
            return NotImplemented
        return self.__name == other.__name

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash(self.__name)

    def __repr__(self):
        return "Zone(%r)" % (self.__name)

    def __str__(self):
        return self.__name


def lookup(name):
    # type: (str) -> Zone
    """Resolve a zone name such as 'Asia/Tehran'.

    zoneinfo is preferred; pytz, which ships its own copy of the tz
    database, answers for hosts without system tz data.

    :raises UnknownZoneError: If neither knows the name.
    """
    if ZoneInfo is not None:
        try:
            return Zone(ZoneInfo(name), name)
        except (ZoneInfoNotFoundError, ValueError):
            _log.debug("zoneinfo cannot resolve %s, trying pytz", name)
    try:
        return Zone(pytz.timezone(name), name)
    except pytz.UnknownTimeZoneError:
        raise UnknownZoneError("unknown time zone %s" % (name), name)


def fixed(name, offset):
    # type: (str, int) -> Zone
    """A zone named name that is always offset seconds east of UTC."""
    return Zone(timezone(timedelta(seconds=offset), name), name)


def utc():
    # type: () -> Zone
    return Zone(timezone.utc, 'UTC')


def local():
    # type: () -> Zone
    """The zone of the host, honouring the TZ environment variable."""
    return Zone(tzlocal.get_localzone())


def _named_or_fixed(name, offset):
    # type: (str, int) -> Zone
    try:
        return lookup(name)
    except UnknownZoneError:
        _log.warning("time zone %s is not available, using a fixed offset",
                     name)
        return fixed(name, offset)


def iran():
    # type: () -> Zone
    return _named_or_fixed('Asia/Tehran', IRAN_OFFSET)


def afghanistan():
    # type: () -> Zone
    return _named_or_fixed('Asia/Kabul', AFGHANISTAN_OFFSET)


def as_zone(zone, where="as_zone"):
    # type: (Union[Zone, tzinfo, str, None], str) -> Zone
    """Coerce zone into a Zone.

    :param zone: A Zone, a tzinfo, or a zone name.
    :param where: Name of the calling operation, used in error messages.
    :raises InvalidZoneError: If zone is None or of an unsupported type.
    :raises UnknownZoneError: If zone is a name that cannot be resolved.
    """
    require_zone(zone, where)
    if isinstance(zone, Zone):
        return zone
    if isinstance(zone, tzinfo):
        return Zone(zone)
    if isinstance(zone, str):
        return lookup(zone)
    raise InvalidZoneError("%s: expected a zone, got %r" % (where, zone))
