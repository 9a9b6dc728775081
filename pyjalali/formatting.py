"""Render Persian date/time values as text, and read them back.

(C) Copyright 2025 The pyjalali Authors.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Two template languages are supported.

Pattern templates (format_time, parse_time) use letter tokens matched
greedily, the longest token first; anything else is copied through:

    yyyy, yyy, y  year, at least 4 digits (e.g. 1394)
    yy            last 2 digits of the year (e.g. 94)
    MMM           Persian name of the month (e.g. farvardin)
    MMI           Dari name of the month (e.g. hamal)
    MM, M         month, 2 digits or as is
    rw            remaining weeks of the year
    w             week of the year
    W             week of the month
    RD            remaining days of the year
    D             day of the year
    rd            remaining days of the month
    dd, d         day of the month, 2 digits or as is
    E, e          weekday name, full or short
    A, a          12-hour marker, full or short
    HH, H         hour [0-23]
    kk, k         hour [1-24]
    hh, h         hour [1-12]
    KK, K         hour [0-11]
    mm, m         minute
    ss, s         second
    n             name of the part of the day
    ns            nanoseconds
    S             milliseconds, 3 digits
    z             zone name
    Z             zone offset (e.g. +03:30)

Layout templates (format_layout) spell each field the way a reference
instant would print, Monday 2006-01-02 15:04:05.999999999 -07:00 (MST):

    2006 06 01 1 Jan January 02 2 _2 Mon Monday Morning 03 3 15 04 4
    05 5 .000 .000000 .000000000 .999 .999999 .999999999 PM pm MST
    -0700 -07 -07:00 Z0700 Z07:00

A layout is compiled in a first pass that cuts it into literal text and
tokens, scanning left to right and trying tokens in a fixed priority order.
Rendering is the second pass, so field values are never rescanned.
"""

__all__ = ['OFFSET_LAYOUTS', 'format_offset', 'scan_template', 'scan_layout',
           'format_time', 'format_layout', 'parse_time']

import re
from functools import lru_cache

from typing import Any, Callable, Dict, List, Optional, Tuple  # pylint: disable=unused-import

from . import names
from . import zone as zones
from .calendar import validate_date
from .exception import InvalidDateError, ParseError
from .normalize import weekday_of

OFFSET_LAYOUTS = ('-07:00', '-0700', '-07', 'Z0700', 'Z07:00')
DEFAULT_OFFSET_LAYOUT = '-07:00'

KABUL = 'Asia/Kabul'


def format_offset(offset, layout=DEFAULT_OFFSET_LAYOUT):
    # type: (int, str) -> str
    """Render a UTC offset given in seconds.

    Unknown layouts render as -07:00.  A zero offset renders as +00:00,
    +0000, +00 or, for the Z layouts, Z.
    """
    if layout not in OFFSET_LAYOUTS:
        layout = DEFAULT_OFFSET_LAYOUT
    if offset == 0 and layout.startswith('Z'):
        return 'Z'

    sign = '-' if offset < 0 else '+'
    hours, minutes = divmod(abs(offset) // 60, 60)

    if layout in ('-0700', 'Z0700'):
        return '%s%02d%02d' % (sign, hours, minutes)
    if layout == '-07':
        return '%s%02d' % (sign, hours)
    return '%s%02d:%02d' % (sign, hours, minutes)


def _d2(value):
    # type: (int) -> str
    return '%02d' % (value)


def _d3(value):
    # type: (int) -> str
    return '%03d' % (value)


def _d4(value):
    # type: (int) -> str
    if value < 0:
        return '-%04d' % (-value)
    return '%04d' % (value)


def _yy(year):
    # type: (int) -> str
    return '%02d' % (abs(year) % 100)


def _clock12(hour):
    # type: (int) -> int
    return 12 if hour == 0 else hour


def _clock24(hour):
    # type: (int) -> int
    return 24 if hour == 0 else hour


# Pattern tokens.  Each renders from the accessors of an instant.
_PATTERN_TOKENS = {
    'yyyy': lambda t: _d4(t.year),
    'yyy': lambda t: _d4(t.year),
    'yy': lambda t: _yy(t.year),
    'y': lambda t: _d4(t.year),
    'MMM': lambda t: names.month_name(t.month),
    'MMI': lambda t: names.month_name(t.month, dari=True),
    'MM': lambda t: _d2(t.month),
    'M': lambda t: '%d' % (t.month),
    'rw': lambda t: str(t.remaining_year_weeks()),
    'w': lambda t: str(t.year_week()),
    'W': lambda t: str(t.month_week()),
    'RD': lambda t: str(t.remaining_year_days()),
    'D': lambda t: str(t.year_day()),
    'rd': lambda t: str(t.remaining_month_days()),
    'dd': lambda t: _d2(t.day),
    'd': lambda t: str(t.day),
    'E': lambda t: names.weekday_name(t.weekday),
    'e': lambda t: names.weekday_name(t.weekday, short=True),
    'A': lambda t: names.ampm_name(t.ampm()),
    'a': lambda t: names.ampm_name(t.ampm(), short=True),
    'HH': lambda t: _d2(t.hour),
    'H': lambda t: str(t.hour),
    'kk': lambda t: _d2(_clock24(t.hour)),
    'k': lambda t: str(_clock24(t.hour)),
    'hh': lambda t: _d2(_clock12(t.hour12)),
    'h': lambda t: str(_clock12(t.hour12)),
    'KK': lambda t: _d2(t.hour12),
    'K': lambda t: str(t.hour12),
    'mm': lambda t: _d2(t.minute),
    'm': lambda t: str(t.minute),
    'ss': lambda t: _d2(t.second),
    's': lambda t: str(t.second),
    'n': lambda t: names.daytime_name(t.daytime()),
    'ns': lambda t: str(t.nanosecond),
    'S': lambda t: _d3(t.nanosecond // 1000000),
    'z': lambda t: t.zone.name,
    'Z': lambda t: t.zone_offset(),
}  # type: Dict[str, Callable[[Any], str]]

_PATTERN_RE = re.compile('|'.join(
    sorted(_PATTERN_TOKENS, key=len, reverse=True)))


def _month_label(t):
    # type: (Any) -> str
    return names.month_name(t.month, dari=t.zone.name == KABUL)


def _fraction(digits, trim):
    # type: (int, bool) -> Callable[[Any], str]
    def render(t):
        text = '.' + ('%09d' % (t.nanosecond))[:digits]
        if trim:
            text = text.rstrip('0')
            if text == '.':
                return ''
        return text
    return render


def _offset(layout):
    # type: (str) -> Callable[[Any], str]
    return lambda t: t.zone_offset(layout)


# Layout tokens, in the order they are tried at each position.
_LAYOUT_TOKENS = (
    ('January', _month_label),
    ('Jan', _month_label),
    ('Monday', lambda t: names.weekday_name(t.weekday)),
    ('Mon', lambda t: names.weekday_name(t.weekday, short=True)),
    ('Morning', lambda t: names.daytime_name(t.daytime())),
    ('.000000000', _fraction(9, False)),
    ('.000000', _fraction(6, False)),
    ('.000', _fraction(3, False)),
    ('.999999999', _fraction(9, True)),
    ('.999999', _fraction(6, True)),
    ('.999', _fraction(3, True)),
    ('2006', lambda t: _d4(t.year)),
    ('PM', lambda t: names.ampm_name(t.ampm())),
    ('pm', lambda t: names.ampm_name(t.ampm(), short=True)),
    ('MST', lambda t: t.zone.name),
    ('Z0700', _offset('Z0700')),
    ('Z07:00', _offset('Z07:00')),
    ('-0700', _offset('-0700')),
    ('-07:00', _offset('-07:00')),
    ('-07', _offset('-07')),
    ('15', lambda t: _d2(t.hour)),
    ('06', lambda t: _yy(t.year)),
    ('01', lambda t: _d2(t.month)),
    ('02', lambda t: _d2(t.day)),
    ('03', lambda t: _d2(t.hour12)),
    ('04', lambda t: _d2(t.minute)),
    ('05', lambda t: _d2(t.second)),
    ('_2', lambda t: '%2d' % (t.day)),
    ('1', lambda t: '%d' % (t.month)),
    ('2', lambda t: str(t.day)),
    ('3', lambda t: str(t.hour12)),
    ('4', lambda t: str(t.minute)),
    ('5', lambda t: str(t.second)),
)  # type: Tuple[Tuple[str, Callable[[Any], str]], ...]

_LAYOUT_RENDER = dict(_LAYOUT_TOKENS)

# regex alternation is ordered, which gives the priority above
_LAYOUT_RE = re.compile('|'.join(re.escape(token)
                                 for token, _ in _LAYOUT_TOKENS))


def _scan(template, token_re):
    # type: (str, Any) -> Tuple[Tuple[bool, str], ...]
    segments = []  # type: List[Tuple[bool, str]]
    literal = []  # type: List[str]
    pos = 0
    while pos < len(template):
        match = token_re.match(template, pos)
        if match is None:
            literal.append(template[pos])
            pos += 1
            continue
        if literal:
            segments.append((False, ''.join(literal)))
            literal = []
        segments.append((True, match.group()))
        pos = match.end()
    if literal:
        segments.append((False, ''.join(literal)))
    return tuple(segments)


@lru_cache(maxsize=128)
def scan_template(template):
    # type: (str) -> Tuple[Tuple[bool, str], ...]
    """Cut a pattern template into (is_token, text) segments."""
    return _scan(template, _PATTERN_RE)


@lru_cache(maxsize=128)
def scan_layout(layout):
    # type: (str) -> Tuple[Tuple[bool, str], ...]
    """Cut a layout template into (is_token, text) segments."""
    return _scan(layout, _LAYOUT_RE)


def format_time(t, template):
    # type: (Any, str) -> str
    """Render instant t through a pattern template."""
    return ''.join(_PATTERN_TOKENS[text](t) if is_token else text
                   for is_token, text in scan_template(template))


def format_layout(t, layout):
    # type: (Any, str) -> str
    """Render instant t through a layout template."""
    return ''.join(_LAYOUT_RENDER[text](t) if is_token else text
                   for is_token, text in scan_layout(layout))


# Parsing

def _name_pattern(*tables):
    """Regex matching any name of the tables, in any accepted spelling."""
    alternatives = []
    for table in tables:
        for name in table:
            pattern = []
            for char in name:
                if char == names.ZWNJ or char == ' ':
                    pattern.append('[\u200c ]?')
                elif char == '\u06cc':
                    # Persian yeh, Arabic yeh or alef maksura
                    pattern.append('[\u06cc\u064a\u0649]')
                elif char == '\u06a9':
                    pattern.append('[\u06a9\u0643]')
                else:
                    pattern.append(re.escape(char))
            alternatives.append(''.join(pattern))
    # longest first so that a full name wins over its prefix
    alternatives.sort(key=len, reverse=True)
    return '(?:%s)' % ('|'.join(alternatives))


_NUMBER = r'\d{1,2}'
_TWO = r'\d{2}'

# token: (field, regex)
_PARSE_TOKENS = {
    'yyyy': ('year', r'-?\d+'),
    'yyy': ('year', r'-?\d+'),
    'y': ('year', r'-?\d+'),
    'MMM': ('month_name', _name_pattern(names.MONTHS)),
    'MMI': ('month_name', _name_pattern(names.DARI_MONTHS)),
    'MM': ('month', _TWO),
    'M': ('month', _NUMBER),
    'dd': ('day', _TWO),
    'd': ('day', _NUMBER),
    'E': ('weekday', _name_pattern(names.WEEKDAYS)),
    'e': ('weekday', _name_pattern(names.SHORT_WEEKDAYS)),
    'A': ('ampm', _name_pattern(names.AMPM)),
    'a': ('ampm', _name_pattern(names.SHORT_AMPM)),
    'HH': ('hour', _TWO),
    'H': ('hour', _NUMBER),
    'kk': ('hour24', _TWO),
    'k': ('hour24', _NUMBER),
    'hh': ('clock12', _TWO),
    'h': ('clock12', _NUMBER),
    'KK': ('hour12', _TWO),
    'K': ('hour12', _NUMBER),
    'mm': ('minute', _TWO),
    'm': ('minute', _NUMBER),
    'ss': ('second', _TWO),
    's': ('second', _NUMBER),
    'S': ('millisecond', r'\d{3}'),
    'ns': ('nanosecond', r'\d{1,9}'),
    'z': ('zone', r'[A-Za-z0-9_+\-/:]+'),
    'Z': ('offset', r'Z|[+-]\d{2}(?::?\d{2})?'),
}  # type: Dict[str, Tuple[str, str]]

_OFFSET_RE = re.compile(r'([+-])(\d{2}):?(\d{2})?')


@lru_cache(maxsize=128)
def _parser(template):
    # type: (str) -> Tuple[Any, Tuple[Tuple[str, str], ...]]
    pattern = []  # type: List[str]
    groups = []  # type: List[Tuple[str, str]]
    for is_token, text in scan_template(template):
        if not is_token:
            pattern.append(re.escape(text))
            continue
        if text not in _PARSE_TOKENS:
            raise ParseError('token "%s" cannot be parsed' % (text))
        field, regex = _PARSE_TOKENS[text]
        group = 'g%d' % (len(groups))
        pattern.append('(?P<%s>%s)' % (group, regex))
        groups.append((group, field))
    return re.compile(''.join(pattern)), tuple(groups)


def _convert(field, value):
    # type: (str, str) -> Any
    if field == 'month_name':
        return int(names.month_from_name(value))
    if field == 'weekday':
        return int(names.weekday_from_name(value))
    if field == 'ampm':
        return int(names.ampm_from_name(value))
    if field == 'zone':
        return value
    if field == 'offset':
        if value == 'Z':
            return 0
        sign, hours, minutes = _OFFSET_RE.match(value).groups()
        offset = int(hours) * 3600 + int(minutes or 0) * 60
        return -offset if sign == '-' else offset
    return int(value)


def _check(field, value, low, high):
    # type: (str, int, int, int) -> int
    if value < low or value > high:
        raise InvalidDateError("Invalid date: %s %d is not between %d and %d"
                               % (field, value, low, high))
    return value


def _resolve_hour(fields):
    # type: (Dict[str, int]) -> int
    hour = fields.get('hour')
    if hour is not None:
        _check('hour', hour, 0, 23)
    if 'hour24' in fields:
        value = _check('hour', fields['hour24'], 1, 24) % 24
        if hour is not None and hour != value:
            raise ParseError("conflicting values for the hour")
        hour = value

    hour12 = None
    if 'clock12' in fields:
        hour12 = _check('hour', fields['clock12'], 1, 12) % 12
    if 'hour12' in fields:
        value = _check('hour', fields['hour12'], 0, 11)
        if hour12 is not None and hour12 != value:
            raise ParseError("conflicting values for the hour")
        hour12 = value

    if hour12 is None:
        return hour if hour is not None else 0
    if hour is not None:
        if hour % 12 != hour12:
            raise ParseError("conflicting values for the hour")
        return hour
    if fields.get('ampm') == names.AmPm.PM:
        return hour12 + 12
    return hour12


def parse_time(text, template, zone=None):
    # type: (str, str, Any) -> Tuple[Tuple[int, int, int, int, int, int, int], zones.Zone]
    """Read text laid out by a pattern template.

    Returns the (year, month, day, hour, minute, second, nanosecond) fields
    and the zone.  An explicit zone wins over a parsed zone name, which
    wins over a parsed offset; a parsed offset gives a fixed zone.  Fields
    missing from the template default to 1/1/1 00:00:00.

    :raises ParseError: If text does not match the template, a token of
                        the template cannot be parsed, a name is unknown
                        or two tokens disagree.
    :raises InvalidDateError: If a parsed field is out of range.
    :raises InvalidZoneError: If no zone is given or parsed.
    """
    regex, groups = _parser(template)
    match = regex.fullmatch(text)
    if match is None:
        raise ParseError('"%s" does not match "%s"' % (text, template))

    fields = {}  # type: Dict[str, Any]
    for group, field in groups:
        value = _convert(field, match.group(group))
        if field == 'month_name':
            field = 'month'
        if field in fields and fields[field] != value:
            raise ParseError('conflicting values for the %s' % (field))
        fields[field] = value

    year = fields.get('year', 1)
    month = fields.get('month', 1)
    day = fields.get('day', 1)
    validate_date(year, month, day)

    hour = _resolve_hour(fields)
    minute = _check('minute', fields.get('minute', 0), 0, 59)
    second = _check('second', fields.get('second', 0), 0, 59)

    nanosecond = fields.get('nanosecond')
    if 'millisecond' in fields:
        millis = fields['millisecond']
        if nanosecond is None:
            nanosecond = millis * 1000000
        elif nanosecond // 1000000 != millis:
            raise ParseError("conflicting values for the nanosecond")
    if nanosecond is None:
        nanosecond = 0

    if 'weekday' in fields and fields['weekday'] != weekday_of(year, month, day):
        raise ParseError('%d/%d/%d is not a %s' % (
            year, month, day, names.weekday_name(fields['weekday'])))

    if zone is None and 'zone' in fields:
        zone = fields['zone']
    elif zone is None and 'offset' in fields:
        offset = fields['offset']
        zone = zones.utc() if offset == 0 else zones.fixed(
            format_offset(offset), offset)

    return ((year, month, day, hour, minute, second, nanosecond),
            zones.as_zone(zone, "parse"))
