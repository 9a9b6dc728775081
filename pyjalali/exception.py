"""Classes containing the exceptions for reporting errors.

(C) Copyright 2025 The pyjalali Authors.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

Out-of-range numeric fields are never an error: they are carried into the
neighbouring fields by normalization.  Only a missing zone, an unknown zone
name, explicit legality checks and text that does not match its template
raise.
"""

__all__ = ['Error', 'ProgrammingError', 'InvalidZoneError',
           'UnknownZoneError', 'DataError', 'InvalidDateError',
           'ParseError', 'require_zone']


class Error(Exception):
    def __init__(self, value):
        self.__value = value

    def __str__(self):
        return repr(self.__value)


class ProgrammingError(Error):
    def __init__(self, value):
        Error.__init__(self, value)


class InvalidZoneError(ProgrammingError):
    """A required zone reference was missing or was not a zone."""

    def __init__(self, value):
        ProgrammingError.__init__(self, value)


class UnknownZoneError(ProgrammingError):
    """A zone name is not known to any of the available tz databases."""

    name = None

    def __init__(self, value, name=None):
        ProgrammingError.__init__(self, value)
        self.name = name


class DataError(Error):
    def __init__(self, value):
        Error.__init__(self, value)


class InvalidDateError(DataError):
    """Raised by explicit legality checks, never by normalization."""

    def __init__(self, value):
        DataError.__init__(self, value)


class ParseError(DataError):
    """Text did not match its template, or a name is not in any table."""

    def __init__(self, value):
        DataError.__init__(self, value)


def require_zone(zone, where):
    """Fail fast when a zone is missing.

    :param zone: The zone reference to check.
    :param where: Name of the calling operation, used in the message.
    :raises InvalidZoneError: If zone is None.
    """
    if zone is None:
        raise InvalidZoneError("pyjalali: the zone must not be None in call to %s"
                               % (where))
