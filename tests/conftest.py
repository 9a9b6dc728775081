"""
(C) Copyright 2025 The pyjalali Authors.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import logging
import pytest

from pyjalali import zone as zones
from pyjalali import JalaliTime

_log = logging.getLogger("pyjalalitest")


@pytest.fixture(scope="session")
def tehran():
    # type: () -> zones.Zone
    """Asia/Tehran, from zoneinfo or pytz."""
    tz = zones.iran()
    _log.info("Using %r for Iran", tz)
    return tz


@pytest.fixture(scope="session")
def kabul():
    # type: () -> zones.Zone
    tz = zones.afghanistan()
    _log.info("Using %r for Afghanistan", tz)
    return tz


@pytest.fixture(scope="session")
def utc():
    # type: () -> zones.Zone
    return zones.utc()


@pytest.fixture
def mehr2(tehran):
    # type: (zones.Zone) -> JalaliTime
    """Panjshanbeh 1394/07/02 12:59:59.050260050 in Tehran."""
    return JalaliTime(1394, 7, 2, 12, 59, 59, 50260050, tehran)
