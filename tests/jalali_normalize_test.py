"""
(C) Copyright 2025 The pyjalali Authors.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import pytest

from pyjalali import calendar
from pyjalali.normalize import norm, norm_day, normalize, weekday_of
from pyjalali.names import Weekday


class TestNorm(object):

    def test_in_range(self):
        # type: () -> None
        assert norm(1, 30, 60) == (1, 30)

    def test_overflow(self):
        # type: () -> None
        assert norm(1, 130, 60) == (3, 10)

    def test_negative_borrows(self):
        # type: () -> None
        assert norm(0, -1, 60) == (-1, 59)
        assert norm(5, -61, 60) == (3, 59)
        assert norm(0, -60, 60) == (-1, 0)


class TestNormalize(object):

    def test_canonical_unchanged(self):
        # type: () -> None
        for fields in [(1394, 7, 2, 12, 59, 59, 50260050),
                       (1395, 12, 30, 23, 59, 59, 999999999),
                       (0, 1, 1, 0, 0, 0, 0),
                       (-5, 6, 31, 1, 2, 3, 4)]:
            assert normalize(*fields) == fields

    def test_idempotent(self):
        # type: () -> None
        for fields in [(1394, 13, 0, 25, -1, 61, -1),
                       (1, -30, 400, 0, 0, 0, 10 ** 12),
                       (-100, 0, -1000, -48, 0, 0, 0)]:
            once = normalize(*fields)
            assert normalize(*once) == once

    def test_month_thirteen_day_zero(self):
        # type: () -> None
        assert normalize(1394, 13, 0) == normalize(1395, 1, 0)
        assert normalize(1395, 1, 0) == (1394, 12, 29, 0, 0, 0, 0)

    def test_day_after_esfand(self):
        # type: () -> None
        assert normalize(1394, 12, 30) == (1395, 1, 1, 0, 0, 0, 0)
        assert normalize(1395, 12, 30) == (1395, 12, 30, 0, 0, 0, 0)
        assert normalize(1395, 12, 31) == (1396, 1, 1, 0, 0, 0, 0)

    def test_month_zero(self):
        # type: () -> None
        assert normalize(1400, 0, 1) == (1399, 12, 1, 0, 0, 0, 0)
        assert normalize(1400, -11, 1) == (1399, 1, 1, 0, 0, 0, 0)
        assert normalize(1400, -12, 1) == (1398, 12, 1, 0, 0, 0, 0)
        assert normalize(1400, 25, 1) == (1402, 1, 1, 0, 0, 0, 0)

    def test_time_carries(self):
        # type: () -> None
        assert normalize(1394, 1, 1, 0, 0, 0, -1) == \
            (1393, 12, 29, 23, 59, 59, 999999999)
        assert normalize(1394, 12, 29, 23, 59, 59, 1000000000) == \
            (1395, 1, 1, 0, 0, 0, 0)
        assert normalize(1400, 1, 1, 24 * 366) == (1401, 1, 2, 0, 0, 0, 0)

    def test_second_31_of_mehr(self):
        # type: () -> None
        assert normalize(1394, 7, 31) == (1394, 8, 1, 0, 0, 0, 0)

    @pytest.mark.parametrize("days", [-100000, -12054, -366, -1, 0, 1, 365,
                                      12053, 12054, 40000, 1000000])
    def test_day_carry_matches_jdn(self, days):
        # type: (int) -> None
        expected = calendar.jdn_to_persian(calendar.persian_to_jdn(1400, 1, 1) + days)
        assert normalize(1400, 1, 1 + days)[:3] == expected

    def test_norm_day_from_any_month(self):
        # type: () -> None
        for month in range(1, 13):
            for days in (-400, -31, 30, 400):
                expected = calendar.jdn_to_persian(
                    calendar.persian_to_jdn(1394, month, 1) + days)
                assert norm_day(1394, month, 1 + days) == expected


class TestWeekdayOf(object):

    def test_known_days(self):
        # type: () -> None
        assert weekday_of(1394, 7, 2) == Weekday.PANJSHANBEH
        assert weekday_of(1394, 7, 1) == Weekday.CHARSHANBEH
        assert weekday_of(1394, 1, 1) == Weekday.SHANBEH
        assert weekday_of(1348, 10, 11) == Weekday.PANJSHANBEH

    def test_across_the_reform(self):
        # type: () -> None
        # 1582-10-04 (Julian) was a Thursday, 1582-10-15 the next day, a Friday
        assert weekday_of(961, 7, 22) == Weekday.PANJSHANBEH
        assert weekday_of(961, 7, 23) == Weekday.JOMEH
