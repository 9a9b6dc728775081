"""
(C) Copyright 2025 The pyjalali Authors.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.
"""

import random

import jdcal
import pytest

from pyjalali import calendar
from pyjalali.exception import InvalidDateError


# (year, month, day, jdn)
PERSIAN_JDN = [
    (1403, 12, 30, 2460755),
    (1400, 1, 1, 2459295),
    (1399, 12, 29, 2459293),
    (1395, 1, 1, 2457468),
    (1422, 12, 29, 2467694),
    (1388, 7, 12, 2455109),
    (1377, 5, 3, 2451020),
    (1376, 12, 29, 2450893),
    (1435, 2, 9, 2472117),
    (1390, 10, 20, 2455937),
]

# (persian, gregorian)
PERSIAN_GREGORIAN = [
    ((1383, 4, 15), (2004, 7, 5)),
    ((1394, 10, 11), (2016, 1, 1)),
    ((1394, 12, 9), (2016, 2, 28)),
    ((1394, 12, 11), (2016, 3, 1)),
    ((1394, 12, 29), (2016, 3, 19)),
    ((1395, 1, 1), (2016, 3, 20)),
    ((1395, 1, 2), (2016, 3, 21)),
    ((1395, 1, 3), (2016, 3, 22)),
    ((1395, 10, 11), (2016, 12, 31)),
    ((1403, 1, 1), (2024, 3, 20)),
    ((1403, 12, 30), (2025, 3, 20)),
    ((1348, 10, 11), (1970, 1, 1)),
]


def jdcal_jdn(year, month, day):
    """JDN of a civil date according to jdcal."""
    if (year, month, day) > (1582, 10, 14):
        jd = jdcal.gcal2jd(year, month, day)
    else:
        jd = jdcal.jcal2jd(year, month, day)
    return int(jd[0] + jd[1] + 0.5)


class TestJDNKernel(object):

    def test_reform_boundary(self):
        # type: () -> None
        assert calendar.jdn_to_gregorian(2299160) == (1582, 10, 4)
        assert calendar.jdn_to_gregorian(2299161) == (1582, 10, 15)
        assert calendar.gregorian_to_jdn(1582, 10, 4) == 2299160
        assert calendar.gregorian_to_jdn(1582, 10, 15) == 2299161
        assert calendar.GREGORIAN_REFORM_JDN == 2299161

    def test_reform_in_persian(self):
        # type: () -> None
        assert calendar.jdn_to_persian(2299160) == (961, 7, 22)
        assert calendar.jdn_to_persian(2299161) == (961, 7, 23)
        assert calendar.gregorian_to_persian(1582, 10, 4) == (961, 7, 22)
        assert calendar.gregorian_to_persian(1582, 10, 15) == (961, 7, 23)

    def test_unix_epoch(self):
        # type: () -> None
        assert calendar.gregorian_to_jdn(1970, 1, 1) == calendar.UNIX_EPOCH_JDN
        assert calendar.jdn_to_persian(calendar.UNIX_EPOCH_JDN) == (1348, 10, 11)

    @pytest.mark.parametrize("year, month, day, jdn", PERSIAN_JDN)
    def test_persian_jdn(self, year, month, day, jdn):
        # type: (int, int, int, int) -> None
        assert calendar.persian_to_jdn(year, month, day) == jdn
        assert calendar.jdn_to_persian(jdn) == (year, month, day)

    @pytest.mark.parametrize("persian, gregorian", PERSIAN_GREGORIAN)
    def test_persian_gregorian(self, persian, gregorian):
        assert calendar.persian_to_gregorian(*persian) == gregorian
        assert calendar.gregorian_to_persian(*gregorian) == persian

    def test_gregorian_round_trip(self):
        # type: () -> None
        for year in range(-3000, 3001):
            for month in range(1, 13):
                for day in (1, 15, 28):
                    if (1582, 10, 4) < (year, month, day) < (1582, 10, 15):
                        continue
                    jdn = calendar.gregorian_to_jdn(year, month, day)
                    assert calendar.jdn_to_gregorian(jdn) == (year, month, day)

    def test_persian_round_trip(self):
        # type: () -> None
        for year in range(-3000, 3001):
            for month in range(1, 13):
                last = calendar.days_in_month(year, month)
                for day in (1, 15, last):
                    jdn = calendar.persian_to_jdn(year, month, day)
                    assert calendar.jdn_to_persian(jdn) == (year, month, day)

    def test_persian_has_no_gaps(self):
        # type: () -> None
        for year in range(-200, 200):
            start = calendar.persian_to_jdn(year, 1, 1)
            end = calendar.persian_to_jdn(year + 1, 1, 1)
            assert end - start == calendar.days_in_year(year)
            assert calendar.persian_to_jdn(year, 12, calendar.days_in_month(year, 12)) == end - 1

    def test_gregorian_against_jdcal(self):
        # type: () -> None
        first = calendar.gregorian_to_jdn(1, 1, 1)
        last = calendar.gregorian_to_jdn(3000, 12, 31)
        for jdn in range(first, last, 97):
            ymd = calendar.jdn_to_gregorian(jdn)
            assert jdcal_jdn(*ymd) == jdn

    def test_random_days_against_jdcal(self):
        # type: () -> None
        rnd = random.Random(1394)
        for _ in range(2000):
            year = rnd.randint(1, 3000)
            month = rnd.randint(1, 12)
            day = rnd.randint(1, 28)
            if (1582, 10, 4) < (year, month, day) < (1582, 10, 15):
                continue
            assert calendar.gregorian_to_jdn(year, month, day) == jdcal_jdn(year, month, day)


class TestLeapYears(object):

    def test_known_years(self):
        # type: () -> None
        assert calendar.is_leap(1395)
        assert not calendar.is_leap(1394)
        assert calendar.is_leap(1399)
        assert calendar.is_leap(1403)
        assert not calendar.is_leap(1400)

    def test_esfand_length(self):
        # type: () -> None
        assert calendar.days_in_month(1395, 12) == 30
        assert calendar.days_in_month(1394, 12) == 29
        assert calendar.days_in_year(1395) == 366
        assert calendar.days_in_year(1394) == 365

    def test_eight_per_cycle(self):
        # type: () -> None
        for start in range(-100, 100):
            assert sum(calendar.is_leap(y) for y in range(start, start + 33)) == 8

    def test_negative_years(self):
        # type: () -> None
        # floor modulo keeps the cycle going through year 0
        for year in range(-66, 66):
            assert calendar.is_leap(year) == calendar.is_leap(year + 33)


class TestCalendarHelpers(object):

    def test_month_lengths(self):
        # type: () -> None
        assert [calendar.days_in_month(1394, m) for m in range(1, 13)] == \
            [31] * 6 + [30] * 5 + [29]

    def test_month_clamped(self):
        # type: () -> None
        assert calendar.days_in_month(1394, 0) == 31
        assert calendar.days_in_month(1394, 13) == 29

    def test_year_day(self):
        # type: () -> None
        assert calendar.year_day(1, 1) == 1
        assert calendar.year_day(7, 2) == 188
        assert calendar.year_day(12, 30) == 366

    def test_weekday(self):
        # type: () -> None
        # 1970-01-01 was a Thursday
        assert calendar.jdn_weekday(calendar.UNIX_EPOCH_JDN) == 3
        assert calendar.jdn_weekday(calendar.persian_to_jdn(1394, 7, 2)) == 3

    def test_days_since_epoch(self):
        # type: () -> None
        assert calendar.persian2day(1348, 10, 11) == 0
        assert calendar.day2persian(0) == (1348, 10, 11)
        assert calendar.day2persian(16879) == (1394, 12, 29)
        assert calendar.day2persian(16880) == (1395, 1, 1)
        assert calendar.day2persian(-1) == (1348, 10, 10)

    def test_validate_date(self):
        # type: () -> None
        calendar.validate_date(1395, 12, 30)
        calendar.validate_date(1394, 1, 31)
        with pytest.raises(InvalidDateError):
            calendar.validate_date(1394, 12, 30)
        with pytest.raises(InvalidDateError):
            calendar.validate_date(1394, 13, 1)
        with pytest.raises(InvalidDateError):
            calendar.validate_date(1394, 7, 31)
        with pytest.raises(InvalidDateError):
            calendar.validate_date(1394, 1, 0)
