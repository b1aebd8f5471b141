import math

import pytest

from mandelbrot_raster.escape import BOUNDED, ITERATION_LIMIT, Bounded, Escaped, escape_time, intensity


@pytest.mark.parametrize("c", [2 + 0j, -2 + 0j, 2j, complex(1.5, 1.5), complex(-3.0, 4.0), complex(1e200, 0.0)])
@pytest.mark.parametrize("limit", [1, 2, 255])
def test_points_outside_radius_two_escape_immediately(c, limit):
    assert escape_time(c, limit) == Escaped(0)


@pytest.mark.parametrize("limit", [0, 1, 10, 255, 1000])
def test_origin_is_bounded(limit):
    assert escape_time(0j, limit) is BOUNDED


@pytest.mark.parametrize("c", [-1 + 0j, 0.25 + 0j, 1j, complex(-0.1, 0.1)])
def test_known_members_stay_bounded(c):
    assert escape_time(c, ITERATION_LIMIT) == BOUNDED


def test_zero_limit_is_bounded():
    assert escape_time(10 + 10j, 0) is BOUNDED


def test_reports_last_iteration_inside_disk():
    # z1 = 1, z2 = 2 (norm 4): the orbit leaves the disk after iteration 1
    assert escape_time(1 + 0j, 10) == Escaped(1)
    # z1 = 0.5, z2 = 0.75, z3 = 1.0625, z4 = 1.62890625, z5 = 3.1533...
    assert escape_time(0.5 + 0j, 10) == Escaped(4)


def test_escape_after_last_iteration_is_reported():
    assert escape_time(0.5 + 0j, 5) == Escaped(4)
    assert escape_time(0.5 + 0j, 4) is BOUNDED


def test_count_is_within_limit():
    for re in range(-20, 11):
        for im in range(-12, 13):
            result = escape_time(complex(re / 10, im / 10), 50)
            if isinstance(result, Escaped):
                assert 0 <= result.count < 50


def test_escaped_zero_is_distinct_from_bounded():
    assert Escaped(0) != BOUNDED
    assert not isinstance(Escaped(0), Bounded)


@pytest.mark.parametrize("c", [complex(math.nan, 0.0), complex(0.0, math.nan), complex(math.inf, 0.0)])
def test_non_finite_points_do_not_raise(c):
    escape_time(c, 20)


def test_intensity():
    assert intensity(BOUNDED) == 0
    assert intensity(Escaped(0)) == 255
    assert intensity(Escaped(254)) == 1
