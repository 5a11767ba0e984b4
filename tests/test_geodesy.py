from __future__ import annotations

import math

import pytest

from rail_direction.core.geodesy import EARTH_RADIUS_M, haversine_m


def test_same_point_is_zero() -> None:
    assert haversine_m(100.5, 13.75, 100.5, 13.75) == 0.0


def test_ten_degrees_along_equator() -> None:
    expected = EARTH_RADIUS_M * math.radians(10)
    assert haversine_m(0.0, 0.0, 10.0, 0.0) == pytest.approx(expected, rel=1e-9)


def test_symmetric() -> None:
    a = haversine_m(100.5, 13.75, 100.6, 14.0)
    b = haversine_m(100.6, 14.0, 100.5, 13.75)
    assert a == pytest.approx(b)


def test_near_antipodal_points_do_not_fail() -> None:
    distance = haversine_m(102.11588374154036, 57.687464146586734, 282.1158838187763, -57.68746409848605)
    assert distance == pytest.approx(math.pi * EARTH_RADIUS_M, rel=1e-6)
