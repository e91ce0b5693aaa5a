# tests/domain/test_geo_distance.py
import math

import numpy as np
import pytest

from campus_nav.app.protocols import DistanceMetric
from campus_nav.domain.entities.geography import Point
from campus_nav.domain.mechanics.mechanics_metrics import (
    EARTH_RADIUS_M,
    HaversineMetric,
    PlanarMetric,
    haversine_m,
)

MAIN_GATE = (12.840440, 80.152999)
LIBRARY = (12.842928, 80.157714)
AB5 = (12.844667, 80.158219)


def test_one_degree_of_latitude_on_the_equator():
    assert haversine_m(0.0, 0.0, 1.0, 0.0) == pytest.approx(2 * math.pi * EARTH_RADIUS_M / 360, rel=1e-9)


def test_identical_points_are_zero_apart():
    assert haversine_m(*LIBRARY, *LIBRARY) == 0.0


def test_symmetric():
    assert haversine_m(*MAIN_GATE, *LIBRARY) == pytest.approx(haversine_m(*LIBRARY, *MAIN_GATE))


def test_triangle_inequality():
    ab = haversine_m(*MAIN_GATE, *LIBRARY)
    bc = haversine_m(*LIBRARY, *AB5)
    ac = haversine_m(*MAIN_GATE, *AB5)
    assert ac <= ab + bc + 1e-9


def test_antipodes_do_not_blow_up():
    d = haversine_m(0.0, 0.0, 0.0, 180.0)
    assert d == pytest.approx(math.pi * EARTH_RADIUS_M, rel=1e-9)


def test_campus_scale_distance_is_plausible():
    # gate to library is roughly 580 m on the ground
    assert 500 < haversine_m(*MAIN_GATE, *LIBRARY) < 650


def test_metric_point_order_is_lng_lat():
    m = HaversineMetric()
    a = Point(MAIN_GATE[1], MAIN_GATE[0])
    b = Point(LIBRARY[1], LIBRARY[0])
    assert m.distance(a, b) == pytest.approx(haversine_m(*MAIN_GATE, *LIBRARY))


def test_vectorized_matches_scalar():
    m = HaversineMetric()
    p = Point(MAIN_GATE[1], MAIN_GATE[0])
    xs = np.array([LIBRARY[1], AB5[1], MAIN_GATE[1]])
    ys = np.array([LIBRARY[0], AB5[0], MAIN_GATE[0]])
    got = m.many(p, xs, ys)
    want = [m.distance(p, Point(x, y)) for x, y in zip(xs, ys)]
    assert got == pytest.approx(want)
    assert got[2] == 0.0


def test_planar_metric():
    m = PlanarMetric()
    assert m.distance(Point(0, 0), Point(3, 4)) == 5.0
    assert list(m.many(Point(0, 0), np.array([3.0, 0.0]), np.array([4.0, 2.0]))) == [5.0, 2.0]


def test_metrics_satisfy_protocol():
    assert isinstance(HaversineMetric(), DistanceMetric)
    assert isinstance(PlanarMetric(), DistanceMetric)
