# tests/domain/test_geomath.py
import math

import numpy as np
import pytest

from mapview.domain.geomath import EARTH_RADIUS_MI, bearing_deg, distance_mi, distances_mi

BERKELEY = (-122.2590, 37.8700)
OAKLAND = (-122.2711, 37.8044)


def test_one_degree_along_equator():
    assert distance_mi(0.0, 0.0, 1.0, 0.0) == pytest.approx(EARTH_RADIUS_MI * math.radians(1.0))


def test_distance_symmetric_and_zero_on_self():
    assert distance_mi(*BERKELEY, *OAKLAND) == pytest.approx(distance_mi(*OAKLAND, *BERKELEY))
    assert distance_mi(*BERKELEY, *BERKELEY) == 0.0
    # roughly 4.6 miles between the two downtowns
    assert 4.0 < distance_mi(*BERKELEY, *OAKLAND) < 5.0


@pytest.mark.parametrize(
    "dst, expected",
    [((0.0, 1.0), 0.0), ((1.0, 0.0), 90.0), ((-1.0, 0.0), -90.0), ((0.0, -1.0), 180.0)],
)
def test_bearing_cardinal_directions(dst, expected):
    assert bearing_deg(0.0, 0.0, *dst) == pytest.approx(expected)


def test_bearing_reverse_differs_by_half_turn():
    fwd = bearing_deg(*BERKELEY, *OAKLAND)
    back = bearing_deg(*OAKLAND, *BERKELEY)
    assert -180.0 < fwd <= 180.0 and -180.0 < back <= 180.0
    diff = (fwd - back) % 360.0
    assert diff == pytest.approx(180.0, abs=0.1)


def test_vectorized_matches_scalar():
    lons = np.array([BERKELEY[0], OAKLAND[0], 0.0])
    lats = np.array([BERKELEY[1], OAKLAND[1], 0.0])
    d = distances_mi(lons, lats, *BERKELEY)
    assert d[0] == 0.0
    assert d[1] == pytest.approx(distance_mi(*OAKLAND, *BERKELEY))
    assert d[2] == pytest.approx(distance_mi(0.0, 0.0, *BERKELEY))
