"""Test latitude-scaled arc-second <-> metre conversion."""

import math

import numpy as np
import pytest

from unitwise import Distance
from unitwise.engine import arc_seconds_to_metres, metres_to_arc_seconds


class TestArcSecondsToMetres:
    def test_one_arc_minute_at_equator_is_a_nautical_mile(self):
        assert math.isclose(float(arc_seconds_to_metres(60, 0)), 1852.0, rel_tol=1e-15)

    def test_default_latitude_is_equator(self):
        assert arc_seconds_to_metres(1) == arc_seconds_to_metres(1, 0.0)

    def test_sixty_degrees_halves_the_length(self):
        assert math.isclose(float(arc_seconds_to_metres(60, 60)), 926.0, rel_tol=1e-12)

    def test_pole_is_zero(self):
        assert abs(float(arc_seconds_to_metres(60, 90))) < 1e-9

    def test_beyond_ninety_degrees_stays_positive(self):
        assert math.isclose(
            float(arc_seconds_to_metres(60, 120)), float(arc_seconds_to_metres(60, 60)), rel_tol=1e-12
        )
        assert math.isclose(
            float(arc_seconds_to_metres(60, -60)), float(arc_seconds_to_metres(60, 60)), rel_tol=1e-15
        )

    def test_array_input(self):
        result = arc_seconds_to_metres(np.array([0.0, 30.0, 60.0]), 0)
        assert np.allclose(np.asarray(result, dtype=float), [0.0, 926.0, 1852.0], rtol=1e-15)


class TestMetresToArcSeconds:
    def test_nautical_mile_at_equator(self):
        assert math.isclose(float(metres_to_arc_seconds(1852, 0)), 60.0, rel_tol=1e-15)

    def test_scales_with_cosine(self):
        assert math.isclose(float(metres_to_arc_seconds(1852, 60)), 30.0, rel_tol=1e-12)

    def test_decimal_string_latitude(self):
        assert math.isclose(float(metres_to_arc_seconds("1852", "0.0")), 60.0, rel_tol=1e-15)


def test_inverse_only_at_equator():
    metres = arc_seconds_to_metres(10, 0)
    assert math.isclose(float(metres_to_arc_seconds(metres, 0)), 10.0, rel_tol=1e-15)
    metres = arc_seconds_to_metres(10, 60)
    assert math.isclose(float(metres_to_arc_seconds(metres, 60)), 2.5, rel_tol=1e-12)


@pytest.mark.parametrize("name", ["arc_seconds_to_metres", "metres_to_arc_seconds"])
def test_helpers_are_reachable_from_distance(name):
    assert getattr(Distance, name)(60, 0) == globals()[name](60, 0)
