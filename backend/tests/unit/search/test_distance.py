import math

import pytest

from talent_portal.services.search.distance import (
    bounding_box,
    calculate_distance,
    within_radius,
)

AKRON = (41.0814, -81.5190)
CLEVELAND = (41.4993, -81.6944)


def test_distance_is_zero_for_identical_points():
    assert calculate_distance(*AKRON, *AKRON) == 0


def test_distance_is_symmetric():
    assert calculate_distance(*AKRON, *CLEVELAND) == pytest.approx(
        calculate_distance(*CLEVELAND, *AKRON)
    )


def test_akron_to_cleveland_is_about_thirty_miles():
    assert calculate_distance(*AKRON, *CLEVELAND) == pytest.approx(30.3, abs=1.0)


def test_one_degree_of_latitude_is_about_69_miles():
    assert calculate_distance(40.0, -80.0, 41.0, -80.0) == pytest.approx(69.1, abs=0.2)


def test_antipodal_points_do_not_raise():
    distance = calculate_distance(0.0, 0.0, 0.0, 180.0)
    assert distance == pytest.approx(math.pi * 3959.0, rel=1e-6)


def test_bounding_box_contains_circle():
    box = bounding_box(41.0, -81.5, 25)
    assert box.min_lat < 41.0 < box.max_lat
    assert box.max_lat - box.min_lat == pytest.approx(50 / 69.0)
    # Longitude span widens with latitude
    assert (box.max_lng - box.min_lng) > (box.max_lat - box.min_lat)


def test_bounding_box_near_pole_spans_all_longitudes():
    box = bounding_box(90.0, 0.0, 10)
    assert box.min_lng == -180.0
    assert box.max_lng == 180.0


def test_within_radius_matches_haversine():
    assert within_radius(*AKRON, *CLEVELAND, 35)
    assert not within_radius(*AKRON, *CLEVELAND, 25)


def test_within_radius_includes_boundary():
    d = calculate_distance(*AKRON, *CLEVELAND)
    assert within_radius(*AKRON, *CLEVELAND, d)
