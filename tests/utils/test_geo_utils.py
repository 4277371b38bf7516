import pytest

from models.models import Location, User
from utils.geo_utils import distance_label, format_distance, haversine

BENGALURU = (12.9716, 77.5946)
CHENNAI = (13.0827, 80.2707)


def test_haversine_same_point_is_zero():
    assert haversine(*BENGALURU, *BENGALURU) == pytest.approx(0.0, abs=1e-9)


def test_haversine_is_symmetric():
    there = haversine(*BENGALURU, *CHENNAI)
    back = haversine(*CHENNAI, *BENGALURU)
    assert there == pytest.approx(back)


def test_haversine_known_distance():
    # Bengaluru to Chennai is roughly 290 km as the crow flies
    assert haversine(*BENGALURU, *CHENNAI) == pytest.approx(290, abs=5)


def test_haversine_antipodal():
    assert haversine(0, 0, 0, 180) == pytest.approx(6371 * 3.141592653589793, rel=1e-6)


def test_format_distance_metres():
    assert format_distance(0.5) == "500m away"
    assert format_distance(0.0) == "0m away"
    assert format_distance(0.9994) == "999m away"


def test_format_distance_kilometres():
    assert format_distance(1.0) == "1.0km away"
    assert format_distance(2.345) == "2.3km away"
    assert format_distance(289.71) == "289.7km away"


def test_format_distance_kilometres_rounds_half_up():
    assert format_distance(1.25) == "1.3km away"
    assert format_distance(3.75) == "3.8km away"
    assert format_distance(1.5) == "1.5km away"


def test_distance_label_needs_both_locations():
    owner = User(id="u1", name="Ravi", email="r@x.io", location=Location(lat=12.9716, lng=77.5946))
    nowhere = User(id="u2", name="Meena", email="m@x.io")
    viewer = Location(lat=12.9716, lng=77.5946)
    assert distance_label(viewer, owner) == "0m away"
    assert distance_label(None, owner) is None
    assert distance_label(viewer, nowhere) is None
