from types import SimpleNamespace

import pytest

from presensi.core.geofence import check_geofence, failed_geolocation, haversine_distance
from presensi.core.verification import VerificationStatus


def _school(lat=0.0, lng=0.0, radius=1000):
    return SimpleNamespace(latitude=lat, longitude=lng, radius_meters=radius)


def test_distance_to_self_is_zero():
    assert haversine_distance(-6.2, 106.816666, -6.2, 106.816666) == 0


@pytest.mark.parametrize(
    "a, b",
    [
        ((-6.2, 106.8166), (-6.1754, 106.8272)),
        ((0, 0), (0, 0.008983)),
        ((51.5007, -0.1246), (40.6892, -74.0445)),
    ],
)
def test_distance_is_symmetric(a, b):
    assert haversine_distance(*a, *b) == pytest.approx(haversine_distance(*b, *a))


def test_one_kilometre_east_of_origin():
    assert haversine_distance(0, 0, 0, 0.008983) == pytest.approx(1000, abs=2)


def test_boundary_point_sits_on_the_radius():
    inside = check_geofence(0, 0.008983, _school())
    assert inside.verified
    assert inside.distance_m == pytest.approx(1000, abs=1)

    outside = check_geofence(0, 0.009, _school())
    assert not outside.verified
    assert outside.distance_m == pytest.approx(1000, abs=1)


def test_origin_is_always_verified():
    result = check_geofence(0, 0, _school(radius=0))
    assert result.status == VerificationStatus.VERIFIED
    assert result.verified
    assert result.distance_m == 0


def test_outside_radius_fails_with_distance():
    result = check_geofence(0, 0.02, _school())
    assert result.status == VerificationStatus.FAILED
    assert result.distance_m == pytest.approx(2224, abs=1)
    assert "2224" in result.message


@pytest.mark.parametrize(
    "school",
    [None, _school(lat=None), _school(lng=None), _school(radius=None)],
)
def test_missing_reference_fails_closed(school):
    result = check_geofence(0, 0, school)
    assert result.status == VerificationStatus.FAILED
    assert result.distance_m is None


def test_failed_geolocation_keeps_platform_message():
    result = failed_geolocation("User denied Geolocation")
    assert not result.verified
    assert result.message == "User denied Geolocation"
