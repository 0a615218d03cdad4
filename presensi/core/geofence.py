# presensi/core/geofence.py
"""
Geofence check: great-circle distance from the school and comparison
with the permitted radius.
"""
import math
from dataclasses import dataclass
from typing import Optional

from presensi.core.verification import VerificationStatus

EARTH_RADIUS_M = 6_371_000


@dataclass(frozen=True)
class GeofenceResult:
    status: VerificationStatus
    distance_m: Optional[int]
    radius_m: Optional[float]
    message: str

    @property
    def verified(self) -> bool:
        return self.status == VerificationStatus.VERIFIED


def haversine_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Distance in meters between two coordinates given in degrees."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    return 2 * EARTH_RADIUS_M * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def check_geofence(latitude: float, longitude: float, school_settings) -> GeofenceResult:
    if (
        school_settings is None
        or school_settings.latitude is None
        or school_settings.longitude is None
        or school_settings.radius_meters is None
    ):
        return GeofenceResult(
            status=VerificationStatus.FAILED,
            distance_m=None,
            radius_m=None,
            message="Lokasi sekolah belum dikonfigurasi",
        )

    distance = haversine_distance(
        latitude, longitude, school_settings.latitude, school_settings.longitude
    )
    radius = school_settings.radius_meters

    if distance <= radius:
        return GeofenceResult(
            status=VerificationStatus.VERIFIED,
            distance_m=round(distance),
            radius_m=radius,
            message=f"Lokasi terverifikasi ({round(distance)} m dari sekolah)",
        )
    return GeofenceResult(
        status=VerificationStatus.FAILED,
        distance_m=round(distance),
        radius_m=radius,
        message=f"Anda berada {round(distance)} m dari sekolah (maksimal {round(radius)} m)",
    )


def failed_geolocation(error_message: str) -> GeofenceResult:
    """A geolocation read that failed on the device is terminal, no retry."""
    return GeofenceResult(
        status=VerificationStatus.FAILED,
        distance_m=None,
        radius_m=None,
        message=error_message,
    )
