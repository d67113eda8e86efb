"""Conversions between geographic and Earth-centred Cartesian coordinates."""

from __future__ import annotations

import enum
import logging
import math
from typing import Protocol

from nodemobility.geometry import Vector, _ieee_div, calculate_distance

_log = logging.getLogger(__name__)

#: Earth's radius in meters when modelled as a perfect sphere.
EARTH_RADIUS = 6371e3
#: Earth's semi-major axis in meters, shared by GRS80 and WGS84.
EARTH_SEMIMAJOR_AXIS = 6378137.0
#: Earth's first eccentricity as defined by GRS80.
EARTH_GRS80_ECCENTRICITY = 0.0818191910428158
#: Earth's first eccentricity as defined by WGS84.
EARTH_WGS84_ECCENTRICITY = 0.0818191908426215

# Convergence threshold: 1 m is roughly 1/30 arc second, or 9.26e-6 degrees.
_LATITUDE_TOLERANCE = math.radians(0.00000926)


class EarthSpheroidType(enum.Enum):
    """Model of the Earth's shape: a perfect sphere, GRS80 or WGS84."""

    SPHERE = "sphere"
    GRS80 = "grs80"
    WGS84 = "wgs84"

    @property
    def semimajor_axis(self) -> float:
        """Semi-major axis in meters."""
        if self is EarthSpheroidType.SPHERE:
            return EARTH_RADIUS
        return EARTH_SEMIMAJOR_AXIS

    @property
    def eccentricity(self) -> float:
        """First eccentricity."""
        if self is EarthSpheroidType.SPHERE:
            return 0.0
        if self is EarthSpheroidType.GRS80:
            return EARTH_GRS80_ECCENTRICITY
        return EARTH_WGS84_ECCENTRICITY


class _UniformSource(Protocol):
    def uniform(self, low: float, high: float) -> float: ...


def geographic_to_cartesian(
    latitude: float,
    longitude: float,
    altitude: float,
    sph_type: EarthSpheroidType,
) -> Vector:
    """Convert latitude/longitude (degrees) and altitude (m) to ECEF x, y, z (m)."""
    lat = math.radians(latitude)
    lon = math.radians(longitude)
    a = sph_type.semimajor_axis
    e2 = sph_type.eccentricity ** 2
    rn = a / math.sqrt(1 - e2 * math.sin(lat) ** 2)
    x = (rn + altitude) * math.cos(lat) * math.cos(lon)
    y = (rn + altitude) * math.cos(lat) * math.sin(lon)
    z = ((1 - e2) * rn + altitude) * math.sin(lat)
    return Vector(x, y, z)


def cartesian_to_geographic(pos: Vector, sph_type: EarthSpheroidType) -> Vector:
    """Convert ECEF coordinates to (latitude deg, longitude deg, altitude m).

    The result is iterated until latitude changes by less than about 1 m.
    Latitude lies in [-90, 90] and longitude in [-180, 180).
    """
    a = sph_type.semimajor_axis
    e2 = sph_type.eccentricity ** 2

    longitude = math.atan2(pos.y, pos.x)
    p = calculate_distance(pos, Vector(0.0, 0.0, pos.z))
    latitude = math.atan2(pos.z, p * (1 - e2))
    altitude = 0.0

    while True:
        previous = latitude
        n = a / math.sqrt(1 - e2 * math.sin(previous) * math.sin(previous))
        v = _ieee_div(p, math.cos(previous))
        altitude = v - n
        latitude = math.atan2(pos.z, p * (1 - _ieee_div(e2 * n, v)))
        if not abs(latitude - previous) > _LATITUDE_TOLERANCE:
            break

    latitude = math.degrees(latitude)
    longitude = math.degrees(longitude)

    if latitude > 90.0:
        latitude = 180 - latitude
        longitude += 180 if longitude < 0 else -180
    elif latitude < -90.0:
        latitude = -180 - latitude
        longitude += 180 if longitude < 0 else -180
    if longitude == 180.0:
        longitude = -180.0

    if not -180.0 <= longitude:
        raise ValueError("conversion error: longitude too negative")
    if not longitude < 180.0:
        raise ValueError("conversion error: longitude too positive")
    if not -90.0 <= latitude:
        raise ValueError("conversion error: latitude too negative")
    if not latitude <= 90.0:
        raise ValueError("conversion error: latitude too positive")

    return Vector(latitude, longitude, altitude)


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


def rand_cartesian_points_around_geographic_point(
    origin_latitude: float,
    origin_longitude: float,
    max_altitude: float,
    num_points: int,
    max_dist_from_origin: float,
    uni_rand: _UniformSource,
) -> list[Vector]:
    """Uniformly scatter ECEF points around a surface point on a spherical Earth.

    Every point lies within max_dist_from_origin meters of arc length of the
    origin (measured on the surface) and at an altitude in [0, max_altitude].
    """
    if origin_latitude >= 90:
        _log.warning("origin latitude must be less than 90; setting to 89.999")
        origin_latitude = 89.999
    elif origin_latitude <= -90:
        _log.warning("origin latitude must be greater than -90; setting to -89.999")
        origin_latitude = -89.999

    if max_altitude < 0:
        _log.warning("maximum altitude must be at least 0; setting to 0")
        max_altitude = 0.0

    origin_lat_rad = math.radians(origin_latitude)
    origin_lon_rad = math.radians(origin_longitude)
    origin_colatitude = math.pi / 2 - origin_lat_rad

    max_alpha = min(max_dist_from_origin / EARTH_RADIUS, math.pi)

    points: list[Vector] = []
    for _ in range(num_points):
        # distance from the pole towards the centre, then angle around it
        d = uni_rand.uniform(0, EARTH_RADIUS - EARTH_RADIUS * math.cos(max_alpha))
        phi = uni_rand.uniform(0, math.pi * 2)
        alpha = math.acos(_clamp_unit((EARTH_RADIUS - d) / EARTH_RADIUS))

        # rotate from pole-referred coordinates to origin-referred ones
        theta = math.pi / 2 - alpha
        point_lat = math.asin(
            _clamp_unit(
                math.sin(theta) * math.cos(origin_colatitude)
                + math.cos(theta) * math.sin(origin_colatitude) * math.sin(phi)
            )
        )
        intermediate_lon = math.asin(
            _clamp_unit(
                _ieee_div(
                    math.sin(point_lat) * math.cos(origin_colatitude) - math.sin(theta),
                    math.cos(point_lat) * math.sin(origin_colatitude),
                )
            )
        )
        intermediate_lon += math.pi / 2
        # arcsin cannot resolve quadrants II and III; mirror those points
        if math.pi / 2 < phi <= 3 * math.pi / 2:
            intermediate_lon = -intermediate_lon

        point_lon = intermediate_lon + origin_lon_rad
        altitude = uni_rand.uniform(0, max_altitude)

        points.append(
            geographic_to_cartesian(
                math.degrees(point_lat),
                math.degrees(point_lon),
                altitude,
                EarthSpheroidType.SPHERE,
            )
        )
    return points