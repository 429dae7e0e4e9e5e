"""Physical constants, unit conversions and the navigation data error type."""

import math

DEG_TO_RAD = math.pi / 180.0
RAD_TO_DEG = 180.0 / math.pi
METER_PER_NM = 1852.0
MS_TO_KNOTS = 1.94384449
METERS_TO_FEET = 3.2808399
EARTH_RADIUS = 6371000.0


class NavDataError(Exception):
    """Raised when navigation data cannot be read, written or parsed."""


def lat_lon_to_mercator(lat, lon):
    """Return ``(northing, easting)`` in meters on a spherical Mercator map.

    ``lat`` and ``lon`` are in degrees.
    """
    easting = EARTH_RADIUS * (lon * DEG_TO_RAD)
    northing = EARTH_RADIUS * math.log(math.tan(math.pi / 4.0 + (lat * DEG_TO_RAD) / 2.0))
    return northing, easting