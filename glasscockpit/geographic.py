"""Objects located on the earth's surface, lists of them and a spatial hash."""

import math
from collections import defaultdict
from dataclasses import dataclass
from enum import IntEnum

from glasscockpit.constants import NavDataError, lat_lon_to_mercator

LAT_BINS = 90
LON_BINS = 180


@dataclass
class GeographicObject:
    """Anything with a position on the surface of the earth."""

    identification: str = ""
    full_name: str = ""
    lat: float = 0.0
    lon: float = 0.0
    altitude_meters: float = 0.0
    mercator_northing: float = 0.0
    mercator_easting: float = 0.0

    @property
    def mercator(self):
        """Mercator map coordinates as ``(northing, easting)`` in meters."""
        return self.mercator_northing, self.mercator_easting


class NavaidType(IntEnum):
    NDB = 0
    VOR = 1
    DME = 2


@dataclass
class Navaid(GeographicObject):
    """A radio navigation aid."""

    frequency: float = 0.0
    navaid_type: NavaidType = NavaidType.NDB


class WaypointStyle(IntEnum):
    FUNDAMENTAL = 0
    INTERP = 1


@dataclass
class Waypoint(GeographicObject):
    """A named waypoint."""

    style: int = WaypointStyle.FUNDAMENTAL


class FlightCourse(list):
    """The planned course as a list of ``(lat, lon)`` pairs."""


class GeographicObjectList(list):
    """A list of geographic objects loaded from a data file."""

    def initialize(self, filename):
        """Load the data file and compute the additional map coordinates."""
        if not self.load_data(filename):
            raise NavDataError("unable to read data")
        self.compute_additional_coordinates()
        return True

    def load_data(self, filename):
        """Read objects from ``filename``; subclasses override this."""
        return False

    def compute_additional_coordinates(self):
        """Fill in the Mercator coordinates of every object."""
        for obj in self:
            lat = obj.lat
            southern = lat < 0
            northing, easting = lat_lon_to_mercator(abs(lat), obj.lon)
            obj.mercator_northing = -northing if southern else northing
            obj.mercator_easting = easting


class GeographicHash:
    """Stores geographic objects in 2x2 degree bins."""

    def __init__(self):
        self._bins = defaultdict(list)

    @staticmethod
    def _bin(lat, lon):
        lat_bin = math.floor(45 + lat / 2)
        lon_bin = math.floor(90 + lon / 2)
        if not (0 <= lat_bin < LAT_BINS and 0 <= lon_bin < LON_BINS):
            raise ValueError(f"position out of range: lat={lat}, lon={lon}")
        return lat_bin, lon_bin

    def list_at(self, lat, lon):
        """Return the (mutable) list of objects in the bin holding lat/lon."""
        return self._bins[self._bin(lat, lon)]

    def insert(self, obj):
        """Add one geographic object to its bin."""
        self.list_at(obj.lat, obj.lon).append(obj)

    def insert_list(self, objects):
        """Add every object of an iterable."""
        for obj in objects:
            self.insert(obj)