"""Lists of airports, navaids and waypoints loaded from data files."""

import logging

from glasscockpit.binary_nav import iter_airport_records, iter_navaid_records
from glasscockpit.constants import METERS_TO_FEET, NavDataError
from glasscockpit.geographic import (
    GeographicObject,
    GeographicObjectList,
    Navaid,
    NavaidType,
    Waypoint,
    WaypointStyle,
)

log = logging.getLogger(__name__)

_ENCODING = "latin-1"


def _enum_or_int(enum_cls, value):
    try:
        return enum_cls(value)
    except ValueError:
        return value


class AirportList(GeographicObjectList):
    """Airports read from a binary airport database."""

    def load_data(self, filename):
        """Append every airport of the binary file ``filename``."""
        self.extend(
            GeographicObject(
                identification=record.ident,
                lat=record.lat,
                lon=record.lon,
                altitude_meters=record.elev,
            )
            for record in iter_airport_records(filename)
        )
        return True


class NavaidList(GeographicObjectList):
    """Navaids read from a binary navaid database."""

    def load_data(self, filename):
        """Append every navaid of the binary file ``filename``."""
        self.extend(
            Navaid(
                identification=record.ident,
                lat=record.lat,
                lon=record.lon,
                altitude_meters=record.elev,
                frequency=record.frequency,
                navaid_type=_enum_or_int(NavaidType, record.navaid_type),
            )
            for record in iter_navaid_records(filename)
        )
        return True


class WaypointList(GeographicObjectList):
    """Waypoints read from a text file of ``lat lon elev_ft style id`` lines."""

    def load_data(self, filename):
        """Append every waypoint of ``filename``; return False if it cannot be opened."""
        try:
            with open(filename, encoding=_ENCODING) as handle:
                lines = handle.read().splitlines()
        except OSError:
            log.error("unable to load the waypoint database file %s", filename)
            return False

        for number, line in enumerate(lines, 1):
            if not line.strip() or line.startswith("#"):
                continue
            tokens = line.split()
            try:
                lat, lon, elev = (float(token) for token in tokens[:3])
                style = int(tokens[3])
            except (IndexError, ValueError) as exc:
                raise NavDataError(f"{filename}:{number}: malformed waypoint line") from exc
            ident = tokens[4] if len(tokens) > 4 else ""
            self.append(
                Waypoint(
                    identification=ident,
                    lat=lat,
                    lon=lon,
                    altitude_meters=elev / METERS_TO_FEET,
                    style=_enum_or_int(WaypointStyle, style),
                )
            )
        return True