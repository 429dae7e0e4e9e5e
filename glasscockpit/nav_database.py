"""The container holding all navigation data."""

import logging
from pathlib import Path

from glasscockpit.binary_nav import convert_airport_data, convert_navaid_data
from glasscockpit.geographic import FlightCourse, GeographicHash
from glasscockpit.nav_lists import AirportList, NavaidList, WaypointList

log = logging.getLogger(__name__)


class NavDatabase:
    """Navaids, airports, waypoints and the flight course."""

    _instance = None

    def __init__(self):
        self.navaid_list = None
        self.navaid_hash = None
        self.airport_list = None
        self.airport_hash = None
        self.waypoint_list = None
        self.flight_course = FlightCourse()

    @classmethod
    def instance(cls):
        """Return the shared database, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def init_database(self, data_path, cache_path):
        """Load the navigation data, building binary caches where missing.

        Text databases are read from ``data_path/Navigation``; binary caches
        live in ``cache_path/Navigation``.
        """
        nav_dir = Path(data_path) / "Navigation"
        cache_dir = Path(cache_path) / "Navigation"
        navaid_cache = cache_dir / "nav_dat.bin"
        airport_cache = cache_dir / "apt_dat.bin"

        if not navaid_cache.exists():
            log.info("Generating binary cache of navaid data...")
            cache_dir.mkdir(parents=True, exist_ok=True)
            convert_navaid_data(nav_dir / "nav.dat", navaid_cache)
        if not airport_cache.exists():
            log.info("Generating binary cache of airport data...")
            cache_dir.mkdir(parents=True, exist_ok=True)
            convert_airport_data(nav_dir / "apt.dat", airport_cache)

        log.info("Loading navigation database...")

        navaids = NavaidList()
        navaids.initialize(navaid_cache)
        navaid_hash = GeographicHash()
        navaid_hash.insert_list(navaids)

        airports = AirportList()
        airports.initialize(airport_cache)
        airport_hash = GeographicHash()
        airport_hash.insert_list(airports)

        waypoints = WaypointList()
        waypoints.initialize(nav_dir / "waypoint.dat")

        self.navaid_list, self.navaid_hash = navaids, navaid_hash
        self.airport_list, self.airport_hash = airports, airport_hash
        self.waypoint_list = waypoints

        log.info(
            "Navigation database contains: %d NavAids, %d Airports, %d Waypoints, %d Map shapes",
            len(navaids),
            len(airports),
            len(waypoints),
            0,
        )