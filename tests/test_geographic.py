import pytest

from glasscockpit.constants import NavDataError, lat_lon_to_mercator
from glasscockpit.geographic import (
    FlightCourse,
    GeographicHash,
    GeographicObject,
    GeographicObjectList,
    Navaid,
    NavaidType,
    Waypoint,
    WaypointStyle,
)


class _FixedList(GeographicObjectList):
    def __init__(self, objects):
        super().__init__()
        self._objects = objects
        self.loaded_from = None

    def load_data(self, filename):
        self.loaded_from = filename
        self.extend(self._objects)
        return True


def test_base_list_load_data_fails():
    assert GeographicObjectList().load_data("anything") is False


def test_base_list_initialize_raises():
    with pytest.raises(NavDataError):
        GeographicObjectList().initialize("anything")


def test_initialize_loads_and_computes_mercator():
    obj = GeographicObject(identification="KPIT", lat=40.0, lon=-80.0)
    objects = _FixedList([obj])
    assert objects.initialize("file.bin") is True
    assert objects.loaded_from == "file.bin"
    northing, easting = lat_lon_to_mercator(40.0, -80.0)
    assert obj.mercator == (pytest.approx(northing), pytest.approx(easting))


def test_southern_hemisphere_is_mirrored():
    north = GeographicObject(lat=35.0, lon=12.0)
    south = GeographicObject(lat=-35.0, lon=12.0)
    objects = _FixedList([north, south])
    objects.initialize("x")
    assert south.mercator_northing == pytest.approx(-north.mercator_northing)
    assert south.mercator_easting == pytest.approx(north.mercator_easting)
    assert north.mercator_northing > 0


def test_navaid_and_waypoint_defaults():
    navaid = Navaid(identification="SEA")
    assert navaid.navaid_type == NavaidType.NDB
    assert navaid.frequency == 0.0
    assert Waypoint().style == WaypointStyle.FUNDAMENTAL


def test_flight_course_holds_pairs():
    course = FlightCourse([(1.0, 2.0)])
    course.append((3.0, 4.0))
    assert list(course) == [(1.0, 2.0), (3.0, 4.0)]


def test_hash_same_bin():
    table = GeographicHash()
    obj = GeographicObject(identification="A", lat=10.0, lon=20.0)
    table.insert(obj)
    assert table.list_at(11.5, 21.5) == [obj]


def test_hash_neighbouring_bin_is_empty():
    table = GeographicHash()
    table.insert(GeographicObject(lat=10.0, lon=20.0))
    assert table.list_at(12.0, 20.0) == []
    assert table.list_at(10.0, 22.0) == []


def test_hash_insert_list_preserves_order():
    table = GeographicHash()
    objs = [GeographicObject(identification=name, lat=-5.0, lon=-5.0) for name in "XYZ"]
    table.insert_list(objs)
    assert [o.identification for o in table.list_at(-5.0, -5.0)] == ["X", "Y", "Z"]


def test_hash_list_is_live():
    table = GeographicHash()
    bucket = table.list_at(0.0, 0.0)
    table.insert(GeographicObject(lat=0.5, lon=0.5))
    assert len(bucket) == 1


@pytest.mark.parametrize("lat,lon", [(90.0, 0.0), (0.0, 180.0), (-91.0, 0.0), (0.0, -181.0)])
def test_hash_out_of_range(lat, lon):
    with pytest.raises(ValueError):
        GeographicHash().list_at(lat, lon)