import pytest

from glasscockpit.binary_nav import AirportRecord
from glasscockpit.constants import NavDataError
from glasscockpit.nav_database import NavDatabase

APT_DAT = (
    "I\n"
    "850 Version\n"
    "1 1000 1 0 KAAA Test Field\n"
    "100 30.0 1 0 0.25 0 0 0 09 40.5 -80.25 x\n"
    "\n"
    "1 500 0 0 KBBB Other Field\n"
    "10 -33.5 151.25 x\n"
    "99\n"
)

NAV_DAT = (
    "I\n"
    "810 Version\n"
    "3 40.0 -80.0 1200 11580 130 0.0 ABC ABC VOR\n"
    "2 -10.5 20.25 0 350 50 0.0 NDB1 name\n"
    "99\n"
)

WAYPOINT_DAT = "# comment\n40.0 -80.0 3000 0 WPT1\n"


def _make_data(root):
    nav_dir = root / "data" / "Navigation"
    nav_dir.mkdir(parents=True)
    (nav_dir / "apt.dat").write_text(APT_DAT)
    (nav_dir / "nav.dat").write_text(NAV_DAT)
    (nav_dir / "waypoint.dat").write_text(WAYPOINT_DAT)
    return root / "data", root / "cache"


def test_instance_is_shared(tmp_path):
    data, cache = _make_data(tmp_path)
    NavDatabase.instance().init_database(data, cache)
    again = NavDatabase.instance()
    assert [a.identification for a in again.airport_list] == ["KAAA", "KBBB"]
    assert [w.identification for w in again.waypoint_list] == ["WPT1"]


def test_new_database_has_empty_course():
    db = NavDatabase()
    assert len(db.flight_course) == 0
    assert db.airport_hash is None


def test_init_database_loads_everything(tmp_path):
    data, cache = _make_data(tmp_path)
    db = NavDatabase()
    db.init_database(data, cache)
    assert len(db.navaid_list) == 2
    assert [a.identification for a in db.airport_list] == ["KAAA", "KBBB"]
    assert [w.identification for w in db.waypoint_list] == ["WPT1"]
    assert (cache / "Navigation" / "nav_dat.bin").exists()
    assert (cache / "Navigation" / "apt_dat.bin").exists()


def test_init_database_hashes_objects(tmp_path):
    data, cache = _make_data(tmp_path)
    db = NavDatabase()
    db.init_database(data, cache)
    near = db.airport_hash.list_at(40.5, -80.25)
    assert [a.identification for a in near] == ["KAAA"]
    navaids = db.navaid_hash.list_at(-10.5, 20.25)
    assert [n.identification for n in navaids] == ["NDB1"]


def test_init_database_computes_mercator(tmp_path):
    data, cache = _make_data(tmp_path)
    db = NavDatabase()
    db.init_database(data, cache)
    southern = db.airport_list[1]
    assert southern.mercator_northing < 0
    assert db.airport_list[0].mercator_northing > 0


def test_existing_cache_is_reused(tmp_path):
    data, cache = _make_data(tmp_path)
    cache_dir = cache / "Navigation"
    cache_dir.mkdir(parents=True)
    (cache_dir / "apt_dat.bin").write_bytes(AirportRecord(10.0, 10.0, 0.0, "ZZZ").pack())
    db = NavDatabase()
    db.init_database(data, cache)
    assert [a.identification for a in db.airport_list] == ["ZZZ"]
    assert len(db.navaid_list) == 2


def test_missing_text_data_raises(tmp_path):
    db = NavDatabase()
    with pytest.raises(NavDataError):
        db.init_database(tmp_path / "nothing", tmp_path / "cache")


def test_missing_waypoints_raises(tmp_path):
    data, cache = _make_data(tmp_path)
    (data / "Navigation" / "waypoint.dat").unlink()
    with pytest.raises(NavDataError):
        NavDatabase().init_database(data, cache)