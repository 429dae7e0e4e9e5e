# glasscockpit

Building blocks for a glass cockpit display: navigation databases, spatial
lookup of navaids and airports, Mercator coordinates, a reader for cached raster
map tiles, and the base objects a gauge renderer is built on.

## Installation

```
pip install glasscockpit
```

To run the tests:

```
pip install "glasscockpit[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `glasscockpit.constants` | unit constants (`DEG_TO_RAD`, `METERS_TO_FEET`, `EARTH_RADIUS`, ...), `lat_lon_to_mercator`, `NavDataError` |
| `glasscockpit.geographic` | `GeographicObject`, `Navaid`, `NavaidType`, `Waypoint`, `WaypointStyle`, `FlightCourse`, `GeographicObjectList`, `GeographicHash` |
| `glasscockpit.binary_nav` | `AirportRecord`, `NavaidRecord`, text-to-binary converters and binary readers |
| `glasscockpit.nav_lists` | `AirportList`, `NavaidList`, `WaypointList` |
| `glasscockpit.nav_database` | `NavDatabase` |
| `glasscockpit.raster_map` | `CacheFormat`, `RasterMapTile`, `RasterMapManager`, `tile_coords_for_lat_lon`, `decode_png`, `decode_jpeg` |
| `glasscockpit.render` | `RenderObject`, `RenderWindow` and the input types they use |

Problems with navigation data (unreadable files, malformed lines, truncated
binary files) raise `glasscockpit.constants.NavDataError`. Progress and
warnings go through the standard `logging` module.

## Navigation data

ASCII `apt.dat` and `nav.dat` files in the X-Plane layout are turned into
compact binary caches of fixed-size records:

```python
from glasscockpit.binary_nav import convert_airport_data, convert_navaid_data, iter_airport_records

n_airports = convert_airport_data("Navigation/apt.dat", "cache/apt_dat.bin")
n_navaids = convert_navaid_data("Navigation/nav.dat", "cache/nav_dat.bin")

for record in iter_airport_records("cache/apt_dat.bin"):
    print(record.ident, record.lat, record.lon, record.elev)
```

Both converters skip the two header lines and stop at a `99` line. Each converter
returns the number of records it wrote. Elevations are stored in meters.

- Airports take their position from the first runway. Both the 810 layout (row
  code `10`) and the 850 layout (row code `100`) are read. Airports whose first
  runway is a seaplane runway (`101`) or a helipad (`102`) are skipped.
- Navaids: NDBs (`2`), VORs (`3`) and DMEs (`12`, `13`) are kept. VOR and DME
  frequencies are divided by 100. ILS components and markers (`4`–`9`) are
  skipped.

`AirportRecord` and `NavaidRecord` have `pack()` and `unpack(data)` for single
records. Identifiers are stored in at most 8 bytes.

The lists in `glasscockpit.nav_lists` are `GeographicObjectList`s:

- `AirportList` and `NavaidList` read the binary caches.
- `WaypointList` reads text lines of `lat lon elev_ft style id`. It skips blank
  lines and `#` comments.

`initialize(filename)` loads the file and fills in Mercator northing and easting
for every entry.

A `GeographicHash` files objects into 2×2 degree bins. `list_at(lat, lon)`
returns the bin that holds a position:

```python
from glasscockpit.geographic import GeographicHash
from glasscockpit.nav_lists import NavaidList

navaids = NavaidList()
navaids.initialize("cache/nav_dat.bin")
bins = GeographicHash()
bins.insert_list(navaids)
nearby = bins.list_at(40.49, -80.23)
```

`NavDatabase` puts it all together:

```python
from glasscockpit.nav_database import NavDatabase

db = NavDatabase.instance()
db.init_database("data/", "cache/")
print(len(db.airport_list), len(db.navaid_list), len(db.waypoint_list))
```

`init_database` works with two directories:

- It reads `nav.dat`, `apt.dat` and `waypoint.dat` from `data/Navigation/`.
- It builds `nav_dat.bin` and `apt_dat.bin` in `cache/Navigation/` if they are
  missing, creating that directory as needed.

The database exposes these attributes: `navaid_list`, `navaid_hash`,
`airport_list`, `airport_hash`, `waypoint_list` and an empty `flight_course`.

## Coordinates

```python
from glasscockpit.constants import lat_lon_to_mercator

northing, easting = lat_lon_to_mercator(40.49, -80.23)
```

## Raster maps

`glasscockpit.raster_map` reads MGMaps tile caches, with 32 tiles per `.mgm`
file. Files are looked up as `<path>/<map_type>_<zoom>/<x>_<y>.mgm`.

```python
from glasscockpit.raster_map import CacheFormat, RasterMapManager, tile_coords_for_lat_lon

manager = RasterMapManager.instance()
manager.set_cache_path(CacheFormat.MGMAPS, "maps", "GoogleTer")
x, y, fx, fy = tile_coords_for_lat_lon(-36.85, 174.76, 10)
tile = manager.get_tile(10, x, y)
```

`get_tile` returns a `RasterMapTile` with `image` (packed RGB bytes), `width`
and `height`. It returns `None` and logs a warning in these cases:

- the cache is not set,
- the tile is missing,
- the cache file is malformed.

Cached tiles are decoded as PNG. `decode_png(data)` and `decode_jpeg(data)`
decode image bytes with Pillow. They return `None` when the bytes are not a
valid image of that format.

## Rendering

`glasscockpit.render` provides two classes.

`RenderObject` is the abstract base for anything placed in a window. Subclass it
and supply `click_test` and `render`.

- `handle_mouse_button` converts a pixel click inside the object into physical
  (millimetre) coordinates. It then calls `on_mouse_down` or `on_mouse_up`.
- The default input handlers record the event in `last_input`.

`RenderWindow` keeps the gauges and the orthographic projection parameters,
which are recomputed on `resize`.

- `render()` does nothing and returns `False` until `ok_to_render` is set. Then
  it renders every gauge in order.
- `mouse()` flips y so that it is measured from the bottom of the window, then
  passes the event to every gauge.
- `keyboard()` handles three cases:
  - `1` pauses for two seconds.
  - Ctrl-`q` is swallowed.
  - Any other key is printed and passed to every gauge's `on_keyboard`.

## What this package does not do

- It draws nothing. `RenderWindow.setup_display` records display settings, but
  no graphics library is used.
- It ships no concrete gauges.
- It has no command-line program and opens no window.
- It does not load map shape data.