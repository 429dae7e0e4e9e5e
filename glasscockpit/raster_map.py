"""Raster map tiles read from MGMaps tile caches."""

import io
import logging
import math
import struct
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

from PIL import Image

from glasscockpit.constants import DEG_TO_RAD, NavDataError

log = logging.getLogger(__name__)

TILE_SIZE_PIXELS = 256
MGM_CACHE_TILES_PER_FILE = 32
READ_BUFFER_SIZE = 64 * 1024
_CHUNK = struct.Struct(">BBI")
HEADER_SIZE = 2 + _CHUNK.size * MGM_CACHE_TILES_PER_FILE
_ONE_MINUS = 0.99999


class CacheFormat(IntEnum):
    MGMAPS = 0


@dataclass(frozen=True)
class RasterMapTile:
    """One decoded map tile as packed RGB bytes."""

    image: bytes
    width: int
    height: int


def tile_coords_for_lat_lon(lat, lon, zoom):
    """Return ``(x, y, fx, fy)``: the tile holding lat/lon and the pixel within it."""
    mapsize = TILE_SIZE_PIXELS << zoom
    origin = mapsize * 0.5

    fx = abs(-180.0 - lon) * mapsize / 360.0

    e = math.sin(lat * DEG_TO_RAD)
    e = max(-_ONE_MINUS, min(_ONE_MINUS, e))
    fy = origin + 0.5 * math.log((1 + e) / (1 - e)) * (-mapsize / (2 * math.pi))

    x = int(fx / TILE_SIZE_PIXELS)
    y = int(fy / TILE_SIZE_PIXELS)
    return x, y, math.fmod(fx, TILE_SIZE_PIXELS), math.fmod(fy, TILE_SIZE_PIXELS)


def _decode(data, expected_format):
    try:
        with Image.open(io.BytesIO(data)) as img:
            if img.format != expected_format:
                log.warning("expected %s image, found %s", expected_format, img.format)
                return None
            rgb = img.convert("RGB")
    except (OSError, ValueError, Image.DecompressionBombError) as exc:
        log.warning("%s codec error: %s", expected_format, exc)
        return None
    return RasterMapTile(rgb.tobytes(), rgb.width, rgb.height)


def decode_png(data):
    """Decode PNG bytes into an RGB tile, or None if they are not a valid PNG."""
    return _decode(data, "PNG")


def decode_jpeg(data):
    """Decode JPEG bytes into an RGB tile, or None if they are not a valid JPEG."""
    return _decode(data, "JPEG")


class RasterMapManager:
    """Reads map tiles out of a tile cache."""

    _instance = None

    def __init__(self):
        self._ready = False
        self._cache_prefix = ""
        self._map_type = ""

    @classmethod
    def instance(cls):
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def set_cache_path(self, format, path, map_type):
        """Use the cache at ``path``; ``map_type`` is e.g. ``"GoogleTer"``."""
        if format == CacheFormat.MGMAPS:
            self._cache_prefix = str(path)
            self._map_type = map_type
            self._ready = True
            log.info("Loading MGMaps cache of type %s from %s", map_type, path)

    def get_tile(self, zoom, x, y):
        """Return the tile at the given zoom and tile coordinates, or None."""
        if not self._ready:
            log.warning("could not find requested file in tile cache")
            return None

        abs_x, abs_y = x >> 3, y >> 2
        rel_x, rel_y = x - abs_x * 8, y - abs_y * 4
        path = Path(self._cache_prefix) / f"{self._map_type}_{zoom}" / f"{abs_x}_{abs_y}.mgm"

        try:
            handle = path.open("rb")
        except OSError:
            log.warning("provided cache does not contain requested tile, ignoring")
            return None

        with handle:
            header = handle.read(HEADER_SIZE)
            if len(header) != HEADER_SIZE:
                log.warning("could not read MGMaps tile cache file header")
                return None

            num_tiles = int.from_bytes(header[:2], "big")
            if not 1 <= num_tiles <= MGM_CACHE_TILES_PER_FILE:
                raise NavDataError("wrong number of tiles in cache file")

            next_offset = HEADER_SIZE
            chunks = header[2 : 2 + num_tiles * _CHUNK.size]
            for chunk_x, chunk_y, chunk_next in _CHUNK.iter_unpack(chunks):
                offset, next_offset = next_offset, chunk_next
                if (chunk_x, chunk_y) != (rel_x, rel_y):
                    continue
                length = next_offset - offset
                if handle.seek(0, io.SEEK_END) < next_offset:
                    log.warning("error parsing MGMaps header (bad size)")
                    return None
                if not 0 <= length < READ_BUFFER_SIZE:
                    log.warning("tile longer than read buffer; probable malformed cache")
                    return None
                handle.seek(offset)
                data = handle.read(length)
                if len(data) != length:
                    log.warning("end of file reached before tile was completely read")
                    return None
                return decode_png(data)

        log.warning("could not find requested file in tile cache")
        return None