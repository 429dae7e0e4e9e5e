"""Conversion of text navigation databases into a compact binary format."""

import logging
import struct
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar

from glasscockpit.constants import METERS_TO_FEET, NavDataError
from glasscockpit.geographic import NavaidType

log = logging.getLogger(__name__)

MAX_ID_LENGTH = 8
_ENCODING = "latin-1"
_RUNWAY_CODES = {10, 100, 101, 102}
_IGNORED_NAVAIDS = {4, 5, 6, 7, 8, 9}


def _encode_id(ident):
    raw = ident.encode(_ENCODING, errors="replace")
    return min(len(raw), 255), raw[:MAX_ID_LENGTH]


def _decode_id(length, raw):
    return raw[: min(length, MAX_ID_LENGTH)].decode(_ENCODING)


@dataclass(frozen=True)
class NavaidRecord:
    """One navaid in the binary file."""

    lat: float
    lon: float
    elev: float
    frequency: float
    navaid_type: int
    ident: str

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<4fBB8s2x")
    SIZE: ClassVar[int] = _STRUCT.size

    def pack(self):
        length, raw = _encode_id(self.ident)
        return self._STRUCT.pack(
            self.lat, self.lon, self.elev, self.frequency, int(self.navaid_type), length, raw
        )

    @classmethod
    def _from_fields(cls, lat, lon, elev, frequency, navaid_type, length, raw):
        return cls(lat, lon, elev, frequency, navaid_type, _decode_id(length, raw))

    @classmethod
    def unpack(cls, data):
        if len(data) != cls.SIZE:
            raise NavDataError(f"navaid record must be {cls.SIZE} bytes, got {len(data)}")
        return cls._from_fields(*cls._STRUCT.unpack(data))


@dataclass(frozen=True)
class AirportRecord:
    """One airport in the binary file."""

    lat: float
    lon: float
    elev: float
    ident: str

    _STRUCT: ClassVar[struct.Struct] = struct.Struct("<3fB8s3x")
    SIZE: ClassVar[int] = _STRUCT.size

    def pack(self):
        length, raw = _encode_id(self.ident)
        return self._STRUCT.pack(self.lat, self.lon, self.elev, length, raw)

    @classmethod
    def _from_fields(cls, lat, lon, elev, length, raw):
        return cls(lat, lon, elev, _decode_id(length, raw))

    @classmethod
    def unpack(cls, data):
        if len(data) != cls.SIZE:
            raise NavDataError(f"airport record must be {cls.SIZE} bytes, got {len(data)}")
        return cls._from_fields(*cls._STRUCT.unpack(data))


def _read_lines(path, what):
    try:
        text = Path(path).read_text(encoding=_ENCODING)
    except OSError as exc:
        raise NavDataError(f"can't read {what} database") from exc
    return iter(text.splitlines())


def _skip_header(lines, label):
    next(lines, None)
    version = next(lines, "")
    log.info("%s Data Version: %s", label, version)


def _first_int(line):
    try:
        return int(line.split()[0])
    except (IndexError, ValueError):
        return None


def _write_records(path, records):
    try:
        with open(path, "wb") as out:
            for record in records:
                out.write(record.pack())
    except OSError as exc:
        raise NavDataError("can't open output file") from exc
    return sum(record.SIZE for record in records)


def _next_runway(lines):
    for line in lines:
        code = _first_int(line)
        if code in _RUNWAY_CODES:
            return code, line.split()
    return None


def _parse_airports(lines):
    _skip_header(lines, "Airport")
    for line in lines:
        code = _first_int(line)
        if code == 99:
            return
        if code != 1:
            continue
        tokens = line.split()
        try:
            elev = float(tokens[1])
            ident = tokens[4]
        except (IndexError, ValueError) as exc:
            raise NavDataError("unexpected file format") from exc

        runway = _next_runway(lines)
        if runway is None:
            return
        runway_code, fields = runway
        try:
            if runway_code == 10:
                lat, lon = float(fields[1]), float(fields[2])
            elif runway_code == 100:
                lat, lon = float(fields[9]), float(fields[10])
            elif runway_code == 101:
                log.info("Ignoring v850 seaplane water runway")
                continue
            else:
                log.info("Ignoring v850 helipad")
                continue
        except (IndexError, ValueError) as exc:
            raise NavDataError("unexpected runway format") from exc
        yield AirportRecord(lat, lon, elev / METERS_TO_FEET, ident)


def _parse_navaids(lines):
    _skip_header(lines, "Nav")
    navaid_type = NavaidType.NDB
    for line in lines:
        code = _first_int(line)
        if code is None:
            continue
        if code == 99:
            return
        if code in _IGNORED_NAVAIDS:
            continue
        tokens = line.split()
        try:
            lat, lon, elev, freq = (float(t) for t in tokens[1:5])
            ident = tokens[7]
        except (IndexError, ValueError):
            log.warning("Skipping malformed navaid line: %s", line)
            continue
        if code == 2:
            navaid_type = NavaidType.NDB
        elif code == 3:
            freq /= 100.0
            navaid_type = NavaidType.VOR
        elif code in (12, 13):
            freq /= 100.0
            navaid_type = NavaidType.DME
        else:
            log.warning("Unknown navaid type %d", code)
        yield NavaidRecord(lat, lon, elev / METERS_TO_FEET, freq, navaid_type, ident)


def convert_airport_data(in_path, out_path):
    """Convert a text airport database to binary; return the number of airports."""
    records = list(_parse_airports(_read_lines(in_path, "airport")))
    size = _write_records(out_path, records)
    log.info("%d airports read, %d bytes written.", len(records), size)
    return len(records)


def convert_navaid_data(in_path, out_path):
    """Convert a text navaid database to binary; return the number of navaids."""
    records = list(_parse_navaids(_read_lines(in_path, "navaid")))
    size = _write_records(out_path, records)
    log.info("%d navaids read, %d kBytes written.", len(records), size // 1024)
    return len(records)


def _iter_records(path, cls, what):
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise NavDataError(f"can't read {what} database") from exc
    if len(data) % cls.SIZE:
        raise NavDataError(f"truncated {what} database")
    for fields in cls._STRUCT.iter_unpack(data):
        yield cls._from_fields(*fields)


def iter_airport_records(path):
    """Yield every airport record in a binary airport file."""
    return _iter_records(path, AirportRecord, "airport")


def iter_navaid_records(path):
    """Yield every navaid record in a binary navaid file."""
    return _iter_records(path, NavaidRecord, "navaid")