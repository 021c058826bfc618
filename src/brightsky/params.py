"""Parameter variants shared by the endpoint queries.

Location selectors are mutually exclusive: a query carries exactly one of
them (or none, where the endpoint allows it).
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class UnitType(str, Enum):
    """Unit system of returned values; the API defaults to DWD units."""

    SI = "si"
    DWD = "dwd"


class RadarCompressionFormat(str, Enum):
    """Encoding of radar precipitation grids."""

    PLAIN = "plain"
    COMPRESSED = "compressed"
    BYTES = "bytes"


@dataclass(frozen=True)
class LatLon:
    """Coordinate location in decimal degrees."""
    lat: float
    lon: float


@dataclass(frozen=True)
class DwdStationIds:
    """DWD station identifiers, in caller order."""
    ids: Tuple[str, ...]


@dataclass(frozen=True)
class WmoStationIds:
    """WMO station identifiers, in caller order."""
    ids: Tuple[str, ...]


@dataclass(frozen=True)
class SourceIds:
    """Bright Sky source identifiers, in caller order."""
    ids: Tuple[int, ...]


@dataclass(frozen=True)
class WarnCellId:
    """DWD warn cell (municipality) identifier, alerts only."""
    id: int


LocationSpec = Union[LatLon, DwdStationIds, WmoStationIds, SourceIds, WarnCellId]


@dataclass(frozen=True)
class BoundingBox:
    """Geographic bounding box in decimal degrees.

    Attributes:
        south: Southern edge latitude.
        west: Western edge longitude.
        north: Northern edge latitude (must be > south).
        east: Eastern edge longitude (must be > west).
    """
    south: float
    west: float
    north: float
    east: float

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.south, self.west, self.north, self.east)


__all__ = [
    "UnitType",
    "RadarCompressionFormat",
    "LatLon",
    "DwdStationIds",
    "WmoStationIds",
    "SourceIds",
    "WarnCellId",
    "LocationSpec",
    "BoundingBox",
]
