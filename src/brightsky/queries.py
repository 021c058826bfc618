"""Validated, immutable query models, one per Bright Sky endpoint.

Instances are produced by the builders in ``brightsky.builders``; the
serializer in ``brightsky.serializer`` turns them into URLs.
"""
from __future__ import annotations
import datetime as dt
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from .constants import ALERTS_PATH, CURRENT_WEATHER_PATH, RADAR_PATH, WEATHER_PATH
from .params import (
    BoundingBox,
    DwdStationIds,
    LatLon,
    RadarCompressionFormat,
    SourceIds,
    UnitType,
    WarnCellId,
    WmoStationIds,
)

StationLocation = Union[LatLon, DwdStationIds, WmoStationIds, SourceIds]
AlertsLocation = Union[LatLon, WarnCellId]


@dataclass(frozen=True)
class CurrentWeatherQuery:
    """Query for ``/current_weather`` (SYNOP observations of the last 90 minutes)."""

    PATH: ClassVar[str] = CURRENT_WEATHER_PATH

    location: StationLocation
    max_dist: Optional[int] = None
    tz: Optional[str] = None
    units: Optional[UnitType] = None

    @property
    def effective_units(self) -> UnitType:
        return self.units or UnitType.DWD


@dataclass(frozen=True)
class WeatherQuery:
    """Query for ``/weather`` (hourly history and MOSMIX forecasts)."""

    PATH: ClassVar[str] = WEATHER_PATH

    location: StationLocation
    date: dt.date
    last_date: Optional[dt.date] = None
    max_dist: Optional[int] = None
    tz: Optional[str] = None
    units: Optional[UnitType] = None

    @property
    def effective_units(self) -> UnitType:
        return self.units or UnitType.DWD


@dataclass(frozen=True)
class RadarQuery:
    """Query for ``/radar`` (rainfall radar frames)."""

    PATH: ClassVar[str] = RADAR_PATH

    location: Optional[LatLon] = None
    datetime: Optional[dt.datetime] = None
    bbox: Optional[BoundingBox] = None
    distance: Optional[int] = None
    tz: Optional[str] = None
    format: Optional[RadarCompressionFormat] = None


@dataclass(frozen=True)
class AlertsQuery:
    """Query for ``/alerts``; without a location all active alerts are returned."""

    PATH: ClassVar[str] = ALERTS_PATH

    location: Optional[AlertsLocation] = None
    tz: Optional[str] = None

    @property
    def is_global(self) -> bool:
        return self.location is None


Query = Union[CurrentWeatherQuery, WeatherQuery, RadarQuery, AlertsQuery]


__all__ = [
    "CurrentWeatherQuery",
    "WeatherQuery",
    "RadarQuery",
    "AlertsQuery",
    "Query",
    "StationLocation",
    "AlertsLocation",
]
