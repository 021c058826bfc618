"""Fluent builders for the Bright Sky endpoint queries.

Setters only record values (last write wins, including across location
variants); all validation happens in ``build()``, which checks fields in a
fixed order and raises on the first failure:

1. presence (location, date)
2. location coordinates (latitude, then longitude)
3. bounding box
4. distance
5. date ordering

Example:
    >>> query = (
    ...     WeatherQueryBuilder()
    ...     .with_dwd_station_ids(["01766", "01767"])
    ...     .with_date(dt.date(2025, 1, 15))
    ...     .with_units(UnitType.SI)
    ...     .build()
    ... )
"""
from __future__ import annotations
import datetime as dt
from typing import Iterable, Optional, Tuple, TypeVar, Union

from .errors import MissingDate, MissingLocation
from .params import (
    BoundingBox,
    DwdStationIds,
    LatLon,
    LocationSpec,
    RadarCompressionFormat,
    SourceIds,
    UnitType,
    WarnCellId,
    WmoStationIds,
)
from .queries import AlertsQuery, CurrentWeatherQuery, RadarQuery, WeatherQuery
from .validators import (
    validate_bbox,
    validate_date_order,
    validate_distance,
    validate_latitude,
    validate_longitude,
)

B = TypeVar("B", bound="_QueryBuilder")
CoordinateArg = Union[float, Tuple[float, float]]


def _as_id_tuple(ids: Union[str, Iterable[str]]) -> Tuple[str, ...]:
    if isinstance(ids, str):
        return (ids,)
    return tuple(str(i) for i in ids)


def _as_date(value: dt.date) -> dt.date:
    # datetime is a date subclass; keep only the calendar day
    if isinstance(value, dt.datetime):
        return value.date()
    return value


class _QueryBuilder:
    """Shared state and setters for all endpoint builders."""

    def __init__(self) -> None:
        self._location: Optional[LocationSpec] = None
        self._tz: Optional[str] = None

    def with_lat_lon(self: B, lat: CoordinateArg, lon: Optional[float] = None) -> B:
        """Select a location by coordinates.

        Accepts ``with_lat_lon(52.52, 13.4)`` or ``with_lat_lon((52.52, 13.4))``.
        Replaces any previously selected location. Anything else is kept as
        given and rejected by ``build()``.
        """
        if lon is None and isinstance(lat, (tuple, list)) and len(lat) == 2:
            lat, lon = lat
        self._location = LatLon(lat=lat, lon=lon)  # type: ignore[arg-type]
        return self

    def with_tz(self: B, tz: str) -> B:
        """IANA timezone for timestamps in the response, passed through verbatim."""
        self._tz = tz
        return self

    def _check_location(self) -> None:
        location = self._location
        if isinstance(location, LatLon):
            validate_latitude(location.lat)
            validate_longitude(location.lon)


class _StationQueryBuilder(_QueryBuilder):
    """Setters shared by the current weather and weather builders."""

    ENDPOINT = ""

    def __init__(self) -> None:
        super().__init__()
        self._max_dist: Optional[int] = None
        self._units: Optional[UnitType] = None

    def with_dwd_station_ids(self: B, ids: Union[str, Iterable[str]]) -> B:
        """Select a location by DWD station ids (e.g. ``"01766"``)."""
        self._location = DwdStationIds(_as_id_tuple(ids))
        return self

    def with_wmo_station_ids(self: B, ids: Union[str, Iterable[str]]) -> B:
        """Select a location by WMO station ids (e.g. ``"10315"``)."""
        self._location = WmoStationIds(_as_id_tuple(ids))
        return self

    def with_source_ids(self: B, ids: Union[int, Iterable[int]]) -> B:
        """Select a location by Bright Sky source ids (one id or an iterable)."""
        if isinstance(ids, (int, str)):
            ids = (ids,)
        self._location = SourceIds(tuple(int(i) for i in ids))
        return self

    def with_max_dist(self: B, max_dist: int) -> B:
        """Maximum station distance in meters for coordinate lookups."""
        self._max_dist = max_dist
        return self

    def with_units(self: B, units: UnitType) -> B:
        self._units = UnitType(units)
        return self

    def _require_location(self) -> None:
        if self._location is None:
            raise MissingLocation(self.ENDPOINT)

    def _checked_max_dist(self) -> Optional[int]:
        if self._max_dist is None:
            return None
        return validate_distance(self._max_dist)


class CurrentWeatherQueryBuilder(_StationQueryBuilder):
    """Builder for ``/current_weather`` queries."""

    ENDPOINT = "current_weather"

    def build(self) -> CurrentWeatherQuery:
        """
        Validate the recorded parameters and create the query.

        Raises:
            MissingLocation: If no location was selected.
            InvalidLatitude: If the latitude is out of range.
            InvalidLongitude: If the longitude is out of range.
            InvalidMaxDistance: If max_dist is out of range.
        """
        self._require_location()
        self._check_location()
        max_dist = self._checked_max_dist()
        return CurrentWeatherQuery(
            location=self._location,  # type: ignore[arg-type]
            max_dist=max_dist,
            tz=self._tz,
            units=self._units,
        )


class WeatherQueryBuilder(_StationQueryBuilder):
    """Builder for ``/weather`` queries (a single day or a date range)."""

    ENDPOINT = "weather"

    def __init__(self) -> None:
        super().__init__()
        self._date: Optional[dt.date] = None
        self._last_date: Optional[dt.date] = None

    def with_date(self, date: dt.date) -> "WeatherQueryBuilder":
        """First day of the requested range."""
        self._date = _as_date(date)
        return self

    def with_last_date(self, last_date: dt.date) -> "WeatherQueryBuilder":
        """Last day of the requested range; defaults to ``date`` on the API side."""
        self._last_date = _as_date(last_date)
        return self

    def build(self) -> WeatherQuery:
        """
        Validate the recorded parameters and create the query.

        Raises:
            MissingLocation: If no location was selected.
            MissingDate: If no date was set.
            InvalidLatitude: If the latitude is out of range.
            InvalidLongitude: If the longitude is out of range.
            InvalidMaxDistance: If max_dist is out of range.
            InvalidDateRange: If last_date precedes date.
        """
        self._require_location()
        if self._date is None:
            raise MissingDate(self.ENDPOINT)
        self._check_location()
        max_dist = self._checked_max_dist()
        validate_date_order(self._date, self._last_date)
        return WeatherQuery(
            location=self._location,  # type: ignore[arg-type]
            date=self._date,
            last_date=self._last_date,
            max_dist=max_dist,
            tz=self._tz,
            units=self._units,
        )


class RadarQueryBuilder(_QueryBuilder):
    """Builder for ``/radar`` queries.

    Without a location or bounding box the full 1200x1100 km grid is returned,
    so narrowing the area is strongly recommended.
    """

    def __init__(self) -> None:
        super().__init__()
        self._datetime: Optional[dt.datetime] = None
        self._bbox: Optional[BoundingBox] = None
        self._distance: Optional[int] = None
        self._format: Optional[RadarCompressionFormat] = None

    def with_datetime(self, value: dt.datetime) -> "RadarQueryBuilder":
        """Point in time of the requested radar frame."""
        self._datetime = value
        return self

    def with_bbox(
        self, south: float, west: float, north: float, east: float
    ) -> "RadarQueryBuilder":
        self._bbox = BoundingBox(south=south, west=west, north=north, east=east)
        return self

    def with_distance(self, distance: int) -> "RadarQueryBuilder":
        """Radius in meters around the coordinates."""
        self._distance = distance
        return self

    def with_format(self, fmt: RadarCompressionFormat) -> "RadarQueryBuilder":
        self._format = RadarCompressionFormat(fmt)
        return self

    with_compression_format = with_format

    def build(self) -> RadarQuery:
        """
        Validate the recorded parameters and create the query.

        Raises:
            InvalidLatitude: If a latitude is out of range.
            InvalidLongitude: If a longitude is out of range.
            InvalidBoundingBox: If the bounding box is inverted.
            InvalidMaxDistance: If distance is out of range.
        """
        self._check_location()
        if self._bbox is not None:
            validate_bbox(*self._bbox.as_tuple())
        distance = None
        if self._distance is not None:
            distance = validate_distance(self._distance)
        return RadarQuery(
            location=self._location,  # type: ignore[arg-type]
            datetime=self._datetime,
            bbox=self._bbox,
            distance=distance,
            tz=self._tz,
            format=self._format,
        )


class AlertsQueryBuilder(_QueryBuilder):
    """Builder for ``/alerts`` queries; with no location, alerts are global."""

    def with_warn_cell_id(self, warn_cell_id: int) -> "AlertsQueryBuilder":
        """Select a location by DWD warn cell id."""
        self._location = WarnCellId(int(warn_cell_id))
        return self

    def build(self) -> AlertsQuery:
        """
        Validate the recorded parameters and create the query.

        Raises:
            InvalidLatitude: If the latitude is out of range.
            InvalidLongitude: If the longitude is out of range.
        """
        self._check_location()
        return AlertsQuery(location=self._location, tz=self._tz)  # type: ignore[arg-type]


__all__ = [
    "CurrentWeatherQueryBuilder",
    "WeatherQueryBuilder",
    "RadarQueryBuilder",
    "AlertsQueryBuilder",
]
