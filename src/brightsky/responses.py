"""Pydantic models of the Bright Sky JSON responses.

Required vs optional fields mirror the provider's payloads, so
``Model.model_validate(payload)`` needs no defensive coercion by callers.
"""
from __future__ import annotations
import base64
import binascii
import datetime as dt
import zlib
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .params import RadarCompressionFormat


# ─────────────────────────────────────────────────────────────────────────────
# Enumerations
# ─────────────────────────────────────────────────────────────────────────────

class WeatherIcon(str, Enum):
    """Display icon derived from the weather record; unknown values map to UNKNOWN."""

    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    PARTLY_CLOUDY_DAY = "partly-cloudy-day"
    PARTLY_CLOUDY_NIGHT = "partly-cloudy-night"
    CLOUDY = "cloudy"
    FOG = "fog"
    WIND = "wind"
    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"
    HAIL = "hail"
    THUNDERSTORM = "thunderstorm"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> "WeatherIcon":
        return cls.UNKNOWN


class WeatherCondition(str, Enum):
    """Dominant weather condition; unknown values map to UNKNOWN."""

    DRY = "dry"
    FOG = "fog"
    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"
    HAIL = "hail"
    THUNDERSTORM = "thunderstorm"
    UNKNOWN = "unknown"

    @classmethod
    def _missing_(cls, value: object) -> "WeatherCondition":
        return cls.UNKNOWN


class ObservationType(str, Enum):
    HISTORICAL = "historical"
    CURRENT = "current"
    SYNOP = "synop"
    FORECAST = "forecast"


class AlertStatus(str, Enum):
    ACTUAL = "actual"
    TEST = "test"


class AlertCategory(str, Enum):
    MET = "met"
    HEALTH = "health"


class AlertResponseType(str, Enum):
    PREPARE = "prepare"
    ALL_CLEAR = "allclear"
    NONE = "none"
    MONITOR = "monitor"


class AlertUrgency(str, Enum):
    IMMEDIATE = "immediate"
    FUTURE = "future"


class AlertSeverity(str, Enum):
    MINOR = "minor"
    MODERATE = "moderate"
    SEVERE = "severe"
    EXTREME = "extreme"


class AlertCertainty(str, Enum):
    OBSERVED = "observed"
    LIKELY = "likely"


# ─────────────────────────────────────────────────────────────────────────────
# Weather
# ─────────────────────────────────────────────────────────────────────────────

class Source(BaseModel):
    """Station or forecast source a weather record was taken from.

    Attributes:
        id: Bright Sky source id.
        dwd_station_id: DWD station id, if the source is a DWD station.
        wmo_station_id: WMO station id, if known.
        station_name: Human-readable station name.
        observation_type: historical, current, synop or forecast.
        first_record: Timestamp of the first available record.
        last_record: Timestamp of the last available record.
        lat: Station latitude.
        lon: Station longitude.
        height: Station height in meters.
        distance: Distance in meters from the requested coordinates.
    """

    id: int
    dwd_station_id: Optional[str] = None
    wmo_station_id: Optional[str] = None
    station_name: Optional[str] = None
    observation_type: ObservationType
    first_record: dt.datetime
    last_record: dt.datetime
    lat: float
    lon: float
    height: float
    distance: Optional[float] = None


class WeatherRecord(BaseModel):
    """One hourly record of ``/weather``."""

    timestamp: dt.datetime
    source_id: int
    cloud_cover: Optional[float] = None
    condition: Optional[WeatherCondition] = None
    dew_point: Optional[float] = None
    icon: Optional[WeatherIcon] = None
    pressure_msl: Optional[float] = None
    relative_humidity: Optional[int] = None
    temperature: Optional[float] = None
    visibility: Optional[int] = None
    fallback_source_ids: Optional[Dict[str, int]] = None
    precipitation: Optional[float] = None
    solar: Optional[float] = None
    sunshine: Optional[float] = None
    wind_direction: Optional[int] = None
    wind_speed: Optional[float] = None
    wind_gust_direction: Optional[int] = None
    wind_gust_speed: Optional[float] = None
    precipitation_probability: Optional[int] = None
    precipitation_probability_6h: Optional[int] = None


class WeatherResponse(BaseModel):
    weather: List[WeatherRecord]
    sources: List[Source]


class CurrentWeatherSource(BaseModel):
    """SYNOP station behind a current weather record."""

    id: int
    dwd_station_id: str
    wmo_station_id: str
    station_name: str
    observation_type: ObservationType
    first_record: dt.datetime
    last_record: dt.datetime
    lat: float
    lon: float
    height: float
    distance: Optional[float] = None


class CurrentWeather(BaseModel):
    """Current conditions compiled from SYNOP observations of the last 90 minutes.

    Suffixes ``_10``, ``_30`` and ``_60`` give the aggregation window in minutes.
    """

    timestamp: dt.datetime
    source_id: int
    cloud_cover: Optional[float] = None
    condition: Optional[WeatherCondition] = None
    dew_point: Optional[float] = None
    icon: Optional[WeatherIcon] = None
    pressure_msl: Optional[float] = None
    relative_humidity: Optional[int] = None
    temperature: Optional[float] = None
    visibility: Optional[int] = None
    fallback_source_ids: Optional[Dict[str, int]] = None
    precipitation_10: Optional[float] = None
    precipitation_30: Optional[float] = None
    precipitation_60: Optional[float] = None
    solar_10: Optional[float] = None
    solar_30: Optional[float] = None
    solar_60: Optional[float] = None
    sunshine_30: Optional[float] = None
    sunshine_60: Optional[float] = None
    wind_direction_10: Optional[int] = None
    wind_direction_30: Optional[int] = None
    wind_direction_60: Optional[int] = None
    wind_speed_10: Optional[float] = None
    wind_speed_30: Optional[float] = None
    wind_speed_60: Optional[float] = None
    wind_gust_direction_10: Optional[int] = None
    wind_gust_direction_30: Optional[int] = None
    wind_gust_direction_60: Optional[int] = None
    wind_gust_speed_10: Optional[float] = None
    wind_gust_speed_30: Optional[float] = None
    wind_gust_speed_60: Optional[float] = None


class CurrentWeatherResponse(BaseModel):
    weather: CurrentWeather
    sources: List[CurrentWeatherSource]


# ─────────────────────────────────────────────────────────────────────────────
# Radar
# ─────────────────────────────────────────────────────────────────────────────

def decode_precipitation(value: Any) -> Tuple[RadarCompressionFormat, np.ndarray]:
    """
    Decode a ``precipitation_5`` payload into a uint16 array.

    Plain payloads are nested lists and decode to a 2-D array. String payloads
    are base64; zlib-compressed data is inflated first, raw bytes are used as
    is. Both are little-endian uint16 and decode to a flat array.

    Raises:
        ValueError: If the payload is neither a nested list nor valid base64.
    """
    if isinstance(value, list):
        if any(not isinstance(row, list) for row in value):
            raise ValueError("Expected a nested array of precipitation values")
        return RadarCompressionFormat.PLAIN, np.array(value, dtype=np.uint16)
    if isinstance(value, str):
        try:
            raw = base64.b64decode(value, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"Base64 decode error: {exc}") from exc
        fmt = RadarCompressionFormat.BYTES
        try:
            raw = zlib.decompress(raw)
            fmt = RadarCompressionFormat.COMPRESSED
        except zlib.error:
            pass
        # trailing odd byte cannot form a value
        usable = len(raw) - (len(raw) % 2)
        return fmt, np.frombuffer(raw[:usable], dtype="<u2").astype(np.uint16)
    raise ValueError(f"Expected string or array, got {type(value).__name__}")


class Precipitation(BaseModel):
    """Decoded precipitation of one radar frame, in 0.01 mm / 5 min."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    format: RadarCompressionFormat
    values: np.ndarray

    @model_validator(mode="before")
    @classmethod
    def decode(cls, data: Any) -> Any:
        if isinstance(data, (list, str)):
            fmt, values = decode_precipitation(data)
            return {"format": fmt, "values": values}
        return data

    def grid(self, shape: Optional[Tuple[int, int]] = None) -> np.ndarray:
        """Return the values as a (height, width) grid.

        Plain payloads are already 2-D; encoded payloads need ``shape``.
        """
        if self.values.ndim == 2:
            return self.values
        if shape is None:
            raise ValueError("shape is required to reshape encoded precipitation")
        return self.values.reshape(shape)


class RadarFrame(BaseModel):
    timestamp: dt.datetime
    source: str
    precipitation_5: Precipitation


class Geometry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    geometry_type: str = Field(alias="type")
    coordinates: List[List[float]]


class LatLonPosition(BaseModel):
    """Pixel position of the requested coordinates inside the returned grid."""

    x: float
    y: float


class RadarResponse(BaseModel):
    """Radar frames plus the echoed area.

    Attributes:
        radar: Frames in chronological order.
        geometry: Polygon of the returned area, if requested by location.
        bbox: Pixel bounding box ``[top, left, bottom, right]`` of the grid.
        latlon_position: Pixel position of the requested coordinates.
    """

    radar: List[RadarFrame]
    geometry: Optional[Geometry] = None
    bbox: Optional[List[int]] = None
    latlon_position: Optional[LatLonPosition] = None

    @property
    def height(self) -> Optional[int]:
        if not self.bbox or len(self.bbox) != 4:
            return None
        return self.bbox[2] - self.bbox[0]

    @property
    def width(self) -> Optional[int]:
        if not self.bbox or len(self.bbox) != 4:
            return None
        return self.bbox[3] - self.bbox[1]

    def grid(self, index: int = 0) -> np.ndarray:
        """2-D precipitation grid of the frame at ``index``."""
        shape = None
        if self.height is not None and self.width is not None:
            shape = (self.height, self.width)
        return self.radar[index].precipitation_5.grid(shape)


# ─────────────────────────────────────────────────────────────────────────────
# Alerts
# ─────────────────────────────────────────────────────────────────────────────

class Alert(BaseModel):
    """Official DWD weather warning (CAP), bilingual."""

    id: int
    alert_id: str
    status: AlertStatus
    effective: dt.datetime
    onset: dt.datetime
    expires: Optional[dt.datetime] = None
    category: Optional[AlertCategory] = None
    response_type: Optional[AlertResponseType] = None
    urgency: Optional[AlertUrgency] = None
    severity: Optional[AlertSeverity] = None
    certainty: Optional[AlertCertainty] = None
    event_code: Optional[int] = None
    event_en: Optional[str] = None
    event_de: Optional[str] = None
    headline_en: str
    headline_de: str
    description_en: str
    description_de: str
    instruction_en: Optional[str] = None
    instruction_de: Optional[str] = None


class AlertLocation(BaseModel):
    """Warn cell the requested location falls into."""

    warn_cell_id: int
    name: str
    name_short: str
    district: str
    state: str
    state_short: str


class AlertsResponse(BaseModel):
    alerts: List[Alert]
    location: Optional[AlertLocation] = None


__all__ = [
    "WeatherIcon",
    "WeatherCondition",
    "ObservationType",
    "AlertStatus",
    "AlertCategory",
    "AlertResponseType",
    "AlertUrgency",
    "AlertSeverity",
    "AlertCertainty",
    "Source",
    "WeatherRecord",
    "WeatherResponse",
    "CurrentWeatherSource",
    "CurrentWeather",
    "CurrentWeatherResponse",
    "decode_precipitation",
    "Precipitation",
    "RadarFrame",
    "Geometry",
    "LatLonPosition",
    "RadarResponse",
    "Alert",
    "AlertLocation",
    "AlertsResponse",
]
