"""Bright Sky API query builders and client.

Bright Sky (https://brightsky.dev) serves DWD open weather data. This package
provides:
- Validating, fluent query builders for every endpoint
- Deterministic URL serialization of the resulting queries
- Pydantic models of the JSON responses
- An optional ``requests``-based client with an injectable HTTP layer

Example usage:
    >>> import datetime as dt
    >>> from brightsky import WeatherQueryBuilder, UnitType, to_url_string
    >>> query = (
    ...     WeatherQueryBuilder()
    ...     .with_dwd_station_ids(["01766", "01767"])
    ...     .with_date(dt.date(2025, 1, 15))
    ...     .with_units(UnitType.SI)
    ...     .build()
    ... )
    >>> to_url_string(query)
    'https://api.brightsky.dev/weather?dwd_station_id=01766%2C01767&date=2025-01-15&units=si'
"""

from __future__ import annotations

from .builders import (
    AlertsQueryBuilder,
    CurrentWeatherQueryBuilder,
    RadarQueryBuilder,
    WeatherQueryBuilder,
)
from .client import BrightSkyClient, ClientConfig, HTTPClient, RequestsHTTPClient
from .constants import BRIGHT_SKY_API, MAX_DISTANCE_METERS, QUERY_KEY_ORDER
from .errors import (
    BrightSkyAPIError,
    BrightSkyError,
    BrightSkyResponseError,
    InvalidBoundingBox,
    InvalidDateRange,
    InvalidLatitude,
    InvalidLongitude,
    InvalidMaxDistance,
    MissingDate,
    MissingLocation,
    QueryValidationError,
    UrlConstructionError,
)
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
from .queries import AlertsQuery, CurrentWeatherQuery, Query, RadarQuery, WeatherQuery
from .responses import (
    Alert,
    AlertsResponse,
    CurrentWeather,
    CurrentWeatherResponse,
    RadarFrame,
    RadarResponse,
    Source,
    WeatherCondition,
    WeatherIcon,
    WeatherRecord,
    WeatherResponse,
)
from .serializer import iter_query_pairs, to_query_string, to_url, to_url_string
from .validators import (
    validate_bbox,
    validate_date_order,
    validate_distance,
    validate_latitude,
    validate_longitude,
)


__all__ = [
    # Builders
    "CurrentWeatherQueryBuilder",
    "WeatherQueryBuilder",
    "RadarQueryBuilder",
    "AlertsQueryBuilder",
    # Query models
    "CurrentWeatherQuery",
    "WeatherQuery",
    "RadarQuery",
    "AlertsQuery",
    "Query",
    # Parameters
    "LatLon",
    "DwdStationIds",
    "WmoStationIds",
    "SourceIds",
    "WarnCellId",
    "LocationSpec",
    "BoundingBox",
    "UnitType",
    "RadarCompressionFormat",
    # Validators
    "validate_latitude",
    "validate_longitude",
    "validate_bbox",
    "validate_date_order",
    "validate_distance",
    # Serializer
    "iter_query_pairs",
    "to_query_string",
    "to_url",
    "to_url_string",
    # Responses
    "CurrentWeather",
    "CurrentWeatherResponse",
    "WeatherRecord",
    "WeatherResponse",
    "Source",
    "RadarFrame",
    "RadarResponse",
    "Alert",
    "AlertsResponse",
    "WeatherIcon",
    "WeatherCondition",
    # Client
    "BrightSkyClient",
    "ClientConfig",
    "HTTPClient",
    "RequestsHTTPClient",
    # Exceptions
    "BrightSkyError",
    "QueryValidationError",
    "InvalidLatitude",
    "InvalidLongitude",
    "InvalidBoundingBox",
    "InvalidMaxDistance",
    "InvalidDateRange",
    "MissingLocation",
    "MissingDate",
    "UrlConstructionError",
    "BrightSkyAPIError",
    "BrightSkyResponseError",
    # Constants
    "BRIGHT_SKY_API",
    "MAX_DISTANCE_METERS",
    "QUERY_KEY_ORDER",
]
