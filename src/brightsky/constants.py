from __future__ import annotations
# Public Bright Sky instance
BRIGHT_SKY_API = "https://api.brightsky.dev"

# Endpoint paths
CURRENT_WEATHER_PATH = "/current_weather"
WEATHER_PATH = "/weather"
RADAR_PATH = "/radar"
ALERTS_PATH = "/alerts"

# Coordinate ranges (decimal degrees)
LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)

# Distance limits (meters)
MAX_DISTANCE_METERS = 500_000

# Request defaults
DEFAULT_TIMEOUT_SECONDS = 30
DEFAULT_USER_AGENT = "brightsky-python"

# Canonical query key order. Keys are always emitted in this order,
# independent of the order in which builder setters were called.
QUERY_KEY_ORDER = (
    "lat",
    "lon",
    "dwd_station_id",
    "wmo_station_id",
    "source_id",
    "warn_cell_id",
    "date",
    "last_date",
    "datetime",
    "bbox",
    "distance",
    "max_dist",
    "tz",
    "units",
    "format",
)

# Separator for list-valued parameters (station ids, source ids, bbox)
LIST_SEPARATOR = ","

__all__ = [
    "BRIGHT_SKY_API",
    "CURRENT_WEATHER_PATH",
    "WEATHER_PATH",
    "RADAR_PATH",
    "ALERTS_PATH",
    "LATITUDE_RANGE",
    "LONGITUDE_RANGE",
    "MAX_DISTANCE_METERS",
    "DEFAULT_TIMEOUT_SECONDS",
    "DEFAULT_USER_AGENT",
    "QUERY_KEY_ORDER",
    "LIST_SEPARATOR",
]
