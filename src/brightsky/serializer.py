"""Deterministic URL serialization of validated query models.

Keys are emitted in ``QUERY_KEY_ORDER``, unset fields are omitted and every
value is percent-encoded as a single query component. The same query always
serializes to the same bytes.

Example:
    >>> query = CurrentWeatherQueryBuilder().with_lat_lon(52.52, 13.4).build()
    >>> to_query_string(query)
    'lat=52.52&lon=13.4'
    >>> to_url_string(query)
    'https://api.brightsky.dev/current_weather?lat=52.52&lon=13.4'
"""
from __future__ import annotations
import datetime as dt
from decimal import Decimal
from typing import Dict, Iterable, Iterator, Tuple
from urllib.parse import quote, urlsplit

from pydantic import AnyHttpUrl, TypeAdapter, ValidationError

from .constants import BRIGHT_SKY_API, LIST_SEPARATOR, QUERY_KEY_ORDER
from .errors import UrlConstructionError
from .params import DwdStationIds, LatLon, SourceIds, WarnCellId, WmoStationIds
from .queries import AlertsQuery, CurrentWeatherQuery, Query, RadarQuery, WeatherQuery

_URL_ADAPTER = TypeAdapter(AnyHttpUrl)


# ─────────────────────────────────────────────────────────────────────────────
# Value formatting
# ─────────────────────────────────────────────────────────────────────────────

def format_float(value: float) -> str:
    """Shortest round-trip decimal form, always with a decimal point (7 -> '7.0')."""
    text = format(Decimal(repr(float(value))), "f")
    if "." not in text:
        text = f"{text}.0"
    return text


def format_date(value: dt.date) -> str:
    return value.isoformat()


def format_datetime(value: dt.datetime) -> str:
    """ISO-8601 with explicit offset; UTC renders as ``Z``.

    Naive datetimes are taken to be UTC. No conversion between zones happens.
    """
    if value.tzinfo is None or value.utcoffset() is None:
        value = value.replace(tzinfo=dt.timezone.utc)
    text = value.isoformat()
    if value.utcoffset() == dt.timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text


def _join(items: Iterable[object]) -> str:
    return LIST_SEPARATOR.join(str(item) for item in items)


# ─────────────────────────────────────────────────────────────────────────────
# Query pairs
# ─────────────────────────────────────────────────────────────────────────────

def _location_params(location: object) -> Dict[str, str]:
    if isinstance(location, LatLon):
        return {"lat": format_float(location.lat), "lon": format_float(location.lon)}
    if isinstance(location, DwdStationIds):
        return {"dwd_station_id": _join(location.ids)}
    if isinstance(location, WmoStationIds):
        return {"wmo_station_id": _join(location.ids)}
    if isinstance(location, SourceIds):
        return {"source_id": _join(location.ids)}
    if isinstance(location, WarnCellId):
        return {"warn_cell_id": str(location.id)}
    return {}


def _collect_params(query: Query) -> Dict[str, str]:
    params = _location_params(query.location)

    if isinstance(query, WeatherQuery):
        params["date"] = format_date(query.date)
        if query.last_date is not None:
            params["last_date"] = format_date(query.last_date)

    if isinstance(query, RadarQuery):
        if query.datetime is not None:
            params["datetime"] = format_datetime(query.datetime)
        if query.bbox is not None:
            params["bbox"] = _join(format_float(v) for v in query.bbox.as_tuple())
        if query.distance is not None:
            params["distance"] = str(query.distance)
        if query.format is not None:
            params["format"] = query.format.value

    if isinstance(query, (CurrentWeatherQuery, WeatherQuery)):
        if query.max_dist is not None:
            params["max_dist"] = str(query.max_dist)
        if query.units is not None:
            params["units"] = query.units.value

    if query.tz is not None:
        params["tz"] = query.tz
    return params


def iter_query_pairs(query: Query) -> Iterator[Tuple[str, str]]:
    """Yield unencoded ``(key, value)`` pairs in canonical key order."""
    if not isinstance(query, (CurrentWeatherQuery, WeatherQuery, RadarQuery, AlertsQuery)):
        raise TypeError(f"Unsupported query type: {type(query).__name__}")
    params = _collect_params(query)
    for key in QUERY_KEY_ORDER:
        value = params.get(key)
        if value is not None:
            yield key, value


def to_query_string(query: Query) -> str:
    """Percent-encoded query string without the leading ``?``."""
    return "&".join(
        f"{key}={quote(value, safe='')}" for key, value in iter_query_pairs(query)
    )


def to_path_and_query(query: Query) -> str:
    """Endpoint path plus query string, e.g. ``/current_weather?lat=52.52&lon=13.4``."""
    query_string = to_query_string(query)
    if not query_string:
        return query.PATH
    return f"{query.PATH}?{query_string}"


# ─────────────────────────────────────────────────────────────────────────────
# URL entry points
# ─────────────────────────────────────────────────────────────────────────────

def to_url_string(query: Query, host: str = BRIGHT_SKY_API) -> str:
    """Full URL as a plain string. Never fails for a validated query."""
    return host.rstrip("/") + to_path_and_query(query)


def to_url(query: Query, host: str = BRIGHT_SKY_API) -> AnyHttpUrl:
    """
    Full URL as a validated pydantic URL.

    Args:
        query: A query model produced by one of the builders.
        host: Base URL (scheme, host and optional path prefix).

    Returns:
        The parsed URL; its path and query match ``to_url_string`` exactly.

    Raises:
        UrlConstructionError: If the host is not an http(s) base URL or the
            result is not a well-formed URL.
    """
    try:
        parts = urlsplit(host)
    except ValueError as exc:
        raise UrlConstructionError(f"Invalid host {host!r}: {exc}", url=host) from exc
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise UrlConstructionError(f"Host must be an absolute http(s) URL, got {host!r}", url=host)
    if parts.query or parts.fragment:
        raise UrlConstructionError(f"Host must not carry a query or fragment, got {host!r}", url=host)

    url = to_url_string(query, host)
    try:
        return _URL_ADAPTER.validate_python(url)
    except ValidationError as exc:
        raise UrlConstructionError(f"Could not build a valid URL from {url!r}: {exc}", url=url) from exc


__all__ = [
    "format_float",
    "format_date",
    "format_datetime",
    "iter_query_pairs",
    "to_query_string",
    "to_path_and_query",
    "to_url_string",
    "to_url",
]
