"""Exceptions raised by the Bright Sky query builders, serializer and client."""
from __future__ import annotations
import datetime as dt
from typing import Any, Optional

import requests


class BrightSkyError(Exception):
    """Base exception for all Bright Sky errors."""
    pass


class QueryValidationError(BrightSkyError, ValueError):
    """A query parameter failed local validation.

    Attributes:
        value: The offending value, when a single value is at fault.
    """

    def __init__(self, message: str, *, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidLatitude(QueryValidationError):
    """Latitude outside [-90, 90]."""

    def __init__(self, value: float) -> None:
        super().__init__(f"Latitude must be between -90 and 90, got {value}", value=value)


class InvalidLongitude(QueryValidationError):
    """Longitude outside [-180, 180]."""

    def __init__(self, value: float) -> None:
        super().__init__(f"Longitude must be between -180 and 180, got {value}", value=value)


class InvalidBoundingBox(QueryValidationError):
    """Bounding box is inverted or degenerate."""

    def __init__(self, south: float, west: float, north: float, east: float) -> None:
        box = (south, west, north, east)
        super().__init__(
            "Bounding box must satisfy south < north and west < east, "
            f"got (south={south}, west={west}, north={north}, east={east})",
            value=box,
        )
        self.south = south
        self.west = west
        self.north = north
        self.east = east


class InvalidMaxDistance(QueryValidationError):
    """Distance outside [0, 500000] meters."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Max distance must be between 0 and 500000, got {value}", value=value)


class MissingLocation(QueryValidationError):
    """Endpoint requires a location but none was set."""

    def __init__(self, endpoint: str) -> None:
        super().__init__(
            f"{endpoint} requires a location, but none was set"
        )
        self.endpoint = endpoint


class MissingDate(QueryValidationError):
    """Endpoint requires a date but none was set."""

    def __init__(self, endpoint: str) -> None:
        super().__init__(f"{endpoint} requires a date, but none was set")
        self.endpoint = endpoint


class InvalidDateRange(QueryValidationError):
    """``last_date`` precedes ``date``."""

    def __init__(self, date: dt.date, last_date: dt.date) -> None:
        super().__init__(
            f"last_date must not precede date, got date={date.isoformat()} "
            f"last_date={last_date.isoformat()}",
            value=last_date,
        )
        self.date = date
        self.last_date = last_date


class UrlConstructionError(BrightSkyError, ValueError):
    """Host plus path/query does not form a well-formed URL."""

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class BrightSkyAPIError(BrightSkyError):
    """API request failed with an error response."""

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        detail: Optional[str] = None,
        response: Optional[requests.Response] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail
        self.response = response


class BrightSkyResponseError(BrightSkyError):
    """Response payload does not match the expected model."""
    pass


__all__ = [
    "BrightSkyError",
    "QueryValidationError",
    "InvalidLatitude",
    "InvalidLongitude",
    "InvalidBoundingBox",
    "InvalidMaxDistance",
    "MissingLocation",
    "MissingDate",
    "InvalidDateRange",
    "UrlConstructionError",
    "BrightSkyAPIError",
    "BrightSkyResponseError",
]
