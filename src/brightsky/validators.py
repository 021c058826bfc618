"""Pure validators for single query values.

Each validator returns the value it was given when it is valid and raises a
``QueryValidationError`` subclass otherwise, so builders can chain them.
"""
from __future__ import annotations
import datetime as dt
from typing import Optional, Tuple

from .constants import LATITUDE_RANGE, LONGITUDE_RANGE, MAX_DISTANCE_METERS
from .errors import (
    InvalidBoundingBox,
    InvalidDateRange,
    InvalidLatitude,
    InvalidLongitude,
    InvalidMaxDistance,
)


def _in_range(value: object, low: float, high: float) -> bool:
    # NaN fails both comparisons; non-numbers fail to compare
    try:
        return bool(low <= value <= high)  # type: ignore[operator]
    except TypeError:
        return False


def validate_latitude(value: float) -> float:
    """Raise InvalidLatitude unless -90 <= value <= 90."""
    low, high = LATITUDE_RANGE
    if not _in_range(value, low, high):
        raise InvalidLatitude(value)
    return value


def validate_longitude(value: float) -> float:
    """Raise InvalidLongitude unless -180 <= value <= 180."""
    low, high = LONGITUDE_RANGE
    if not _in_range(value, low, high):
        raise InvalidLongitude(value)
    return value


def validate_bbox(
    south: float, west: float, north: float, east: float
) -> Tuple[float, float, float, float]:
    """
    Validate a (south, west, north, east) bounding box.

    Each edge is checked as a latitude/longitude first; the box must then be
    non-degenerate and not inverted.

    Raises:
        InvalidLatitude: If south or north is out of range.
        InvalidLongitude: If west or east is out of range.
        InvalidBoundingBox: If south >= north or west >= east.
    """
    validate_latitude(south)
    validate_longitude(west)
    validate_latitude(north)
    validate_longitude(east)
    if not (south < north and west < east):
        raise InvalidBoundingBox(south, west, north, east)
    return south, west, north, east


def validate_date_order(date: dt.date, last_date: Optional[dt.date]) -> None:
    """Raise InvalidDateRange if last_date is set and precedes date."""
    if last_date is not None and last_date < date:
        raise InvalidDateRange(date, last_date)


def validate_distance(value: int) -> int:
    """
    Validate a distance in whole meters and return it as an int.

    Integral floats (1000.0) are accepted; fractional ones are not.

    Raises:
        InvalidMaxDistance: Unless value is a whole number in [0, 500000].
    """
    if isinstance(value, bool) or not _in_range(value, 0, MAX_DISTANCE_METERS):
        raise InvalidMaxDistance(value)
    if int(value) != value:
        raise InvalidMaxDistance(value)
    return int(value)


__all__ = [
    "validate_latitude",
    "validate_longitude",
    "validate_bbox",
    "validate_date_order",
    "validate_distance",
]
