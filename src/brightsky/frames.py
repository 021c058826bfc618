"""Flatten Bright Sky responses into pandas DataFrames."""
from __future__ import annotations
from typing import Any, Dict, Iterable, List, Union

import pandas as pd
from pydantic import BaseModel

from .responses import AlertsResponse, CurrentWeatherResponse, WeatherResponse


def _rows(models: Iterable[BaseModel]) -> List[Dict[str, Any]]:
    # mode="json" turns enums into their wire strings
    return [model.model_dump(mode="json") for model in models]


def _to_frame(rows: List[Dict[str, Any]], time_columns: Iterable[str]) -> pd.DataFrame:
    if not rows:
        return pd.DataFrame()
    frame = pd.DataFrame(rows)
    for column in time_columns:
        if column in frame.columns:
            frame[column] = pd.to_datetime(frame[column], utc=True)
    return frame


def weather_to_dataframe(response: WeatherResponse) -> pd.DataFrame:
    """One row per hourly record; fallback_source_ids is dropped."""
    frame = _to_frame(_rows(response.weather), ["timestamp"])
    if "fallback_source_ids" in frame.columns:
        frame = frame.drop(columns=["fallback_source_ids"])
    return frame


def current_weather_to_dataframe(response: CurrentWeatherResponse) -> pd.DataFrame:
    """Single-row frame of the current conditions."""
    frame = _to_frame(_rows([response.weather]), ["timestamp"])
    return frame.drop(columns=["fallback_source_ids"])


def sources_to_dataframe(response: Union[WeatherResponse, CurrentWeatherResponse]) -> pd.DataFrame:
    return _to_frame(_rows(response.sources), ["first_record", "last_record"])


def alerts_to_dataframe(response: AlertsResponse) -> pd.DataFrame:
    """One row per alert, with the warn cell name attached when the response has one."""
    frame = _to_frame(_rows(response.alerts), ["effective", "onset", "expires"])
    if frame.empty or response.location is None:
        return frame
    frame.insert(0, "warn_cell_id", response.location.warn_cell_id)
    frame.insert(1, "warn_cell_name", response.location.name)
    return frame


__all__ = [
    "weather_to_dataframe",
    "current_weather_to_dataframe",
    "sources_to_dataframe",
    "alerts_to_dataframe",
]
