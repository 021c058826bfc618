"""Unit tests for URL serialization of query models."""

from __future__ import annotations

import datetime as dt
from urllib.parse import parse_qsl, urlsplit

import pytest

from brightsky.builders import (
    AlertsQueryBuilder,
    CurrentWeatherQueryBuilder,
    RadarQueryBuilder,
    WeatherQueryBuilder,
)
from brightsky.errors import UrlConstructionError
from brightsky.params import RadarCompressionFormat, UnitType
from brightsky.serializer import (
    format_datetime,
    format_float,
    iter_query_pairs,
    to_path_and_query,
    to_query_string,
    to_url,
    to_url_string,
)


class TestFormatting:
    """Tests for value formatting helpers."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (52.52, "52.52"),
            (13.4, "13.4"),
            (7, "7.0"),
            (-0.5, "-0.5"),
            (0.0, "0.0"),
            (1e-05, "0.00001"),
            (179.999999, "179.999999"),
        ],
    )
    def test_format_float(self, value, expected: str) -> None:
        assert format_float(value) == expected

    def test_utc_datetime_uses_z(self) -> None:
        moment = dt.datetime(2023, 8, 7, 12, 0, tzinfo=dt.timezone.utc)
        assert format_datetime(moment) == "2023-08-07T12:00:00Z"

    def test_naive_datetime_is_treated_as_utc(self) -> None:
        assert format_datetime(dt.datetime(2023, 8, 7, 12, 0)) == "2023-08-07T12:00:00Z"

    def test_offset_is_preserved(self) -> None:
        moment = dt.datetime(2023, 8, 7, 14, 0, tzinfo=dt.timezone(dt.timedelta(hours=2)))
        assert format_datetime(moment) == "2023-08-07T14:00:00+02:00"


class TestQueryString:
    """Tests for query string construction."""

    def test_current_weather_by_coordinates(self) -> None:
        query = CurrentWeatherQueryBuilder().with_lat_lon(52.52, 13.4).build()
        assert to_query_string(query) == "lat=52.52&lon=13.4"
        assert to_path_and_query(query) == "/current_weather?lat=52.52&lon=13.4"

    def test_weather_by_station_ids(self) -> None:
        query = (
            WeatherQueryBuilder()
            .with_dwd_station_ids(["01766", "01767"])
            .with_date(dt.date(2025, 1, 15))
            .with_units(UnitType.SI)
            .build()
        )
        assert to_path_and_query(query) == (
            "/weather?dwd_station_id=01766%2C01767&date=2025-01-15&units=si"
        )

    def test_setter_order_does_not_change_output(self) -> None:
        first = (
            WeatherQueryBuilder()
            .with_lat_lon(52.52, 13.4)
            .with_date(dt.date(2023, 8, 7))
            .with_last_date(dt.date(2023, 8, 8))
            .with_tz("Europe/Berlin")
            .with_max_dist(10_000)
            .build()
        )
        second = (
            WeatherQueryBuilder()
            .with_max_dist(10_000)
            .with_tz("Europe/Berlin")
            .with_last_date(dt.date(2023, 8, 8))
            .with_date(dt.date(2023, 8, 7))
            .with_lat_lon(52.52, 13.4)
            .build()
        )
        assert to_query_string(first) == to_query_string(second)
        assert to_query_string(first) == (
            "lat=52.52&lon=13.4&date=2023-08-07&last_date=2023-08-08"
            "&max_dist=10000&tz=Europe%2FBerlin"
        )

    def test_serialization_is_repeatable(self) -> None:
        query = CurrentWeatherQueryBuilder().with_source_ids([1, 2, 3]).with_tz("UTC").build()
        assert to_url_string(query) == to_url_string(query)

    def test_unset_optionals_are_omitted(self) -> None:
        query = CurrentWeatherQueryBuilder().with_wmo_station_ids("10315").build()
        keys = [key for key, _ in iter_query_pairs(query)]
        assert keys == ["wmo_station_id"]

    def test_units_omitted_when_unset(self) -> None:
        query = WeatherQueryBuilder().with_lat_lon(52.52, 13.4).with_date(dt.date(2025, 1, 15)).build()
        assert "units" not in to_query_string(query)

    def test_global_alerts_have_no_query(self) -> None:
        query = AlertsQueryBuilder().build()
        assert to_query_string(query) == ""
        assert to_url_string(query) == "https://api.brightsky.dev/alerts"

    def test_alerts_by_warn_cell(self) -> None:
        query = AlertsQueryBuilder().with_warn_cell_id(803159016).build()
        assert to_path_and_query(query) == "/alerts?warn_cell_id=803159016"

    def test_radar_parameters(self) -> None:
        query = (
            RadarQueryBuilder()
            .with_bbox(47.0, 5.0, 55.0, 16.0)
            .with_datetime(dt.datetime(2023, 8, 7, 12, 0, tzinfo=dt.timezone.utc))
            .with_format(RadarCompressionFormat.PLAIN)
            .build()
        )
        assert to_query_string(query) == (
            "datetime=2023-08-07T12%3A00%3A00Z&bbox=47.0%2C5.0%2C55.0%2C16.0&format=plain"
        )

    def test_radar_distance(self) -> None:
        query = RadarQueryBuilder().with_lat_lon(52.0, 7.6).with_distance(50_000).build()
        assert to_query_string(query) == "lat=52.0&lon=7.6&distance=50000"

    def test_reserved_characters_are_encoded(self) -> None:
        query = AlertsQueryBuilder().with_lat_lon(52.52, 13.4).with_tz("Etc/GMT+1").build()
        assert to_query_string(query).endswith("tz=Etc%2FGMT%2B1")

    def test_pairs_decode_back_to_values(self) -> None:
        query = (
            WeatherQueryBuilder()
            .with_source_ids([6007, 24])
            .with_date(dt.date(2025, 1, 15))
            .with_tz("Europe/Berlin")
            .build()
        )
        decoded = parse_qsl(to_query_string(query))
        assert decoded == list(iter_query_pairs(query))

    def test_unsupported_query_type(self) -> None:
        with pytest.raises(TypeError):
            list(iter_query_pairs(object()))  # type: ignore[arg-type]


class TestUrl:
    """Tests for the two URL entry points."""

    def test_default_host(self) -> None:
        query = CurrentWeatherQueryBuilder().with_lat_lon(52.52, 13.4).build()
        assert to_url_string(query) == "https://api.brightsky.dev/current_weather?lat=52.52&lon=13.4"

    def test_custom_host_with_trailing_slash(self) -> None:
        query = CurrentWeatherQueryBuilder().with_lat_lon(52.52, 13.4).build()
        assert to_url_string(query, "http://localhost:5000/") == (
            "http://localhost:5000/current_weather?lat=52.52&lon=13.4"
        )

    def test_structured_url_matches_string_form(self) -> None:
        query = (
            WeatherQueryBuilder()
            .with_dwd_station_ids(["01766", "01767"])
            .with_date(dt.date(2025, 1, 15))
            .with_units(UnitType.SI)
            .build()
        )
        url = to_url(query)
        expected = urlsplit(to_url_string(query))
        assert url.scheme == "https"
        assert url.host == "api.brightsky.dev"
        assert url.path == expected.path
        assert url.query == expected.query

    def test_long_query_matches_string_form(self) -> None:
        station_ids = [f"{i:05d}" for i in range(400)]
        query = (
            WeatherQueryBuilder()
            .with_dwd_station_ids(station_ids)
            .with_date(dt.date(2025, 1, 15))
            .build()
        )
        url_string = to_url_string(query)
        assert len(url_string) > 2083

        url = to_url(query)
        expected = urlsplit(url_string)
        assert url.path == expected.path
        assert url.query == expected.query

    @pytest.mark.parametrize(
        "host",
        ["not a url", "ftp://api.brightsky.dev", "https://", "https://api.brightsky.dev?x=1"],
    )
    def test_invalid_host_fails(self, host: str) -> None:
        query = CurrentWeatherQueryBuilder().with_lat_lon(52.52, 13.4).build()
        with pytest.raises(UrlConstructionError):
            to_url(query, host)

    def test_url_error_is_value_error(self) -> None:
        query = AlertsQueryBuilder().build()
        with pytest.raises(ValueError):
            to_url(query, "mailto:someone@example.com")
