"""Minimal synchronous client for the Bright Sky API.

The client turns a validated query into a URL, fetches it through an
injectable ``HTTPClient`` and validates the JSON payload into the matching
response model. It does not retry, rate-limit or cache.

Example:
    >>> from brightsky import BrightSkyClient, CurrentWeatherQueryBuilder
    >>> query = CurrentWeatherQueryBuilder().with_lat_lon(52.52, 13.4).build()
    >>> with BrightSkyClient() as client:
    ...     response = client.current_weather(query)
    >>> response.weather.temperature
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Protocol, Type, TypeVar

import requests
from pydantic import BaseModel, Field, ValidationError

from .config import get_settings
from .constants import BRIGHT_SKY_API, DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT
from .errors import BrightSkyAPIError, BrightSkyResponseError
from .queries import AlertsQuery, CurrentWeatherQuery, Query, RadarQuery, WeatherQuery
from .responses import AlertsResponse, CurrentWeatherResponse, RadarResponse, WeatherResponse
from .serializer import to_url_string

LOGGER = logging.getLogger(__name__)

R = TypeVar("R", bound=BaseModel)

RESPONSE_MODELS: Dict[type, Type[BaseModel]] = {
    CurrentWeatherQuery: CurrentWeatherResponse,
    WeatherQuery: WeatherResponse,
    RadarQuery: RadarResponse,
    AlertsQuery: AlertsResponse,
}


class ClientConfig(BaseModel):
    """Configuration settings for BrightSkyClient.

    Attributes:
        base_url: API base URL.
        timeout: Request timeout in seconds.
        user_agent: User-Agent header value.
    """

    base_url: str = BRIGHT_SKY_API
    timeout: int = Field(default=DEFAULT_TIMEOUT_SECONDS, ge=1)
    user_agent: str = DEFAULT_USER_AGENT

    @classmethod
    def from_settings(cls) -> "ClientConfig":
        """Build a config from ``BRIGHTSKY_*`` environment settings."""
        settings = get_settings()
        return cls(
            base_url=settings.base_url,
            timeout=settings.timeout_seconds,
            user_agent=settings.user_agent,
        )


# HTTP Client Protocol
class HTTPClient(Protocol):
    def get(
        self,
        url: str,
        headers: Dict[str, str],
        timeout: int,
    ) -> Dict[str, Any]:
        ...


def _error_detail(response: requests.Response) -> Optional[str]:
    try:
        body = response.json()
    except ValueError:
        return response.text[:200] or None
    if isinstance(body, dict):
        detail = body.get("detail") or body.get("description") or body.get("title")
        return str(detail) if detail is not None else None
    return None


class RequestsHTTPClient:
    """HTTPClient backed by a lazily created ``requests.Session``."""

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self._session = session

    def _get_session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "RequestsHTTPClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def get(
        self,
        url: str,
        headers: Dict[str, str],
        timeout: int,
    ) -> Dict[str, Any]:
        """
        GET ``url`` and return the decoded JSON body.

        Raises:
            BrightSkyAPIError: On timeouts, connection failures, non-2xx
                responses or a body that is not JSON.
        """
        session = self._get_session()
        response: Optional[requests.Response] = None
        try:
            response = session.get(url, headers=headers, timeout=timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.Timeout as exc:
            raise BrightSkyAPIError(
                f"Request timed out after {timeout} seconds for {url}"
            ) from exc
        except requests.exceptions.ConnectionError as exc:
            raise BrightSkyAPIError(f"Failed to establish connection to {url}: {exc}") from exc
        except requests.exceptions.HTTPError as exc:
            status_code = response.status_code if response is not None else None
            detail = _error_detail(response) if response is not None else None
            message = f"HTTP {status_code} error for {url}"
            if detail:
                message = f"{message} (details: {detail})"
            raise BrightSkyAPIError(
                message, status_code=status_code, detail=detail, response=response
            ) from exc
        except requests.exceptions.JSONDecodeError as exc:
            raise BrightSkyAPIError(
                f"Response from {url} is not valid JSON",
                status_code=response.status_code if response is not None else None,
                response=response,
            ) from exc
        except requests.RequestException as exc:
            raise BrightSkyAPIError(f"Request to {url} failed: {exc}") from exc
        finally:
            if response is not None:
                response.close()


class BrightSkyClient:
    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_client: Optional[HTTPClient] = None,
    ) -> None:
        self._config = config or ClientConfig.from_settings()
        # Only close HTTP clients we created ourselves
        self._owns_http_client = http_client is None
        self._http_client = http_client or RequestsHTTPClient()

    def close(self) -> None:
        if self._owns_http_client and hasattr(self._http_client, "close"):
            self._http_client.close()

    def __enter__(self) -> "BrightSkyClient":
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _get_headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "User-Agent": self._config.user_agent,
        }

    def url_for(self, query: Query) -> str:
        return to_url_string(query, self._config.base_url)

    def fetch_json(self, query: Query) -> Dict[str, Any]:
        """GET the query's URL and return the raw JSON payload."""
        url = self.url_for(query)
        LOGGER.debug("GET %s", url)
        return self._http_client.get(url, headers=self._get_headers(), timeout=self._config.timeout)

    def get(self, query: Query, response_model: Optional[Type[R]] = None) -> R:
        """
        Fetch a query and validate the payload into its response model.

        Args:
            query: A query model produced by one of the builders.
            response_model: Override for the model inferred from the query type.

        Raises:
            BrightSkyAPIError: If the HTTP request fails.
            BrightSkyResponseError: If the payload does not match the model.
        """
        model = response_model or RESPONSE_MODELS.get(type(query))
        if model is None:
            raise TypeError(f"Unsupported query type: {type(query).__name__}")
        payload = self.fetch_json(query)
        try:
            return model.model_validate(payload)  # type: ignore[return-value]
        except ValidationError as exc:
            raise BrightSkyResponseError(
                f"Unexpected {query.PATH} payload: {exc.error_count()} validation error(s)"
            ) from exc

    def current_weather(self, query: CurrentWeatherQuery) -> CurrentWeatherResponse:
        return self.get(query, CurrentWeatherResponse)

    def weather(self, query: WeatherQuery) -> WeatherResponse:
        return self.get(query, WeatherResponse)

    def radar(self, query: RadarQuery) -> RadarResponse:
        return self.get(query, RadarResponse)

    def alerts(self, query: AlertsQuery) -> AlertsResponse:
        return self.get(query, AlertsResponse)


__all__ = [
    "ClientConfig",
    "HTTPClient",
    "RequestsHTTPClient",
    "BrightSkyClient",
    "RESPONSE_MODELS",
]
