"""
Infrastructure Gateway - Carbon Aware Computing Forecast

This module downloads the open-data carbon-intensity forecasts published by
the Carbon Aware Computing project. Each location is a JSON document holding
an ``Emissions`` array of ``{Time, Duration, Rating}`` entries.
"""

import re
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

import httpx

from carbon_exporter.domain.entities.errors import (
    ForecastFetchError,
    ForecastParseError,
)
from carbon_exporter.domain.entities.forecast import EmissionsForecastPoint
from carbon_exporter.domain.entities.location import ComputingLocation
from carbon_exporter.domain.gateways.forecast_gateway import IForecastGateway
from carbon_exporter.shared import get_logger

logger = get_logger(__name__)

PLACEHOLDERS = ("{0}", "{location}")

# .NET TimeSpan text: [d.]hh:mm:ss[.fffffff]
_TIME_SPAN_PATTERN = re.compile(
    r"^(?:(?P<days>\d+)\.)?(?P<hours>\d{1,2}):(?P<minutes>\d{2}):(?P<seconds>\d{2})"
    r"(?:\.(?P<fraction>\d+))?$"
)
# fromisoformat on 3.10 wants exactly six fractional digits; .NET writes one to seven.
_FRACTION_PATTERN = re.compile(r"(?<=:\d{2})\.(\d+)")


def build_endpoint(endpoint_template: str, location: ComputingLocation) -> str:
    """
    Substitute the location code into the endpoint template.

    Raises:
        ForecastFetchError: If the template does not hold exactly one placeholder
    """
    found = sum(endpoint_template.count(placeholder) for placeholder in PLACEHOLDERS)
    if found != 1:
        raise ForecastFetchError(
            "Forecast endpoint template must contain exactly one location "
            f"placeholder, found {found}",
            details={"template": endpoint_template},
        )
    url = endpoint_template
    for placeholder in PLACEHOLDERS:
        url = url.replace(placeholder, location.code)
    return url


class CarbonAwareForecastGateway(IForecastGateway):
    """Implementation of the forecast gateway using HTTP client."""

    def __init__(self, timeout: float = 30.0):
        """
        Initialize the forecast gateway.

        Args:
            timeout: Request timeout in seconds
        """
        self.timeout = timeout

    async def get_forecast(
        self,
        location: ComputingLocation,
        endpoint_template: str,
    ) -> List[EmissionsForecastPoint]:
        """Download and decode the forecast for ``location``."""

        url = build_endpoint(endpoint_template, location)

        logger.info("forecast.download.started", url=url, location=location.code)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, headers={"Accept": "application/json"})
                response.raise_for_status()
                data = response.json()

        except httpx.HTTPStatusError as e:
            logger.error(
                "forecast.download.http_error",
                status_code=e.response.status_code,
                url=url,
            )
            raise ForecastFetchError(
                f"Forecast HTTP error {e.response.status_code} for {url}",
                details={"url": url, "status_code": e.response.status_code},
            ) from e

        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.error("forecast.download.request_error", error=str(e), url=url)
            raise ForecastFetchError(
                f"Forecast request failed: {e}", details={"url": url}
            ) from e

        except ValueError as e:
            logger.error("forecast.download.invalid_json", error=str(e), url=url)
            raise ForecastParseError(
                f"Forecast response is not valid JSON: {e}", details={"url": url}
            ) from e

        points = parse_forecast(data)
        logger.info(
            "forecast.download.completed",
            location=location.code,
            count=len(points),
        )
        return points


def parse_forecast(data: Any) -> List[EmissionsForecastPoint]:
    """
    Decode a forecast document into forecast points.

    Accepts either the provider's object form (``{"Emissions": [...]}``) or a
    bare array of entries. Keys are matched case-insensitively.

    Raises:
        ForecastParseError: If the document or any entry cannot be decoded
    """
    if isinstance(data, dict):
        entries = _lookup(data, "emissions")
    else:
        entries = data

    if not isinstance(entries, list):
        raise ForecastParseError("Forecast document does not contain an emissions list")

    points = []
    for index, entry in enumerate(entries):
        try:
            points.append(_parse_entry(entry))
        except (TypeError, ValueError, KeyError) as e:
            raise ForecastParseError(
                f"Invalid forecast entry at index {index}: {e}",
                details={"index": index, "entry": entry},
            ) from e
    return points


def _parse_entry(entry: Any) -> EmissionsForecastPoint:
    if not isinstance(entry, dict):
        raise TypeError(f"expected an object, got {type(entry).__name__}")

    return EmissionsForecastPoint(
        time=_parse_time(_require(entry, "time")),
        duration=_parse_duration(_require(entry, "duration")),
        rating=_parse_rating(_require(entry, "rating")),
    )


def _lookup(data: Dict[str, Any], key: str) -> Optional[Any]:
    for name, value in data.items():
        if name.lower() == key:
            return value
    return None


def _require(entry: Dict[str, Any], key: str) -> Any:
    value = _lookup(entry, key)
    if value is None:
        raise KeyError(key)
    return value


def _parse_time(value: Any) -> datetime:
    if not isinstance(value, str):
        raise TypeError("time must be a string")
    text = _FRACTION_PATTERN.sub(
        lambda match: "." + match.group(1)[:6].ljust(6, "0"),
        value.strip().replace("Z", "+00:00"),
    )
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _parse_duration(value: Any) -> timedelta:
    """Parse a .NET TimeSpan string or a number of minutes."""
    if isinstance(value, bool):
        raise TypeError("duration must be a time span or a number of minutes")
    if isinstance(value, (int, float)):
        return timedelta(minutes=value)
    if not isinstance(value, str):
        raise TypeError("duration must be a time span or a number of minutes")

    match = _TIME_SPAN_PATTERN.match(value.strip())
    if match is None:
        raise ValueError(f"unsupported duration format {value!r}")

    fraction = match.group("fraction") or "0"
    return timedelta(
        days=int(match.group("days") or 0),
        hours=int(match.group("hours")),
        minutes=int(match.group("minutes")),
        seconds=int(match.group("seconds")),
        microseconds=int(fraction[:6].ljust(6, "0")),
    )


def _parse_rating(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError("rating must be a number")
    return float(value)
