"""
Domain Gateway - Forecast Provider

This module defines the gateway interface for downloading carbon-intensity
forecasts for a computing location.
"""

from abc import ABC, abstractmethod
from typing import List

from carbon_exporter.domain.entities.forecast import EmissionsForecastPoint
from carbon_exporter.domain.entities.location import ComputingLocation


class IForecastGateway(ABC):
    """Interface for forecast provider gateway."""

    @abstractmethod
    async def get_forecast(
        self,
        location: ComputingLocation,
        endpoint_template: str,
    ) -> List[EmissionsForecastPoint]:
        """
        Download the forecast for a location.

        Args:
            location: Resolved computing location
            endpoint_template: URL containing one placeholder for the location code

        Returns:
            Forecast points in provider order

        Raises:
            ForecastFetchError: When the provider cannot be reached
            ForecastParseError: When the response cannot be decoded
        """
        pass
