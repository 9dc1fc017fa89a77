"""
Export Forecast Use Case - Application Layer

This module runs the whole export: resolve the location, download the
forecast, transform it and publish it to the ConfigMap. Stages run strictly
one after another; the first failing stage ends the run with its typed error.
"""

from dataclasses import dataclass

from dependency_injector.wiring import Provide, inject

from carbon_exporter.application.use_cases.publish_forecast_use_case import (
    PublishForecastUseCase,
)
from carbon_exporter.domain.entities.config_document import ConfigDocument
from carbon_exporter.domain.entities.forecast import PublishBatch
from carbon_exporter.domain.entities.location import ComputingLocation
from carbon_exporter.domain.gateways.forecast_gateway import IForecastGateway
from carbon_exporter.domain.services.forecast_transformer import transform_forecast
from carbon_exporter.domain.services.location_resolver import resolve_location
from carbon_exporter.shared import get_logger

logger = get_logger(__name__)


@dataclass(slots=True)
class ExportResult:
    """Outcome of a successful export run."""

    location: ComputingLocation
    batch: PublishBatch
    document: ConfigDocument


class ExportForecastUseCase:
    """Use case for exporting a location's forecast into a ConfigMap."""

    @inject
    def __init__(
        self,
        forecast_gateway: IForecastGateway = Provide["forecast_gateway"],
        publish_use_case: PublishForecastUseCase = Provide["publish_forecast_use_case"],
    ):
        self.forecast_gateway = forecast_gateway
        self.publish_use_case = publish_use_case

    async def execute(
        self,
        location_code: str,
        endpoint_template: str,
        namespace: str,
        name: str,
        payload_key: str,
    ) -> ExportResult:
        """
        Run resolve, fetch, transform and publish for one location.

        Raises:
            InvalidLocationError: If the location code is unknown (before any I/O)
            ForecastFetchError: If the forecast cannot be downloaded
            ForecastParseError: If the forecast cannot be decoded
            ConfigStoreError: If the ConfigMap cannot be updated
        """
        location = resolve_location(location_code)

        logger.info(
            "export.started",
            location=location.code,
            namespace=namespace,
            name=name,
            key=payload_key,
        )

        points = await self.forecast_gateway.get_forecast(location, endpoint_template)
        batch = transform_forecast(points)
        document = await self.publish_use_case.execute(
            namespace, name, payload_key, batch
        )

        logger.info(
            "export.completed",
            location=location.code,
            downloaded=len(points),
            published=batch.count,
        )
        return ExportResult(location=location, batch=batch, document=document)
