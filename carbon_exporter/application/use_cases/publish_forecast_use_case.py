"""
Publish Forecast Use Case - Application Layer

Writes a transformed forecast batch into the shared ConfigMap: the document
is fetched (or created when missing), the bookkeeping metadata and the JSON
payload are merged in, and the result is persisted with one update call.
"""

from datetime import datetime
from typing import Callable

from dependency_injector.wiring import Provide, inject

from carbon_exporter.application.dtos.forecast_dto import (
    ForecastMetadataDTO,
    serialize_records,
)
from carbon_exporter.domain.entities.config_document import ConfigDocument
from carbon_exporter.domain.entities.forecast import PublishBatch
from carbon_exporter.domain.gateways.config_store_gateway import IConfigStoreGateway
from carbon_exporter.shared import get_logger

logger = get_logger(__name__)


def local_now() -> datetime:
    """Current time with the local UTC offset attached."""
    return datetime.now().astimezone()


class PublishForecastUseCase:
    """Use case for upserting a forecast batch into a config document."""

    @inject
    def __init__(
        self,
        config_store_gateway: IConfigStoreGateway = Provide["config_store_gateway"],
        clock: Callable[[], datetime] = local_now,
    ):
        """
        Initialize the use case with its dependencies.

        Args:
            config_store_gateway: Gateway reading and writing config documents
            clock: Source of the heartbeat timestamp
        """
        self.config_store_gateway = config_store_gateway
        self._clock = clock

    async def execute(
        self,
        namespace: str,
        name: str,
        payload_key: str,
        batch: PublishBatch,
    ) -> ConfigDocument:
        """
        Publish the batch under ``payload_key`` of ``namespace/name``.

        Other payload keys of the document are left untouched. The heartbeat
        is refreshed on every call, even when the forecast did not change.

        Returns:
            ConfigDocument: The document as returned by the store after the write

        Raises:
            ConfigStoreError: If the document cannot be read, created or updated
        """
        document = await self._get_or_create(namespace, name)

        metadata = ForecastMetadataDTO.from_batch(batch, heartbeat=self._clock())
        for key, value in metadata.to_data().items():
            document.set_metadata(key, value)
        document.set_payload(payload_key, serialize_records(batch.records))

        updated = await self.config_store_gateway.update_document(document)

        logger.info(
            "configmap.update.completed",
            namespace=namespace,
            name=name,
            key=payload_key,
            count=batch.count,
        )
        return updated

    async def _get_or_create(self, namespace: str, name: str) -> ConfigDocument:
        document = await self.config_store_gateway.get_document(namespace, name)
        if document is not None:
            return document

        logger.info("configmap.create", namespace=namespace, name=name)
        return await self.config_store_gateway.create_document(
            ConfigDocument(namespace=namespace, name=name)
        )
