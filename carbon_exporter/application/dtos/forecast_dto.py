"""
Application DTOs - Forecast

Wire shapes of the forecast payload and of the bookkeeping metadata stored
in the ConfigMap. Consumers read these keys, so they are part of the
exporter's public contract.
"""

from datetime import datetime
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_serializer

from carbon_exporter.domain.entities.forecast import PublishBatch, PublishedRecord
from carbon_exporter.shared import format_optional_timestamp, format_timestamp


class PublishedRecordDTO(BaseModel):
    """One element of the JSON array stored under the payload key."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(description="Start of the forecast window")
    duration: int = Field(description="Window length in whole minutes")
    value: float = Field(description="Carbon intensity rating")

    @field_serializer("timestamp")
    def _serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)

    @classmethod
    def from_record(cls, record: PublishedRecord) -> "PublishedRecordDTO":
        return cls(
            timestamp=record.timestamp,
            duration=record.duration_minutes,
            value=record.value,
        )


_RECORD_LIST_ADAPTER = TypeAdapter(List[PublishedRecordDTO])


def serialize_records(records: Sequence[PublishedRecord]) -> bytes:
    """Serialize records to a UTF-8 JSON array with camelCase keys."""
    dtos = [PublishedRecordDTO.from_record(record) for record in records]
    return _RECORD_LIST_ADAPTER.dump_json(dtos)


class ForecastMetadataDTO(BaseModel):
    """Bookkeeping values written next to the payload as plain strings."""

    last_heartbeat_time: datetime = Field(serialization_alias="lastHeartbeatTime")
    num_of_records: int = Field(ge=0, serialization_alias="numOfRecords")
    min_forecast: Optional[datetime] = Field(
        default=None, serialization_alias="minForecast"
    )
    max_forecast: Optional[datetime] = Field(
        default=None, serialization_alias="maxForecast"
    )

    @classmethod
    def from_batch(
        cls, batch: PublishBatch, heartbeat: datetime
    ) -> "ForecastMetadataDTO":
        return cls(
            last_heartbeat_time=heartbeat,
            num_of_records=batch.count,
            min_forecast=batch.first_timestamp,
            max_forecast=batch.last_timestamp,
        )

    def to_data(self) -> Dict[str, str]:
        """Render the metadata as the string map stored in the ConfigMap."""
        rendered: Dict[str, str] = {}
        for key, value in self.model_dump(by_alias=True).items():
            if value is None or isinstance(value, datetime):
                rendered[key] = format_optional_timestamp(value)
            else:
                rendered[key] = str(value)
        return rendered
