from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

from carbon_exporter.application.dtos.forecast_dto import (
    ForecastMetadataDTO,
    PublishedRecordDTO,
    serialize_records,
)
from carbon_exporter.domain.entities.forecast import PublishBatch, PublishedRecord


def test_serialize_records_uses_camel_case_keys() -> None:
    record = PublishedRecord(
        timestamp=datetime(2023, 1, 1, tzinfo=timezone.utc),
        duration_minutes=30,
        value=120.0,
    )

    payload = serialize_records([record])

    assert isinstance(payload, bytes)
    assert json.loads(payload.decode("utf-8")) == [
        {"timestamp": "2023-01-01T00:00:00+00:00", "duration": 30, "value": 120.0}
    ]


def test_serialize_records_keeps_offset() -> None:
    offset = timezone(timedelta(hours=1))
    record = PublishedRecord(
        timestamp=datetime(2023, 1, 1, 1, 0, tzinfo=offset),
        duration_minutes=15,
        value=95.5,
    )

    decoded = json.loads(serialize_records([record]))

    assert decoded[0]["timestamp"] == "2023-01-01T01:00:00+01:00"


def test_serialize_records_empty() -> None:
    assert json.loads(serialize_records([])) == []


def test_published_record_dto_from_record() -> None:
    record = PublishedRecord(
        timestamp=datetime(2023, 1, 1, tzinfo=timezone.utc),
        duration_minutes=5,
        value=1.5,
    )
    dto = PublishedRecordDTO.from_record(record)
    assert dto.duration == 5
    assert dto.value == 1.5


def test_metadata_dto_renders_strings() -> None:
    start = datetime(2023, 1, 1, tzinfo=timezone.utc)
    batch = PublishBatch(
        records=(
            PublishedRecord(timestamp=start, duration_minutes=30, value=120.0),
            PublishedRecord(
                timestamp=start + timedelta(hours=1), duration_minutes=30, value=95.5
            ),
        )
    )
    heartbeat = datetime(2024, 5, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))

    data = ForecastMetadataDTO.from_batch(batch, heartbeat=heartbeat).to_data()

    assert data == {
        "lastHeartbeatTime": "2024-05-01T12:00:00+02:00",
        "numOfRecords": "2",
        "minForecast": "2023-01-01T00:00:00+00:00",
        "maxForecast": "2023-01-01T01:00:00+00:00",
    }


def test_metadata_dto_empty_batch_uses_empty_markers() -> None:
    heartbeat = datetime(2024, 5, 1, tzinfo=timezone.utc)

    data = ForecastMetadataDTO.from_batch(PublishBatch(), heartbeat=heartbeat).to_data()

    assert data["numOfRecords"] == "0"
    assert data["minForecast"] == ""
    assert data["maxForecast"] == ""
