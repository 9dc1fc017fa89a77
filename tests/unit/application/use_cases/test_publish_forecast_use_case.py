from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

import pytest

from carbon_exporter.application.use_cases.publish_forecast_use_case import (
    PublishForecastUseCase,
    local_now,
)
from carbon_exporter.domain.entities.config_document import ConfigDocument
from carbon_exporter.domain.entities.errors import ConfigStoreError
from carbon_exporter.domain.entities.forecast import PublishBatch
from carbon_exporter.domain.services.forecast_transformer import transform_forecast


def _use_case(store, now: datetime) -> PublishForecastUseCase:
    return PublishForecastUseCase(config_store_gateway=store, clock=lambda: now)


@pytest.mark.asyncio
async def test_publish_creates_missing_document(
    fake_config_store, sample_points, fixed_now
) -> None:
    batch = transform_forecast(sample_points)

    await _use_case(fake_config_store, fixed_now).execute(
        "kube-system", "carbon-intensity", "data", batch
    )

    assert fake_config_store.calls == [
        ("get", "kube-system", "carbon-intensity"),
        ("create", "kube-system", "carbon-intensity"),
        ("update", "kube-system", "carbon-intensity"),
    ]
    stored = fake_config_store.documents[("kube-system", "carbon-intensity")]
    assert stored.namespace == "kube-system"
    assert stored.name == "carbon-intensity"
    assert stored.data == {
        "lastHeartbeatTime": "2024-05-01T12:00:00+02:00",
        "numOfRecords": "2",
        "minForecast": "2023-01-01T00:00:00+00:00",
        "maxForecast": "2023-01-01T01:00:00+00:00",
    }
    assert json.loads(stored.binary_data["data"].decode("utf-8")) == [
        {"timestamp": "2023-01-01T00:00:00+00:00", "duration": 30, "value": 120.0},
        {"timestamp": "2023-01-01T01:00:00+00:00", "duration": 30, "value": 95.5},
    ]


@pytest.mark.asyncio
async def test_publish_updates_existing_document_in_place(
    fake_config_store, sample_points, fixed_now
) -> None:
    fake_config_store.seed(
        ConfigDocument(
            namespace="default",
            name="carbon",
            data={"owner": "platform", "numOfRecords": "99"},
            binary_data={"data": b"old", "other": b"untouched"},
            labels={"app": "scheduler"},
        )
    )

    result = await _use_case(fake_config_store, fixed_now).execute(
        "default", "carbon", "data", transform_forecast(sample_points)
    )

    assert [call[0] for call in fake_config_store.calls] == ["get", "update"]
    stored = fake_config_store.documents[("default", "carbon")]
    assert stored.data["owner"] == "platform"
    assert stored.data["numOfRecords"] == "2"
    assert stored.binary_data["other"] == b"untouched"
    assert stored.binary_data["data"] != b"old"
    assert stored.labels == {"app": "scheduler"}
    assert result.resource_version == "2"


@pytest.mark.asyncio
async def test_republishing_only_changes_heartbeat(
    fake_config_store, sample_points
) -> None:
    batch = transform_forecast(sample_points)
    first_now = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
    second_now = first_now + timedelta(hours=1)

    first = await _use_case(fake_config_store, first_now).execute(
        "ns", "cm", "data", batch
    )
    second = await _use_case(fake_config_store, second_now).execute(
        "ns", "cm", "data", batch
    )

    assert first.binary_data == second.binary_data
    for key in ("numOfRecords", "minForecast", "maxForecast"):
        assert first.data[key] == second.data[key]
    assert first.data["lastHeartbeatTime"] != second.data["lastHeartbeatTime"]


@pytest.mark.asyncio
async def test_publish_empty_batch(fake_config_store, fixed_now) -> None:
    result = await _use_case(fake_config_store, fixed_now).execute(
        "ns", "cm", "data", PublishBatch()
    )

    assert result.data["numOfRecords"] == "0"
    assert result.data["minForecast"] == ""
    assert result.data["maxForecast"] == ""
    assert json.loads(result.binary_data["data"]) == []


@pytest.mark.asyncio
@pytest.mark.parametrize("operation", ["get", "create", "update"])
async def test_publish_propagates_store_failures(
    fake_config_store, fixed_now, operation
) -> None:
    fake_config_store.fail_on = operation

    with pytest.raises(ConfigStoreError):
        await _use_case(fake_config_store, fixed_now).execute(
            "ns", "cm", "data", PublishBatch()
        )


@pytest.mark.asyncio
async def test_failed_write_leaves_created_document(
    fake_config_store, fixed_now
) -> None:
    fake_config_store.fail_on = "update"

    with pytest.raises(ConfigStoreError):
        await _use_case(fake_config_store, fixed_now).execute(
            "ns", "cm", "data", PublishBatch()
        )

    stored = fake_config_store.documents[("ns", "cm")]
    assert stored.data == {}
    assert stored.binary_data == {}


@pytest.mark.asyncio
async def test_publish_rejects_stale_copy(fake_config_store, fixed_now) -> None:
    fake_config_store.seed(ConfigDocument(namespace="ns", name="cm"))

    stored_get = fake_config_store.get_document

    async def _get_then_concurrent_write(namespace: str, name: str):
        document = await stored_get(namespace, name)
        fake_config_store.documents[(namespace, name)].resource_version = "7"
        return document

    fake_config_store.get_document = _get_then_concurrent_write

    with pytest.raises(ConfigStoreError):
        await _use_case(fake_config_store, fixed_now).execute(
            "ns", "cm", "data", PublishBatch()
        )


def test_local_now_is_timezone_aware() -> None:
    assert local_now().utcoffset() is not None
