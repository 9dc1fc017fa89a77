"""Domain service turning provider forecasts into publishable records."""

from datetime import timedelta
from typing import Iterable

from carbon_exporter.domain.entities.forecast import (
    EmissionsForecastPoint,
    PublishBatch,
    PublishedRecord,
)
from carbon_exporter.shared import format_optional_timestamp, get_logger

logger = get_logger(__name__)

_ONE_MINUTE = timedelta(minutes=1)


def _to_record(point: EmissionsForecastPoint) -> PublishedRecord:
    return PublishedRecord(
        timestamp=point.time,
        duration_minutes=int(point.duration / _ONE_MINUTE),
        value=point.rating,
    )


def transform_forecast(points: Iterable[EmissionsForecastPoint]) -> PublishBatch:
    """
    Drop samples without a positive rating and convert the rest to records.

    Points with a zero, negative or NaN rating carry no data and are removed,
    never zero-filled. Durations are truncated to whole minutes. The input
    order is kept; the provider is expected to deliver chronological points,
    so the first and last records bound the forecast window.
    """
    records = tuple(_to_record(point) for point in points if point.rating > 0)
    batch = PublishBatch(records=records)

    logger.info(
        "forecast.transform.completed",
        count=batch.count,
        first_timestamp=format_optional_timestamp(batch.first_timestamp),
        last_timestamp=format_optional_timestamp(batch.last_timestamp),
    )
    return batch
