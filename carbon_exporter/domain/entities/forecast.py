"""Domain entities for carbon-intensity forecasts."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class EmissionsForecastPoint:
    """One forecast sample as delivered by the provider."""

    time: datetime
    duration: timedelta
    rating: float


@dataclass(frozen=True, slots=True)
class PublishedRecord:
    """A forecast point in the shape written to the ConfigMap."""

    timestamp: datetime
    duration_minutes: int
    value: float


@dataclass(frozen=True, slots=True)
class PublishBatch:
    """The records published by one run, in provider order."""

    records: Tuple[PublishedRecord, ...] = ()

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def first_timestamp(self) -> Optional[datetime]:
        """Timestamp of the first record, ``None`` for an empty batch."""
        return self.records[0].timestamp if self.records else None

    @property
    def last_timestamp(self) -> Optional[datetime]:
        """Timestamp of the last record, ``None`` for an empty batch."""
        return self.records[-1].timestamp if self.records else None
