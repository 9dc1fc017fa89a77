from __future__ import annotations

import copy
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from carbon_exporter.domain.entities.config_document import ConfigDocument  # noqa: E402
from carbon_exporter.domain.entities.errors import ConfigStoreError  # noqa: E402
from carbon_exporter.domain.entities.forecast import (  # noqa: E402
    EmissionsForecastPoint,
)
from carbon_exporter.domain.entities.location import ComputingLocation  # noqa: E402
from carbon_exporter.domain.gateways.config_store_gateway import (  # noqa: E402
    IConfigStoreGateway,
)
from carbon_exporter.domain.gateways.forecast_gateway import (  # noqa: E402
    IForecastGateway,
)


class FakeConfigStoreGateway(IConfigStoreGateway):
    """In-memory ConfigMap store with resource-version checks."""

    def __init__(self) -> None:
        self.documents: Dict[Tuple[str, str], ConfigDocument] = {}
        self.calls: List[Tuple[str, str, str]] = []
        self.fail_on: Optional[str] = None

    def seed(self, document: ConfigDocument) -> None:
        stored = copy.deepcopy(document)
        stored.resource_version = stored.resource_version or "1"
        self.documents[(stored.namespace, stored.name)] = stored

    def _maybe_fail(self, operation: str) -> None:
        if self.fail_on == operation:
            raise ConfigStoreError(f"{operation} failed")

    async def get_document(
        self, namespace: str, name: str
    ) -> Optional[ConfigDocument]:
        self.calls.append(("get", namespace, name))
        self._maybe_fail("get")
        document = self.documents.get((namespace, name))
        return copy.deepcopy(document) if document is not None else None

    async def create_document(self, document: ConfigDocument) -> ConfigDocument:
        self.calls.append(("create", document.namespace, document.name))
        self._maybe_fail("create")
        key = (document.namespace, document.name)
        if key in self.documents:
            raise ConfigStoreError("already exists")
        stored = copy.deepcopy(document)
        stored.resource_version = "1"
        self.documents[key] = stored
        return copy.deepcopy(stored)

    async def update_document(self, document: ConfigDocument) -> ConfigDocument:
        self.calls.append(("update", document.namespace, document.name))
        self._maybe_fail("update")
        key = (document.namespace, document.name)
        current = self.documents.get(key)
        if current is None:
            raise ConfigStoreError("not found")
        if document.resource_version != current.resource_version:
            raise ConfigStoreError("conflict")
        stored = copy.deepcopy(document)
        stored.resource_version = str(int(current.resource_version or "0") + 1)
        self.documents[key] = stored
        return copy.deepcopy(stored)


class StubForecastGateway(IForecastGateway):
    def __init__(
        self,
        points: Optional[List[EmissionsForecastPoint]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self._points = points or []
        self._error = error
        self.calls: List[Tuple[ComputingLocation, str]] = []

    async def get_forecast(
        self, location: ComputingLocation, endpoint_template: str
    ) -> List[EmissionsForecastPoint]:
        self.calls.append((location, endpoint_template))
        if self._error is not None:
            raise self._error
        return list(self._points)


@pytest.fixture()
def sample_points() -> List[EmissionsForecastPoint]:
    start = datetime(2023, 1, 1, tzinfo=timezone.utc)
    return [
        EmissionsForecastPoint(start, timedelta(minutes=30), 120.0),
        EmissionsForecastPoint(
            start + timedelta(minutes=30), timedelta(minutes=30), 0.0
        ),
        EmissionsForecastPoint(start + timedelta(hours=1), timedelta(minutes=30), 95.5),
    ]


@pytest.fixture()
def fake_config_store() -> FakeConfigStoreGateway:
    return FakeConfigStoreGateway()


@pytest.fixture()
def fixed_now() -> datetime:
    return datetime(2024, 5, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))


@pytest.fixture()
def forecast_gateway_factory():
    return StubForecastGateway
