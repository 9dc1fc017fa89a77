"""Domain entity for the shared configuration document (a ConfigMap)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(slots=True)
class ConfigDocument:
    """
    In-memory copy of a ConfigMap.

    ``data`` holds string metadata and ``binary_data`` holds raw payloads.
    ``resource_version`` is the version read from the cluster; sending it
    back on update lets the API server reject writes based on a stale copy.
    ``raw`` keeps the stored object so that a replace writes back owner
    references, finalizers and any other field untouched.
    """

    namespace: str
    name: str
    data: Dict[str, str] = field(default_factory=dict)
    binary_data: Dict[str, bytes] = field(default_factory=dict)
    resource_version: Optional[str] = None
    labels: Dict[str, str] = field(default_factory=dict)
    annotations: Dict[str, str] = field(default_factory=dict)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def set_metadata(self, key: str, value: str) -> None:
        self.data[key] = value

    def set_payload(self, key: str, payload: bytes) -> None:
        self.binary_data[key] = payload
