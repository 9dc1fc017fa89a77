"""Domain entity for computing locations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ComputingLocation:
    """A grid region the forecast provider publishes data for."""

    code: str
    name: str
