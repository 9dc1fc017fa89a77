"""
Domain Entities Package

This package contains the core domain entities and errors.
"""

from .config_document import ConfigDocument
from .errors import (
    ConfigStoreError,
    DomainError,
    ForecastFetchError,
    ForecastParseError,
    InvalidLocationError,
)
from .forecast import EmissionsForecastPoint, PublishBatch, PublishedRecord
from .location import ComputingLocation

__all__ = [
    "ComputingLocation",
    "ConfigDocument",
    "ConfigStoreError",
    "DomainError",
    "EmissionsForecastPoint",
    "ForecastFetchError",
    "ForecastParseError",
    "InvalidLocationError",
    "PublishBatch",
    "PublishedRecord",
]
