"""
Application DTOs Package

Data Transfer Objects for the payload written to the ConfigMap.
"""

from .forecast_dto import (
    ForecastMetadataDTO,
    PublishedRecordDTO,
    serialize_records,
)

__all__ = ["ForecastMetadataDTO", "PublishedRecordDTO", "serialize_records"]
