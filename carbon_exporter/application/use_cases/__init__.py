"""
Application Use Cases Package

This package contains the use cases that run the export pipeline.
"""

from .export_forecast_use_case import ExportForecastUseCase, ExportResult
from .publish_forecast_use_case import PublishForecastUseCase

__all__ = ["ExportForecastUseCase", "ExportResult", "PublishForecastUseCase"]
