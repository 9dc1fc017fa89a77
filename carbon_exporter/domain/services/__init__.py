"""
Domain Services Package

Pure domain logic: location lookup and forecast transformation.
"""

from .forecast_transformer import transform_forecast
from .location_resolver import resolve_location, supported_location_codes

__all__ = ["resolve_location", "supported_location_codes", "transform_forecast"]
