"""
Gateways Package - Domain Layer

This package contains interfaces defining gateway contracts
for external service communications. Specific implementations
are provided by the infrastructure layer.
"""

from .config_store_gateway import IConfigStoreGateway
from .forecast_gateway import IForecastGateway

__all__ = ["IConfigStoreGateway", "IForecastGateway"]
