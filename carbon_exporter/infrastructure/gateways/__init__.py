"""
Gateways Package - Infrastructure Layer

This package contains concrete implementations of the gateway
interfaces defined in the domain layer. These implementations
handle the details of external service communications.
"""

from .carbon_aware_forecast_gateway import CarbonAwareForecastGateway
from .kubernetes_configmap_gateway import KubernetesConfigMapGateway

__all__ = ["CarbonAwareForecastGateway", "KubernetesConfigMapGateway"]
