"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from dependency_injector import containers, providers

from carbon_exporter.application.use_cases.export_forecast_use_case import (
    ExportForecastUseCase,
)
from carbon_exporter.application.use_cases.publish_forecast_use_case import (
    PublishForecastUseCase,
)
from carbon_exporter.infrastructure.gateways.carbon_aware_forecast_gateway import (
    CarbonAwareForecastGateway,
)
from carbon_exporter.infrastructure.gateways.kubernetes_configmap_gateway import (
    KubernetesConfigMapGateway,
)

from .config import AppSettings


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependecy-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..application"])

    # Settings
    config = providers.Configuration()

    # Gateways
    forecast_gateway = providers.Singleton(
        CarbonAwareForecastGateway,
        timeout=config.forecast.timeout,
    )

    config_store_gateway = providers.Singleton(
        KubernetesConfigMapGateway,
        base_url=config.kubernetes.api_url,
        timeout=config.kubernetes.timeout,
    )

    # Application (use cases)
    publish_forecast_use_case = providers.Factory(
        PublishForecastUseCase,
        config_store_gateway=config_store_gateway,
    )

    export_forecast_use_case = providers.Factory(
        ExportForecastUseCase,
        forecast_gateway=forecast_gateway,
        publish_use_case=publish_forecast_use_case,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container
