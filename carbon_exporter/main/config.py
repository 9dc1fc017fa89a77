"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values. Command line
options override these values for a single run.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from carbon_exporter.shared import EnumEnvironment, EnumLogLevel
from carbon_exporter.shared.env import load_secret_file_variables

load_secret_file_variables()


class ForecastSettings(BaseSettings):
    """Forecast provider configuration settings."""

    computing_location: str = Field(
        default="de",
        description="Grid for which the carbon intensity is requested",
    )
    endpoint_template: str = Field(
        default="https://carbonawarecomputing.blob.core.windows.net/forecasts/{0}.json",
        description="URL of the forecast data; {0} is replaced by the location",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout (s)")

    model_config = SettingsConfigDict(
        env_prefix="FORECAST_", case_sensitive=False, extra="ignore"
    )


class ConfigMapSettings(BaseSettings):
    """Target ConfigMap configuration settings."""

    namespace: str = Field(
        default="kube-system", description="Namespace of the target ConfigMap"
    )
    name: str = Field(default="carbon-intensity", description="ConfigMap name")
    key: str = Field(default="data", description="binaryData key of the payload")

    model_config = SettingsConfigDict(
        env_prefix="CONFIGMAP_", case_sensitive=False, extra="ignore"
    )


class KubernetesSettings(BaseSettings):
    """Kubernetes API configuration settings."""

    api_url: str = Field(
        default="http://localhost:8001",
        description="Kubernetes API server URL (kubectl proxy by default)",
    )
    timeout: float = Field(default=30.0, gt=0, description="Request timeout (s)")

    model_config = SettingsConfigDict(
        env_prefix="KUBE_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    forecast: ForecastSettings = Field(default_factory=ForecastSettings)
    configmap: ConfigMapSettings = Field(default_factory=ConfigMapSettings)
    kubernetes: KubernetesSettings = Field(default_factory=KubernetesSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()
