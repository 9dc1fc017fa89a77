from __future__ import annotations

from carbon_exporter.main.config import AppSettings, get_settings
from carbon_exporter.shared.consts import EnumEnvironment


def test_get_settings_loads_defaults(monkeypatch) -> None:
    for key in (
        "FORECAST_COMPUTING_LOCATION",
        "FORECAST_ENDPOINT_TEMPLATE",
        "CONFIGMAP_NAMESPACE",
        "CONFIGMAP_NAME",
        "CONFIGMAP_KEY",
        "ENVIRONMENT",
    ):
        monkeypatch.delenv(key, raising=False)

    settings = get_settings()

    assert settings.forecast.computing_location == "de"
    assert settings.forecast.endpoint_template == (
        "https://carbonawarecomputing.blob.core.windows.net/forecasts/{0}.json"
    )
    assert settings.configmap.namespace == "kube-system"
    assert settings.configmap.name == "carbon-intensity"
    assert settings.configmap.key == "data"
    assert settings.environment == EnumEnvironment.DEVELOPMENT


def test_settings_respect_environment_variables(monkeypatch) -> None:
    monkeypatch.setenv("FORECAST_COMPUTING_LOCATION", "fr")
    monkeypatch.setenv("CONFIGMAP_NAMESPACE", "scheduling")
    monkeypatch.setenv("KUBE_API_URL", "https://kubernetes.default.svc")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = AppSettings()

    assert settings.forecast.computing_location == "fr"
    assert settings.configmap.namespace == "scheduling"
    assert settings.kubernetes.api_url == "https://kubernetes.default.svc"
    assert settings.logging.level.value == "DEBUG"
