"""
Mounted-file settings for the exporter.

A CronJob usually receives the API server address or the target ConfigMap
from a mounted Secret or ConfigMap volume rather than from a literal value.
``KUBE_API_URL_FILE=/etc/exporter/api-url`` therefore stands in for
``KUBE_API_URL``. Only the exporter's own setting groups are resolved; any
other ``*_FILE`` variable in the pod environment is left alone.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import MutableMapping, Optional, Tuple

logger = logging.getLogger(__name__)

FILE_SUFFIX = "_FILE"

# Prefixes of the settings groups in ``carbon_exporter.main.config``.
SETTING_PREFIXES: Tuple[str, ...] = (
    "FORECAST_",
    "CONFIGMAP_",
    "KUBE_",
    "LOG_",
)
SETTING_NAMES: Tuple[str, ...] = ("ENVIRONMENT",)


def setting_for_file_variable(key: str) -> Optional[str]:
    """Return the setting a ``*_FILE`` variable provides, if it is one of ours."""
    if not key.endswith(FILE_SUFFIX):
        return None
    setting = key[: -len(FILE_SUFFIX)]
    name = setting.upper()
    if name in SETTING_NAMES or name.startswith(SETTING_PREFIXES):
        return setting
    return None


def _read_setting_file(key: str, path: str) -> Optional[str]:
    try:
        return Path(path).read_text(encoding="utf-8").strip()
    except UnicodeDecodeError as exc:
        event = "env.secret_file.decode_failed"
        error = str(exc)
    except FileNotFoundError as exc:
        event = "env.secret_file.missing"
        error = str(exc)
    except OSError as exc:
        event = "env.secret_file.load_failed"
        error = str(exc)

    logger.warning(event, extra={"key": key, "path": path, "error": error})
    return None


def load_secret_file_variables(
    environ: Optional[MutableMapping[str, str]] = None,
) -> int:
    """
    Fill exporter settings from their ``*_FILE`` companions.

    A value set directly always wins over the file. Files that cannot be read
    are logged and skipped, so settings fall back to their defaults.

    Returns:
        Number of settings that were populated.
    """
    env = os.environ if environ is None else environ
    loaded = 0
    for key, path in list(env.items()):
        setting = setting_for_file_variable(key)
        if setting is None or not path or env.get(setting):
            continue
        value = _read_setting_file(key, path)
        if value is not None:
            env[setting] = value
            loaded += 1
    return loaded
