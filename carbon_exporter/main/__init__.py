"""
Main module - Main/Composition Root Layer

This module serves as the entry point for the exporter, wiring the
settings, the gateways and the use cases together.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "get_settings",
    "AppContainer",
    "init_container",
    "get_container",
]
