"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides shared utilities, constants, and enums that are used
across multiple layers of the application.

Following Clean Architecture principles:
- Shared module contains only *cross-cutting concerns*
- It must not depend on Infrastructure or Frameworks
"""

from .consts import EnumEnvironment, EnumExitCode, EnumLogLevel
from .logging import configure_logging, get_logger, update_logging_from_settings
from .timestamps import format_timestamp, format_optional_timestamp

__all__ = [
    "EnumEnvironment",
    "EnumExitCode",
    "EnumLogLevel",
    "configure_logging",
    "format_optional_timestamp",
    "format_timestamp",
    "get_logger",
    "update_logging_from_settings",
]
