"""
Domain Errors

This module defines the typed errors raised by each pipeline stage. Callers
can tell bad input (InvalidLocationError) apart from failures of the forecast
provider or of the cluster.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidLocationError(DomainError):
    """Raised when a computing location code is not in the catalog."""

    def __init__(self, code: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        message = f"No supported computing location found for {code}"
        super().__init__(message, details)


class ForecastFetchError(DomainError):
    """Raised when the forecast provider cannot be reached or answers with an error."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ForecastParseError(DomainError):
    """Raised when a forecast response cannot be decoded into forecast points."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class ConfigStoreError(DomainError):
    """Raised when reading, creating or updating the config document fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
