"""
Domain Layer Package

This package contains the forecast entities, the location catalog and the
transformation rules. It has no dependencies on HTTP clients or on the
cluster API.
"""

from carbon_exporter.domain import entities, gateways, services

__all__ = ["entities", "gateways", "services"]
