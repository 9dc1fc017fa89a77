"""
Application Layer Package

This package contains the use cases that drive the export pipeline and the
DTOs describing what is written to the ConfigMap.
"""

from carbon_exporter.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
