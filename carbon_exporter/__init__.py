"""
Carbon Exporter Root Module

Publishes a grid carbon-intensity forecast into a Kubernetes ConfigMap.

Layer Structure:
- Domain: Forecast entities, location catalog, transformation rules
- Application: Use cases and DTOs
- Infrastructure: HTTP gateways for the forecast provider and the cluster
- Shared: Cross-cutting concerns and shared utilities
- Main: Composition root, command line entry point and configuration
"""
