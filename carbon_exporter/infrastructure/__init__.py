"""
Infrastructure Layer Package

This package implements the domain gateways against the external systems:
the forecast provider's HTTP endpoint and the Kubernetes API server.
"""
