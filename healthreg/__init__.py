"""Endpoint health check registry."""

__version__ = "0.1.0"
