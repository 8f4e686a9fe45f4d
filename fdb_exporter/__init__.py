"""Prometheus exporter for FoundationDB status documents."""

__version__ = "0.1.0"