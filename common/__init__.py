"""Shared infrastructure: configuration, errors and telemetry."""
