"""
observability/__init__.py

PURPOSE: OpenTelemetry observability module for tracing.
DEPENDENCIES: opentelemetry-api, opentelemetry-sdk

ARCHITECTURE NOTES:
This module provides tracing capabilities that are opt-in:
- No-op spans until init_telemetry() is called with tracing enabled
- Console output by default when enabled
- OTLP export when endpoint is configured
"""

from ruby_quest.observability.telemetry import get_tracer, init_telemetry, shutdown_telemetry

__all__ = ["init_telemetry", "get_tracer", "shutdown_telemetry"]
