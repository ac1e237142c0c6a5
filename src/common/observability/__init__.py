"""Shared observability helpers."""

from common.observability.exporter import is_feature_enabled, is_otel_exporter_configured

__all__ = ["is_feature_enabled", "is_otel_exporter_configured"]
