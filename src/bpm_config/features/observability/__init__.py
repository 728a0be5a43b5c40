"""Observability module for logging and metrics."""

from bpm_config.features.observability.logging import configure_logging, run_context
from bpm_config.features.observability.metrics import ConfigMetrics


__all__ = [
    "ConfigMetrics",
    "configure_logging",
    "run_context",
]
