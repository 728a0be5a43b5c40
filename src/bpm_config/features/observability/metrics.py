"""Metrics collection for configuration loading."""

from dataclasses import dataclass, field
from typing import ClassVar


@dataclass
class ConfigMetrics:
    """In-process counters for configuration loads.

    Attributes:
        loads_total: Loads that completed successfully.
        load_failures_total: Loads that raised an error.
        errors_by_type: Failure count keyed by error type.
        persisted_total: Loads that wrote the process variable.
        last_load_duration_ms: Duration of the most recent load.
    """

    loads_total: int = 0
    load_failures_total: int = 0
    errors_by_type: dict[str, int] = field(default_factory=dict)
    persisted_total: int = 0
    last_load_duration_ms: float = 0.0

    _instance: ClassVar["ConfigMetrics | None"] = None

    @classmethod
    def get_instance(cls) -> "ConfigMetrics":
        """Get singleton metrics instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset metrics (primarily for testing)."""
        cls._instance = None

    def record_load(self, duration_ms: float, *, persisted: bool) -> None:
        """Record a successful load.

        Args:
            duration_ms: Duration in milliseconds.
            persisted: Whether the process variable was written.
        """
        self.loads_total += 1
        self.last_load_duration_ms = duration_ms
        if persisted:
            self.persisted_total += 1

    def record_failure(self, error_type: str, duration_ms: float) -> None:
        """Record a failed load.

        Args:
            error_type: Error type of the raised exception.
            duration_ms: Duration in milliseconds.
        """
        self.load_failures_total += 1
        self.last_load_duration_ms = duration_ms
        self.errors_by_type[error_type] = self.errors_by_type.get(error_type, 0) + 1

    def to_dict(self) -> dict[str, object]:
        """Convert metrics to dictionary."""
        return {
            "loads_total": self.loads_total,
            "load_failures_total": self.load_failures_total,
            "errors_by_type": dict(sorted(self.errors_by_type.items())),
            "persisted_total": self.persisted_total,
            "last_load_duration_ms": self.last_load_duration_ms,
        }
