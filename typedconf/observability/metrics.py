"""Metrics collection for configuration loading."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class ConfigMetrics:
    """Metrics for configuration loading.

    Attributes:
        load_duration_ms: Time taken by the most recent load.
        files_loaded: Number of config files read.
        redefinition_warnings_total: Variables re-defined by later definitions.
        load_errors_total: Loads that ended in an error.
    """

    load_duration_ms: float = 0.0
    files_loaded: int = 0
    redefinition_warnings_total: int = 0
    load_errors_total: int = 0

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

    def record_load_duration(self, duration_ms: float) -> None:
        """Record load duration.

        Args:
            duration_ms: Duration in milliseconds.
        """
        self.load_duration_ms = duration_ms

    def record_file_loaded(self) -> None:
        """Record a file read."""
        self.files_loaded += 1

    def record_redefinition(self) -> None:
        """Record a re-definition warning."""
        self.redefinition_warnings_total += 1

    def record_load_error(self) -> None:
        """Record a failed load."""
        self.load_errors_total += 1

    def to_dict(self) -> dict[str, float | int]:
        """Convert metrics to dictionary."""
        return {
            "load_duration_ms": self.load_duration_ms,
            "files_loaded": self.files_loaded,
            "redefinition_warnings_total": self.redefinition_warnings_total,
            "load_errors_total": self.load_errors_total,
        }
