"""Unit tests for configuration metrics."""

import pytest

from typedconf.observability.metrics import ConfigMetrics


class TestConfigMetrics:
    """Tests for ConfigMetrics."""

    @pytest.mark.unit
    def test_singleton(self) -> None:
        """get_instance returns the same object until reset."""
        first = ConfigMetrics.get_instance()
        assert ConfigMetrics.get_instance() is first
        ConfigMetrics.reset()
        assert ConfigMetrics.get_instance() is not first

    @pytest.mark.unit
    def test_recording(self) -> None:
        """Counters accumulate and duration is replaced."""
        metrics = ConfigMetrics()
        metrics.record_file_loaded()
        metrics.record_file_loaded()
        metrics.record_redefinition()
        metrics.record_load_error()
        metrics.record_load_duration(1.5)
        metrics.record_load_duration(2.5)

        assert metrics.to_dict() == {
            "load_duration_ms": 2.5,
            "files_loaded": 2,
            "redefinition_warnings_total": 1,
            "load_errors_total": 1,
        }
