"""Shared fixtures for configuration tests."""

from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

from typedconf.config.store import reset_config
from typedconf.observability.metrics import ConfigMetrics


WriteConfig = Callable[..., Path]


@pytest.fixture(autouse=True)
def _reset_global_state() -> Iterator[None]:
    """Start every test with fresh metrics and no process-wide store."""
    ConfigMetrics.reset()
    reset_config()
    yield
    ConfigMetrics.reset()
    reset_config()


@pytest.fixture
def write_config(tmp_path: Path) -> WriteConfig:
    """Return a helper that writes a config file under tmp_path."""

    def _write(name: str, *lines: str) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
