"""Unit tests for command-line override scanning."""

from pathlib import Path

import pytest

from typedconf.config.arguments import OverrideDefinition, scan_arguments
from typedconf.config.errors import (
    InvalidTypeNameError,
    InvalidValueFormatError,
    OverrideArgumentError,
)


class TestScanArguments:
    """Tests for scan_arguments."""

    @pytest.mark.unit
    def test_defaults(self) -> None:
        """Without flags the default path is used and there are no overrides."""
        sources = scan_arguments([], "app.cfg")
        assert sources.primary_path == Path("app.cfg")
        assert sources.overrides == []

    @pytest.mark.unit
    def test_use_config_replaces_primary(self) -> None:
        """--use-config replaces the default path."""
        sources = scan_arguments(["--use-config", "other.cfg"], "app.cfg")
        assert sources.primary_path == Path("other.cfg")

    @pytest.mark.unit
    def test_use_config_without_path_is_ignored(self) -> None:
        """A trailing --use-config has no effect."""
        sources = scan_arguments(["--use-config"], "app.cfg")
        assert sources.primary_path == Path("app.cfg")

    @pytest.mark.unit
    def test_add_config_in_order(self) -> None:
        """Extra files keep command-line order."""
        sources = scan_arguments(
            ["--add-config", "a.cfg", "--add-config", "b.cfg"], "app.cfg"
        )
        assert sources.extra_files == [Path("a.cfg"), Path("b.cfg")]

    @pytest.mark.unit
    def test_definitions(self) -> None:
        """-DNAME TYPE VALUE adds a definition."""
        sources = scan_arguments(["-DPORT", "int", "8080", "-DHOST", "string", "x"], "a")
        assert sources.definitions == [
            OverrideDefinition(name="PORT", type_name="int", text="8080"),
            OverrideDefinition(name="HOST", type_name="string", text="x"),
        ]

    @pytest.mark.unit
    def test_other_tokens_ignored(self) -> None:
        """Arguments of the host program are skipped."""
        sources = scan_arguments(
            ["--verbose", "input.txt", "-DN", "int", "1", "-x"], "app.cfg"
        )
        assert sources.extra_files == []
        assert [d.name for d in sources.definitions] == ["N"]

    @pytest.mark.unit
    def test_ordered_puts_definitions_last(self) -> None:
        """Definitions are applied after every file."""
        sources = scan_arguments(
            ["-DN", "int", "1", "--add-config", "a.cfg"], "app.cfg"
        )
        assert sources.ordered() == [
            Path("a.cfg"),
            OverrideDefinition(name="N", type_name="int", text="1"),
        ]

    @pytest.mark.unit
    def test_missing_type(self) -> None:
        """A definition at the end of argv is missing its type."""
        with pytest.raises(OverrideArgumentError) as exc_info:
            scan_arguments(["-DPORT"], "app.cfg")
        assert exc_info.value.reason == "Missing type"
        assert exc_info.value.variable == "PORT"

    @pytest.mark.unit
    def test_missing_value(self) -> None:
        """A definition with only a type is missing its value."""
        with pytest.raises(OverrideArgumentError) as exc_info:
            scan_arguments(["-DPORT", "int"], "app.cfg")
        assert exc_info.value.reason == "Missing type or value"

    @pytest.mark.unit
    def test_invalid_type_name(self) -> None:
        """Bad type tags fail at scan time and name the variable."""
        with pytest.raises(InvalidTypeNameError) as exc_info:
            scan_arguments(["-DPORT", "integer", "80"], "app.cfg")
        assert exc_info.value.variable == "PORT"
        assert "user-set configuration variable PORT" in str(exc_info.value)

    @pytest.mark.unit
    def test_invalid_value(self) -> None:
        """Bad values fail at scan time."""
        with pytest.raises(InvalidValueFormatError):
            scan_arguments(["-DPORT", "int", "eighty"], "app.cfg")
