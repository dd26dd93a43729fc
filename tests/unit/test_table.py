"""Unit tests for ConfigTable."""

import pytest

from typedconf.config.table import ConfigTable
from typedconf.config.values import parse_value


class TestConfigTable:
    """Tests for the loaded table."""

    @pytest.mark.unit
    def test_entries_are_read_only(self) -> None:
        """Entries cannot be added or replaced after construction."""
        table = ConfigTable(entries={"A": parse_value("int", "1")})

        with pytest.raises(TypeError):
            table.entries["A"] = parse_value("int", "2")  # type: ignore[index]
        with pytest.raises(TypeError):
            table.entries["B"] = parse_value("int", "3")  # type: ignore[index]

        assert table.get("A") == parse_value("int", "1")
        assert "B" not in table

    @pytest.mark.unit
    def test_checksums_are_read_only(self) -> None:
        """File checksums cannot be changed either."""
        table = ConfigTable(file_checksums={"/app.cfg": "abc"})

        with pytest.raises(TypeError):
            table.file_checksums["/app.cfg"] = "def"  # type: ignore[index]

    @pytest.mark.unit
    def test_source_dict_is_copied(self) -> None:
        """Mutating the dict a table was built from leaves the table alone."""
        entries = {"A": parse_value("int", "1")}
        table = ConfigTable(entries=entries)

        entries["B"] = parse_value("int", "2")

        assert len(table) == 1
        assert "B" not in table

    @pytest.mark.unit
    def test_defaults_are_read_only(self) -> None:
        """An empty table is read-only too."""
        table = ConfigTable()

        assert len(table) == 0
        with pytest.raises(TypeError):
            table.entries["A"] = parse_value("int", "1")  # type: ignore[index]

    @pytest.mark.unit
    def test_model_dump_gives_plain_dicts(self) -> None:
        """Serialization is unaffected by the read-only views."""
        table = ConfigTable(
            entries={"A": parse_value("int", "1")},
            file_checksums={"/app.cfg": "abc"},
        )

        dumped = table.model_dump(mode="json")

        assert dumped == {
            "entries": {"A": {"kind": "int", "value": 1}},
            "file_checksums": {"/app.cfg": "abc"},
        }

    @pytest.mark.unit
    def test_checksum_is_order_independent(self) -> None:
        """The checksum depends on contents, not insertion order."""
        first = ConfigTable(
            entries={"A": parse_value("int", "1"), "B": parse_value("bool", "true")}
        )
        second = ConfigTable(
            entries={"B": parse_value("bool", "true"), "A": parse_value("int", "1")}
        )

        assert first.compute_checksum() == second.compute_checksum()
