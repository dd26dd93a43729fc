"""Loaded configuration table."""

import hashlib
import json
from collections.abc import Mapping
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from typedconf.config.values import ConfigValue


class LoadWarning(BaseModel):
    """A variable re-definition noticed while loading.

    Attributes:
        file_path: File whose line or include caused the re-definition.
        line: Line number of the assignment, None for include merges.
        name: The re-defined variable.
        include_path: The included file that re-defined the variable, if any.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    file_path: str
    line: int | None = None
    name: str
    include_path: str | None = None


class ConfigTable(BaseModel):
    """Flat, immutable mapping from variable name to typed value.

    Both mappings are read-only views over private copies.

    Attributes:
        entries: Variables by name; the last definition wins.
        file_checksums: SHA-256 checksums of every file read to build the table.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    entries: Annotated[
        Mapping[str, ConfigValue], Field(default_factory=dict, validate_default=True)
    ]
    file_checksums: Annotated[
        Mapping[str, str], Field(default_factory=dict, validate_default=True)
    ]

    @field_validator("entries", "file_checksums")
    @classmethod
    def freeze_mapping(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        """Store a read-only copy so the table cannot change after loading."""
        return MappingProxyType(dict(v))

    @field_serializer("entries", "file_checksums")
    def serialize_mapping(self, v: Mapping[str, Any]) -> dict[str, Any]:
        """Dump read-only views as plain dicts."""
        return dict(v)

    def __contains__(self, name: object) -> bool:
        return name in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, name: str) -> ConfigValue | None:
        """Return the value stored under name, if any."""
        return self.entries.get(name)

    def to_normalized_json(self) -> str:
        """Convert entries to JSON with stable key ordering.

        Returns:
            JSON string with sorted keys.
        """
        data = {
            name: value.model_dump(mode="json") for name, value in self.entries.items()
        }
        return json.dumps(data, sort_keys=True, separators=(",", ":"))

    def compute_checksum(self) -> str:
        """Compute SHA-256 checksum of the normalized entries.

        Returns:
            Hex-encoded SHA-256 checksum.
        """
        normalized = self.to_normalized_json()
        return hashlib.sha256(normalized.encode("utf-8")).hexdigest()
