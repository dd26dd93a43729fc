"""Typed access to a merged configuration table.

``ConfigStore`` is an explicit value: build one with ``build_store`` and
pass it around. For programs that want a single process-wide instance,
``init_config`` records where values come from and ``get_config`` builds
the store once, under a lock, on first use. ``refresh_config`` discards it
so the next access reloads the files.
"""

import threading
from collections.abc import Iterable, Sequence
from pathlib import Path

import structlog

from typedconf.config.arguments import OverrideSource, OverrideSources, scan_arguments
from typedconf.config.constants import COMPONENT_CONFIG
from typedconf.config.errors import TypeMismatchError, VariableNotFoundError
from typedconf.config.expander import expand_variables
from typedconf.config.loader import ConfigLoader
from typedconf.config.table import ConfigTable, LoadWarning
from typedconf.config.values import ConfigValue, ValueKind


logger = structlog.get_logger()


class ConfigStore:
    """Read-only, typed view over one merged table.

    Safe for concurrent reads once built.
    """

    def __init__(
        self,
        table: ConfigTable,
        sources: OverrideSources | None = None,
        warnings: Sequence[LoadWarning] = (),
    ) -> None:
        """Initialize the store.

        Args:
            table: The merged table.
            sources: Where the table was loaded from, used by ``reload``.
            warnings: Re-definition warnings produced while loading.
        """
        self._table = table
        self._sources = sources
        self._warnings = tuple(warnings)

    @property
    def table(self) -> ConfigTable:
        """Get the underlying table."""
        return self._table

    @property
    def sources(self) -> OverrideSources | None:
        """Get the sources the store was built from."""
        return self._sources

    @property
    def warnings(self) -> tuple[LoadWarning, ...]:
        """Get re-definition warnings produced while loading."""
        return self._warnings

    def __contains__(self, name: object) -> bool:
        return name in self._table

    def __len__(self) -> int:
        return len(self._table)

    def names(self) -> list[str]:
        """Return all variable names, sorted."""
        return sorted(self._table.entries)

    def kind_of(self, name: str) -> ValueKind:
        """Return the stored kind of a variable.

        Raises:
            VariableNotFoundError: If the variable is not defined.
        """
        return self._lookup(name).kind

    def get_int(self, name: str) -> int:
        """Look up an int."""
        return int(self._typed(name, ValueKind.INT))

    def get_float(self, name: str) -> float:
        """Look up a float."""
        return float(self._typed(name, ValueKind.FLOAT))

    def get_bool(self, name: str) -> bool:
        """Look up a bool."""
        return bool(self._typed(name, ValueKind.BOOL))

    def get_char(self, name: str) -> str:
        """Look up a char, returned as a one-character string."""
        return str(self._typed(name, ValueKind.CHAR))

    def get_string(self, name: str) -> str:
        """Look up a string with ``$NAME`` references expanded.

        Raises:
            VariableNotFoundError: If the variable is not defined.
            TypeMismatchError: If the variable is not a string.
            UnresolvedVariableError: If a reference cannot be expanded.
        """
        raw = str(self._typed(name, ValueKind.STRING))
        return expand_variables(name, raw, self._table.get)

    def get_raw_string(self, name: str) -> str:
        """Look up a string without expanding references."""
        return str(self._typed(name, ValueKind.STRING))

    def get(self, name: str, kind: ValueKind) -> bool | int | float | str:
        """Look up a value through the getter for kind."""
        getters = {
            ValueKind.INT: self.get_int,
            ValueKind.FLOAT: self.get_float,
            ValueKind.BOOL: self.get_bool,
            ValueKind.CHAR: self.get_char,
            ValueKind.STRING: self.get_string,
        }
        return getters[kind](name)

    def reload(self) -> "ConfigStore":
        """Build a new store from the same sources.

        Raises:
            ValueError: If the store was not built from files.
        """
        if self._sources is None:
            raise ValueError("Store has no sources to reload from")
        return build_store(self._sources.primary_path, self._sources.overrides)

    def _lookup(self, name: str) -> ConfigValue:
        value = self._table.get(name)
        if value is None:
            raise VariableNotFoundError(name)
        return value

    def _typed(self, name: str, expected: ValueKind) -> bool | int | float | str:
        value = self._lookup(name)
        if value.kind is not expected:
            raise TypeMismatchError(name, expected=expected.value, found=value.kind.value)
        return value.value


def build_store(
    primary_path: Path | str,
    overrides: Iterable[OverrideSource] = (),
) -> ConfigStore:
    """Load the primary file, merge overrides, and wrap the result.

    Args:
        primary_path: Root configuration file.
        overrides: Extra files (``Path``) and explicit definitions.

    Returns:
        A ready store.

    Raises:
        ConfigLoadError: On the first load error.
    """
    sources = OverrideSources(primary_path=Path(primary_path), overrides=list(overrides))
    loader = ConfigLoader()
    table = loader.load(sources.primary_path, sources.overrides)
    logger.info(
        "config_store_built",
        component=COMPONENT_CONFIG,
        primary_path=str(sources.primary_path),
        variable_count=len(table),
        config_checksum=table.compute_checksum(),
    )
    return ConfigStore(table, sources=sources, warnings=loader.warnings)


_store: ConfigStore | None = None
_sources: OverrideSources | None = None
_store_lock = threading.Lock()


def init_config(
    primary_path: Path | str,
    overrides: Iterable[OverrideSource] = (),
) -> None:
    """Record the sources of the process-wide store.

    The store itself is built lazily by ``get_config``. Any store built
    from earlier sources is discarded.
    """
    global _sources, _store  # noqa: PLW0603
    with _store_lock:
        _sources = OverrideSources(primary_path=Path(primary_path), overrides=list(overrides))
        _store = None


def init_config_from_args(argv: Sequence[str], default_path: Path | str) -> None:
    """Record process-wide sources from command-line arguments.

    Raises:
        OverrideArgumentError: If a -D definition is incomplete.
        ValueParseError: If a -D definition does not parse.
    """
    sources = scan_arguments(argv, default_path)
    init_config(sources.primary_path, sources.overrides)


def get_config() -> ConfigStore:
    """Get the process-wide store, building it on first use.

    Raises:
        RuntimeError: If ``init_config`` was never called.
        ConfigLoadError: If building the store fails.
    """
    global _store  # noqa: PLW0603
    store = _store
    if store is not None:
        return store

    with _store_lock:
        if _store is None:
            if _sources is None:
                raise RuntimeError("init_config must be called before get_config")
            _store = build_store(_sources.primary_path, _sources.overrides)
        return _store


def refresh_config() -> None:
    """Discard the process-wide store; the next access rebuilds it."""
    global _store  # noqa: PLW0603
    with _store_lock:
        _store = None
    logger.info("config_store_refreshed", component=COMPONENT_CONFIG)


def reset_config() -> None:
    """Forget both the process-wide store and its sources (primarily for testing)."""
    global _store, _sources  # noqa: PLW0603
    with _store_lock:
        _store = None
        _sources = None


def get_int(name: str) -> int:
    """Look up an int in the process-wide store."""
    return get_config().get_int(name)


def get_float(name: str) -> float:
    """Look up a float in the process-wide store."""
    return get_config().get_float(name)


def get_bool(name: str) -> bool:
    """Look up a bool in the process-wide store."""
    return get_config().get_bool(name)


def get_char(name: str) -> str:
    """Look up a char in the process-wide store."""
    return get_config().get_char(name)


def get_string(name: str) -> str:
    """Look up an expanded string in the process-wide store."""
    return get_config().get_string(name)
