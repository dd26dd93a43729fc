"""Configuration loader with include resolution and override merging."""

import hashlib
import json
import time
from collections.abc import Iterable
from pathlib import Path

import structlog

from typedconf.config.arguments import OverrideDefinition, OverrideSource, OverrideSources
from typedconf.config.constants import (
    COMPONENT_CONFIG,
    SOURCE_ASSIGNMENT,
    SOURCE_INCLUDE,
    SOURCE_OVERRIDE_FILE,
)
from typedconf.config.errors import (
    ConfigEncodingError,
    ConfigError,
    ConfigFileNotFoundError,
    ConfigSyntaxError,
    IncludeCycleError,
    IncludePathError,
    ValueParseError,
)
from typedconf.config.lines import (
    AssignmentLine,
    IncludeLine,
    LineSyntaxError,
    classify_line,
)
from typedconf.config.state_machine import ConfigState, ConfigStateMachine
from typedconf.config.table import ConfigTable, LoadWarning
from typedconf.config.values import ConfigValue, parse_value
from typedconf.observability.metrics import ConfigMetrics


logger = structlog.get_logger()

Entries = dict[str, ConfigValue]


class ConfigLoader:
    """Loads configuration files and merges overrides into one table.

    Implements a state machine for loading:
    UNLOADED -> LOADING -> VALIDATED -> READY

    A loader is used for a single ``load``. Re-definitions are logged and
    collected in ``warnings``; they never change which value wins.
    """

    def __init__(self) -> None:
        self._state_machine = ConfigStateMachine()
        self._warnings: list[LoadWarning] = []
        self._file_checksums: dict[str, str] = {}
        self._errors: list[dict[str, object]] = []
        self._load_duration_ms: float = 0
        self._metrics = ConfigMetrics.get_instance()

    @property
    def state(self) -> ConfigState:
        """Get the current loader state."""
        return self._state_machine.state

    @property
    def warnings(self) -> list[LoadWarning]:
        """Get re-definition warnings collected so far."""
        return self._warnings.copy()

    @property
    def errors(self) -> list[dict[str, object]]:
        """Get the error that stopped the load, if any."""
        return self._errors.copy()

    @property
    def file_checksums(self) -> dict[str, str]:
        """Get SHA-256 checksums of loaded files."""
        return self._file_checksums.copy()

    @property
    def load_duration_ms(self) -> float:
        """Get load duration in milliseconds."""
        return self._load_duration_ms

    def load(
        self,
        primary_path: Path | str,
        overrides: Iterable[OverrideSource] = (),
    ) -> ConfigTable:
        """Load the primary file and merge overrides over it.

        Extra files are merged in order with warn-and-overwrite. Explicit
        definitions are merged after every file, silently, and always win.

        Args:
            primary_path: Root configuration file.
            overrides: Extra files and explicit definitions.

        Returns:
            The merged, immutable table.

        Raises:
            ConfigLoadError: On the first syntax, type, value, or file error.
            ConfigStateError: If called more than once.
        """
        start_time = time.perf_counter()
        self._state_machine.transition(ConfigState.LOADING)

        log = logger.bind(
            component=COMPONENT_CONFIG,
            primary_path=str(primary_path),
        )
        sources = OverrideSources(
            primary_path=Path(primary_path),
            overrides=[
                src if isinstance(src, OverrideDefinition) else Path(src)
                for src in overrides
            ],
        )

        try:
            entries = self._load_file(sources.primary_path, ())
            self._state_machine.transition(ConfigState.VALIDATED)

            for override in sources.ordered():
                if isinstance(override, OverrideDefinition):
                    entries[override.name] = self._parse_definition(override)
                    log.debug("config_override_applied", name=override.name)
                else:
                    self._merge(
                        entries,
                        self._load_file(override, ()),
                        file_path=str(override),
                        source=SOURCE_OVERRIDE_FILE,
                    )

        except ConfigError as e:
            self._state_machine.transition(ConfigState.FAILED)
            self._errors.append(e.to_dict())
            self._metrics.record_load_error()
            log.error("config_load_failed", phase="FAILED", **e.to_dict())
            raise

        self._load_duration_ms = (time.perf_counter() - start_time) * 1000
        self._metrics.record_load_duration(self._load_duration_ms)
        self._state_machine.transition(ConfigState.READY)
        log.info(
            "config_ready",
            phase="READY",
            variable_count=len(entries),
            warning_count=len(self._warnings),
            load_duration_ms=self._load_duration_ms,
        )
        return ConfigTable(entries=entries, file_checksums=self._file_checksums.copy())

    def load_table(self, path: Path | str) -> ConfigTable:
        """Load a single file and its includes without overrides."""
        return self.load(path)

    def _read_lines(self, path: Path) -> list[str]:
        """Read a file, record its checksum, and split it into lines.

        Lines are split on newlines only; a trailing carriage return is
        dropped from each.

        Raises:
            ConfigFileNotFoundError: If the file cannot be read.
            ConfigEncodingError: If the file is not valid UTF-8.
        """
        try:
            content_bytes = path.read_bytes()
        except OSError as e:
            raise ConfigFileNotFoundError(path) from e

        checksum = hashlib.sha256(content_bytes).hexdigest()
        self._file_checksums[str(path.resolve())] = checksum
        self._metrics.record_file_loaded()
        logger.debug(
            "config_file_loaded",
            component=COMPONENT_CONFIG,
            file_path=str(path),
            file_sha256=checksum,
        )
        try:
            content = content_bytes.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ConfigEncodingError(path, e.start) from e
        return [line.removesuffix("\r") for line in content.split("\n")]

    def _load_file(self, path: Path, chain: tuple[str, ...]) -> Entries:
        """Load one file, recursing into its includes.

        Args:
            path: File to load.
            chain: Resolved paths of the files currently being loaded above
                this one, used to detect include cycles.

        Returns:
            Entries defined by the file and its includes, in text order.
        """
        file_path = str(path)
        chain = (*chain, str(path.resolve()))
        result: Entries = {}

        for line_num, line in enumerate(self._read_lines(path), start=1):
            try:
                classified = classify_line(line)
            except LineSyntaxError as e:
                raise ConfigSyntaxError(file_path, line_num) from e

            if classified is None:
                continue

            if isinstance(classified, IncludeLine):
                include_path = self._resolve_include(path, classified, chain, line_num)
                self._merge(
                    result,
                    self._load_file(include_path, chain),
                    file_path=file_path,
                    source=SOURCE_INCLUDE,
                    include_path=str(include_path),
                )
            else:
                self._assign(result, classified, file_path, line_num)

        return result

    def _resolve_include(
        self,
        path: Path,
        include: IncludeLine,
        chain: tuple[str, ...],
        line_num: int,
    ) -> Path:
        """Resolve an include relative to the including file's directory."""
        if Path(include.path).is_absolute():
            raise IncludePathError(include.path, str(path), line_num)

        include_path = path.parent / include.path
        if str(include_path.resolve()) in chain:
            raise IncludeCycleError(
                [*chain, str(include_path.resolve())], str(path), line_num
            )
        return include_path

    def _assign(
        self,
        result: Entries,
        assignment: AssignmentLine,
        file_path: str,
        line_num: int,
    ) -> None:
        try:
            value = parse_value(assignment.type_name, assignment.value_text)
        except ValueParseError as e:
            raise e.located(file_path=file_path, line=line_num) from e

        if assignment.name in result:
            self._warn(
                LoadWarning(file_path=file_path, line=line_num, name=assignment.name),
                SOURCE_ASSIGNMENT,
            )
        result[assignment.name] = value

    def _merge(  # noqa: PLR0913
        self,
        result: Entries,
        loaded: Entries,
        file_path: str,
        source: str,
        include_path: str | None = None,
    ) -> None:
        """Merge loaded entries into result, warning on each collision."""
        for name, value in loaded.items():
            if name in result:
                self._warn(
                    LoadWarning(file_path=file_path, name=name, include_path=include_path),
                    source,
                )
            result[name] = value

    def _parse_definition(self, definition: OverrideDefinition) -> ConfigValue:
        try:
            return parse_value(definition.type_name, definition.text)
        except ValueParseError as e:
            raise e.located(variable=definition.name) from e

    def _warn(self, warning: LoadWarning, source: str) -> None:
        self._warnings.append(warning)
        self._metrics.record_redefinition()
        logger.warning(
            "config_variable_rebound",
            component=COMPONENT_CONFIG,
            source=source,
            **warning.model_dump(),
        )

    def get_load_summary(self) -> dict[str, object]:
        """Get a summary of the load.

        Returns:
            Dictionary with load summary.
        """
        return {
            "state": self._state_machine.state.name,
            "file_checksums": self._file_checksums,
            "warning_count": len(self._warnings),
            "warnings": [w.model_dump() for w in self._warnings],
            "error_count": len(self._errors),
            "errors": self._errors,
            "load_duration_ms": self._load_duration_ms,
        }

    def get_load_summary_json(self) -> str:
        """Get load summary as JSON string with stable ordering."""
        return json.dumps(self.get_load_summary(), sort_keys=True, indent=2)
