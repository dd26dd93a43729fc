"""Command-line override scanning.

Recognized tokens (anything else belongs to the host program and is skipped):

    --use-config PATH      replace the primary configuration file
    --add-config PATH      merge PATH over the primary configuration
    -DNAME TYPE VALUE      define NAME with the highest priority
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from typedconf.config.constants import ADD_CONFIG_FLAG, DEFINE_PREFIX, USE_CONFIG_FLAG
from typedconf.config.errors import OverrideArgumentError, ValueParseError
from typedconf.config.values import parse_value


@dataclass(frozen=True, slots=True)
class OverrideDefinition:
    """An explicit ``(name, type, text)`` override."""

    name: str
    type_name: str
    text: str


OverrideSource = Path | OverrideDefinition


@dataclass
class OverrideSources:
    """Where a store's values come from, in application order.

    Attributes:
        primary_path: The root configuration file.
        overrides: Extra files and definitions, applied in order after the
            primary file.
    """

    primary_path: Path
    overrides: list[OverrideSource] = field(default_factory=list)

    @property
    def extra_files(self) -> list[Path]:
        """Extra override files in order."""
        return [src for src in self.overrides if isinstance(src, Path)]

    @property
    def definitions(self) -> list[OverrideDefinition]:
        """Explicit definitions in order."""
        return [src for src in self.overrides if isinstance(src, OverrideDefinition)]

    def ordered(self) -> list[OverrideSource]:
        """Return overrides with all files before all definitions.

        Definitions always beat files, whatever their position on the
        command line.
        """
        return [*self.extra_files, *self.definitions]


def scan_arguments(argv: Sequence[str], default_path: Path | str) -> OverrideSources:
    """Collect configuration overrides from command-line arguments.

    Args:
        argv: Arguments without the program name.
        default_path: Primary configuration file used unless --use-config is given.

    Returns:
        The primary path and ordered override sources.

    Raises:
        OverrideArgumentError: If a -D definition is missing its type or value.
        InvalidTypeNameError: If a -D definition has an unknown type.
        InvalidValueFormatError: If a -D value is malformed for its type.
    """
    sources = OverrideSources(primary_path=Path(default_path))
    index = 0
    while index < len(argv):
        token = argv[index]
        if token == USE_CONFIG_FLAG and index < len(argv) - 1:
            sources.primary_path = Path(argv[index + 1])
            index += 2
        elif token == ADD_CONFIG_FLAG and index < len(argv) - 1:
            sources.overrides.append(Path(argv[index + 1]))
            index += 2
        elif token.startswith(DEFINE_PREFIX):
            sources.overrides.append(_scan_definition(argv, index))
            index += 3
        else:
            index += 1
    return sources


def _scan_definition(argv: Sequence[str], index: int) -> OverrideDefinition:
    name = argv[index][len(DEFINE_PREFIX) :]
    remaining = len(argv) - index - 1
    if remaining == 0:
        raise OverrideArgumentError(name, "Missing type")
    if remaining == 1:
        raise OverrideArgumentError(name, "Missing type or value")

    definition = OverrideDefinition(
        name=name, type_name=argv[index + 1], text=argv[index + 2]
    )
    # Fail at scan time, the way a bad line fails at load time.
    try:
        parse_value(definition.type_name, definition.text)
    except ValueParseError as e:
        raise e.located(variable=name) from e
    return definition
