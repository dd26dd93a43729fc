"""Error types for configuration loading and lookup.

Load errors stop a load at the first problem and never leave a partial
table behind. Lookup errors are raised by the typed getters of a store.
"""

from enum import Enum
from pathlib import Path


ErrorDetails = dict[str, str | int | None]


class ConfigErrorKind(str, Enum):
    """Classification of configuration errors."""

    SYNTAX_ERROR = "syntax_error"
    INVALID_TYPE_NAME = "invalid_type_name"
    INVALID_VALUE_FORMAT = "invalid_value_format"
    FILE_NOT_FOUND = "file_not_found"
    FILE_ENCODING = "file_encoding"
    INCLUDE_PATH = "include_path"
    INCLUDE_CYCLE = "include_cycle"
    OVERRIDE_ARGUMENT = "override_argument"
    NOT_FOUND = "not_found"
    TYPE_MISMATCH = "type_mismatch"
    UNRESOLVED_VARIABLE = "unresolved_variable"


class ConfigError(Exception):
    """Base exception for configuration errors.

    Provides structured error information for logging and presentation.
    """

    def __init__(
        self,
        kind: ConfigErrorKind,
        message: str,
        details: ErrorDetails | None = None,
    ) -> None:
        """Initialize the configuration error.

        Args:
            kind: Classification of the error.
            message: Human-readable error message.
            details: Additional structured error details.
        """
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, str | ErrorDetails]:
        """Convert error to dictionary for logging.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "kind": self.kind.value,
            "message": self.message,
            "details": self.details,
        }


class ConfigLoadError(ConfigError):
    """Base class for errors raised while building a table.

    Carries the source location when the error can be pinned to a line.
    """

    def __init__(
        self,
        kind: ConfigErrorKind,
        message: str,
        file_path: str | None = None,
        line: int | None = None,
        details: ErrorDetails | None = None,
    ) -> None:
        merged: ErrorDetails = {}
        if file_path is not None:
            merged["file_path"] = file_path
        if line is not None:
            merged["line"] = line
        merged.update(details or {})
        super().__init__(kind=kind, message=message, details=merged)
        self.file_path = file_path
        self.line = line

    @property
    def location(self) -> str | None:
        """Return ``file:line`` (or just the file) for this error."""
        if self.file_path is None:
            return None
        if self.line is None:
            return self.file_path
        return f"{self.file_path}:{self.line}"


class ConfigSyntaxError(ConfigLoadError):
    """A line matched neither the include nor the assignment grammar."""

    def __init__(self, file_path: str, line: int) -> None:
        super().__init__(
            kind=ConfigErrorKind.SYNTAX_ERROR,
            message=(
                f"Syntax error when parsing configuration file {file_path} "
                f"at line {line}: Unexpected end of line"
            ),
            file_path=file_path,
            line=line,
        )


class ValueParseError(ConfigLoadError):
    """Base class for errors produced by the value parser.

    Attributes:
        type_name: The type tag as written.
        canonical_kind: The kind the tag maps to, or None for unknown tags.
        text: The raw value text.
        variable: Name of the variable being defined, when known.
    """

    def __init__(  # noqa: PLR0913
        self,
        kind: ConfigErrorKind,
        reason: str,
        type_name: str,
        text: str,
        canonical_kind: str | None = None,
        file_path: str | None = None,
        line: int | None = None,
        variable: str | None = None,
    ) -> None:
        if file_path is not None and line is not None:
            where = f"configuration file {file_path} at line {line}"
        elif variable is not None:
            where = f"user-set configuration variable {variable}"
        else:
            where = "configuration value"
        super().__init__(
            kind=kind,
            message=f"Syntax error when parsing {where}: {reason}",
            file_path=file_path,
            line=line,
            details={
                "type_name": type_name,
                "canonical_kind": canonical_kind,
                "text": text,
                "variable": variable,
            },
        )
        self.reason = reason
        self.type_name = type_name
        self.canonical_kind = canonical_kind
        self.text = text
        self.variable = variable

    def located(
        self,
        file_path: str | None = None,
        line: int | None = None,
        variable: str | None = None,
    ) -> "ValueParseError":
        """Return a copy of this error with location information attached."""
        return type(self)(
            type_name=self.type_name,
            text=self.text,
            canonical_kind=self.canonical_kind,
            file_path=file_path,
            line=line,
            variable=variable,
        )


class InvalidTypeNameError(ValueParseError):
    """The type tag is not one of the recognized tags."""

    def __init__(  # noqa: PLR0913
        self,
        type_name: str,
        text: str,
        canonical_kind: str | None = None,
        file_path: str | None = None,
        line: int | None = None,
        variable: str | None = None,
    ) -> None:
        super().__init__(
            kind=ConfigErrorKind.INVALID_TYPE_NAME,
            reason=f"Invalid type name {type_name}",
            type_name=type_name,
            text=text,
            canonical_kind=canonical_kind,
            file_path=file_path,
            line=line,
            variable=variable,
        )


class InvalidValueFormatError(ValueParseError):
    """The value text is not a valid literal for a recognized type."""

    def __init__(  # noqa: PLR0913
        self,
        type_name: str,
        text: str,
        canonical_kind: str | None = None,
        file_path: str | None = None,
        line: int | None = None,
        variable: str | None = None,
    ) -> None:
        super().__init__(
            kind=ConfigErrorKind.INVALID_VALUE_FORMAT,
            reason="Invalid value format",
            type_name=type_name,
            text=text,
            canonical_kind=canonical_kind,
            file_path=file_path,
            line=line,
            variable=variable,
        )


class ConfigFileNotFoundError(ConfigLoadError):
    """A root or included configuration file could not be read."""

    def __init__(self, file_path: Path | str) -> None:
        super().__init__(
            kind=ConfigErrorKind.FILE_NOT_FOUND,
            message=f"Could not find configuration file {file_path}",
            file_path=str(file_path),
        )


class ConfigEncodingError(ConfigLoadError):
    """A configuration file is not valid UTF-8."""

    def __init__(self, file_path: Path | str, offset: int) -> None:
        super().__init__(
            kind=ConfigErrorKind.FILE_ENCODING,
            message=(
                f"Could not decode configuration file {file_path}: "
                f"Invalid UTF-8 at byte {offset}"
            ),
            file_path=str(file_path),
            details={"offset": offset},
        )
        self.offset = offset


class IncludePathError(ConfigLoadError):
    """An include directive named an absolute path."""

    def __init__(self, include_path: str, file_path: str, line: int) -> None:
        super().__init__(
            kind=ConfigErrorKind.INCLUDE_PATH,
            message=(
                f"Error when parsing configuration file {file_path} at line {line}: "
                f"Absolute include path {include_path} is not permitted"
            ),
            file_path=file_path,
            line=line,
            details={"include_path": include_path},
        )
        self.include_path = include_path


class IncludeCycleError(ConfigLoadError):
    """A configuration file includes itself, directly or transitively."""

    def __init__(self, chain: list[str], file_path: str, line: int) -> None:
        cycle = " -> ".join(chain)
        super().__init__(
            kind=ConfigErrorKind.INCLUDE_CYCLE,
            message=(
                f"Error when parsing configuration file {file_path} at line {line}: "
                f"Include cycle {cycle}"
            ),
            file_path=file_path,
            line=line,
            details={"cycle": cycle},
        )
        self.chain = chain


class OverrideArgumentError(ConfigLoadError):
    """A ``-D`` command-line definition is missing its type or value."""

    def __init__(self, variable: str, reason: str) -> None:
        super().__init__(
            kind=ConfigErrorKind.OVERRIDE_ARGUMENT,
            message=(
                "Syntax error when parsing user-set configuration variable "
                f"{variable}: {reason}"
            ),
            details={"variable": variable},
        )
        self.variable = variable
        self.reason = reason


class ConfigLookupError(ConfigError):
    """Base class for errors raised by typed getters.

    Attributes:
        name: The variable that was looked up.
    """

    def __init__(
        self,
        kind: ConfigErrorKind,
        message: str,
        name: str,
        details: ErrorDetails | None = None,
    ) -> None:
        super().__init__(kind=kind, message=message, details={"name": name, **(details or {})})
        self.name = name


class VariableNotFoundError(ConfigLookupError):
    """Raised when a requested variable is not defined."""

    def __init__(self, name: str) -> None:
        super().__init__(
            kind=ConfigErrorKind.NOT_FOUND,
            message=f"Could not find configuration variable {name}",
            name=name,
        )


class TypeMismatchError(ConfigLookupError):
    """Raised when a variable is read with the wrong getter."""

    def __init__(self, name: str, expected: str, found: str) -> None:
        super().__init__(
            kind=ConfigErrorKind.TYPE_MISMATCH,
            message=(
                f"Incompatible type for configuration variable {name}: "
                f"Looked for {expected}, but found {found}"
            ),
            name=name,
            details={"expected": expected, "found": found},
        )
        self.expected = expected
        self.found = found


class UnresolvedVariableError(ConfigLookupError):
    """Raised when ``$NAME`` inside a string cannot be expanded.

    Attributes:
        reference: The referenced variable name.
        found: Kind of the referenced variable, or None if it is undefined.
    """

    def __init__(self, name: str, reference: str, found: str | None = None) -> None:
        if found is None:
            reason = f"{reference} is not defined"
        else:
            reason = f"{reference} is a {found}, not a string"
        super().__init__(
            kind=ConfigErrorKind.UNRESOLVED_VARIABLE,
            message=(
                f"Could not expand ${reference} in configuration variable {name}: "
                f"{reason}"
            ),
            name=name,
            details={"reference": reference, "found": found},
        )
        self.reference = reference
        self.found = found
