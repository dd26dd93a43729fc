"""Typed configuration loading, merging, and lookup."""

from typedconf.config.arguments import (
    OverrideDefinition,
    OverrideSources,
    scan_arguments,
)
from typedconf.config.errors import (
    ConfigEncodingError,
    ConfigError,
    ConfigErrorKind,
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigLookupError,
    ConfigSyntaxError,
    IncludeCycleError,
    IncludePathError,
    InvalidTypeNameError,
    InvalidValueFormatError,
    OverrideArgumentError,
    TypeMismatchError,
    UnresolvedVariableError,
    ValueParseError,
    VariableNotFoundError,
)
from typedconf.config.loader import ConfigLoader
from typedconf.config.state_machine import ConfigState, ConfigStateError
from typedconf.config.store import (
    ConfigStore,
    build_store,
    get_bool,
    get_char,
    get_config,
    get_float,
    get_int,
    get_string,
    init_config,
    init_config_from_args,
    refresh_config,
)
from typedconf.config.table import ConfigTable, LoadWarning
from typedconf.config.values import ConfigValue, ValueKind, parse_value


__all__ = [
    "ConfigEncodingError",
    "ConfigError",
    "ConfigErrorKind",
    "ConfigFileNotFoundError",
    "ConfigLoadError",
    "ConfigLoader",
    "ConfigLookupError",
    "ConfigState",
    "ConfigStateError",
    "ConfigStore",
    "ConfigSyntaxError",
    "ConfigTable",
    "ConfigValue",
    "IncludeCycleError",
    "IncludePathError",
    "InvalidTypeNameError",
    "InvalidValueFormatError",
    "LoadWarning",
    "OverrideArgumentError",
    "OverrideDefinition",
    "OverrideSources",
    "TypeMismatchError",
    "UnresolvedVariableError",
    "ValueKind",
    "ValueParseError",
    "VariableNotFoundError",
    "build_store",
    "get_bool",
    "get_char",
    "get_config",
    "get_float",
    "get_int",
    "get_string",
    "init_config",
    "init_config_from_args",
    "parse_value",
    "refresh_config",
    "scan_arguments",
]
