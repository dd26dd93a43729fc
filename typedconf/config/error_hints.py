"""Error hints for configuration errors.

Provides user-friendly hints with actionable remediation steps
for common loading and lookup errors.
"""

from typing import Final

from typedconf.config.errors import ConfigError, ConfigLoadError


# Mapping of error kinds to user-friendly hints
ERROR_HINTS: Final[dict[str, str]] = {
    "syntax_error": (
        "Lines must look like '<type> <name> = <value>' or 'use \"<file>\"'. "
        "Indent with spaces only; a tab makes a line non-blank."
    ),
    "invalid_type_name": (
        "Use one of: int, hex, octal, float, bool, boolean, char, string."
    ),
    "invalid_value_format": "The value does not match the format of its type.",
    "file_not_found": "The file does not exist. Check the file path.",
    "file_encoding": "Save the file as UTF-8.",
    "include_path": "Include paths are relative to the including file's directory.",
    "include_cycle": "Remove the 'use' line that brings the file back in.",
    "override_argument": "Definitions take the form -DNAME <type> <value>.",
    "not_found": "The variable is not defined. Add it to a configuration file.",
    "type_mismatch": "Read the variable with the getter matching its declared type.",
    "unresolved_variable": "A $NAME reference must name a string variable.",
}

# Type-specific hints for invalid value formats
TYPE_HINTS: Final[dict[str, str]] = {
    "int": "Must be decimal digits (e.g., '42').",
    "hex": "Must be hex digits with an optional 0x prefix (e.g., '0x1F').",
    "octal": "Must be octal digits 0-7 (e.g., '017').",
    "float": "Must be a decimal number (e.g., '3' or '3.14').",
    "bool": "Must be true, false, 1, or 0.",
    "boolean": "Must be true, false, 1, or 0.",
    "char": "Must be one character, quoted ('a') or bare, or one of '\\n', '\\r', '\\t'.",
    "string": "Must be double-quoted text without embedded quotes (e.g., \"hello\").",
}


def get_error_hint(error_kind: str, type_name: str | None = None) -> str:
    """Get a user-friendly hint for an error.

    Args:
        error_kind: The error kind (e.g., 'syntax_error').
        type_name: Optional type tag for type-specific hints.

    Returns:
        A user-friendly hint string.
    """
    if error_kind == "invalid_value_format" and type_name in TYPE_HINTS:
        return TYPE_HINTS[type_name]

    return ERROR_HINTS.get(
        error_kind, "Check the configuration file format documentation."
    )


def format_config_error(error: ConfigError, *, include_hint: bool = True) -> str:
    """Format a configuration error with optional hint.

    Args:
        error: The error to format.
        include_hint: Whether to include a hint.

    Returns:
        Formatted error string.
    """
    base = error.message
    if isinstance(error, ConfigLoadError) and error.details.get("text") is not None:
        base = f"{base} ({error.details['type_name']} {error.details['text']!r})"
    if include_hint:
        type_name = error.details.get("type_name")
        hint = get_error_hint(error.kind.value, str(type_name) if type_name else None)
        return f"{base}\n    Hint: {hint}"
    return base
