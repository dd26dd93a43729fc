"""Line classification for configuration files.

A line is one of:

- blank: only spaces before the first ``#`` (tabs do not count as blank)
- include: ``use "<path>"``
- assignment: ``<type> <name> = <value> [# comment]``

Anything else is a syntax error.
"""

import re
from dataclasses import dataclass
from typing import Final


NAME_PATTERN: Final = r"[A-Za-z][A-Za-z0-9_-]*"

INCLUDE_PATTERN = re.compile(r'use "(.*)"')
ASSIGNMENT_PATTERN = re.compile(
    rf'({NAME_PATTERN}) +({NAME_PATTERN}) *= *((?:"[^"\n]*"|[^\n# ])*) *(?:#.*)?'
)


@dataclass(frozen=True, slots=True)
class IncludeLine:
    """An include directive with its verbatim path payload."""

    path: str


@dataclass(frozen=True, slots=True)
class AssignmentLine:
    """A typed assignment with unparsed value text."""

    type_name: str
    name: str
    value_text: str


ClassifiedLine = IncludeLine | AssignmentLine


class LineSyntaxError(ValueError):
    """Raised when a line matches neither grammar."""


def is_blank(line: str) -> bool:
    """Check whether a line is blank or comment-only.

    Only literal spaces count as blank; a tab makes the line non-blank.

    Args:
        line: Line text without trailing newline.

    Returns:
        True if every character before the first ``#`` is a space.
    """
    content = line.split("#", 1)[0]
    return all(ch == " " for ch in content)


def classify_line(line: str) -> ClassifiedLine | None:
    """Classify a configuration line.

    Args:
        line: Line text without trailing newline.

    Returns:
        None for blank lines, otherwise an IncludeLine or AssignmentLine.

    Raises:
        LineSyntaxError: If the line matches neither grammar.
    """
    if is_blank(line):
        return None

    include = INCLUDE_PATTERN.fullmatch(line)
    if include:
        return IncludeLine(path=include.group(1))

    assignment = ASSIGNMENT_PATTERN.fullmatch(line)
    if assignment is None:
        raise LineSyntaxError(line)

    type_name, name, value_text = assignment.groups()
    return AssignmentLine(
        type_name=type_name,
        name=name,
        value_text=value_text.lstrip(" "),
    )
