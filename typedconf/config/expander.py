"""Variable expansion inside string values.

``$NAME`` is replaced by the raw text of the string variable NAME. The
substituted text is not expanded again, so mutually referring variables
cannot loop. A ``$`` that is not followed by a name is kept as is.
"""

import re
from collections.abc import Callable

from typedconf.config.errors import UnresolvedVariableError
from typedconf.config.values import ConfigValue, ValueKind


VARIABLE_REFERENCE = re.compile(r"\$([A-Za-z][A-Za-z0-9_-]*)")


def expand_variables(
    name: str,
    raw: str,
    resolve: Callable[[str], ConfigValue | None],
) -> str:
    """Expand ``$NAME`` references in a string value.

    Args:
        name: Variable whose value is being expanded (for error messages).
        raw: The stored, unexpanded string.
        resolve: Looks up a variable in the same store.

    Returns:
        The string with every reference replaced.

    Raises:
        UnresolvedVariableError: If a reference is undefined or not a string.
    """

    def substitute(match: re.Match[str]) -> str:
        reference = match.group(1)
        value = resolve(reference)
        if value is None:
            raise UnresolvedVariableError(name, reference)
        if value.kind is not ValueKind.STRING:
            raise UnresolvedVariableError(name, reference, found=value.kind.value)
        return str(value.value)

    return VARIABLE_REFERENCE.sub(substitute, raw)
