"""Named placeholder interpolation for translated messages.

Two placeholder forms are supported:

- ``%{name}`` inserts ``str(options["name"])``
- ``%<name>spec`` renders ``options["name"]`` with a printf-style conversion,
  e.g. ``%<count>03d`` or ``%<price>.2f``

``%%`` renders a literal percent sign once interpolation runs.
"""

import re
from typing import Any, Mapping

from tater.i18n.errors import MissingInterpolationArgument

FORMAT_CURLY = "%{"
FORMAT_NAMED = "%<"

PLACEHOLDER_REGEX = re.compile(
    r"%(?:(?P<escape>%)"
    r"|\{(?P<curly>\w+)\}"
    r"|<(?P<named>\w+)>(?P<spec>[-+ 0#]*\d*(?:\.\d+)?[diouxXeEfFgGcrsa]))"
)


def interpolate(string: str, options: Mapping[str, Any]) -> str:
    """Format values into a string when there is anything to format.

    Empty options never trigger formatting, so a string with placeholders is
    returned untouched. Strings without placeholder markers are returned
    untouched as well.

    Args:
        string: The target string to interpolate into.
        options: The values to interpolate into the target string.

    Returns:
        The interpolated string.

    Raises:
        MissingInterpolationArgument: If a placeholder names a value missing
            from a non-empty ``options``.
    """
    if not options:
        return string
    if not is_interpolation_string(string):
        return string

    return interpolate_unchecked(string, options)


def interpolate_unchecked(string: str, options: Mapping[str, Any]) -> str:
    """Format values into a string unconditionally."""

    def _replace(match: re.Match) -> str:
        if match.group("escape"):
            return "%"

        name = match.group("curly") or match.group("named")
        if name not in options:
            raise MissingInterpolationArgument(name)

        value = options[name]
        if match.group("curly"):
            return str(value)
        return ("%" + match.group("spec")) % (value,)

    return PLACEHOLDER_REGEX.sub(_replace, string)


def is_interpolation_string(string: str) -> bool:
    """Determine whether a string includes ``%{`` or ``%<`` placeholders."""
    return FORMAT_CURLY in string or FORMAT_NAMED in string
