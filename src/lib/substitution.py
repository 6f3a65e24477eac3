"""Positional substitution of values into help templates.

Templates use a fixed printf-like convention:

    %s  - next value as text
    %d  - next value as integer
    %%  - literal percent sign

Values are consumed strictly left to right and the number of values
must match the number of placeholders exactly.
"""

import re
from typing import Callable, Sequence

from src.lib.exceptions import SubstitutionError

# A percent sign followed by any single character, or a dangling one at the end
_TOKEN_PATTERN = re.compile(r"%(.?)", re.DOTALL)

_PLACEHOLDERS = ("s", "d")

# ASCII decimal digits only, with an optional sign
_INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+\Z")


def _tokens(template: str):
    """Yield (start, end, conversion) for every percent sequence."""
    for match in _TOKEN_PATTERN.finditer(template):
        conversion = match.group(1)
        if conversion != "%" and conversion not in _PLACEHOLDERS:
            shown = f"%{conversion}" if conversion else "%"
            raise SubstitutionError(
                f"Unsupported placeholder '{shown}' at position {match.start()}"
            )
        yield match.start(), match.end(), conversion


def count_placeholders(template: str) -> int:
    """
    Count the value placeholders of a template.

    Args:
        template: Template string

    Returns:
        Number of %s/%d placeholders (escaped %% excluded)

    Raises:
        SubstitutionError: If the template contains an unsupported sequence
    """
    return sum(1 for _, _, conversion in _tokens(template) if conversion != "%")


def _convert(conversion: str, value: str, index: int) -> str:
    if conversion == "s":
        return str(value)
    text = str(value).strip()
    if not _INTEGER_PATTERN.match(text):
        raise SubstitutionError(
            f"Value {index + 1} ({value!r}) is not an integer for '%d'"
        )
    return str(int(text))


def substitute(
    template: str,
    values: Sequence[str],
    escape: Callable[[str], str] | None = None,
) -> str:
    """
    Fill the placeholders of a template with positional values.

    Args:
        template: Template string
        values: Ordered values, one per placeholder
        escape: Optional function applied to every converted value

    Returns:
        str: The rendered text

    Raises:
        SubstitutionError: If the value count does not match the
            placeholders, or a %d value is not an integer
    """
    tokens = list(_tokens(template))
    expected = sum(1 for _, _, conversion in tokens if conversion != "%")

    if expected != len(values):
        raise SubstitutionError(
            f"Template expects {expected} value(s) but {len(values)} were supplied",
            expected=expected,
            supplied=len(values),
        )

    parts: list[str] = []
    position = 0
    index = 0
    for start, end, conversion in tokens:
        parts.append(template[position:start])
        if conversion == "%":
            parts.append("%")
        else:
            text = _convert(conversion, values[index], index)
            parts.append(escape(text) if escape else text)
            index += 1
        position = end
    parts.append(template[position:])

    return "".join(parts)
