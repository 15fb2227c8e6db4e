"""
Placeholder substitution for SQL sent to the gateway.

The gateway takes a single literal SQL string, so parameters are rendered
client side. ``?`` placeholders are filled from a sequence, ``:name``
placeholders from a mapping.
"""

import datetime
import decimal
import math
import re
from typing import Any, Mapping, Sequence, Union

from psdb.errors import DataError
from psdb.text import to_hex

Args = Union[Sequence[Any], Mapping[str, Any]]

_POSITIONAL = re.compile(r"\?")
_NAMED = re.compile(r":(\w+)")

# The escape set accepted by the target database's string literals.
_ESCAPES = str.maketrans({
    "\0": "\\0",
    "\b": "\\b",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\x1a": "\\Z",
    "\\": "\\\\",
    '"': '\\"',
    "'": "\\'",
})


def format(query: str, values: Args) -> str:
    if isinstance(values, Mapping):
        return _replace_named(query, values)
    return _replace_position(query, values)


def _replace_position(query: str, values: Sequence[Any]) -> str:
    remaining = iter(values)
    count = len(values)
    used = 0

    def substitute(match: re.Match) -> str:
        nonlocal used
        if used >= count:
            return match.group(0)
        used += 1
        return sanitize(next(remaining))

    return _POSITIONAL.sub(substitute, query)


def _replace_named(query: str, values: Mapping[str, Any]) -> str:
    def substitute(match: re.Match) -> str:
        name = match.group(1)
        if name not in values:
            return match.group(0)
        return sanitize(values[name])

    return _NAMED.sub(substitute, query)


def sanitize(value: Any) -> str:
    """Render one parameter as a SQL literal."""
    if value is None:
        return "null"

    # bool before int: True is an int too.
    if isinstance(value, bool):
        return "true" if value else "false"

    if isinstance(value, int):
        return str(value)

    if isinstance(value, (float, decimal.Decimal)):
        # nan and inf have no SQL literal
        finite = value.is_finite() if isinstance(value, decimal.Decimal) else math.isfinite(value)
        if not finite:
            raise DataError(f"Cannot render non-finite number {value!r} as SQL")
        return str(value)

    if isinstance(value, str):
        return quote(value)

    if isinstance(value, (bytes, bytearray, memoryview)):
        return f"x'{to_hex(value)[2:]}'"

    if isinstance(value, (list, tuple)):
        return ", ".join(sanitize(item) for item in value)

    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc).replace(tzinfo=None)
        return quote(value.isoformat(timespec="milliseconds"))

    if isinstance(value, (datetime.date, datetime.time)):
        return quote(value.isoformat())

    return quote(str(value))


def quote(text: str) -> str:
    return f"'{escape(text)}'"


def escape(text: str) -> str:
    return text.translate(_ESCAPES)
