"""
Column value casting.

Mirrors the gateway's own JSON rendering rules:
https://github.com/vitessio/vitess/blob/v19.0.3/go/mysql/json/helpers.go#L86-L112
"""

import json
from typing import Any, Callable, Dict, Optional

from psdb.errors import DataError
from psdb.fields import (
    BIG_INT_TYPES,
    BINARY_TYPES,
    DATE_OR_TIME_TYPES,
    FLOAT_TYPES,
    INTEGRAL_TYPES,
    TEXT_TYPES,
    FieldType,
)
from psdb.schemas import Field
from psdb.text import decode

Cast = Callable[[Field, Optional[bytes]], Any]


# 1A) one converter per rendering rule
def to_text(field: Field, data: bytes) -> str:
    return decode(data)


def to_int(field: Field, data: bytes) -> int:
    try:
        return int(data)
    except ValueError as e:
        raise DataError(f"Invalid integer in column {field.name!r}: {data!r}") from e


def to_float(field: Field, data: bytes) -> float:
    try:
        return float(data)
    except ValueError as e:
        raise DataError(f"Invalid float in column {field.name!r}: {data!r}") from e


def to_json(field: Field, data: bytes) -> Any:
    try:
        return json.loads(decode(data))
    except json.JSONDecodeError as e:
        raise DataError(f"Invalid JSON in column {field.name!r}: {e}") from e


def to_bytes_or_text(field: Field, data: bytes) -> Any:
    # Binary column types can still carry text, e.g. identifiers from
    # system tables come back as VARBINARY with a text charset.
    if field.is_binary_charset:
        return bytes(data)
    return decode(data)


# 1B) map every type tag to the right converter
_CASTERS: Dict[FieldType, Callable[[Field, bytes], Any]] = {}


def register(fn: Callable[[Field, bytes], Any], *types: FieldType) -> None:
    for t in types:
        _CASTERS[t] = fn


# INT64/UINT64 stay as text; widening to int is left to the caller.
register(to_text, *BIG_INT_TYPES)
register(to_text, *DATE_OR_TIME_TYPES)
register(to_text, FieldType.DECIMAL)
register(to_json, FieldType.JSON)
register(to_int, *INTEGRAL_TYPES)
register(to_float, *FLOAT_TYPES)
register(to_bytes_or_text, *BINARY_TYPES)
register(to_text, *TEXT_TYPES)
register(to_text, FieldType.NULL)


def is_binary(field: Field) -> bool:
    return field.type in BINARY_TYPES and field.is_binary_charset


def cast(field: Field, value: Optional[bytes]) -> Any:
    """
    Convert one column's raw bytes into a Python value.

    ``None`` stays ``None``. An empty span is ``b''`` for binary columns and
    ``''`` for everything else, independent of the declared type.
    """
    if value is None:
        return None

    if not value:
        return b"" if is_binary(field) else ""

    try:
        converter = _CASTERS[field.type]
    except KeyError:
        raise DataError(f"Unknown type {field.type!r} for column {field.name!r}")
    return converter(field, value)
