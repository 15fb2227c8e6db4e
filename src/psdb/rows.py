import base64
import binascii
from typing import Any, Dict, List, Literal, Optional, Sequence, Tuple, Union

from psdb.cast import Cast, cast as default_cast
from psdb.errors import DataError
from psdb.schemas import Field, QueryResult, QueryResultRow

Row = Union[Dict[str, Any], Tuple[Any, ...]]
RowMode = Literal["object", "array"]


def decode_values(values: Optional[str]) -> bytes:
    if not values:
        return b""
    try:
        return base64.b64decode(values, validate=True)
    except binascii.Error as e:
        raise DataError(f"Invalid base64 row data: {e}") from e


def decode_row(lengths: Sequence[str], values: bytes) -> List[Optional[bytes]]:
    """
    Split one packed row into per-column byte spans.

    ``lengths[i]`` is the byte width of column i; a negative width marks a
    NULL column, which consumes nothing from ``values``. Trailing bytes are
    not checked.
    """
    spans: List[Optional[bytes]] = []
    offset = 0
    for size in lengths:
        try:
            width = int(size)
        except (TypeError, ValueError) as e:
            raise DataError(f"Invalid column length: {size!r}") from e
        if width < 0:
            spans.append(None)
            continue
        spans.append(values[offset:offset + width])
        offset += width
    return spans


def parse_row(
    fields: Sequence[Field],
    raw_row: QueryResultRow,
    cast: Cast = default_cast,
    as_: RowMode = "object",
) -> Row:
    if len(raw_row.lengths) != len(fields):
        raise DataError(
            f"Row has {len(raw_row.lengths)} column lengths for {len(fields)} fields"
        )
    spans = decode_row(raw_row.lengths, decode_values(raw_row.values))
    if as_ == "array":
        return tuple(cast(field, span) for field, span in zip(fields, spans))
    return {field.name: cast(field, span) for field, span in zip(fields, spans)}


def parse_rows(
    result: QueryResult,
    cast: Cast = default_cast,
    as_: RowMode = "object",
) -> List[Row]:
    return [parse_row(result.fields, row, cast, as_) for row in result.rows]
