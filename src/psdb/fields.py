from enum import Enum


class FieldType(str, Enum):
    """Column type tags as the gateway names them in ``fields[].type``."""

    NULL = "NULL"
    INT8 = "INT8"
    UINT8 = "UINT8"
    INT16 = "INT16"
    UINT16 = "UINT16"
    INT24 = "INT24"
    UINT24 = "UINT24"
    INT32 = "INT32"
    UINT32 = "UINT32"
    INT64 = "INT64"
    UINT64 = "UINT64"
    FLOAT32 = "FLOAT32"
    FLOAT64 = "FLOAT64"
    DECIMAL = "DECIMAL"
    YEAR = "YEAR"
    DATE = "DATE"
    TIME = "TIME"
    DATETIME = "DATETIME"
    TIMESTAMP = "TIMESTAMP"
    CHAR = "CHAR"
    VARCHAR = "VARCHAR"
    TEXT = "TEXT"
    ENUM = "ENUM"
    SET = "SET"
    JSON = "JSON"
    BLOB = "BLOB"
    BIT = "BIT"
    BINARY = "BINARY"
    VARBINARY = "VARBINARY"
    GEOMETRY = "GEOMETRY"

    def __str__(self) -> str:
        return self.value


# https://dev.mysql.com/doc/dev/mysql-server/latest/page_protocol_basic_character_set.html
BINARY_CHARSET = 63

# Column definition flag bits
NOT_NULL_FLAG = 1

BIG_INT_TYPES = frozenset({FieldType.INT64, FieldType.UINT64})

INTEGRAL_TYPES = frozenset({
    FieldType.INT8, FieldType.INT16, FieldType.INT24, FieldType.INT32,
    FieldType.UINT8, FieldType.UINT16, FieldType.UINT24, FieldType.UINT32,
    FieldType.YEAR,
})

FLOAT_TYPES = frozenset({FieldType.FLOAT32, FieldType.FLOAT64})

DATE_OR_TIME_TYPES = frozenset({
    FieldType.DATE, FieldType.TIME, FieldType.DATETIME, FieldType.TIMESTAMP,
})

TEXT_TYPES = frozenset({
    FieldType.CHAR, FieldType.VARCHAR, FieldType.TEXT, FieldType.ENUM, FieldType.SET,
})

# Only returned as bytes when the column also carries the binary charset.
BINARY_TYPES = frozenset({
    FieldType.BLOB, FieldType.BIT, FieldType.BINARY, FieldType.VARBINARY, FieldType.GEOMETRY,
})
