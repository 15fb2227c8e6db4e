"""
psdb – a PEP‑249‑style HTTP driver for a sharded MySQL gateway
"""

__version__ = "0.1.0"

import datetime

# PEP‑249 module globals
apilevel    = "2.0"      # supported DB‑API level
threadsafety = 1         # threads may share the module, not connections
paramstyle  = "qmark"    # ":name" placeholders with a mapping work too

# Convenience imports
from .cast import cast
from .config import Config
from .connection import Client, Connection, ExecutedQuery, Transaction, connect
from .cursor import Cursor
from .errors import (
    AuthenticationError,
    DatabaseError,
    DataError,
    Error,
    IntegrityError,
    InterfaceError,
    InternalError,
    NotSupportedError,
    OperationalError,
    ProgrammingError,
)
from .fields import FieldType
from .sanitization import format
from .schemas import Field
from .text import from_hex, to_hex


class DBAPITypeObject:
    def __init__(self, *types: FieldType):
        self.values = frozenset(types)

    def __eq__(self, other):
        return other in self.values

    def __ne__(self, other):
        return other not in self.values

    def __hash__(self):
        return hash(self.values)


STRING = DBAPITypeObject(
    FieldType.CHAR, FieldType.VARCHAR, FieldType.TEXT, FieldType.ENUM, FieldType.SET,
    FieldType.JSON,
)
BINARY = DBAPITypeObject(
    FieldType.BLOB, FieldType.BIT, FieldType.BINARY, FieldType.VARBINARY, FieldType.GEOMETRY,
)
NUMBER = DBAPITypeObject(
    FieldType.INT8, FieldType.INT16, FieldType.INT24, FieldType.INT32, FieldType.INT64,
    FieldType.UINT8, FieldType.UINT16, FieldType.UINT24, FieldType.UINT32, FieldType.UINT64,
    FieldType.FLOAT32, FieldType.FLOAT64, FieldType.DECIMAL, FieldType.YEAR,
)
DATETIME = DBAPITypeObject(
    FieldType.DATE, FieldType.TIME, FieldType.DATETIME, FieldType.TIMESTAMP,
)
ROWID = DBAPITypeObject(FieldType.INT64, FieldType.UINT64)

Date = datetime.date
Time = datetime.time
Timestamp = datetime.datetime
Binary = bytes

# What users get when they do `import psdb`:
__all__ = [
    "connect",
    "Client",
    "Config",
    "Connection",
    "Cursor",
    "ExecutedQuery",
    "Transaction",
    "Field",
    "FieldType",
    "cast",
    "to_hex",
    "from_hex",
    "Error",
    "InterfaceError",
    "DatabaseError",
    "DataError",
    "OperationalError",
    "IntegrityError",
    "InternalError",
    "ProgrammingError",
    "NotSupportedError",
    "AuthenticationError",
    "STRING",
    "BINARY",
    "NUMBER",
    "DATETIME",
    "ROWID",
    "Date",
    "Time",
    "Timestamp",
    "Binary",
    "apilevel",
    "threadsafety",
    "paramstyle",
    "__version__",
]
