from typing import TYPE_CHECKING, Any, Iterable, Iterator, List, Optional, Tuple

from psdb.errors import ProgrammingError
from psdb.sanitization import Args

if TYPE_CHECKING:
    from psdb.connection import Connection, ExecutedQuery


class Cursor:
    """DB-API cursor over :meth:`Connection.execute`; rows come back as tuples."""

    def __init__(self, conn: "Connection"):
        self._conn = conn
        self._rows: Optional[Iterator[Tuple[Any, ...]]] = None
        self._closed = False
        self.description: Optional[List[Tuple[Any, ...]]] = None
        self.rowcount: int = -1
        self.lastrowid: Optional[int] = None
        self.arraysize: int = 1

    @property
    def connection(self) -> "Connection":
        return self._conn

    def execute(self, operation: str, parameters: Optional[Args] = None) -> "Cursor":
        """
        Send one statement through the owning connection.
        Raises:
          ProgrammingError if the cursor is closed,
          DatabaseError    for anything the gateway rejects.
        """
        self._check_open()
        result = self._conn.execute(operation, parameters, as_="array")
        self._load(result)
        return self

    def executemany(self, operation: str, seq_of_parameters: Iterable[Args]) -> "Cursor":
        self._check_open()
        total = 0
        for parameters in seq_of_parameters:
            result = self._conn.execute(operation, parameters, as_="array")
            total += result.rows_affected
            self._load(result)
        self.rowcount = total
        return self

    def _load(self, result: "ExecutedQuery") -> None:
        if result.fields:
            self.description = [
                (
                    field.name,
                    field.type,
                    None,
                    field.column_length,
                    None,
                    field.decimals,
                    field.nullable,
                )
                for field in result.fields
            ]
            self.rowcount = result.size
        else:
            self.description = None
            self.rowcount = result.rows_affected
        self.lastrowid = int(result.insert_id) or None
        self._rows = iter(result.rows)

    def fetchone(self) -> Optional[Tuple[Any, ...]]:
        self._check_open()
        if self._rows is None:
            raise ProgrammingError("No result set; call execute() first")
        return next(self._rows, None)

    def fetchmany(self, size: Optional[int] = None) -> List[Tuple[Any, ...]]:
        if size is None:
            size = self.arraysize
        rows = []
        for _ in range(size):
            r = self.fetchone()
            if r is None:
                break
            rows.append(r)
        return rows

    def fetchall(self) -> List[Tuple[Any, ...]]:
        rows = []
        while (r := self.fetchone()) is not None:
            rows.append(r)
        return rows

    def __iter__(self):
        return self

    def __next__(self):
        row = self.fetchone()
        if row is None:
            raise StopIteration
        return row

    def setinputsizes(self, sizes: Any) -> None:
        pass

    def setoutputsize(self, size: Any, column: Optional[int] = None) -> None:
        pass

    def close(self):
        self._rows = None
        self._closed = True

    def _check_open(self) -> None:
        if self._closed:
            raise ProgrammingError("Cursor is closed")
