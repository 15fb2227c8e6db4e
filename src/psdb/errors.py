from typing import Any, Dict, Optional


# Exceptions
class Error(Exception): ...


class InterfaceError(Error):
    """
    Exception raised for errors that are related to the database interface
    rather than the database itself. (e.g., bad configuration, misuse of the
    DB-API, driver bugs)
    """

    pass


class DatabaseError(Error):
    """
    Exception raised for errors reported by the gateway, or while turning its
    response into rows.

    ``status`` is the HTTP status the failure maps to (400 for query errors
    carried in a 2xx body) and ``body`` is the gateway's ``{"code", "message"}``
    error object.
    """

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body

    @property
    def code(self) -> Optional[str]:
        if self.body is None:
            return None
        return self.body.get("code")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, {self.status!r}, {self.body!r})"


# Subclasses of DatabaseError


class DataError(DatabaseError):
    """
    Exception raised for errors that are due to problems with the
    processed data, like a malformed JSON column or a packed row whose
    lengths do not line up with its fields.
    """

    pass


class OperationalError(DatabaseError):
    """
    Exception raised for errors that are related to the database's operation
    and not necessarily under the programmer's control, e.g. the gateway
    cannot be reached or the request times out.
    """

    pass


class IntegrityError(DatabaseError):
    """
    Exception raised when the relational integrity of the database is affected,
    e.g. a foreign key check fails, duplicate key, etc.
    """

    pass


class InternalError(DatabaseError):
    """
    Exception raised when the database encounters an internal error,
    e.g. the cursor is not valid anymore, the transaction is out of sync, etc.
    """

    pass


class ProgrammingError(DatabaseError):
    """
    Exception raised for programming errors, e.g. fetching from a cursor
    that has not executed anything or has been closed.
    """

    pass


class NotSupportedError(DatabaseError):
    """
    Exception raised in case a method or database API was used which is
    not supported by the driver, e.g. requesting a .rollback() on a
    connection outside of a transaction.
    """

    pass


class AuthenticationError(DatabaseError):
    """
    Exception raised when the gateway rejects the credentials (401 or 403).
    """

    pass
