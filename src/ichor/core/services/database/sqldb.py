"""Driver error classification.

Stores never inspect driver exceptions themselves; they hand an
``IntegrityError`` to :func:`classify` and map the resulting sentinel to
their domain error.
"""

from sqlalchemy.exc import IntegrityError

# PostgreSQL SQLSTATE codes
_UNIQUE_VIOLATION = "23505"
_FOREIGN_KEY_VIOLATION = "23503"


class DBError(Exception):
    """Base class for classified database errors."""


class DBNotFoundError(DBError):
    def __init__(self, message: str = "not found"):
        super().__init__(message)


class DBDuplicatedEntryError(DBError):
    def __init__(self, message: str = "duplicated entry"):
        super().__init__(message)


class DBForeignKeyViolationError(DBError):
    def __init__(self, message: str = "foreign key violation"):
        super().__init__(message)


def _sqlstate(err: IntegrityError) -> str | None:
    orig = err.orig
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def classify(err: IntegrityError) -> DBError:
    """Translate an integrity error into one of the sentinels above."""
    state = _sqlstate(err)
    message = str(err.orig)

    if state == _UNIQUE_VIOLATION or "UNIQUE constraint failed" in message:
        return DBDuplicatedEntryError(message)
    if state == _FOREIGN_KEY_VIOLATION or "FOREIGN KEY constraint failed" in message:
        return DBForeignKeyViolationError(message)
    return DBError(message)
