from sqlalchemy.exc import DBAPIError, IntegrityError, OperationalError

from portfolio.errors import ApiError, Conflict, InternalError, NotFound

# SQLSTATE codes
SERIALIZATION_FAILURE = "40001"
DEADLOCK_DETECTED = "40P01"
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"

WRITE_CONFLICT_CODES = {SERIALIZATION_FAILURE, DEADLOCK_DETECTED}


def store_error_code(exc):
    """
    Returns the driver's SQLSTATE for a wrapped DBAPI error, if it has one.

    psycopg2 exposes ``pgcode``, psycopg 3 exposes ``sqlstate``.
    """
    orig = getattr(exc, "orig", None)
    if orig is None:
        return None
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def is_write_conflict(exc) -> bool:
    if not isinstance(exc, DBAPIError):
        return False

    if store_error_code(exc) in WRITE_CONFLICT_CODES:
        return True

    # SQLite reports lock contention without a SQLSTATE
    return isinstance(exc, OperationalError) and "database is locked" in str(exc.orig).lower()


def classify_store_error(exc) -> ApiError:
    """Maps a storage-layer exception onto the API error taxonomy."""
    if is_write_conflict(exc):
        return Conflict("The resource was modified concurrently. Please retry.")

    if isinstance(exc, IntegrityError):
        code = store_error_code(exc)
        text = str(exc.orig).lower()

        if code == FOREIGN_KEY_VIOLATION or "foreign key" in text:
            return NotFound("Referenced record not found")

        if code == UNIQUE_VIOLATION or "unique" in text:
            return Conflict("A record with the same unique value already exists")

        return Conflict("Integrity constraint violated", error=str(exc.orig))

    raw = getattr(exc, "orig", None) or exc
    return InternalError("Storage failure", error=str(raw))
