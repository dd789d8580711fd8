"""Exception hierarchy for the console.

Only ServerStartError is fatal. Everything else is caught where it occurs,
logged, and the interactive loop resumes.
"""

from __future__ import annotations


class PgShellError(Exception):
    """Base class for all console errors."""


class ServerStartError(PgShellError):
    """The database server was not running and could not be started."""


class DriverError(PgShellError):
    """The database driver failed to open or verify a connection."""


class QueryError(DriverError):
    """A statement failed to execute or its results could not be read."""


class ConnectionFailedError(PgShellError):
    """Raised when every connection attempt to a database has failed.

    Attributes:
        database_name: The database the connection was opened for
        attempts: Number of attempts made before giving up
    """

    def __init__(self, database_name: str, attempts: int, cause: Exception | None = None) -> None:
        self.database_name = database_name
        self.attempts = attempts
        self.cause = cause
        message = f"could not connect to database '{database_name}' after {attempts} attempts"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)


class UnsupportedPlatformError(PgShellError):
    """The terminal screen cannot be cleared on this platform."""
