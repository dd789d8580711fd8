"""Database Driver port.

This outbound port hides the concrete driver behind two small contracts:
a DatabaseDriver that opens connections by database name, and the
Connection it returns.

Connections run in autocommit mode. The console does not manage
transactions; statements typed at the prompt take effect immediately.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol

from pgshell.domain.entities.result_set import ResultSet


class Connection(Protocol):
    """An open connection to a single database.

    Owned by exactly one shell session and closed exactly once.
    """

    @property
    @abstractmethod
    def database_name(self) -> str:
        """Return the name of the connected database."""
        ...

    @abstractmethod
    def ping(self) -> None:
        """Verify the connection is usable.

        Raises:
            DriverError: If the server cannot be reached.
        """
        ...

    @abstractmethod
    def query(self, sql: str) -> ResultSet:
        """Run a statement that returns rows.

        The returned ResultSet streams rows from the server and must be
        closed by the caller.

        Raises:
            QueryError: If the statement fails or rows cannot be read.
        """
        ...

    @abstractmethod
    def execute(self, sql: str) -> int | None:
        """Run a statement that does not return rows.

        Returns:
            Number of affected rows, or None if the driver does not know.

        Raises:
            QueryError: If the statement fails.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Close the connection and release resources."""
        ...


class DatabaseDriver(Protocol):
    """Opens connections to databases on one server."""

    @abstractmethod
    def open(self, database_name: str) -> Connection:
        """Open a connection to the named database.

        Raises:
            DriverError: If the connection cannot be opened.
        """
        ...
