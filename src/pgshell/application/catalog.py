"""Catalog Lister - prints the databases available on the server."""

from __future__ import annotations

from pgshell.application.connection_manager import ConnectionManager
from pgshell.domain.errors import ConnectionFailedError, DriverError
from pgshell.infrastructure.logging import get_logger

logger = get_logger(__name__)

DATABASES_QUERY = "SELECT datname FROM pg_database WHERE datistemplate = false"


class CatalogLister:
    """Lists non-template databases over a maintenance connection."""

    def __init__(self, connections: ConnectionManager, maintenance_database: str = "postgres") -> None:
        self._connections = connections
        self._maintenance_database = maintenance_database

    def list_databases(self) -> list[str]:
        """Print the available databases.

        Failures are logged and leave the console without a listing; the
        user can still type a database name.

        Returns:
            The names printed, empty if the listing failed.
        """
        try:
            connection = self._connections.connect(self._maintenance_database)
        except ConnectionFailedError as e:
            logger.error("Cannot list databases", error=str(e))
            return []

        try:
            with connection.query(DATABASES_QUERY) as result:
                names = [str(row[0]) for row in result]
        except DriverError as e:
            logger.error("Error obtaining database list", error=str(e))
            return []
        finally:
            connection.close()

        print("Available databases:")
        for name in names:
            print("-", name)
        return names
