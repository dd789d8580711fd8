"""SQLAlchemy-backed database driver.

Connections are opened with the pg8000 PostgreSQL driver in AUTOCOMMIT
isolation, so DDL such as CREATE DATABASE works from the prompt and
every statement takes effect immediately. Statements are sent verbatim
through ``exec_driver_sql``; the console never parses them.
"""

from __future__ import annotations

from typing import Any, Iterator, Sequence

import sqlalchemy
from sqlalchemy.engine import URL, Connection as SAConnection, CursorResult, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from pgshell.domain.entities.result_set import ResultSet
from pgshell.domain.errors import DriverError, QueryError
from pgshell.infrastructure.config import DatabaseConfig
from pgshell.infrastructure.logging import get_logger

logger = get_logger(__name__)

DRIVER_NAME = "postgresql+pg8000"


class SQLAlchemyConnection:
    """Connection port implementation wrapping a SQLAlchemy connection.

    Owns both the connection and the engine it came from; closing the
    connection disposes the engine.
    """

    def __init__(self, database_name: str, engine: Engine, connection: SAConnection) -> None:
        self._database_name = database_name
        self._engine = engine
        self._connection = connection
        self._closed = False

    @property
    def database_name(self) -> str:
        return self._database_name

    @property
    def closed(self) -> bool:
        return self._closed

    def ping(self) -> None:
        try:
            self._connection.exec_driver_sql("SELECT 1").close()
        except SQLAlchemyError as e:
            raise DriverError(str(e)) from e

    def query(self, sql: str) -> ResultSet:
        try:
            result = self._connection.exec_driver_sql(sql)
            columns = list(result.keys()) if result.returns_rows else []
        except SQLAlchemyError as e:
            raise QueryError(str(e)) from e
        return ResultSet(columns=columns, rows=self._stream(result), on_close=result.close)

    def execute(self, sql: str) -> int | None:
        try:
            result = self._connection.exec_driver_sql(sql)
            rowcount = result.rowcount
            result.close()
        except SQLAlchemyError as e:
            raise QueryError(str(e)) from e
        if rowcount is None or rowcount < 0:
            return None
        return rowcount

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._connection.close()
        finally:
            self._engine.dispose()

    @staticmethod
    def _stream(result: CursorResult) -> Iterator[Sequence[Any]]:
        if not result.returns_rows:
            return
        try:
            for row in result:
                yield tuple(row)
        except SQLAlchemyError as e:
            raise QueryError(str(e)) from e


class SQLAlchemyDriver:
    """DatabaseDriver implementation for one PostgreSQL server."""

    def __init__(self, config: DatabaseConfig) -> None:
        self._config = config

    def url(self, database_name: str) -> URL:
        """Build the connection URL for a database."""
        return URL.create(
            DRIVER_NAME,
            username=self._config.user,
            password=self._config.password,
            host=self._config.host,
            port=self._config.port,
            database=database_name,
        )

    def connect_args(self) -> dict[str, Any]:
        # pg8000 uses no TLS unless an ssl_context is passed
        if self._config.sslmode == "require":
            return {"ssl_context": True}
        return {}

    def open(self, database_name: str) -> SQLAlchemyConnection:
        engine = sqlalchemy.create_engine(
            self.url(database_name),
            poolclass=NullPool,
            isolation_level="AUTOCOMMIT",
            connect_args=self.connect_args(),
        )
        try:
            connection = engine.connect()
        except SQLAlchemyError as e:
            engine.dispose()
            raise DriverError(str(e)) from e
        logger.debug(
            "Connection opened",
            database=database_name,
            host=self._config.host,
            port=self._config.port,
        )
        return SQLAlchemyConnection(database_name, engine, connection)
