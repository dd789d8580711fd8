"""Connection Manager - opens verified connections with bounded retry.

The server may still be starting when the launcher returns, so opening a
connection is retried a fixed number of times with a fixed pause. It never
blocks indefinitely.
"""

from __future__ import annotations

import time
from typing import Callable

from pgshell.domain.errors import ConnectionFailedError, DriverError
from pgshell.infrastructure.logging import get_logger
from pgshell.infrastructure.metrics import MetricsRegistry, get_metrics
from pgshell.infrastructure.tracing import trace_span
from pgshell.ports.outbound.database_driver import Connection, DatabaseDriver

logger = get_logger(__name__)

DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_RETRY_DELAY_SECONDS = 2.0


class ConnectionManager:
    """Opens and pings connections through a DatabaseDriver."""

    def __init__(
        self,
        driver: DatabaseDriver,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        retry_delay_seconds: float = DEFAULT_RETRY_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Initialize the connection manager.

        Args:
            driver: Driver used to open connections.
            max_attempts: Attempts before giving up (at least 1).
            retry_delay_seconds: Pause between two attempts.
            sleep: Sleep function, replaceable in tests.
            metrics: Metrics registry; the global one if None.
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        self._driver = driver
        self._max_attempts = max_attempts
        self._retry_delay_seconds = retry_delay_seconds
        self._sleep = sleep
        self._metrics = metrics or get_metrics()

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    def connect(self, database_name: str) -> Connection:
        """Open a connection and verify it with a ping.

        Args:
            database_name: Database to connect to.

        Returns:
            The first connection whose ping succeeds.

        Raises:
            ConnectionFailedError: After the last failed attempt.
        """
        last_error: DriverError | None = None

        with trace_span("pgshell.connect", {"db.name": database_name}):
            for attempt in range(1, self._max_attempts + 1):
                connection: Connection | None = None
                try:
                    connection = self._driver.open(database_name)
                    connection.ping()
                except DriverError as e:
                    last_error = e
                    if connection is not None:
                        connection.close()
                    self._metrics.connection_attempts_total.labels(status="failure").inc()
                    logger.warning(
                        "Connection attempt failed",
                        database=database_name,
                        attempt=attempt,
                        max_attempts=self._max_attempts,
                        error=str(e),
                    )
                    if attempt < self._max_attempts:
                        self._sleep(self._retry_delay_seconds)
                    continue

                self._metrics.connection_attempts_total.labels(status="success").inc()
                logger.debug("Connected", database=database_name, attempt=attempt)
                return connection

        raise ConnectionFailedError(database_name, self._max_attempts, last_error)
