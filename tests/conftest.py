"""Pytest configuration and fixtures for pgshell tests."""

from __future__ import annotations

import io
from typing import Any, Generator, Sequence

import pytest
from structlog.testing import capture_logs
from prometheus_client import CollectorRegistry

from pgshell.application.catalog import DATABASES_QUERY
from pgshell.domain.entities.result_set import ResultSet
from pgshell.domain.errors import DriverError, QueryError, ServerStartError
from pgshell.infrastructure.metrics import MetricsRegistry


class FakeConnection:
    """In-memory Connection that records what was run on it."""

    def __init__(
        self,
        database_name: str,
        tables: dict[str, tuple[list[str], list[Sequence[Any]]]] | None = None,
        rowcount: int | None = 0,
        ping_error: str | None = None,
        failing: set[str] | None = None,
    ) -> None:
        self._database_name = database_name
        self.tables = tables or {}
        self.rowcount = rowcount
        self.ping_error = ping_error
        self.failing = failing or set()
        self.queries: list[str] = []
        self.commands: list[str] = []
        self.close_calls = 0

    @property
    def database_name(self) -> str:
        return self._database_name

    @property
    def closed(self) -> bool:
        return self.close_calls > 0

    def ping(self) -> None:
        if self.ping_error is not None:
            raise DriverError(self.ping_error)

    def query(self, sql: str) -> ResultSet:
        self.queries.append(sql)
        if sql in self.failing:
            raise QueryError(f"syntax error at or near \"{sql.split()[0]}\"")
        columns, rows = self.tables.get(sql, ([], []))
        return ResultSet(columns=list(columns), rows=list(rows))

    def execute(self, sql: str) -> int | None:
        self.commands.append(sql)
        if sql in self.failing:
            raise QueryError(f"syntax error at or near \"{sql.split()[0]}\"")
        return self.rowcount

    def close(self) -> None:
        self.close_calls += 1


class FakeDriver:
    """DatabaseDriver that hands out FakeConnections.

    Attributes:
        databases: Names returned by the catalog query
        unreachable: Databases whose open always fails
        failures_before_success: Opens that fail before the first success
    """

    def __init__(
        self,
        databases: list[str] | None = None,
        unreachable: set[str] | None = None,
        failures_before_success: int = 0,
    ) -> None:
        self.databases = databases if databases is not None else ["postgres", "shop"]
        self.unreachable = unreachable or set()
        self.failures_before_success = failures_before_success
        self.opened: list[FakeConnection] = []
        self.open_calls: list[str] = []

    def open(self, database_name: str) -> FakeConnection:
        self.open_calls.append(database_name)
        if database_name in self.unreachable:
            raise DriverError(f'database "{database_name}" does not exist')
        if self.failures_before_success > 0:
            self.failures_before_success -= 1
            raise DriverError("connection refused")

        connection = FakeConnection(
            database_name,
            tables={DATABASES_QUERY: (["datname"], [(name,) for name in self.databases])},
        )
        self.opened.append(connection)
        return connection

    def sessions(self, database_name: str) -> list[FakeConnection]:
        """Connections opened for a database, excluding catalog lookups."""
        return [
            c for c in self.opened
            if c.database_name == database_name and DATABASES_QUERY not in c.queries
        ]


class FakeServerControl:
    """ServerControl with scripted status and start results."""

    def __init__(self, running: bool = False, start_error: str | None = None) -> None:
        self.running = running
        self.start_error = start_error
        self.start_calls = 0

    def is_running(self) -> bool:
        return self.running

    def start(self) -> None:
        self.start_calls += 1
        if self.start_error is not None:
            raise ServerStartError(self.start_error)
        self.running = True


class RecordingSleep:
    """Sleep replacement that records requested delays."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture(autouse=True)
def captured_logs() -> Generator[list[dict[str, Any]], None, None]:
    """Capture structlog events instead of printing them over test output."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def driver() -> FakeDriver:
    return FakeDriver()


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def clear_calls() -> list[int]:
    return []


@pytest.fixture
def clear_screen(clear_calls: list[int]):
    """Clear-screen action that only counts invocations."""
    return lambda: clear_calls.append(1)


def make_stdin(*lines: str) -> io.StringIO:
    """Build an input stream from lines."""
    return io.StringIO("".join(f"{line}\n" for line in lines))


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
