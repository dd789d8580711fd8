"""Integration tests for a full console session.

Launcher, connection manager, catalog, executor and shell run together
against the in-memory driver and server control.
"""

from __future__ import annotations

import pytest

from conftest import FakeConnection, FakeDriver, FakeServerControl, RecordingSleep, make_stdin
from pgshell.application import (
    CatalogLister,
    ConnectionManager,
    InteractiveShell,
    QueryExecutor,
    ServerLauncher,
)
from pgshell.domain.errors import ServerStartError
from pgshell.infrastructure.metrics import MetricsRegistry

RULE = "-" * 80


class ShopDriver(FakeDriver):
    """Driver whose 'shop' database has a users table."""

    def open(self, database_name: str) -> FakeConnection:
        connection = super().open(database_name)
        if database_name == "shop":
            connection.tables["SELECT id, email FROM users"] = (
                ["id", "email"],
                [(1, "a@example.com"), (2, None)],
            )
            connection.rowcount = 2
        return connection


@pytest.mark.integration
class TestConsoleSession:
    """End-to-end console sessions."""

    def run_session(
        self,
        driver: FakeDriver,
        control: FakeServerControl,
        metrics: MetricsRegistry,
        *lines: str,
    ) -> RecordingSleep:
        sleep = RecordingSleep()
        ServerLauncher(control, metrics).ensure_server_running()
        connections = ConnectionManager(driver, sleep=sleep, metrics=metrics)
        InteractiveShell(
            connections=connections,
            catalog=CatalogLister(connections),
            executor=QueryExecutor(metrics),
            clear_screen=lambda: None,
            stdin=make_stdin(*lines),
        ).run()
        return sleep

    def test_cold_start_session(
        self, capsys: pytest.CaptureFixture[str], metrics_registry: MetricsRegistry
    ) -> None:
        # Server needs two failed connection attempts before it accepts
        driver = ShopDriver(databases=["postgres", "shop"], failures_before_success=2)
        control = FakeServerControl(running=False)

        sleep = self.run_session(
            driver,
            control,
            metrics_registry,
            "shop",
            "SELECT id, email",
            "FROM users",
            "$send",
            "",
            "UPDATE users SET email = lower(email)",
            "$send",
            "",
            "$exit",
        )

        out = capsys.readouterr().out
        assert control.start_calls == 1
        assert sleep.calls == [2.0, 2.0]
        assert out.startswith("Starting PostgreSQL server...\nAvailable databases:\n")
        assert "- postgres\n- shop\n" in out
        assert "Connected to the database 'shop'" in out
        assert f"id\temail\n{RULE}\n1\ta@example.com\n2\t<nil>\n" in out
        assert "Query executed successfully. Affected lines: 2\n" in out

        shop = driver.sessions("shop")[0]
        assert shop.queries == ["SELECT id, email FROM users"]
        assert shop.commands == ["UPDATE users SET email = lower(email)"]
        assert shop.close_calls == 1

    def test_change_database_does_not_restart_server(
        self, capsys: pytest.CaptureFixture[str], metrics_registry: MetricsRegistry
    ) -> None:
        driver = ShopDriver()
        control = FakeServerControl(running=True)

        self.run_session(
            driver,
            control,
            metrics_registry,
            "shop",
            "$change_db",
            "",
            "CREATE TABLE t (id int)",
            "$send",
            "",
            "$exit",
        )

        out = capsys.readouterr().out
        assert out.count("PostgreSQL server is already running.") == 1
        assert out.count("Available databases:") == 2
        assert "Connected to the database 'postgres'" in out
        assert "Query executed successfully. Affected lines: 0\n" in out
        assert driver.sessions("shop")[0].close_calls == 1
        assert driver.sessions("postgres")[0].commands == ["CREATE TABLE t (id int)"]

    def test_failed_query_keeps_session_alive(
        self, capsys: pytest.CaptureFixture[str], metrics_registry: MetricsRegistry
    ) -> None:
        class FailingDriver(ShopDriver):
            def open(self, database_name: str) -> FakeConnection:
                connection = super().open(database_name)
                connection.failing.add("SELEC 1")
                return connection

        driver = FailingDriver()

        self.run_session(
            driver,
            FakeServerControl(running=True),
            metrics_registry,
            "shop",
            "SELEC 1",
            "$send",
            "",
            "SELECT id, email FROM users",
            "$send",
            "",
            "$exit",
        )

        out = capsys.readouterr().out
        assert "1\ta@example.com" in out
        assert metrics_registry.registry.get_sample_value(
            "pgshell_queries_total", {"kind": "write", "status": "error"}
        ) == 1

    def test_unstartable_server_stops_before_shell(
        self, metrics_registry: MetricsRegistry
    ) -> None:
        driver = ShopDriver()
        control = FakeServerControl(running=False, start_error="could not start server")

        with pytest.raises(ServerStartError):
            self.run_session(driver, control, metrics_registry, "shop", "$exit")

        assert driver.open_calls == []
