"""Command-line entry point.

Wires configuration, observability and the adapters together, makes sure
the server is running and hands control to the interactive shell.

Usage:
    pgshell                      # start/verify the local server, then prompt
    pgshell --no-launch --host db.internal --database analytics
"""

from __future__ import annotations

import sys

import click

from pgshell import __version__
from pgshell.adapters.outbound.pg_ctl_server_control import PgCtlServerControl
from pgshell.adapters.outbound.sqlalchemy_driver import SQLAlchemyDriver
from pgshell.application.catalog import CatalogLister
from pgshell.application.connection_manager import ConnectionManager
from pgshell.application.executor import QueryExecutor
from pgshell.application.launcher import ServerLauncher
from pgshell.application.shell import InteractiveShell
from pgshell.domain.errors import ServerStartError, UnsupportedPlatformError
from pgshell.infrastructure.config import Config, get_config
from pgshell.infrastructure.logging import get_logger, setup_logging
from pgshell.infrastructure.metrics import get_metrics, setup_metrics
from pgshell.infrastructure.terminal import resolve_clear_screen
from pgshell.infrastructure.tracing import setup_tracing

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def apply_overrides(
    config: Config,
    host: str | None = None,
    port: int | None = None,
    user: str | None = None,
    password: str | None = None,
    no_launch: bool = False,
    log_level: str | None = None,
    log_format: str | None = None,
    metrics_port: int | None = None,
) -> Config:
    """Return a copy of the configuration with command-line values applied.

    Options left unset keep the configured value.
    """

    def given(**values: object) -> dict[str, object]:
        return {key: value for key, value in values.items() if value is not None}

    database = config.database.model_copy(
        update=given(host=host, port=port, user=user, password=password)
    )
    server = config.server
    if no_launch:
        server = server.model_copy(update={"manage": False})
    observability = config.observability.model_copy(
        update=given(log_level=log_level, log_format=log_format, metrics_port=metrics_port)
    )
    return config.model_copy(
        update={"database": database, "server": server, "observability": observability}
    )


def build_shell(config: Config, initial_database: str | None = None) -> InteractiveShell:
    """Assemble the shell and its collaborators from configuration."""
    metrics = get_metrics()
    connections = ConnectionManager(
        SQLAlchemyDriver(config.database),
        max_attempts=config.retry.max_attempts,
        retry_delay_seconds=config.retry.retry_delay_seconds,
        metrics=metrics,
    )
    return InteractiveShell(
        connections=connections,
        catalog=CatalogLister(connections, config.database.default_database),
        executor=QueryExecutor(metrics),
        clear_screen=resolve_clear_screen(),
        default_database=config.database.default_database,
        initial_database=initial_database,
    )


@click.command(name="pgshell", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--host", default=None, help="Server host.")
@click.option("--port", default=None, type=click.IntRange(1, 65535), help="Server port.")
@click.option("-U", "--user", default=None, help="Login role.")
@click.option("--password", default=None, help="Login password.")
@click.option(
    "-d",
    "--database",
    default=None,
    help="Connect to this database first instead of prompting for one.",
)
@click.option(
    "--no-launch",
    is_flag=True,
    default=False,
    help="Do not check or start the local server with pg_ctl.",
)
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Log level.",
)
@click.option(
    "--log-format",
    default=None,
    type=click.Choice(["console", "json"]),
    help="Log format.",
)
@click.option(
    "--metrics-port",
    default=None,
    type=click.IntRange(1, 65535),
    help="Expose Prometheus metrics on this port.",
)
@click.version_option(__version__)
def main(
    host: str | None,
    port: int | None,
    user: str | None,
    password: str | None,
    database: str | None,
    no_launch: bool,
    log_level: str | None,
    log_format: str | None,
    metrics_port: int | None,
) -> None:
    """
    Interactive console for a local PostgreSQL server.

    Type a statement over as many lines as needed, then a line with $send
    to run it. A line with $exit quits; $change_db switches database.
    """
    config = apply_overrides(
        get_config(),
        host=host,
        port=port,
        user=user,
        password=password,
        no_launch=no_launch,
        log_level=log_level.upper() if log_level else None,
        log_format=log_format,
        metrics_port=metrics_port,
    )

    observability = config.observability
    setup_logging(level=observability.log_level, log_format=observability.log_format)
    logger = get_logger(__name__)

    if observability.metrics_port is not None:
        setup_metrics(port=observability.metrics_port)
    if observability.otel_endpoint:
        setup_tracing(
            service_name=observability.otel_service_name,
            otlp_endpoint=observability.otel_endpoint,
        )

    if config.server.manage:
        launcher = ServerLauncher(
            PgCtlServerControl(config.server.pg_ctl_path, config.server.data_dir),
            get_metrics(),
        )
        try:
            launcher.ensure_server_running()
        except ServerStartError as e:
            logger.critical("Failed to start PostgreSQL server", error=str(e))
            sys.exit(1)

    try:
        build_shell(config, initial_database=database).run()
    except UnsupportedPlatformError as e:
        logger.critical("Cannot clear terminal screen", error=str(e))
        sys.exit(1)


if __name__ == "__main__":
    # pylint: disable=no-value-for-parameter
    main()
