"""Process Launcher - makes sure the local server is up.

An unstartable server is not self-healing, so a failed start is never
retried; ServerStartError propagates to the entry point which exits.
"""

from __future__ import annotations

from pgshell.domain.errors import ServerStartError
from pgshell.infrastructure.logging import get_logger
from pgshell.infrastructure.metrics import MetricsRegistry, get_metrics
from pgshell.ports.outbound.server_control import ServerControl

logger = get_logger(__name__)


class ServerLauncher:
    """Checks the server status and starts it when it is down."""

    def __init__(self, control: ServerControl, metrics: MetricsRegistry | None = None) -> None:
        self._control = control
        self._metrics = metrics or get_metrics()

    def ensure_server_running(self) -> None:
        """Start the server unless it already reports running.

        Raises:
            ServerStartError: If the start command fails.
        """
        if self._control.is_running():
            logger.info("Server already running")
            print("PostgreSQL server is already running.")
            return

        print("Starting PostgreSQL server...")
        try:
            self._control.start()
        except ServerStartError:
            self._metrics.server_starts_total.labels(status="failure").inc()
            raise
        self._metrics.server_starts_total.labels(status="success").inc()
        logger.info("Server started")
