"""pg_ctl-backed server control.

Runs ``pg_ctl status -D <data_dir>`` to check liveness and
``pg_ctl start -D <data_dir>`` to start the server. Exit status 0 from the
status check means the server is running.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Callable

from pgshell.domain.errors import ServerStartError
from pgshell.infrastructure.logging import get_logger

logger = get_logger(__name__)

Runner = Callable[..., subprocess.CompletedProcess]


class PgCtlServerControl:
    """ServerControl implementation that shells out to pg_ctl.

    Example:
        >>> control = PgCtlServerControl(Path("/usr/local/pgsql/bin/pg_ctl"),
        ...                              Path("/usr/local/pgsql/data"))
        >>> control.status_command()
        ['/usr/local/pgsql/bin/pg_ctl', 'status', '-D', '/usr/local/pgsql/data']
    """

    def __init__(
        self,
        pg_ctl_path: Path,
        data_dir: Path,
        runner: Runner = subprocess.run,
    ) -> None:
        """Initialize the server control.

        Args:
            pg_ctl_path: Path to the pg_ctl executable.
            data_dir: Server data directory.
            runner: Process runner with the signature of subprocess.run.
        """
        self._pg_ctl_path = pg_ctl_path
        self._data_dir = data_dir
        self._runner = runner

    def status_command(self) -> list[str]:
        return self._command("status")

    def start_command(self) -> list[str]:
        return self._command("start")

    def is_running(self) -> bool:
        """Run the status subcommand; output is discarded."""
        try:
            completed = self._runner(
                self.status_command(),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                check=False,
            )
        except OSError as e:
            logger.warning("Server status check failed", pg_ctl=str(self._pg_ctl_path), error=str(e))
            return False
        return completed.returncode == 0

    def start(self) -> None:
        """Run the start subcommand with output inherited by the console.

        Raises:
            ServerStartError: If pg_ctl cannot be run or exits non-zero.
        """
        try:
            self._runner(self.start_command(), check=True)
        except subprocess.CalledProcessError as e:
            raise ServerStartError(f"pg_ctl start exited with status {e.returncode}") from e
        except OSError as e:
            raise ServerStartError(f"cannot run {self._pg_ctl_path}: {e}") from e

    def _command(self, action: str) -> list[str]:
        return [str(self._pg_ctl_path), action, "-D", str(self._data_dir)]
