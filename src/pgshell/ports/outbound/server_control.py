"""Server Control port for the local database server process.

The console does not manage the server itself. It asks an external control
executable whether the server is running and, if not, to start it.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol


class ServerControl(Protocol):
    """Protocol for checking and starting the database server."""

    @abstractmethod
    def is_running(self) -> bool:
        """Return True if the server reports itself as running.

        Any failure to run the status check counts as "not running".
        """
        ...

    @abstractmethod
    def start(self) -> None:
        """Start the server, streaming its output to the console.

        Raises:
            ServerStartError: If the server could not be started.
        """
        ...
