"""Application layer for the console.

The application layer orchestrates the ports to fulfil the console's use
cases: make sure the server runs, connect, list databases, run statements.

Exports:
    - ServerLauncher: Checks and starts the local server
    - ConnectionManager: Opens verified connections with bounded retry
    - CatalogLister: Prints the non-template databases
    - QueryExecutor: Runs one statement and prints its outcome
    - InteractiveShell: The read/execute loop
    - ShellState: States of the interactive shell
"""

from pgshell.application.catalog import CatalogLister
from pgshell.application.connection_manager import ConnectionManager
from pgshell.application.executor import QueryExecutor
from pgshell.application.launcher import ServerLauncher
from pgshell.application.shell import InteractiveShell, ShellState

__all__ = [
    "CatalogLister",
    "ConnectionManager",
    "InteractiveShell",
    "QueryExecutor",
    "ServerLauncher",
    "ShellState",
]
