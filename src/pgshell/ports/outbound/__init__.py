"""Outbound ports - interfaces for external dependencies.

Outbound ports define contracts for external systems that the console
depends on: the server control executable and the database driver.
"""

from pgshell.ports.outbound.database_driver import Connection, DatabaseDriver
from pgshell.ports.outbound.server_control import ServerControl

__all__ = [
    "Connection",
    "DatabaseDriver",
    "ServerControl",
]
