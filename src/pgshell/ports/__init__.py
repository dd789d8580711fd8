"""Ports layer - interface definitions following Hexagonal Architecture.

The console only has outbound ports: the server control executable and the
database driver. Adapters implement them with concrete functionality.
"""

from pgshell.ports.outbound import Connection, DatabaseDriver, ServerControl

__all__ = [
    "Connection",
    "DatabaseDriver",
    "ServerControl",
]
