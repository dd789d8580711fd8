"""Outbound adapters - implementations of outbound ports.

Exports:
    - PgCtlServerControl: ServerControl backed by the pg_ctl executable
    - SQLAlchemyDriver: DatabaseDriver backed by SQLAlchemy and pg8000
    - SQLAlchemyConnection: Connection wrapper returned by SQLAlchemyDriver
"""

from pgshell.adapters.outbound.pg_ctl_server_control import PgCtlServerControl
from pgshell.adapters.outbound.sqlalchemy_driver import SQLAlchemyConnection, SQLAlchemyDriver

__all__ = [
    "PgCtlServerControl",
    "SQLAlchemyConnection",
    "SQLAlchemyDriver",
]
