"""Interactive Shell - the console's read/execute loop.

State machine:

    CHOOSING_DATABASE ──connected──> EDITING_STATEMENT <──────────┐
          ^                              │      │                  │
          │                          $change_db $send ──> EXECUTING┘
          │                              │      │
          └────── CHANGING_DATABASE <────┘    $exit / EOF
                                                │
                                                v
                                             EXITED

Changing database loops back to CHOOSING_DATABASE; the server launcher is
not run again. Exactly one connection is open outside CHOOSING_DATABASE and
it is closed before the shell leaves EDITING_STATEMENT.
"""

from __future__ import annotations

import sys
from enum import Enum, auto
from typing import TextIO

from pgshell.application.catalog import CatalogLister
from pgshell.application.connection_manager import ConnectionManager
from pgshell.application.executor import QueryExecutor
from pgshell.domain.errors import ConnectionFailedError
from pgshell.domain.value_objects.statement import (
    DEFAULT_DATABASE,
    Sentinel,
    StatementBuffer,
    resolve_database_name,
)
from pgshell.infrastructure.logging import get_logger
from pgshell.infrastructure.terminal import ClearScreen
from pgshell.ports.outbound.database_driver import Connection

logger = get_logger(__name__)

DATABASE_PROMPT = (
    "Enter the name of the database to connect to "
    "(or leave blank to connect to '{default}'): "
)
STATEMENT_BANNER = (
    "\nType your query (end with $send on a new line to execute, "
    "$exit to exit, $change_db to change database):"
)
CONTINUE_PROMPT = "\nPress Enter to continue..."


class ShellState(Enum):
    """States of the interactive shell."""

    CHOOSING_DATABASE = auto()
    EDITING_STATEMENT = auto()
    EXECUTING = auto()
    CHANGING_DATABASE = auto()
    EXITED = auto()


class InteractiveShell:
    """Reads statements from the console and runs them."""

    def __init__(
        self,
        connections: ConnectionManager,
        catalog: CatalogLister,
        executor: QueryExecutor,
        clear_screen: ClearScreen,
        stdin: TextIO | None = None,
        default_database: str = DEFAULT_DATABASE,
        initial_database: str | None = None,
    ) -> None:
        """Initialize the shell.

        Args:
            connections: Opens connections for chosen databases.
            catalog: Lists databases before each choice.
            executor: Runs sent statements.
            clear_screen: Clears the terminal after each statement.
            stdin: Input stream; sys.stdin if None.
            default_database: Database used for a blank name.
            initial_database: Connect here first instead of prompting.
        """
        self._connections = connections
        self._catalog = catalog
        self._executor = executor
        self._clear_screen = clear_screen
        self._stdin = stdin
        self._default_database = default_database
        self._initial_database = initial_database

        self._state = ShellState.CHOOSING_DATABASE
        self._connection: Connection | None = None

    @property
    def state(self) -> ShellState:
        return self._state

    @property
    def connection(self) -> Connection | None:
        return self._connection

    def run(self) -> None:
        """Run until $exit or end of input."""
        self._state = ShellState.CHOOSING_DATABASE
        try:
            while self._state is not ShellState.EXITED:
                if self._state is ShellState.CHOOSING_DATABASE:
                    self._connection = self._choose_database()
                    if self._connection is None:
                        self._state = ShellState.EXITED
                    else:
                        self._state = ShellState.EDITING_STATEMENT
                elif self._state is ShellState.EDITING_STATEMENT:
                    self._state = self._edit_statement()
                elif self._state is ShellState.CHANGING_DATABASE:
                    self._close_connection()
                    self._state = ShellState.CHOOSING_DATABASE
        finally:
            self._close_connection()
            self._state = ShellState.EXITED

    def _choose_database(self) -> Connection | None:
        """Prompt until a connection is open; None on end of input."""
        while True:
            if self._initial_database is not None:
                database_name = self._initial_database
                self._initial_database = None
            else:
                self._catalog.list_databases()
                print(DATABASE_PROMPT.format(default=self._default_database), end="", flush=True)
                try:
                    line = self._read_line()
                except (OSError, UnicodeDecodeError) as e:
                    logger.error("Input reading error", error=str(e))
                    continue
                if line is None:
                    return None
                database_name = resolve_database_name(line.strip(), self._default_database)

            try:
                connection = self._connections.connect(database_name)
            except ConnectionFailedError as e:
                logger.error("Database connection error", database=database_name, error=str(e))
                continue

            print(f"Connected to the database '{database_name}'")
            return connection

    def _edit_statement(self) -> ShellState:
        """Read lines until a sentinel and return the next state."""
        print(STATEMENT_BANNER)
        buffer = StatementBuffer()

        while True:
            try:
                line = self._read_line()
            except (OSError, UnicodeDecodeError) as e:
                logger.error("Input reading error", error=str(e))
                self._clear_screen()
                return ShellState.EDITING_STATEMENT

            if line is None:
                return ShellState.EXITED

            sentinel = Sentinel.parse(line)
            if sentinel is Sentinel.EXIT:
                return ShellState.EXITED
            if sentinel is Sentinel.CHANGE_DB:
                return ShellState.CHANGING_DATABASE
            if sentinel is Sentinel.SEND:
                self._send(buffer)
                self._clear_screen()
                return ShellState.EDITING_STATEMENT

            buffer.append(line)

    def _send(self, buffer: StatementBuffer) -> None:
        statement = buffer.statement()
        if statement and self._connection is not None:
            self._state = ShellState.EXECUTING
            self._executor.execute(self._connection, statement)
        buffer.clear()

        print(CONTINUE_PROMPT)
        try:
            self._read_line()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Input reading error", error=str(e))

    def _read_line(self) -> str | None:
        """Read one line without its line ending; None at end of input."""
        stream = self._stdin if self._stdin is not None else sys.stdin
        line = stream.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def _close_connection(self) -> None:
        if self._connection is None:
            return
        connection, self._connection = self._connection, None
        logger.debug("Closing connection", database=connection.database_name)
        connection.close()
