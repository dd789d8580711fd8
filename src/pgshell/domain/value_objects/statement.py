"""Statement types for the interactive shell.

A statement is typed over any number of lines and sent with a sentinel line.
Sentinels are recognized only as an entire line; a line that merely contains
``$send`` is ordinary statement text.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

DEFAULT_DATABASE = "postgres"
"""Database used when the user leaves the name blank."""


class StatementKind(Enum):
    """Execution path of a statement."""

    READ = auto()
    """Returns rows, rendered as a table."""

    WRITE = auto()
    """DML or DDL, reported as an affected-row count."""


class Sentinel(Enum):
    """Reserved control lines of the shell."""

    SEND = "$send"
    EXIT = "$exit"
    CHANGE_DB = "$change_db"

    @classmethod
    def parse(cls, line: str) -> Sentinel | None:
        """Return the sentinel matching the whole line, or None.

        Example:
            >>> Sentinel.parse("$send")
            <Sentinel.SEND: '$send'>
            >>> Sentinel.parse("SELECT '$send'") is None
            True
        """
        try:
            return cls(line)
        except ValueError:
            return None


def classify_statement(statement: str) -> StatementKind:
    """Classify a statement as a read or a write.

    Only statements starting with SELECT (ignoring surrounding whitespace
    and case) are reads.
    """
    if statement.strip().upper().startswith("SELECT"):
        return StatementKind.READ
    return StatementKind.WRITE


def resolve_database_name(name: str, default: str = DEFAULT_DATABASE) -> str:
    """Return the database to connect to for what the user typed."""
    if name == "":
        return default
    return name


@dataclass
class StatementBuffer:
    """Ordered input lines accumulated until the terminator."""

    lines: list[str] = field(default_factory=list)

    def append(self, line: str) -> None:
        self.lines.append(line)

    def statement(self) -> str:
        """Join the buffered lines with single spaces."""
        return " ".join(self.lines)

    def clear(self) -> None:
        self.lines.clear()

    def __len__(self) -> int:
        return len(self.lines)
