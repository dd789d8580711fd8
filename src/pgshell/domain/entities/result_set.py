"""Result sets and execution outcomes.

A ResultSet only lives while it is being rendered. Rows are pulled one at a
time from the driver so unbounded results never need to fit in memory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Sequence

from pgshell.domain.value_objects.statement import StatementKind


@dataclass
class ResultSet:
    """Column names and a row stream for one read statement.

    Attributes:
        columns: Ordered column names
        rows: Iterable of rows; each row is a sequence of driver values
        on_close: Called once when the result set is closed
    """

    columns: list[str]
    rows: Iterable[Sequence[Any]]
    on_close: Callable[[], None] | None = None
    _closed: bool = field(default=False, init=False, repr=False)

    def __iter__(self) -> Iterator[Sequence[Any]]:
        return iter(self.rows)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self.on_close is not None:
            self.on_close()

    def __enter__(self) -> ResultSet:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass(frozen=True)
class ExecutionOutcome:
    """What happened to a statement.

    Attributes:
        kind: Read or write path taken
        success: False if the statement or its results failed
        row_count: Rows printed (read) or rows affected (write)
        error: Error text when success is False
    """

    kind: StatementKind
    success: bool
    row_count: int = 0
    error: str = ""
