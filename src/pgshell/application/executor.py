"""Query Executor - runs one statement and renders its outcome.

Reads (statements starting with SELECT) print a tab-separated table:

    id	name
    --------------------------------------------------------------------------------
    1	alice

Everything else is run as a command and reports the affected-row count.
Failures are logged and reported in the returned outcome; they never
propagate to the shell.
"""

from __future__ import annotations

import time

from pgshell.domain.entities.result_set import ExecutionOutcome
from pgshell.domain.errors import QueryError
from pgshell.domain.value_objects.cell import render_cell
from pgshell.domain.value_objects.statement import StatementKind, classify_statement
from pgshell.infrastructure.logging import get_logger
from pgshell.infrastructure.metrics import MetricsRegistry, get_metrics
from pgshell.infrastructure.tracing import trace_span
from pgshell.ports.outbound.database_driver import Connection

logger = get_logger(__name__)

COLUMN_SEPARATOR = "\t"
RULE_WIDTH = 80


class QueryExecutor:
    """Executes statements typed at the console."""

    def __init__(self, metrics: MetricsRegistry | None = None) -> None:
        self._metrics = metrics or get_metrics()

    def execute(self, connection: Connection, statement: str) -> ExecutionOutcome:
        """Execute a statement and print its result.

        Args:
            connection: Open connection to run the statement on.
            statement: Statement text as typed.

        Returns:
            ExecutionOutcome describing the path taken and its result.
        """
        kind = classify_statement(statement)
        start = time.perf_counter()

        with trace_span("pgshell.execute", {"db.statement.kind": kind.name.lower()}):
            if kind is StatementKind.READ:
                outcome = self._run_read(connection, statement)
            else:
                outcome = self._run_write(connection, statement)

        label = kind.name.lower()
        self._metrics.query_latency_seconds.labels(kind=label).observe(
            time.perf_counter() - start
        )
        self._metrics.queries_total.labels(
            kind=label, status="success" if outcome.success else "error"
        ).inc()
        return outcome

    def _run_read(self, connection: Connection, statement: str) -> ExecutionOutcome:
        try:
            result = connection.query(statement)
        except QueryError as e:
            logger.error("Query execution error", error=str(e))
            return ExecutionOutcome(StatementKind.READ, success=False, error=str(e))

        printed = 0
        with result:
            print(COLUMN_SEPARATOR.join(result.columns))
            print("-" * RULE_WIDTH)
            try:
                for row in result:
                    print(COLUMN_SEPARATOR.join(render_cell(value) for value in row))
                    printed += 1
            except QueryError as e:
                logger.error("Error reading row", error=str(e), rows_read=printed)
                return ExecutionOutcome(
                    StatementKind.READ, success=False, row_count=printed, error=str(e)
                )

        return ExecutionOutcome(StatementKind.READ, success=True, row_count=printed)

    def _run_write(self, connection: Connection, statement: str) -> ExecutionOutcome:
        try:
            affected = connection.execute(statement)
        except QueryError as e:
            logger.error("Query execution error", error=str(e))
            return ExecutionOutcome(StatementKind.WRITE, success=False, error=str(e))

        affected = affected or 0
        print(f"Query executed successfully. Affected lines: {affected}")
        return ExecutionOutcome(StatementKind.WRITE, success=True, row_count=affected)
