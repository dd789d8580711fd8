"""Domain entities for the console.

Exports:
    - ResultSet: Column names plus a stream of rows
    - ExecutionOutcome: What the executor did with one statement
"""

from pgshell.domain.entities.result_set import ExecutionOutcome, ResultSet

__all__ = [
    "ExecutionOutcome",
    "ResultSet",
]
