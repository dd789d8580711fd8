"""Value objects for the console domain.

Exports:
    Statements:
        - StatementKind: READ or WRITE classification of a statement
        - Sentinel: Reserved control lines ($send, $exit, $change_db)
        - StatementBuffer: Lines accumulated until the terminator
        - classify_statement: Decide the execution path of a statement
        - resolve_database_name: Apply the default to a blank database name

    Cells:
        - CellKind: Scalar kinds a driver can return for a result cell
        - cell_kind: Classify a driver value
        - render_cell: Render a driver value as console text
"""

from pgshell.domain.value_objects.cell import CellKind, cell_kind, render_cell
from pgshell.domain.value_objects.statement import (
    DEFAULT_DATABASE,
    Sentinel,
    StatementBuffer,
    StatementKind,
    classify_statement,
    resolve_database_name,
)

__all__ = [
    # Statements
    "DEFAULT_DATABASE",
    "Sentinel",
    "StatementBuffer",
    "StatementKind",
    "classify_statement",
    "resolve_database_name",
    # Cells
    "CellKind",
    "cell_kind",
    "render_cell",
]
