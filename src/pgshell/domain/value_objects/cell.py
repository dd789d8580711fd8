"""Result cell values.

Drivers hand back dynamically-typed scalars. CellKind is the closed set of
kinds the console knows how to render; anything else falls back to ``str``.

Rendering follows the classic ``%v`` formatting of the first console
release so that scripted output stays stable:

    None            -> <nil>
    True / False    -> true / false
    b"hi"           -> [104 105]
    anything else   -> str(value)
"""

from __future__ import annotations

import datetime
from decimal import Decimal
from enum import Enum, auto
from typing import Any

NULL_TEXT = "<nil>"


class CellKind(Enum):
    """Scalar kinds of a result cell."""

    NULL = auto()
    BOOLEAN = auto()
    INTEGER = auto()
    FLOAT = auto()
    TEXT = auto()
    BYTES = auto()
    TEMPORAL = auto()
    OTHER = auto()


def cell_kind(value: Any) -> CellKind:
    """Classify a driver value."""
    if value is None:
        return CellKind.NULL
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return CellKind.BOOLEAN
    if isinstance(value, int):
        return CellKind.INTEGER
    if isinstance(value, (float, Decimal)):
        return CellKind.FLOAT
    if isinstance(value, str):
        return CellKind.TEXT
    if isinstance(value, (bytes, bytearray, memoryview)):
        return CellKind.BYTES
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time, datetime.timedelta)):
        return CellKind.TEMPORAL
    return CellKind.OTHER


def render_cell(value: Any) -> str:
    """Render a driver value as console text."""
    kind = cell_kind(value)
    if kind is CellKind.NULL:
        return NULL_TEXT
    if kind is CellKind.BOOLEAN:
        return "true" if value else "false"
    if kind is CellKind.BYTES:
        return "[" + " ".join(str(b) for b in bytes(value)) + "]"
    return str(value)
