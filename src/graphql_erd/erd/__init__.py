from __future__ import annotations

from .types import (
    ERDDiagram,
    ERDTable,
    ERDConnection,
    ConnectionType,
)
from .layout import generate_erd_diagram, connection_type

__all__ = [
    "ERDDiagram",
    "ERDTable",
    "ERDConnection",
    "ConnectionType",
    "generate_erd_diagram",
    "connection_type",
]
