from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from ..types import Field, Relationship

# ============================================================================
# ER diagram types
#
# Table-based projection of the entity model. Each table is an entity
# placed on the canvas; each connection joins one unordered pair of tables.
# ============================================================================

# Connection cardinality:
#   'one-to-many'   hasMany between two regular entities
#   'many-to-many'  hasMany touching a junction table
#   'belongsTo'     belongsTo from the owning side
ConnectionType = Literal["one-to-many", "many-to-many", "belongsTo"]


@dataclass(slots=True)
class ERDTable:
    """A positioned entity table. (x, y) is the top-left corner."""

    id: str
    name: str
    x: float
    y: float
    fields: list[Field] = field(default_factory=list)
    relationships: list[Relationship] = field(default_factory=list)


@dataclass(slots=True)
class ERDConnection:
    """An undirected connection between two tables.

    `from_entity` is the side whose relationship was encountered first.
    """

    id: str
    from_entity: str
    to_entity: str
    type: ConnectionType
    # Relationship field on the from side
    from_field: str


@dataclass(slots=True)
class ERDDiagram:
    """Fully positioned ER diagram ready for rendering."""

    tables: list[ERDTable] = field(default_factory=list)
    connections: list[ERDConnection] = field(default_factory=list)
