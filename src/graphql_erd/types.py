from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

# ============================================================================
# Entity model — logical structure extracted from GraphQL SDL
#
# Entities reference each other by name only. Relationship targets are
# resolved through a name -> Entity lookup at layout time, so the model
# itself never holds cycles even when the relationship graph does.
# ============================================================================

RelationshipType = Literal["hasMany", "belongsTo"]


@dataclass(frozen=True, slots=True)
class Field:
    """A plain attribute of an entity (anything without a relationship directive)."""

    name: str
    # Innermost named type, e.g. "String" for `[String!]!`
    type: str
    # True when any non-null wrapper was present
    required: bool
    # True when any list wrapper was present
    is_list: bool


@dataclass(frozen=True, slots=True)
class Relationship:
    """A directed relationship from the owning entity to a named target."""

    type: RelationshipType
    target_entity: str
    field_name: str


@dataclass(frozen=True, slots=True)
class Entity:
    """A `@model` type. Identity is its name. Never changed once built."""

    name: str
    fields: tuple[Field, ...] = ()
    relationships: tuple[Relationship, ...] = ()
    is_junction_table: bool = False


# ============================================================================
# Positions
# ============================================================================


@dataclass(slots=True)
class Point:
    x: float
    y: float


# ============================================================================
# Layout options — user-facing configuration
# ============================================================================

ErdLayoutMode = Literal["grid", "layered"]


@dataclass(slots=True)
class LayoutOptions:
    # ER diagram
    erd_layout: ErdLayoutMode = "grid"
    erd_start_x: float = 100
    erd_start_y: float = 100
    erd_spacing: float = 300
    # Layered ER diagram only (grandalf spacing between boxes and layers)
    node_spacing: float = 80
    layer_spacing: float = 120
    # Node graph
    graph_center_x: float = 400
    graph_center_y: float = 400
    graph_radius: float = 300
