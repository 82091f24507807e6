from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from ..types import Point, RelationshipType

# ============================================================================
# Node graph types
#
# Circle-of-nodes projection of the entity model, intended as the initial
# positions for a force-directed renderer.
# ============================================================================

NodeType = Literal["entity", "junction"]


@dataclass(slots=True)
class NodeData:
    entity_name: str
    field_count: int
    relationship_count: int


@dataclass(slots=True)
class NodeGraphNode:
    id: str
    label: str
    type: NodeType
    data: NodeData
    # Center of the node
    position: Point


@dataclass(slots=True)
class NodeGraphEdge:
    id: str
    source: str
    target: str
    # Relationship kind, shown as-is
    label: str
    type: RelationshipType


@dataclass(slots=True)
class NodeGraphData:
    nodes: list[NodeGraphNode] = field(default_factory=list)
    edges: list[NodeGraphEdge] = field(default_factory=list)
