from __future__ import annotations

from .types import (
    NodeGraphData,
    NodeGraphNode,
    NodeGraphEdge,
    NodeData,
    NodeType,
)
from .layout import generate_node_graph

__all__ = [
    "NodeGraphData",
    "NodeGraphNode",
    "NodeGraphEdge",
    "NodeData",
    "NodeType",
    "generate_node_graph",
]
