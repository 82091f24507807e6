from __future__ import annotations

import math

from .types import NodeGraphData, NodeGraphNode, NodeGraphEdge, NodeData
from ..types import Entity, LayoutOptions, Point
from ..relationships import unique_links

# ============================================================================
# Node graph layout
#
# Entities are spread evenly on a circle, index 0 at angle 0 (to the right
# of the center), going clockwise in screen coordinates. Edges follow the
# same one-per-pair rule as ER diagram connections but keep the raw
# relationship kind as label; there is no many-to-many refinement here.
# ============================================================================


def generate_node_graph(
    entities: list[Entity],
    options: LayoutOptions | None = None,
) -> NodeGraphData:
    """Place entities on a circle and connect related entities."""
    if options is None:
        options = LayoutOptions()

    if len(entities) == 0:
        return NodeGraphData()

    nodes = [
        NodeGraphNode(
            id=entity.name,
            label=entity.name,
            type="junction" if entity.is_junction_table else "entity",
            data=NodeData(
                entity_name=entity.name,
                field_count=len(entity.fields),
                relationship_count=len(entity.relationships),
            ),
            position=position,
        )
        for entity, position in zip(entities, _circle_positions(len(entities), options))
    ]

    edges = [
        NodeGraphEdge(
            id=f"{owner.name}-{rel.target_entity}-{rel.field_name}",
            source=owner.name,
            target=rel.target_entity,
            label=rel.type,
            type=rel.type,
        )
        for owner, rel, _target in unique_links(entities)
    ]

    return NodeGraphData(nodes=nodes, edges=edges)


def _circle_positions(count: int, options: LayoutOptions) -> list[Point]:
    cx = options.graph_center_x
    cy = options.graph_center_y

    # A lone node sits at the center
    if count == 1:
        return [Point(x=cx, y=cy)]

    angle_step = 2 * math.pi / count
    return [
        Point(
            x=cx + options.graph_radius * math.cos(i * angle_step),
            y=cy + options.graph_radius * math.sin(i * angle_step),
        )
        for i in range(count)
    ]
