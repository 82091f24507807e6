from __future__ import annotations

import math

from .types import ERDDiagram, ERDTable, ERDConnection, ConnectionType
from ..types import Entity, Relationship, LayoutOptions, Point
from ..relationships import unique_links
from ..grandalf_adapter import layered_positions

# ============================================================================
# ER diagram layout engine
#
# Two placement modes:
#   grid     square-ish grid, one fixed-size cell per entity (default)
#   layered  grandalf Sugiyama layout driven by the connections
#
# Connections are built the same way in both modes: one per unordered pair
# of entities, the first relationship encountered deciding its direction.
# ============================================================================

# Box size estimates used by the layered mode
ER_BOX_PAD_X = 12
ER_HEADER_HEIGHT = 32
ER_ROW_HEIGHT = 22
ER_MIN_WIDTH = 140
ER_CHAR_WIDTH = 6.6


def generate_erd_diagram(
    entities: list[Entity],
    options: LayoutOptions | None = None,
) -> ERDDiagram:
    """Place entities as tables and connect related tables.

    Output depends only on `entities` (and `options`), so calling this twice
    on the same list gives identical diagrams.
    """
    if options is None:
        options = LayoutOptions()

    if len(entities) == 0:
        return ERDDiagram()

    connections = _build_connections(entities)
    if options.erd_layout == "layered":
        positions = _layered_positions(entities, connections, options)
    else:
        positions = _grid_positions(entities, options)

    tables = [
        ERDTable(
            id=entity.name,
            name=entity.name,
            x=positions[entity.name].x,
            y=positions[entity.name].y,
            fields=list(entity.fields),
            relationships=list(entity.relationships),
        )
        for entity in entities
    ]

    return ERDDiagram(tables=tables, connections=connections)


def connection_type(rel: Relationship, owner: Entity, target: Entity) -> ConnectionType:
    """Cardinality shown for a relationship between two tables."""
    if rel.type == "belongsTo":
        return "belongsTo"
    if owner.is_junction_table or target.is_junction_table:
        return "many-to-many"
    return "one-to-many"


def _build_connections(entities: list[Entity]) -> list[ERDConnection]:
    return [
        ERDConnection(
            id=f"{owner.name}-{rel.target_entity}-{rel.field_name}",
            from_entity=owner.name,
            to_entity=rel.target_entity,
            type=connection_type(rel, owner, target),
            from_field=rel.field_name,
        )
        for owner, rel, target in unique_links(entities)
    ]


def _grid_positions(entities: list[Entity], options: LayoutOptions) -> dict[str, Point]:
    cols = math.ceil(math.sqrt(len(entities)))
    positions: dict[str, Point] = {}
    for index, entity in enumerate(entities):
        row = index // cols
        col = index % cols
        positions[entity.name] = Point(
            x=options.erd_start_x + col * options.erd_spacing,
            y=options.erd_start_y + row * options.erd_spacing,
        )
    return positions


def _layered_positions(
    entities: list[Entity],
    connections: list[ERDConnection],
    options: LayoutOptions,
) -> dict[str, Point]:
    sizes = {entity.name: _table_size(entity) for entity in entities}
    edges = [(c.from_entity, c.to_entity) for c in connections]
    origin_positions = layered_positions(
        sizes, edges, options.node_spacing, options.layer_spacing
    )
    return {
        name: Point(x=p.x + options.erd_start_x, y=p.y + options.erd_start_y)
        for name, p in origin_positions.items()
    }


def _table_size(entity: Entity) -> tuple[float, float]:
    """Estimated (width, height) of a rendered table box."""
    rows = [f"{f.name}: {f.type}" for f in entity.fields]
    rows += [f"{r.field_name}: {r.target_entity}" for r in entity.relationships]

    longest = max([len(entity.name)] + [len(row) for row in rows])
    width = max(ER_MIN_WIDTH, longest * ER_CHAR_WIDTH + ER_BOX_PAD_X * 2)
    height = ER_HEADER_HEIGHT + max(len(rows), 1) * ER_ROW_HEIGHT
    return width, height
