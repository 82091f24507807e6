from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from .types import Entity, Field, Relationship, Point
from .erd.types import ERDDiagram
from .node_graph.types import NodeGraphData

if TYPE_CHECKING:
    from .analysis import SchemaAnalysis

# ============================================================================
# Export — SDL text and JSON-ready dicts
#
# export_schema_sdl() regenerates schema text from entities; parsing that
# text again yields the same entities. The *_to_dict() helpers produce plain
# dicts with the camelCase keys diagram renderers expect.
# ============================================================================


def export_schema_sdl(entities: list[Entity]) -> str:
    """Render entities back to GraphQL SDL.

    Plain fields come first, then relationship fields. Directive arguments
    and non-model types are not part of the entity model and are not emitted.
    """
    blocks: list[str] = []
    for entity in entities:
        header = f"type {entity.name} @model"
        lines = [f"  {f.name}: {_field_type_sdl(f)}" for f in entity.fields]
        lines += [f"  {_relationship_sdl(r)}" for r in entity.relationships]
        if lines:
            blocks.append(header + " {\n" + "\n".join(lines) + "\n}")
        else:
            blocks.append(header)

    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


def _field_type_sdl(f: Field) -> str:
    bang = "!" if f.required else ""
    if f.is_list:
        return f"[{f.type}]{bang}"
    return f"{f.type}{bang}"


def _relationship_sdl(rel: Relationship) -> str:
    if rel.type == "hasMany":
        return f"{rel.field_name}: [{rel.target_entity}] @hasMany"
    return f"{rel.field_name}: {rel.target_entity} @belongsTo"


# ============================================================================
# Dict projections
# ============================================================================


def field_to_dict(f: Field) -> dict[str, Any]:
    return {"name": f.name, "type": f.type, "required": f.required, "isList": f.is_list}


def relationship_to_dict(rel: Relationship) -> dict[str, Any]:
    return {"type": rel.type, "targetEntity": rel.target_entity, "fieldName": rel.field_name}


def entity_to_dict(entity: Entity) -> dict[str, Any]:
    return {
        "name": entity.name,
        "fields": [field_to_dict(f) for f in entity.fields],
        "relationships": [relationship_to_dict(r) for r in entity.relationships],
        "isJunctionTable": entity.is_junction_table,
    }


def erd_to_dict(diagram: ERDDiagram) -> dict[str, Any]:
    return {
        "tables": [
            {
                "id": t.id,
                "name": t.name,
                "x": t.x,
                "y": t.y,
                "fields": [field_to_dict(f) for f in t.fields],
                "relationships": [relationship_to_dict(r) for r in t.relationships],
            }
            for t in diagram.tables
        ],
        "connections": [
            {
                "id": c.id,
                "from": c.from_entity,
                "to": c.to_entity,
                "type": c.type,
                "fromField": c.from_field,
            }
            for c in diagram.connections
        ],
    }


def node_graph_to_dict(data: NodeGraphData) -> dict[str, Any]:
    return {
        "nodes": [
            {
                "id": n.id,
                "label": n.label,
                "type": n.type,
                "data": {
                    "entityName": n.data.entity_name,
                    "fieldCount": n.data.field_count,
                    "relationshipCount": n.data.relationship_count,
                },
                "position": _point_to_dict(n.position),
            }
            for n in data.nodes
        ],
        "edges": [
            {
                "id": e.id,
                "source": e.source,
                "target": e.target,
                "label": e.label,
                "type": e.type,
            }
            for e in data.edges
        ],
    }


def _point_to_dict(p: Point) -> dict[str, float]:
    return {"x": p.x, "y": p.y}


def analysis_to_json(analysis: SchemaAnalysis, indent: int | None = 2) -> str:
    """Serialize a SchemaAnalysis (entities plus both layouts) to JSON."""
    return json.dumps(
        {
            "entities": [entity_to_dict(e) for e in analysis.entities],
            "erd": erd_to_dict(analysis.erd),
            "nodeGraph": node_graph_to_dict(analysis.node_graph),
        },
        indent=indent,
    )
