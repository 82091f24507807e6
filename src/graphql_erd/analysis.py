from __future__ import annotations

from dataclasses import dataclass, field

from .types import Entity, LayoutOptions
from .parser import parse_graphql_schema
from .erd.types import ERDDiagram
from .erd.layout import generate_erd_diagram
from .node_graph.types import NodeGraphData
from .node_graph.layout import generate_node_graph


@dataclass(slots=True)
class SchemaAnalysis:
    """Entities extracted from a schema plus both diagram projections."""

    entities: list[Entity] = field(default_factory=list)
    erd: ERDDiagram = field(default_factory=ERDDiagram)
    node_graph: NodeGraphData = field(default_factory=NodeGraphData)


def analyze_schema(text: str, options: LayoutOptions | None = None) -> SchemaAnalysis:
    """Parse schema text and build the ER diagram and node graph.

    Every call starts from scratch; nothing is cached between calls.
    Raises SchemaSyntaxError if the text is not valid SDL, in which case
    no partial result is produced.
    """
    entities = parse_graphql_schema(text)
    return SchemaAnalysis(
        entities=entities,
        erd=generate_erd_diagram(entities, options),
        node_graph=generate_node_graph(entities, options),
    )
