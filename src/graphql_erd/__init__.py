"""graphql-erd — Derive ER diagrams and node graphs from annotated GraphQL SDL."""

from __future__ import annotations

from .types import Entity, Field, Relationship, LayoutOptions, Point
from .errors import SchemaSyntaxError, DuplicateEntityError
from .parser import parse_graphql_schema, is_junction_table
from .relationships import merge_relationships, scan_relationships_from_text

from .erd.types import ERDDiagram, ERDTable, ERDConnection
from .erd.layout import generate_erd_diagram

from .node_graph.types import NodeGraphData, NodeGraphNode, NodeGraphEdge
from .node_graph.layout import generate_node_graph

from .analysis import SchemaAnalysis, analyze_schema
from .export import export_schema_sdl, erd_to_dict, node_graph_to_dict, analysis_to_json

__all__ = [
    "analyze_schema",
    "parse_graphql_schema",
    "generate_erd_diagram",
    "generate_node_graph",
    "export_schema_sdl",
    "erd_to_dict",
    "node_graph_to_dict",
    "analysis_to_json",
    "is_junction_table",
    "merge_relationships",
    "scan_relationships_from_text",
    "SchemaAnalysis",
    "Entity",
    "Field",
    "Relationship",
    "LayoutOptions",
    "Point",
    "ERDDiagram",
    "ERDTable",
    "ERDConnection",
    "NodeGraphData",
    "NodeGraphNode",
    "NodeGraphEdge",
    "SchemaSyntaxError",
    "DuplicateEntityError",
]
