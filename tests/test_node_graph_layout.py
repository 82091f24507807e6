"""Layout tests for the node graph -- circular placement, node typing and
edge dedup.
"""
from __future__ import annotations

import math

import pytest

from graphql_erd.parser import parse_graphql_schema
from graphql_erd.node_graph.layout import generate_node_graph
from graphql_erd.types import Entity, LayoutOptions, Point, Relationship


def graph(source: str, options: LayoutOptions | None = None):
    """Helper: parse schema text and build its node graph."""
    return generate_node_graph(parse_graphql_schema(source), options)


def models(*names: str) -> str:
    return "\n".join(f"type {name} @model {{ id: ID! }}" for name in names)


BLOG_SCHEMA = """
type Author @model {
  id: ID!
  name: String!
  books: [Book] @hasMany
}

type Book @model {
  id: ID!
  title: String!
  author: Author @belongsTo
}
"""


# ============================================================================
# Circular placement
# ============================================================================


class TestCircularPlacement:
    def test_empty_entity_list(self):
        result = generate_node_graph([])
        assert result.nodes == []
        assert result.edges == []

    def test_single_entity_sits_at_center(self):
        result = graph(models("Only"))
        assert result.nodes[0].position == Point(x=400, y=400)

    def test_four_entities_on_the_compass_points(self):
        result = graph(models("A", "B", "C", "D"))
        positions = [(n.position.x, n.position.y) for n in result.nodes]
        expected = [(700, 400), (400, 700), (100, 400), (400, 100)]
        for (x, y), (ex, ey) in zip(positions, expected):
            assert x == pytest.approx(ex)
            assert y == pytest.approx(ey)

    def test_all_nodes_are_on_the_circle(self):
        result = graph(models(*[f"T{i}" for i in range(7)]))
        for node in result.nodes:
            dist = math.hypot(node.position.x - 400, node.position.y - 400)
            assert dist == pytest.approx(300)

    def test_two_entities_are_opposite(self):
        result = graph(models("A", "B"))
        a, b = result.nodes
        assert a.position.x == pytest.approx(700)
        assert b.position.x == pytest.approx(100)
        assert b.position.y == pytest.approx(400)

    def test_center_and_radius_are_configurable(self):
        options = LayoutOptions(graph_center_x=0, graph_center_y=0, graph_radius=10)
        result = graph(models("A", "B"), options)
        assert result.nodes[0].position.x == pytest.approx(10)
        assert result.nodes[1].position.x == pytest.approx(-10)


# ============================================================================
# Nodes
# ============================================================================


class TestNodes:
    def test_node_carries_entity_counts(self):
        result = graph(BLOG_SCHEMA)
        author = result.nodes[0]
        assert author.id == "Author"
        assert author.label == "Author"
        assert author.data.entity_name == "Author"
        assert author.data.field_count == 2
        assert author.data.relationship_count == 1

    def test_relationship_count_is_deduplicated(self):
        # Both the AST pass and the text scan see the same directive
        result = graph("type Blog @model {\n  posts: [Post] @hasMany\n}\n")
        assert result.nodes[0].data.relationship_count == 1

    def test_junction_node_type(self):
        result = graph("type ProductCatalog @model\ntype Blog @model { id: ID! }")
        assert [n.type for n in result.nodes] == ["junction", "entity"]


# ============================================================================
# Edges
# ============================================================================


class TestEdges:
    def test_mutual_relationships_give_one_edge(self):
        result = graph(BLOG_SCHEMA)
        assert len(result.edges) == 1
        edge = result.edges[0]
        assert edge.id == "Author-Book-books"
        assert (edge.source, edge.target) == ("Author", "Book")
        assert edge.label == "hasMany"
        assert edge.type == "hasMany"

    def test_belongs_to_label(self):
        result = graph(
            "type Book @model { author: Author @belongsTo }\n"
            "type Author @model { books: [Book] @hasMany }\n"
        )
        assert len(result.edges) == 1
        assert result.edges[0].label == "belongsTo"

    def test_junction_edges_keep_the_relationship_kind(self):
        result = graph(
            "type Product @model { industries: [ProductIndustry] @hasMany }\n"
            "type ProductIndustry @model { product: Product @belongsTo }\n"
        )
        assert result.edges[0].label == "hasMany"

    def test_dangling_relationship_is_dropped(self):
        entities = [
            Entity(
                name="Blog",
                relationships=(Relationship(type="belongsTo", target_entity="Ghost", field_name="ghost"),),
            )
        ]
        result = generate_node_graph(entities)
        assert len(result.nodes) == 1
        assert result.edges == []


# ============================================================================
# Idempotence
# ============================================================================


class TestIdempotence:
    def test_same_entities_give_same_graph(self):
        entities = parse_graphql_schema(BLOG_SCHEMA)
        assert generate_node_graph(entities) == generate_node_graph(entities)
