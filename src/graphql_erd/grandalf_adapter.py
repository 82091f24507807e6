from __future__ import annotations

from grandalf.graphs import Vertex, Edge, Graph
from grandalf.layouts import SugiyamaLayout

from .types import Point

# ============================================================================
# Grandalf layout adapter — layered (Sugiyama) placement of boxes
#
# Grandalf only lays out one connected component at a time, so each
# component is laid out on its own and components are placed left to right.
# ============================================================================


class _VertexView:
    """Minimal view object required by grandalf's SugiyamaLayout."""

    def __init__(self, w: float = 60, h: float = 36) -> None:
        self.w = w
        self.h = h
        # xy is set by the layout engine (center coordinates)
        self.xy = (0.0, 0.0)


def center_to_top_left(cx: float, cy: float, width: float, height: float) -> Point:
    """Convert center-based coordinates to top-left origin."""
    return Point(x=cx - width / 2, y=cy - height / 2)


def layered_positions(
    sizes: dict[str, tuple[float, float]],
    edges: list[tuple[str, str]],
    node_spacing: float,
    layer_spacing: float,
) -> dict[str, Point]:
    """Top-left positions for boxes keyed by id, with the layout's origin at (0, 0).

    `sizes` maps box id -> (width, height) in the order boxes should be
    considered. Edges naming unknown ids and self-loops are ignored.
    """
    vertices: dict[str, Vertex] = {}
    for box_id, (w, h) in sizes.items():
        v = Vertex(box_id)
        v.view = _VertexView(w, h)
        vertices[box_id] = v

    edges_list: list[Edge] = []
    for source, target in edges:
        src_v = vertices.get(source)
        tgt_v = vertices.get(target)
        if src_v and tgt_v and src_v is not tgt_v:
            edges_list.append(Edge(src_v, tgt_v))

    g = Graph(list(vertices.values()), edges_list)

    positions: dict[str, Point] = {}
    offset_x = 0.0
    for component in g.C:
        try:
            sug = SugiyamaLayout(component)
            sug.xspace = node_spacing
            sug.yspace = layer_spacing
            sug.init_all()
            sug.draw()
        except Exception as err:
            raise RuntimeError(f"Grandalf layout failed (ER diagram): {err}") from err

        top_lefts: dict[str, Point] = {}
        for v in component.sV:
            cx, cy = v.view.xy
            top_lefts[v.data] = center_to_top_left(cx, cy, v.view.w, v.view.h)

        min_x = min(p.x for p in top_lefts.values())
        min_y = min(p.y for p in top_lefts.values())
        max_x = max(p.x + sizes[box_id][0] for box_id, p in top_lefts.items())

        for box_id, p in top_lefts.items():
            positions[box_id] = Point(x=p.x - min_x + offset_x, y=p.y - min_y)

        offset_x += (max_x - min_x) + node_spacing

    return positions
