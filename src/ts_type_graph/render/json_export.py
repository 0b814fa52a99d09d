"""JSON rendering of the accumulated graph."""

from __future__ import annotations

from ts_type_graph.core.graph import Graph
from ts_type_graph.render.schemas import GraphDocument


def render_json(graph: Graph) -> str:
    return GraphDocument.from_graph(graph).model_dump_json(indent=2) + "\n"
