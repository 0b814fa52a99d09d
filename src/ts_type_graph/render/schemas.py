"""Pydantic models for the JSON graph document."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ts_type_graph.core.graph import EdgeKind, Graph


class NodeModel(BaseModel):
    label: str = Field(min_length=1)


class LinkModel(BaseModel):
    source: str
    target: str
    type: EdgeKind


class GraphDocument(BaseModel):
    nodes: dict[str, NodeModel] = Field(default_factory=dict)
    links: list[LinkModel] = Field(default_factory=list)

    @classmethod
    def from_graph(cls, graph: Graph) -> "GraphDocument":
        return cls(
            nodes={label: NodeModel(label=node.label) for label, node in graph.nodes.items()},
            links=[LinkModel(source=e.source, target=e.target, type=e.kind) for e in graph.edges],
        )
