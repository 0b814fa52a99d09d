"""Graph accumulator: label-keyed nodes plus an append-only edge list."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EdgeKind(str, Enum):
    EXTENDS = "extends"
    RETURNS = "returns"
    CALL_ARG = "call-arg"


@dataclass(frozen=True)
class GraphNode:
    label: str


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str
    kind: EdgeKind


@dataclass
class Graph:
    """Mutable dependency graph built once per run.

    Nodes are created lazily and keyed by label; edges are never merged, so
    the same (source, target, kind) triple can appear several times.
    Not safe for concurrent writers.
    """

    nodes: dict[str, GraphNode] = field(default_factory=dict)
    edges: list[GraphEdge] = field(default_factory=list)

    def add_node(self, label: str) -> GraphNode:
        node = self.nodes.get(label)
        if node is None:
            node = GraphNode(label=label)
            self.nodes[label] = node
        return node

    def link(self, source: str, target: str, kind: EdgeKind) -> None:
        self.add_node(source)
        self.add_node(target)
        self.edges.append(GraphEdge(source=source, target=target, kind=EdgeKind(kind)))
