"""Graphviz DOT rendering."""

from __future__ import annotations

import re

from ts_type_graph.core.graph import Graph


_RE_QUOTE = re.compile(r'(["])')
_RE_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")

RANKDIRS: tuple[str, ...] = ("LR", "TB", "RL", "BT")


def escape_dot(text: str) -> str:
    """Return `text` as a valid DOT identifier / label body."""

    escaped = _RE_QUOTE.sub(r"\\\1", text)
    return _RE_NON_ALNUM.sub("_", escaped)


def render_dot(graph: Graph, *, rankdir: str = "LR") -> str:
    """Render nodes then edges in insertion order. Edge kinds are not drawn."""

    if rankdir not in RANKDIRS:
        raise ValueError(f"Unsupported rankdir={rankdir!r}. Supported={list(RANKDIRS)}")

    lines = ["digraph G {", f"    rankdir={rankdir};"]
    for node_id, node in graph.nodes.items():
        lines.append(f'  {escape_dot(node_id)} [label="{escape_dot(node.label)}"];')
    for edge in graph.edges:
        lines.append(f"  {escape_dot(edge.source)} -> {escape_dot(edge.target)};")
    lines.append("}")
    return "\n".join(lines) + "\n"
