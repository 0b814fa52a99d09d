"""Per-declaration dependency extraction."""

from __future__ import annotations

from dataclasses import dataclass, field

import structlog

from ts_type_graph.core.builtins import is_basic_type
from ts_type_graph.core.decomposition import DEFAULT_MAX_DEPTH, decompose
from ts_type_graph.core.graph import EdgeKind, Graph
from ts_type_graph.core.types import Declaration, Method, TypeHandle


logger = structlog.get_logger(__name__)


@dataclass
class AnalysisState:
    graph: Graph = field(default_factory=Graph)
    processed: set[str] = field(default_factory=set)
    max_depth: int = DEFAULT_MAX_DEPTH


def _link_leaves(state: AnalysisState, source: str, type_handle: TypeHandle, kind: EdgeKind) -> None:
    for part in decompose(type_handle, max_depth=state.max_depth):
        if not is_basic_type(part):
            state.graph.link(source, part.text, kind)


def _analyze_methods(state: AnalysisState, source: str, methods: tuple[Method, ...]) -> None:
    for method in methods:
        _link_leaves(state, source, method.return_type, EdgeKind.RETURNS)
        for param in method.parameters:
            _link_leaves(state, source, param.type, EdgeKind.CALL_ARG)


def analyze_class(decl: Declaration, state: AnalysisState) -> None:
    name = decl.name
    if not name:
        return

    key = decl.key
    if key in state.processed:
        logger.warning("analyze.duplicate_class", name=name, file_path=decl.file_path, line=decl.line)
        return
    state.processed.add(key)

    state.graph.add_node(name)

    base = decl.base_class
    if base is not None and not is_basic_type(base):
        state.graph.link(name, base.text, EdgeKind.EXTENDS)

    _analyze_methods(state, name, decl.methods)


def analyze_interface(decl: Declaration, state: AnalysisState) -> None:
    name = decl.name
    if not name:
        return

    state.graph.add_node(name)

    for base in decl.base_types:
        if not is_basic_type(base):
            state.graph.link(name, base.text, EdgeKind.EXTENDS)

    _analyze_methods(state, name, decl.methods)
