"""Corpus walker: the single orchestration entry point for analysis."""

from __future__ import annotations

from typing import Optional

import structlog

from ts_type_graph.core.analyzer import AnalysisState, analyze_class, analyze_interface
from ts_type_graph.core.decomposition import DEFAULT_MAX_DEPTH
from ts_type_graph.core.graph import Graph
from ts_type_graph.core.types import Corpus


logger = structlog.get_logger(__name__)


def run(corpus: Corpus, *, state: Optional[AnalysisState] = None, max_depth: int = DEFAULT_MAX_DEPTH) -> Graph:
    """Analyze every class, then every interface, of each file in corpus order."""

    state = state or AnalysisState(max_depth=max_depth)
    file_count = 0
    for source_file in corpus:
        file_count += 1
        for class_decl in source_file.classes:
            analyze_class(class_decl, state)
        for interface_decl in source_file.interfaces:
            analyze_interface(interface_decl, state)

    logger.info(
        "walk.done",
        file_count=file_count,
        node_count=len(state.graph.nodes),
        edge_count=len(state.graph.edges),
    )
    return state.graph
