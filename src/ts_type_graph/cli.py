"""Command-line entry point.

    ts-type-graph <tsconfig> <pattern> [<pattern> ...]

Writes the graph (DOT by default) to stdout and diagnostics to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

import structlog

from ts_type_graph.config import get_type_graph_settings
from ts_type_graph.configuration.logging_config import configure_logging
from ts_type_graph.core.errors import ConfigurationError, TypeGraphError
from ts_type_graph.core.walker import run
from ts_type_graph.frontend.project import load_project, parse_project
from ts_type_graph.render.dot import RANKDIRS, render_dot
from ts_type_graph.render.json_export import render_json


logger = structlog.get_logger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ts-type-graph",
        description="Emit the class/interface type dependency graph of a TypeScript project.",
    )
    parser.add_argument("tsconfig", help="Path to the project's tsconfig.json.")
    parser.add_argument("patterns", nargs="+", metavar="pattern", help="Source file glob, e.g. 'src/**/*.ts'.")
    parser.add_argument("--format", choices=("dot", "json"), default="dot", help="Graph output format.")
    parser.add_argument("--rankdir", choices=RANKDIRS, default=None, help="DOT layout direction.")
    parser.add_argument(
        "--skip-tsconfig-files",
        action="store_true",
        default=None,
        help="Ignore tsconfig files/include and analyze only the given patterns.",
    )
    parser.add_argument("--log-level", default=None, help="Diagnostic log level (default from LOG_LEVEL).")
    return parser


def _log_level(name: Optional[str]) -> int:
    return getattr(logging, (name or "INFO").upper(), logging.INFO)


def _failed(e: TypeGraphError) -> int:
    logger.error("run.failed", error_type=type(e).__name__, message=str(e))
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        settings = get_type_graph_settings()
    except ConfigurationError as e:
        # Settings are unusable, so diagnostics fall back to the defaults.
        configure_logging(log_level=_log_level(args.log_level), force_reconfigure=True)
        return _failed(e)

    configure_logging(
        log_level=_log_level(args.log_level or settings.LOG_LEVEL),
        log_format=settings.LOG_FORMAT,
        force_reconfigure=True,
    )

    skip_tsconfig_files = args.skip_tsconfig_files or settings.SKIP_TSCONFIG_FILES
    logger.info("run.start", tsconfig=args.tsconfig, patterns=list(args.patterns))

    try:
        project = load_project(args.tsconfig, args.patterns, include_tsconfig_files=not skip_tsconfig_files)
        corpus = parse_project(project)
        graph = run(corpus, max_depth=settings.MAX_DECOMPOSITION_DEPTH)
    except TypeGraphError as e:
        return _failed(e)

    if args.format == "json":
        output = render_json(graph)
    else:
        output = render_dot(graph, rankdir=args.rankdir or settings.DOT_RANKDIR)
    sys.stdout.write(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
