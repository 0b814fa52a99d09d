#!/usr/bin/env python
from setuptools import setup, find_packages

setup(
    name="ts-type-graph",
    version="0.1.0",
    description="Class/interface type dependency graph for TypeScript projects, rendered as Graphviz DOT",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        # Parsing
        "tree-sitter>=0.25.0",
        "tree-sitter-language-pack>=0.9.0,<1.0",
        "pathspec>=0.12.1",

        # Models and configuration
        "pydantic>=2.7.0",
        "pydantic-settings>=2.3.0",

        # Utilities
        "structlog>=24.1.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.1.0",
            "pytest-cov>=4.2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ts-type-graph=ts_type_graph.cli:main",
        ],
    },
)
