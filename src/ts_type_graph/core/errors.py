"""Exception types raised by the graph pipeline."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class TypeGraphError(Exception):
    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class ConfigurationError(TypeGraphError):
    """Invalid tsconfig or settings; raised before any source file is read."""


@dataclass(eq=False)
class CorpusError(TypeGraphError):
    path: str = ""
