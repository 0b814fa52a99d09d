"""Deterministic declaration keys."""

from __future__ import annotations

import hashlib


def stable_id(*parts: str, size: int = 24) -> str:
    """Return a stable id derived from the given identity parts."""

    raw = "|".join(parts).encode("utf-8", errors="replace")
    return hashlib.sha256(raw).hexdigest()[:size]


def declaration_key(*, file_path: str, kind: str, name: str, line: int, column: int) -> str:
    """Key a declaration by where it is defined, not by object identity."""

    return stable_id(file_path, kind, name, str(line), str(column))
