"""Type decomposition: reduce a type expression to its leaf type handles.

Rules, in precedence order:
- union / tuple / intersection: concatenation of each member's leaves
- array: the element type's leaves
- generic instantiation: the type arguments' leaves (the generic head is dropped)
- literal, builtin, plain named reference: the type itself
- anything else: the type itself, with a diagnostic listing matched predicates

Recursion is bounded by a per-path identity check and a depth limit; both emit
the offending handle as a truncation leaf instead of raising.
"""

from __future__ import annotations

from typing import Iterable

import structlog

from ts_type_graph.core.builtins import is_basic_type
from ts_type_graph.core.types import TypeHandle


logger = structlog.get_logger(__name__)

DEFAULT_MAX_DEPTH = 64


def matched_predicates(type_handle: TypeHandle) -> list[str]:
    """Names of the zero-argument `is_*` predicates that hold for `type_handle`."""

    matches: list[str] = []
    for attr in sorted(dir(type_handle)):
        if not attr.startswith("is_"):
            continue
        predicate = getattr(type_handle, attr)
        if callable(predicate) and predicate() is True:
            matches.append(attr)
    return matches


def _is_named_reference(type_handle: TypeHandle) -> bool:
    predicate = getattr(type_handle, "is_named_reference", None)
    return bool(predicate()) if callable(predicate) else False


def decompose(type_handle: TypeHandle, *, max_depth: int = DEFAULT_MAX_DEPTH) -> list[TypeHandle]:
    """Return the ordered leaf types `type_handle` depends on."""

    if max_depth < 1:
        raise ValueError(f"max_depth must be >= 1, got {max_depth}")
    return _decompose(type_handle, depth=0, max_depth=max_depth, active=set())


def _decompose(type_handle: TypeHandle, *, depth: int, max_depth: int, active: set[int]) -> list[TypeHandle]:
    key = id(type_handle)
    if key in active:
        logger.warning("decompose.cycle_detected", type=type_handle.text, depth=depth)
        return [type_handle]
    if depth >= max_depth:
        logger.warning("decompose.depth_exceeded", type=type_handle.text, max_depth=max_depth)
        return [type_handle]

    active.add(key)
    try:
        return _reduce(type_handle, depth=depth, max_depth=max_depth, active=active)
    finally:
        active.discard(key)


def _reduce(type_handle: TypeHandle, *, depth: int, max_depth: int, active: set[int]) -> list[TypeHandle]:
    def flatten(members: Iterable[TypeHandle]) -> list[TypeHandle]:
        out: list[TypeHandle] = []
        for member in members:
            out.extend(_decompose(member, depth=depth + 1, max_depth=max_depth, active=active))
        return out

    if type_handle.is_union():
        return flatten(type_handle.union_types())
    if type_handle.is_array():
        element = type_handle.array_element_type()
        if element is None:
            return []
        return flatten([element])
    if type_handle.is_tuple():
        return flatten(type_handle.tuple_element_types())
    if type_handle.is_intersection():
        return flatten(type_handle.intersection_types())
    if type_handle.is_type_reference():
        return flatten(type_handle.type_arguments())
    if type_handle.is_literal():
        return [type_handle]
    if is_basic_type(type_handle):
        return [type_handle]
    if _is_named_reference(type_handle):
        return [type_handle]

    logger.warning(
        "decompose.unparseable_type",
        type=type_handle.text,
        matches=matched_predicates(type_handle),
    )
    return [type_handle]
