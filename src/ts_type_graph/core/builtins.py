"""Builtin type registry.

Primitive and standard-library type names are not nominal dependencies and
never become graph edges. Matching is exact on the rendered text: `Array`
matches, `Array<Foo>` does not.
"""

from __future__ import annotations

from ts_type_graph.core.types import TypeHandle


BASIC_TYPE_NAMES: frozenset[str] = frozenset(
    {
        # Primitives and top/bottom types
        "string",
        "number",
        "boolean",
        "null",
        "undefined",
        "symbol",
        "object",
        "function",
        "bigint",
        "void",
        "any",
        "unknown",
        "never",
        # Binary data
        "Uint8Array",
        "Uint8ClampedArray",
        "Uint16Array",
        "Uint32Array",
        "Int8Array",
        "Int16Array",
        "Int32Array",
        "Float32Array",
        "Float64Array",
        "ArrayBuffer",
        "DataView",
        # Collections and containers
        "Map",
        "Set",
        "WeakMap",
        "WeakSet",
        "Promise",
        "RegExp",
        "Date",
        "Array",
        "ArrayLike",
        # Errors
        "Error",
        "EvalError",
        "RangeError",
        "ReferenceError",
        "SyntaxError",
        "TypeError",
        "URIError",
        # Boxed wrappers
        "Object",
        "Function",
        "Boolean",
        "Number",
        "String",
        "Symbol",
        "BigInt",
        # Iteration protocols
        "Generator",
        "GeneratorFunction",
        "AsyncGenerator",
        "AsyncGeneratorFunction",
        "Iterable",
        "Iterator",
        "AsyncIterable",
        "AsyncIterator",
        "IterableIterator",
        "AsyncIterableIterator",
    }
)


def is_basic_name(text: str) -> bool:
    return text in BASIC_TYPE_NAMES


def is_basic_type(type_handle: TypeHandle) -> bool:
    return is_basic_name(type_handle.text)
