"""Tree-sitter backed type handles.

Types are read from source annotations, so `text` is the annotation as
written (whitespace-normalized), not a checker-resolved rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


_WRAPPER_NODES = frozenset({"parenthesized_type", "type_annotation", "readonly_type"})
_NAMED_REFERENCE_NODES = frozenset({"type_identifier", "nested_type_identifier", "identifier", "member_expression"})
_ARRAY_GENERIC_HEADS = frozenset({"Array", "ReadonlyArray"})


def named_children(node: Any) -> list[Any]:
    return [c for c in node.named_children if c.type != "comment"]


def _unwrap(node: Any) -> Any:
    while node.type in _WRAPPER_NODES:
        inner = named_children(node)
        if not inner:
            break
        node = inner[-1]
    return node


def _flatten(node: Any, node_type: str) -> list[Any]:
    out: list[Any] = []
    for child in named_children(node):
        child = _unwrap(child)
        if child.type == node_type:
            out.extend(_flatten(child, node_type))
        else:
            out.append(child)
    return out


def node_text(node: Any) -> str:
    return " ".join(node.text.decode("utf-8", errors="replace").split())


@dataclass(frozen=True)
class KeywordType:
    """A type with no source node: implicit `any`, predicate `boolean`, assertion `void`."""

    text: str

    def is_union(self) -> bool:
        return False

    def is_array(self) -> bool:
        return False

    def is_tuple(self) -> bool:
        return False

    def is_intersection(self) -> bool:
        return False

    def is_type_reference(self) -> bool:
        return False

    def is_literal(self) -> bool:
        return False

    def union_types(self) -> list:
        return []

    def array_element_type(self) -> None:
        return None

    def tuple_element_types(self) -> list:
        return []

    def intersection_types(self) -> list:
        return []

    def type_arguments(self) -> list:
        return []


IMPLICIT_ANY = KeywordType("any")


class SyntaxType:
    """Type handle over a tree-sitter type node."""

    __slots__ = ("node", "type_params")

    def __init__(self, node: Any, type_params: frozenset[str] = frozenset()) -> None:
        self.node = _unwrap(node)
        self.type_params = type_params

    def __repr__(self) -> str:
        return f"SyntaxType({self.node.type}, {self.text!r})"

    def _wrap(self, node: Any) -> "SyntaxType":
        return SyntaxType(node, self.type_params)

    @property
    def text(self) -> str:
        return node_text(self.node)

    @property
    def kind(self) -> str:
        return self.node.type

    def _generic_head(self) -> Optional[str]:
        if self.node.type != "generic_type":
            return None
        name = self.node.child_by_field_name("name")
        return node_text(name) if name is not None else None

    def _type_argument_nodes(self) -> list[Any]:
        args = self.node.child_by_field_name("type_arguments")
        return named_children(args) if args is not None else []

    # Structural predicates

    def is_union(self) -> bool:
        return self.node.type == "union_type"

    def is_array(self) -> bool:
        if self.node.type == "array_type":
            return True
        return self._generic_head() in _ARRAY_GENERIC_HEADS and len(self._type_argument_nodes()) == 1

    def is_tuple(self) -> bool:
        return self.node.type == "tuple_type"

    def is_intersection(self) -> bool:
        return self.node.type == "intersection_type"

    def is_type_reference(self) -> bool:
        return self.node.type == "generic_type" and bool(self._type_argument_nodes())

    def is_literal(self) -> bool:
        return self.node.type == "literal_type"

    # Diagnostic predicates

    def is_named_reference(self) -> bool:
        return self.node.type in _NAMED_REFERENCE_NODES and not self.is_type_parameter()

    def is_type_parameter(self) -> bool:
        return self.node.type == "type_identifier" and self.text in self.type_params

    def is_object(self) -> bool:
        return self.node.type == "object_type"

    def is_function(self) -> bool:
        return self.node.type in ("function_type", "constructor_type")

    def is_type_query(self) -> bool:
        return self.node.type in ("type_query", "index_type_query", "lookup_type")

    def is_conditional(self) -> bool:
        return self.node.type == "conditional_type"

    def is_template_literal(self) -> bool:
        return self.node.type == "template_literal_type"

    def is_this(self) -> bool:
        return self.node.type == "this_type"

    # Accessors

    def union_types(self) -> list["SyntaxType"]:
        return [self._wrap(n) for n in _flatten(self.node, "union_type")]

    def intersection_types(self) -> list["SyntaxType"]:
        return [self._wrap(n) for n in _flatten(self.node, "intersection_type")]

    def array_element_type(self) -> Optional["SyntaxType"]:
        if self.node.type == "array_type":
            children = named_children(self.node)
        else:
            children = self._type_argument_nodes()
        return self._wrap(children[0]) if children else None

    def tuple_element_types(self) -> list["SyntaxType"]:
        out: list[SyntaxType] = []
        for member in named_children(self.node):
            if member.type in ("required_parameter", "optional_parameter"):
                annotation = member.child_by_field_name("type")
                if annotation is None:
                    continue
                out.append(self._wrap(annotation))
            elif member.type in ("optional_type", "rest_type"):
                inner = named_children(member)
                if inner:
                    out.append(self._wrap(inner[0]))
            else:
                out.append(self._wrap(member))
        return out

    def type_arguments(self) -> list["SyntaxType"]:
        return [self._wrap(n) for n in self._type_argument_nodes()]
