"""Minimal in-memory type handles for engine tests."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(eq=False)
class FakeType:
    text: str
    shape: str = "named"  # union | array | tuple | intersection | generic | literal | named | other
    members: list["FakeType"] = field(default_factory=list)

    def is_union(self) -> bool:
        return self.shape == "union"

    def is_array(self) -> bool:
        return self.shape == "array"

    def is_tuple(self) -> bool:
        return self.shape == "tuple"

    def is_intersection(self) -> bool:
        return self.shape == "intersection"

    def is_type_reference(self) -> bool:
        return self.shape == "generic"

    def is_literal(self) -> bool:
        return self.shape == "literal"

    def is_named_reference(self) -> bool:
        return self.shape == "named"

    def union_types(self):
        return list(self.members)

    def array_element_type(self):
        return self.members[0] if self.members else None

    def tuple_element_types(self):
        return list(self.members)

    def intersection_types(self):
        return list(self.members)

    def type_arguments(self):
        return list(self.members)


def named(text: str) -> FakeType:
    return FakeType(text)


def union(*members: FakeType) -> FakeType:
    return FakeType(" | ".join(m.text for m in members), "union", list(members))


def intersection(*members: FakeType) -> FakeType:
    return FakeType(" & ".join(m.text for m in members), "intersection", list(members))


def tuple_of(*members: FakeType) -> FakeType:
    return FakeType("[" + ", ".join(m.text for m in members) + "]", "tuple", list(members))


def array_of(element: FakeType | None) -> FakeType:
    if element is None:
        return FakeType("[]", "array")
    return FakeType(f"{element.text}[]", "array", [element])


def generic(head: str, *args: FakeType) -> FakeType:
    return FakeType(f"{head}<{', '.join(a.text for a in args)}>", "generic", list(args))


def literal(text: str) -> FakeType:
    return FakeType(text, "literal")
