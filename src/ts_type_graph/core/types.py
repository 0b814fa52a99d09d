"""Declaration and type-handle contracts consumed by the analyzer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Protocol, Sequence

from ts_type_graph.core.stable_ids import declaration_key


DeclarationKind = Literal["class", "interface"]


class TypeHandle(Protocol):
    """A resolved type expression, owned by the front end."""

    @property
    def text(self) -> str:
        """Rendered type text."""

    def is_union(self) -> bool: ...

    def is_array(self) -> bool: ...

    def is_tuple(self) -> bool: ...

    def is_intersection(self) -> bool: ...

    def is_type_reference(self) -> bool:
        """True for a generic instantiation that carries type arguments."""

    def is_literal(self) -> bool: ...

    def union_types(self) -> Sequence["TypeHandle"]: ...

    def array_element_type(self) -> Optional["TypeHandle"]: ...

    def tuple_element_types(self) -> Sequence["TypeHandle"]: ...

    def intersection_types(self) -> Sequence["TypeHandle"]: ...

    def type_arguments(self) -> Sequence["TypeHandle"]: ...


@dataclass(frozen=True)
class Parameter:
    name: str
    type: TypeHandle


@dataclass(frozen=True)
class Method:
    name: str
    return_type: TypeHandle
    parameters: tuple[Parameter, ...] = ()


@dataclass(frozen=True, eq=False)
class Declaration:
    kind: DeclarationKind
    name: Optional[str]
    file_path: str
    line: int
    column: int
    methods: tuple[Method, ...] = ()
    base_class: Optional[TypeHandle] = None
    base_types: tuple[TypeHandle, ...] = ()

    @property
    def key(self) -> str:
        return declaration_key(
            file_path=self.file_path,
            kind=self.kind,
            name=self.name or "",
            line=self.line,
            column=self.column,
        )


@dataclass(frozen=True)
class SourceFile:
    path: str
    classes: tuple[Declaration, ...] = ()
    interfaces: tuple[Declaration, ...] = ()


Corpus = Sequence[SourceFile]
