"""TypeScript declaration extraction via Tree-sitter.

Collects top-level class and interface declarations (plain, exported and
ambient) with their heritage and method signatures.
"""

from __future__ import annotations

from typing import Any, Iterator, Union

import structlog
from tree_sitter_language_pack import get_parser

from ts_type_graph.core.types import Declaration, Method, Parameter, SourceFile, TypeHandle
from ts_type_graph.frontend.syntax_types import IMPLICIT_ANY, KeywordType, SyntaxType, named_children, node_text


logger = structlog.get_logger(__name__)

CLASS_NODES = frozenset({"class_declaration", "abstract_class_declaration", "class"})
INTERFACE_NODES = frozenset({"interface_declaration"})
_WRAPPER_STATEMENTS = frozenset({"export_statement", "ambient_declaration"})
_METHOD_NODES = frozenset({"method_definition", "abstract_method_signature", "method_signature"})
_BASE_EXPRESSIONS = frozenset({"identifier", "member_expression", "nested_identifier"})


def language_for(file_path: str) -> str:
    return "tsx" if file_path.lower().endswith(".tsx") else "typescript"


def _walk_counts(node: Any) -> tuple[int, int]:
    error_nodes = 1 if node.type == "ERROR" or getattr(node, "is_missing", False) else 0
    total = 1
    for child in node.children:
        t, e = _walk_counts(child)
        total += t
        error_nodes += e
    return total, error_nodes


def _type_param_names(node: Any) -> frozenset[str]:
    params = node.child_by_field_name("type_parameters")
    if params is None:
        return frozenset()
    names = set()
    for p in named_children(params):
        name = p.child_by_field_name("name")
        if name is not None:
            names.add(node_text(name))
    return frozenset(names)


def _has_token(node: Any, *tokens: str) -> bool:
    return any(not c.is_named and c.type in tokens for c in node.children)


def _return_type(node: Any, type_params: frozenset[str]) -> TypeHandle:
    annotation = node.child_by_field_name("return_type")
    if annotation is None:
        return IMPLICIT_ANY
    if annotation.type == "type_predicate_annotation":
        return KeywordType("boolean")
    if annotation.type == "asserts_annotation":
        return KeywordType("void")
    return SyntaxType(annotation, type_params)


def _parameters(node: Any, type_params: frozenset[str]) -> tuple[Parameter, ...]:
    params = node.child_by_field_name("parameters")
    if params is None:
        return ()
    out: list[Parameter] = []
    for p in named_children(params):
        if p.type not in ("required_parameter", "optional_parameter"):
            continue
        pattern = p.child_by_field_name("pattern")
        name = node_text(pattern) if pattern is not None else ""
        if name == "this":
            continue
        annotation = p.child_by_field_name("type")
        handle = SyntaxType(annotation, type_params) if annotation is not None else IMPLICIT_ANY
        out.append(Parameter(name=name, type=handle))
    return tuple(out)


def _method(node: Any, owner_params: frozenset[str]) -> Method:
    name_node = node.child_by_field_name("name")
    type_params = owner_params | _type_param_names(node)
    return Method(
        name=node_text(name_node) if name_node is not None else "",
        return_type=_return_type(node, type_params),
        parameters=_parameters(node, type_params),
    )


def _methods(body: Any, owner_params: frozenset[str]) -> tuple[Method, ...]:
    if body is None:
        return ()
    members = [m for m in named_children(body) if m.type in _METHOD_NODES]
    implemented = {
        node_text(m.child_by_field_name("name"))
        for m in members
        if m.type == "method_definition" and m.child_by_field_name("name") is not None
    }

    out: list[Method] = []
    for m in members:
        if _has_token(m, "get", "set"):
            continue
        name_node = m.child_by_field_name("name")
        name = node_text(name_node) if name_node is not None else ""
        if name == "constructor":
            continue
        # Overload signatures are superseded by the implementation.
        if m.type == "method_signature" and name in implemented:
            continue
        out.append(_method(m, owner_params))
    return tuple(out)


def _base_class(node: Any, type_params: frozenset[str]) -> SyntaxType | None:
    for heritage in named_children(node):
        if heritage.type != "class_heritage":
            continue
        for clause in named_children(heritage):
            if clause.type != "extends_clause":
                continue
            value = clause.child_by_field_name("value")
            if value is None:
                candidates = [c for c in named_children(clause) if c.type != "type_arguments"]
                value = candidates[0] if candidates else None
            if value is not None and value.type in _BASE_EXPRESSIONS:
                return SyntaxType(value, type_params)
    return None


def _base_types(node: Any, type_params: frozenset[str]) -> tuple[SyntaxType, ...]:
    out: list[SyntaxType] = []
    for clause in named_children(node):
        if clause.type not in ("extends_type_clause", "extends_clause"):
            continue
        for t in named_children(clause):
            if t.type == "type_arguments":
                continue
            out.append(SyntaxType(t, type_params))
    return tuple(out)


def _location(node: Any) -> tuple[int, int]:
    return int(node.start_point[0]) + 1, int(node.start_point[1])


def class_declaration(node: Any, file_path: str) -> Declaration:
    name_node = node.child_by_field_name("name")
    type_params = _type_param_names(node)
    line, column = _location(node)
    return Declaration(
        kind="class",
        name=node_text(name_node) if name_node is not None else None,
        file_path=file_path,
        line=line,
        column=column,
        methods=_methods(node.child_by_field_name("body"), type_params),
        base_class=_base_class(node, type_params),
    )


def interface_declaration(node: Any, file_path: str) -> Declaration:
    name_node = node.child_by_field_name("name")
    type_params = _type_param_names(node)
    line, column = _location(node)
    return Declaration(
        kind="interface",
        name=node_text(name_node) if name_node is not None else None,
        file_path=file_path,
        line=line,
        column=column,
        methods=_methods(node.child_by_field_name("body"), type_params),
        base_types=_base_types(node, type_params),
    )


def _top_level_declarations(statement: Any) -> Iterator[Any]:
    if statement.type in CLASS_NODES or statement.type in INTERFACE_NODES:
        yield statement
    elif statement.type in _WRAPPER_STATEMENTS:
        for child in named_children(statement):
            yield from _top_level_declarations(child)


def parse_source(source: Union[bytes, str], *, file_path: str = "<memory>.ts") -> SourceFile:
    data = source.encode("utf-8") if isinstance(source, str) else source
    tree = get_parser(language_for(file_path)).parse(data)
    root = tree.root_node

    if root.has_error:
        total, error_nodes = _walk_counts(root)
        logger.warning("frontend.parse_errors", file_path=file_path, error_nodes=error_nodes, total_nodes=total)

    classes: list[Declaration] = []
    interfaces: list[Declaration] = []
    for statement in named_children(root):
        for node in _top_level_declarations(statement):
            if node.type in CLASS_NODES:
                classes.append(class_declaration(node, file_path))
            else:
                interfaces.append(interface_declaration(node, file_path))

    return SourceFile(path=file_path, classes=tuple(classes), interfaces=tuple(interfaces))
