from fakes import named
from ts_type_graph.core.analyzer import AnalysisState
from ts_type_graph.core.types import Declaration, Method, SourceFile
from ts_type_graph.core.walker import run


def _decl(kind, name, target, path="a.ts", line=1) -> Declaration:
    return Declaration(
        kind=kind,
        name=name,
        file_path=path,
        line=line,
        column=0,
        methods=(Method(name="m", return_type=named(target)),),
    )


def test_classes_before_interfaces_in_file_order() -> None:
    corpus = [
        SourceFile(path="a.ts", classes=(_decl("class", "A", "X"),), interfaces=(_decl("interface", "IA", "Y", line=2),)),
        SourceFile(path="b.ts", classes=(_decl("class", "B", "Z", path="b.ts"),)),
    ]
    graph = run(corpus)
    assert [e.source for e in graph.edges] == ["A", "IA", "B"]


def test_same_declaration_visited_twice_is_analyzed_once() -> None:
    decl = _decl("class", "A", "X")
    sf = SourceFile(path="a.ts", classes=(decl,))
    graph = run([sf, sf])
    assert len(graph.edges) == 1


def test_interfaces_are_not_duplicate_guarded() -> None:
    decl = _decl("interface", "IA", "X")
    sf = SourceFile(path="a.ts", interfaces=(decl,))
    graph = run([sf, sf])
    assert len(graph.edges) == 2


def test_run_uses_given_state() -> None:
    state = AnalysisState(max_depth=5)
    graph = run([SourceFile(path="a.ts", classes=(_decl("class", "A", "X"),))], state=state)
    assert graph is state.graph
    assert len(state.processed) == 1


def test_empty_corpus_gives_empty_graph() -> None:
    graph = run([])
    assert graph.nodes == {}
    assert graph.edges == []
