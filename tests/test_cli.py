import json
from pathlib import Path

import pytest

from ts_type_graph.cli import main


ZOO = """
export class Animal {}
export class Dog extends Animal {
  feed(food: Kibble | Treat): void {}
}
export interface Counter { count(): number; }
"""


@pytest.fixture
def project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    (tmp_path / "tsconfig.json").write_text('{"files": []}', encoding="utf-8")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "zoo.ts").write_text(ZOO, encoding="utf-8")
    return tmp_path


@pytest.mark.parametrize("argv", [[], ["tsconfig.json"]])
def test_missing_inputs_print_usage_and_fail(argv, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code != 0
    captured = capsys.readouterr()
    assert "usage:" in captured.err
    assert captured.out == ""


def test_dot_output_on_stdout(project: Path, capsys) -> None:
    assert main(["tsconfig.json", "src/**/*.ts"]) == 0
    captured = capsys.readouterr()
    assert captured.out.startswith("digraph G {\n    rankdir=LR;\n")
    assert "  Dog -> Animal;\n" in captured.out
    assert "  Dog -> Kibble;\n" in captured.out
    assert "  Dog -> Treat;\n" in captured.out
    assert '  Counter [label="Counter"];\n' in captured.out
    assert captured.out.endswith("}\n")
    assert "run.start" in captured.err


def test_json_output(project: Path, capsys) -> None:
    assert main(["tsconfig.json", "src/**/*.ts", "--format", "json", "--rankdir", "TB"]) == 0
    doc = json.loads(capsys.readouterr().out)
    assert {"source": "Dog", "target": "Animal", "type": "extends"} in doc["links"]
    assert set(doc["nodes"]) == {"Animal", "Dog", "Kibble", "Treat", "Counter"}


def test_rankdir_from_settings(project: Path, capsys, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DOT_RANKDIR", "BT")
    assert main(["tsconfig.json", "src/*.ts"]) == 0
    assert "    rankdir=BT;\n" in capsys.readouterr().out


def test_configuration_error_exits_one_without_graph(tmp_path: Path, capsys, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    assert main(["missing-tsconfig.json", "src/*.ts"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "run.failed" in captured.err
    assert "ConfigurationError" in captured.err


def test_invalid_setting_exits_one_without_graph(project: Path, capsys, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MAX_DECOMPOSITION_DEPTH", "0")
    assert main(["tsconfig.json", "src/*.ts"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "run.failed" in captured.err
    assert "ConfigurationError" in captured.err
    assert "MAX_DECOMPOSITION_DEPTH" in captured.err


def test_skip_tsconfig_files_from_settings(tmp_path: Path, capsys, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SKIP_TSCONFIG_FILES", "true")
    (tmp_path / "tsconfig.json").write_text("{}", encoding="utf-8")
    (tmp_path / "listed.ts").write_text("export class Listed { find(): Hidden { return null!; } }", encoding="utf-8")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "zoo.ts").write_text(ZOO, encoding="utf-8")

    assert main(["tsconfig.json", "src/*.ts"]) == 0
    out = capsys.readouterr().out
    assert "Dog -> Animal;" in out
    assert "Listed" not in out
