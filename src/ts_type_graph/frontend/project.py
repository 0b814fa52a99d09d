"""Corpus resolution: tsconfig + file patterns -> ordered source files.

tsconfig `files`/`include` are resolved relative to the tsconfig directory and
filtered by `exclude` (gitignore-compatible matching via `pathspec`); CLI
patterns are recursive globs relative to the working directory.
"""

from __future__ import annotations

import glob
import json
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

import pathspec
import structlog

from ts_type_graph.core.errors import ConfigurationError, CorpusError
from ts_type_graph.core.types import SourceFile
from ts_type_graph.frontend.parser import parse_source


logger = structlog.get_logger(__name__)

SOURCE_SUFFIXES: tuple[str, ...] = (".ts", ".tsx", ".mts", ".cts")

# Applied to tsconfig-derived files only, like `tsc`.
DEFAULT_EXCLUDE_PATTERNS: tuple[str, ...] = (
    "node_modules/",
    "bower_components/",
    "jspm_packages/",
    ".git/",
)

_RE_JSONC_TOKENS = re.compile(
    r'"(?:\\.|[^"\\])*"|//[^\n]*|/\*.*?\*/',
    re.DOTALL,
)
_RE_TRAILING_COMMA = re.compile(r",(\s*[}\]])")


@dataclass(frozen=True)
class Project:
    tsconfig_path: Path
    files: tuple[Path, ...]


def _strip_jsonc(text: str) -> str:
    def keep_strings(m: re.Match) -> str:
        token = m.group(0)
        return token if token.startswith('"') else ""

    no_comments = _RE_JSONC_TOKENS.sub(keep_strings, text)
    return _RE_TRAILING_COMMA.sub(r"\1", no_comments)


def read_tsconfig(tsconfig_path: Path) -> dict:
    """Parse a tsconfig file, tolerating comments and trailing commas."""

    if not tsconfig_path.is_file():
        raise ConfigurationError(f"TypeScript config not found: {tsconfig_path}")
    try:
        raw = tsconfig_path.read_text(encoding="utf-8-sig")
        data = json.loads(_strip_jsonc(raw))
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read TypeScript config {tsconfig_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid TypeScript config {tsconfig_path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"TypeScript config must be a JSON object: {tsconfig_path}")
    return data


def _string_list(config: dict, key: str, tsconfig_path: Path) -> list[str] | None:
    value = config.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigurationError(f"tsconfig {key!r} must be a list of strings: {tsconfig_path}")
    return value


def _is_source(path: Path) -> bool:
    return path.is_file() and path.name.lower().endswith(SOURCE_SUFFIXES)


def _tsconfig_files(tsconfig_path: Path, config: dict) -> list[Path]:
    root = tsconfig_path.parent
    files = _string_list(config, "files", tsconfig_path)
    include = _string_list(config, "include", tsconfig_path)
    exclude = _string_list(config, "exclude", tsconfig_path) or []
    if files is None and include is None:
        include = ["**/*"]

    out: list[Path] = []
    for f in files or []:
        p = root / f
        if not p.is_file():
            raise ConfigurationError(f"File listed in tsconfig 'files' not found: {p}")
        out.append(p)

    if include:
        include_spec = pathspec.PathSpec.from_lines("gitwildmatch", include)
        exclude_spec = pathspec.PathSpec.from_lines("gitwildmatch", [*DEFAULT_EXCLUDE_PATTERNS, *exclude])
        matched: list[Path] = []
        for p in root.rglob("*"):
            if p.is_symlink() or not _is_source(p):
                continue
            rel = p.relative_to(root).as_posix()
            if exclude_spec.match_file(rel) or not include_spec.match_file(rel):
                continue
            matched.append(p)
        out.extend(sorted(matched, key=lambda x: x.relative_to(root).as_posix()))
    return out


def _pattern_files(patterns: Iterable[str]) -> list[Path]:
    out: list[Path] = []
    for pattern in patterns:
        for match in sorted(glob.glob(pattern, recursive=True)):
            p = Path(match)
            if _is_source(p):
                out.append(p)
    return out


def _dedupe(paths: Iterable[Path]) -> tuple[Path, ...]:
    seen: set[Path] = set()
    out: list[Path] = []
    for p in paths:
        resolved = p.resolve()
        if resolved in seen:
            continue
        seen.add(resolved)
        out.append(p)
    return tuple(out)


def load_project(
    tsconfig_path: str | Path,
    patterns: Sequence[str],
    *,
    include_tsconfig_files: bool = True,
) -> Project:
    """Resolve the ordered, de-duplicated list of source files to analyze."""

    tsconfig = Path(tsconfig_path)
    config = read_tsconfig(tsconfig)

    files: list[Path] = []
    if include_tsconfig_files:
        files.extend(_tsconfig_files(tsconfig, config))
    files.extend(_pattern_files(patterns))

    project = Project(tsconfig_path=tsconfig, files=_dedupe(files))
    logger.info("project.loaded", tsconfig=str(tsconfig), file_count=len(project.files))
    return project


def parse_project(project: Project) -> list[SourceFile]:
    corpus: list[SourceFile] = []
    for path in project.files:
        try:
            data = path.read_bytes()
        except OSError as e:
            raise CorpusError(f"Cannot read source file {path}: {e}", path=str(path)) from e
        corpus.append(parse_source(data, file_path=path.as_posix()))
    return corpus
