"""Line counting for non-ignored project files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import structlog

from project_probe.ignore.engine import IgnoreEngine
from project_probe.models.stats import CodeStats

log = structlog.get_logger("project_probe.stats")

_CHUNK_SIZE = 64 * 1024

OTHER_LANGUAGE = "Other"

# Source language by file extension (lowercased, with dot)
EXTENSION_TO_LANGUAGE: dict[str, str] = {
    ".c": "C",
    ".h": "C/C++ Header",
    ".hh": "C/C++ Header",
    ".hpp": "C/C++ Header",
    ".cc": "C++",
    ".cpp": "C++",
    ".cxx": "C++",
    ".cs": "C#",
    ".clj": "Clojure",
    ".cljs": "Clojure",
    ".edn": "Clojure",
    ".cr": "Crystal",
    ".css": "CSS",
    ".scss": "CSS",
    ".dart": "Dart",
    ".ex": "Elixir",
    ".exs": "Elixir",
    ".elm": "Elm",
    ".erl": "Erlang",
    ".hrl": "Erlang",
    ".go": "Go",
    ".hs": "Haskell",
    ".html": "HTML",
    ".htm": "HTML",
    ".java": "Java",
    ".js": "JavaScript",
    ".mjs": "JavaScript",
    ".cjs": "JavaScript",
    ".jsx": "JSX",
    ".json": "JSON",
    ".jl": "Julia",
    ".kt": "Kotlin",
    ".kts": "Kotlin",
    ".lua": "Lua",
    ".md": "Markdown",
    ".nim": "Nim",
    ".ml": "OCaml",
    ".mli": "OCaml",
    ".pl": "Perl",
    ".pm": "Perl",
    ".php": "PHP",
    ".purs": "PureScript",
    ".py": "Python",
    ".pyi": "Python",
    ".r": "R",
    ".rb": "Ruby",
    ".rs": "Rust",
    ".scala": "Scala",
    ".sbt": "Scala",
    ".sh": "Shell",
    ".bash": "Shell",
    ".sql": "SQL",
    ".swift": "Swift",
    ".toml": "TOML",
    ".ts": "TypeScript",
    ".tsx": "TSX",
    ".vue": "Vue",
    ".xml": "XML",
    ".yaml": "YAML",
    ".yml": "YAML",
    ".zig": "Zig",
}

# Extensionless files recognised by name
FILENAME_TO_LANGUAGE: dict[str, str] = {
    "Makefile": "Makefile",
    "makefile": "Makefile",
    "Dockerfile": "Dockerfile",
    "Gemfile": "Ruby",
    "Rakefile": "Ruby",
}


def language_for(path: str | Path) -> str | None:
    """Source language of a file, from its name or extension; None if unknown."""
    p = Path(path)
    return FILENAME_TO_LANGUAGE.get(p.name) or EXTENSION_TO_LANGUAGE.get(p.suffix.lower())


def count_lines(path: str | Path) -> int:
    """Count newline-delimited lines.

    An empty file has 0 lines; a final line without a trailing newline still
    counts. Raises ``OSError`` if the file cannot be read.
    """
    lines = 0
    last = b""
    with open(path, "rb") as fh:
        while chunk := fh.read(_CHUNK_SIZE):
            lines += chunk.count(b"\n")
            last = chunk
    if last and not last.endswith(b"\n"):
        lines += 1
    return lines


class StatsCounter:
    """Aggregate per-file and per-language line counts under a project root."""

    def __init__(self, root: str | Path, engine: IgnoreEngine | None = None) -> None:
        self.root = Path(root)
        self.engine = engine or IgnoreEngine()

    def count(self, paths: Iterable[tuple[str, str | None]]) -> CodeStats:
        """Count lines for each ``(relative_path, language_hint)`` not ignored.

        A ``None`` hint is resolved from the file name. Unreadable files are
        logged, recorded in ``CodeStats.warnings`` and skipped.
        """
        stats = CodeStats()
        for relative_path, hint in paths:
            if self.engine.is_ignored(relative_path, is_directory=False):
                log.debug("stats.ignored", path=relative_path)
                continue
            try:
                lines = count_lines(self.root / relative_path)
            except OSError as e:
                log.warning("stats.file_unreadable", path=relative_path, error=str(e))
                stats.warnings.append(f"{relative_path}: {e}")
                continue
            language = hint or language_for(relative_path) or OTHER_LANGUAGE
            stats.add(language, relative_path, lines)
        return stats
