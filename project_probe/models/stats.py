"""Data models for code statistics."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class LanguageStats:
    file_count: int = 0
    line_count: int = 0


@dataclass
class CodeStats:
    """Line counts per language and per file for one stats pass."""

    languages: dict[str, LanguageStats] = field(default_factory=dict)
    files: dict[str, int] = field(default_factory=dict)  # relative path -> lines
    warnings: list[str] = field(default_factory=list)  # unreadable files

    def add(self, language: str, relative_path: str, lines: int) -> None:
        stat = self.languages.setdefault(language, LanguageStats())
        stat.file_count += 1
        stat.line_count += lines
        self.files[relative_path] = lines

    @property
    def total_files(self) -> int:
        return len(self.files)

    @property
    def total_lines(self) -> int:
        return sum(self.files.values())

    def to_dict(self) -> dict[str, Any]:
        return {
            "languages": {
                name: {"file_count": s.file_count, "line_count": s.line_count}
                for name, s in sorted(self.languages.items())
            },
            "files": dict(sorted(self.files.items())),
            "warnings": list(self.warnings),
            "total_files": self.total_files,
            "total_lines": self.total_lines,
        }
