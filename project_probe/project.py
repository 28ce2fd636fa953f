"""Project — detect languages, configure ignore rules, compute code stats.

Usage::

    project = Project("/my/project/dir")
    project.parse()
    project.set_gitignore("files/to/ignore/1.js \\n files/to/ignore/2.rs", update_existing=False)
    project.use_project_gitignore(True)
    project.is_ignored("files/to/ignore/1.js")   # True
    stats = project.get_code_stats()
"""

from __future__ import annotations

import os
from pathlib import Path

import structlog

from project_probe.core.config import ProbeSettings
from project_probe.detector import LanguageDetector
from project_probe.exceptions import NotParsedError, ProbeIOError, ProjectNotFoundError
from project_probe.ignore.engine import IgnoreEngine
from project_probe.ignore.ruleset import RuleSource, parse_rules
from project_probe.ignore.templates import templates_for
from project_probe.models.language import Language
from project_probe.models.project import PathStatus, ProjectState
from project_probe.models.stats import CodeStats
from project_probe.stats import StatsCounter
from project_probe.walker import walk_project

log = structlog.get_logger("project_probe.project")


class Project:
    """A project directory and everything derived from scanning it."""

    def __init__(self, root: str | os.PathLike[str], settings: ProbeSettings | None = None) -> None:
        path = Path(root)
        if not path.is_dir():
            raise ProjectNotFoundError(str(root))

        self._root = path
        self.settings = settings or ProbeSettings.from_env()
        self.is_git = (path / ".git").exists()
        self.state = ProjectState.UNINITIALIZED

        self.languages: set[Language] = set()
        # Raw rule text behind the generic RuleSet: template blocks + extra lines
        self.generic_gitignore: list[str] = []
        self.engine = IgnoreEngine()
        self.code_stats: CodeStats | None = None

        self._detector = LanguageDetector()

    @property
    def root(self) -> Path:
        return self._root

    def __repr__(self) -> str:
        langs = ",".join(sorted(lang.value for lang in self.languages))
        return f"Project(root={str(self._root)!r}, state={self.state.value}, languages=[{langs}])"

    # ── lifecycle ─────────────────────────────────────────────────────────

    def parse(self) -> None:
        """Detect project languages and build the generic rules from their templates.

        May be called again to re-scan; user rules and stats are reset.
        """
        self.state = ProjectState.UNINITIALIZED
        self.engine.clear()
        self.code_stats = None

        languages = self._detector.detect_from_dir(self._root)
        blocks = templates_for(languages)

        self.languages = languages
        self.generic_gitignore = blocks
        self.engine.set_generic(parse_rules("\n".join(blocks), RuleSource.GENERIC))
        self.state = ProjectState.PARSED

        log.info(
            "project.parsed",
            root=str(self._root),
            languages=sorted(lang.value for lang in languages),
            generic_rules=len(self.engine.generic or ()),
            is_git=self.is_git,
        )

    def set_gitignore(self, extra_lines: str, update_existing: bool = False) -> None:
        """Rebuild the generic rules with ``extra_lines`` added.

        ``extra_lines`` is split on newlines and whitespace into single rules;
        ``#`` comment lines are dropped. With ``update_existing`` the rules are
        appended to the current generic rules, otherwise the generic rules
        restart from the language templates.
        """
        self._require_parsed()

        rules: list[str] = []
        for line in extra_lines.splitlines():
            line = line.strip()
            if line and not line.startswith("#"):
                rules.extend(line.split())

        blocks = list(self.generic_gitignore) if update_existing else templates_for(self.languages)
        if rules:
            blocks.append("\n".join(rules))

        self.generic_gitignore = blocks
        self.engine.set_generic(parse_rules("\n".join(blocks), RuleSource.GENERIC))
        self.state = ProjectState.GITIGNORE_CONFIGURED
        log.info(
            "project.gitignore_set",
            added=len(rules),
            update_existing=update_existing,
            generic_rules=len(self.engine.generic or ()),
        )

    def use_project_gitignore(self, enabled: bool = True) -> None:
        """Attach (or detach) the rules of the project's own ignore file.

        The user rules always take precedence over the generic rules. A
        project without an ignore file ends up with no user rules.
        """
        self._require_parsed()
        self.state = ProjectState.GITIGNORE_CONFIGURED

        if not enabled:
            self.engine.set_user(None)
            log.info("project.user_rules_detached")
            return

        ignore_path = self._root / self.settings.ignore_file
        if not ignore_path.is_file():
            self.engine.set_user(None)
            log.info("project.no_ignore_file", path=str(ignore_path))
            return

        try:
            content = ignore_path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            raise ProbeIOError(f"Cannot read {ignore_path}: {e}") from e

        ruleset = parse_rules(content, RuleSource.USER)
        self.engine.set_user(ruleset)
        log.info("project.user_rules_attached", path=str(ignore_path), rules=len(ruleset))

    def get_code_stats(self) -> CodeStats:
        """Count lines of every non-ignored file. Always recomputed from scratch."""
        self._require_parsed()

        entries = walk_project(
            self._root, self.engine, include_hidden=self.settings.include_hidden
        )
        files = ((e.relative_path, None) for e in entries if not e.is_dir)
        stats = StatsCounter(self._root, self.engine).count(files)

        self.code_stats = stats
        self.state = ProjectState.STATS_COMPUTED
        log.info(
            "project.stats_computed",
            files=stats.total_files,
            lines=stats.total_lines,
            warnings=len(stats.warnings),
        )
        return stats

    # ── queries ───────────────────────────────────────────────────────────

    def is_ignored(self, path: str) -> bool:
        """Whether ``path`` (relative to the root, or absolute inside it) is ignored."""
        return self.check_path(path).is_ignored

    def check_path(self, path: str) -> PathStatus:
        """Existence, directory flag and ignore status of ``path``.

        For a path that does not exist, a trailing ``/`` marks a directory.
        """
        self._require_parsed()
        relative = self._relative(path)
        full = self._root / relative
        exists = full.exists()
        is_dir = full.is_dir() if exists else path.endswith(("/", os.sep))
        return PathStatus(
            exists=exists,
            is_dir=is_dir,
            is_ignored=self.engine.is_ignored(relative, is_directory=is_dir),
        )

    def _relative(self, path: str) -> str:
        p = Path(path)
        if not p.is_absolute():
            return p.as_posix()
        try:
            return p.relative_to(self._root.resolve()).as_posix()
        except ValueError:
            raise ValueError(f"Path {path} is outside project root {self._root}") from None

    def _require_parsed(self) -> None:
        if self.state is ProjectState.UNINITIALIZED:
            raise NotParsedError(f"Project {self._root} has not been parsed; call parse() first")
