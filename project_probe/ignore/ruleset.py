"""RuleSet — an ordered collection of compiled ignore patterns from one source."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

import structlog

from project_probe.exceptions import InvalidPatternError
from project_probe.ignore.pattern import compile_pattern
from project_probe.models.pattern import Pattern, Segment, SegmentKind

log = structlog.get_logger("project_probe.ignore")


class RuleSource(Enum):
    GENERIC = "generic"  # built-in language templates + extra lines
    USER = "user"  # the project's own ignore file


@dataclass(frozen=True)
class RuleSet:
    """Patterns in declaration order; later patterns win on conflicting matches.

    A RuleSet is never edited in place. Rebuild it with ``parse_rules`` to
    change its contents.
    """

    patterns: tuple[Pattern, ...] = ()
    source: RuleSource = RuleSource.GENERIC

    def __len__(self) -> int:
        return len(self.patterns)

    def matches(self, relative_path: str, is_directory: bool = False) -> bool | None:
        """Polarity of the last pattern matching ``relative_path`` (True = ignored).

        Returns ``None`` when no pattern applies. Only the path itself is
        tested: a bare rule such as ``build`` matches the last segment, so
        ``src/build`` matches but ``src/build/x.o`` does not. Exclusion of
        everything below a matched directory is applied by ``IgnoreEngine``.
        """
        return self.matches_parts(split_path(relative_path), is_directory)

    def matches_parts(self, names: tuple[str, ...], is_directory: bool) -> bool | None:
        for pattern in reversed(self.patterns):
            if pattern_matches(pattern, names, is_directory):
                return pattern.ignores
        return None

    def may_reinclude_under(self, names: tuple[str, ...]) -> bool:
        """Whether a negated pattern could match some path below directory ``names``."""
        return any(
            pattern.negated and _may_match_below(pattern, names) for pattern in self.patterns
        )


def split_path(relative_path: str) -> tuple[str, ...]:
    """Normalise a relative path into its segments.

    Backslashes are treated as separators; empty and ``.`` segments are dropped.
    """
    parts = relative_path.replace("\\", "/").split("/")
    return tuple(p for p in parts if p and p != ".")


def pattern_matches(pattern: Pattern, names: tuple[str, ...], is_directory: bool) -> bool:
    if pattern.directory_only and not is_directory:
        return False
    if not names:
        return False
    if pattern.has_recursive or pattern.anchored:
        return _match_segments(pattern.segments, names)
    # Bare rule: basename match at any depth
    return pattern.segments[0].matches(names[-1])


def _match_segments(segments: tuple[Segment, ...], names: tuple[str, ...]) -> bool:
    if not segments:
        return not names

    head, rest = segments[0], segments[1:]
    if head.kind is SegmentKind.RECURSIVE:
        if not rest:
            # trailing "**" matches the contents of a directory, not the directory
            return len(names) >= 1
        return any(_match_segments(rest, names[i:]) for i in range(len(names) + 1))

    if not names or not head.matches(names[0]):
        return False
    return _match_segments(rest, names[1:])


def parse_rules(
    content: str | Iterable[str],
    source: RuleSource = RuleSource.GENERIC,
) -> RuleSet:
    """Build a RuleSet from ignore-file text (or an iterable of lines).

    Blank lines and ``#`` comments are skipped. A malformed line is logged
    and skipped; the remaining lines still compile.
    """
    lines = content.splitlines() if isinstance(content, str) else content
    patterns: list[Pattern] = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        try:
            patterns.append(compile_pattern(line))
        except InvalidPatternError:
            log.warning("ignore.rule_skipped", rule=line, line=lineno, source=source.value)
    return RuleSet(patterns=tuple(patterns), source=source)


def _may_match_below(pattern: Pattern, names: tuple[str, ...]) -> bool:
    if not (pattern.has_recursive or pattern.anchored):
        return True  # bare rules match at any depth
    for i, segment in enumerate(pattern.segments):
        if segment.kind is SegmentKind.RECURSIVE or i >= len(names):
            return True
        if not segment.matches(names[i]):
            return False
    return False
