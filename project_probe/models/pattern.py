"""Data models for compiled ignore patterns."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SegmentKind(Enum):
    LITERAL = "literal"
    GLOB = "glob"  # contains "*", matches within one path segment
    RECURSIVE = "recursive"  # "**", spans zero or more segments


@dataclass(frozen=True)
class Segment:
    kind: SegmentKind
    text: str

    def matches(self, name: str) -> bool:
        """Match a single path segment (never called for ``**``)."""
        if self.kind is SegmentKind.LITERAL:
            return name == self.text
        return glob_match(self.text, name)


@dataclass(frozen=True)
class Pattern:
    """One compiled ignore rule."""

    segments: tuple[Segment, ...]
    negated: bool = False
    directory_only: bool = False
    anchored: bool = False  # rule contained "/" other than the trailing one
    source: str = ""  # original rule line

    @property
    def has_recursive(self) -> bool:
        return any(s.kind is SegmentKind.RECURSIVE for s in self.segments)

    @property
    def ignores(self) -> bool:
        """Polarity: True when a match means "ignored"."""
        return not self.negated


def glob_match(glob: str, name: str) -> bool:
    """Match ``name`` against a glob where ``*`` spans zero or more characters.

    The glob is split on ``*``: the first piece must be a prefix, the last a
    suffix, and the middle pieces must occur in order in between.
    """
    parts = glob.split("*")
    if len(parts) == 1:
        return glob == name

    head, tail = parts[0], parts[-1]
    if len(head) + len(tail) > len(name):
        return False
    if not name.startswith(head) or not name.endswith(tail):
        return False

    pos = len(head)
    end = len(name) - len(tail)
    for piece in parts[1:-1]:
        if not piece:
            continue
        idx = name.find(piece, pos, end)
        if idx < 0:
            return False
        pos = idx + len(piece)
    return True
