"""Ignore-rule compiler — one rule line in, one ``Pattern`` out.

Supported subset of gitignore syntax:

    build        bare name, matches a basename at any depth
    /build       leading "/" anchors the rule to the project root
    src/*.rs     "*" matches within a single path segment
    **/cache     "**" spans zero or more segments
    logs/        trailing "/" restricts the rule to directories
    !keep.log    leading "!" re-includes a previously ignored path
    \\!name      leading backslash escapes a literal "!" or "#"
"""

from __future__ import annotations

from project_probe.exceptions import InvalidPatternError
from project_probe.models.pattern import Pattern, Segment, SegmentKind

RECURSIVE_WILDCARD = "**"


def compile_pattern(rule_line: str) -> Pattern:
    """Compile one ignore rule.

    Blank lines and ``#`` comments must be filtered out by the caller
    (see ``parse_rules``). Raises ``InvalidPatternError`` when the rule has
    no path segments left once its markers are stripped.
    """
    text = rule_line.strip()
    if not text:
        raise InvalidPatternError(rule_line)

    negated = False
    if text.startswith("!"):
        negated = True
        text = text[1:]
    elif text.startswith("\\"):
        text = text[1:]

    directory_only = text.endswith("/")
    if directory_only:
        text = text[:-1]

    rooted = text.startswith("/")
    if rooted:
        text = text[1:]

    parts = [p for p in text.split("/") if p]
    if not parts:
        raise InvalidPatternError(rule_line)

    return Pattern(
        segments=tuple(_compile_segment(p) for p in parts),
        negated=negated,
        directory_only=directory_only,
        anchored=rooted or len(parts) > 1,
        source=rule_line.strip(),
    )


def _compile_segment(part: str) -> Segment:
    if part == RECURSIVE_WILDCARD:
        return Segment(SegmentKind.RECURSIVE, part)
    if "*" in part:
        return Segment(SegmentKind.GLOB, part)
    return Segment(SegmentKind.LITERAL, part)
