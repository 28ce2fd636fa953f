"""project_probe: language detection, ignore rules and line counts for project trees."""

__version__ = "0.1.0"

from project_probe.detector import LanguageDetector
from project_probe.exceptions import (
    InvalidPatternError,
    NotParsedError,
    ProbeError,
    ProbeIOError,
    ProjectNotFoundError,
    TemplateNotFoundError,
)
from project_probe.ignore.engine import IgnoreEngine
from project_probe.ignore.pattern import compile_pattern
from project_probe.ignore.ruleset import RuleSet, RuleSource, parse_rules
from project_probe.models.language import Language
from project_probe.models.pattern import Pattern, Segment, SegmentKind
from project_probe.models.project import PathStatus, ProjectState
from project_probe.models.stats import CodeStats, LanguageStats
from project_probe.project import Project
from project_probe.stats import StatsCounter, count_lines

__all__ = [
    "CodeStats",
    "IgnoreEngine",
    "InvalidPatternError",
    "Language",
    "LanguageDetector",
    "LanguageStats",
    "NotParsedError",
    "PathStatus",
    "Pattern",
    "ProbeError",
    "ProbeIOError",
    "Project",
    "ProjectNotFoundError",
    "ProjectState",
    "RuleSet",
    "RuleSource",
    "Segment",
    "SegmentKind",
    "StatsCounter",
    "TemplateNotFoundError",
    "compile_pattern",
    "count_lines",
    "parse_rules",
]
