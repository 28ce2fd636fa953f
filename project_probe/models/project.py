"""Data models for project state and path queries."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProjectState(Enum):
    UNINITIALIZED = "uninitialized"
    PARSED = "parsed"
    GITIGNORE_CONFIGURED = "gitignore_configured"
    STATS_COMPUTED = "stats_computed"


@dataclass
class PathStatus:
    """Result of ``Project.check_path``."""

    exists: bool
    is_dir: bool
    is_ignored: bool
