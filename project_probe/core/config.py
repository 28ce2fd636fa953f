"""Runtime settings, read from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_bool(key: str, default: bool) -> bool:
    raw = os.environ.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class ProbeSettings:
    """Settings shared by the project scanner and the CLI.

    Environment variables:
        PROJECT_PROBE_IGNORE_FILE     — project ignore file name (default: .gitignore)
        PROJECT_PROBE_INCLUDE_HIDDEN  — walk dot-files and dot-dirs (default: false)
        PROJECT_PROBE_LOG_LEVEL       — log level (default: INFO)
        PROJECT_PROBE_LOG_FORMAT      — console | json (default: console)
    """

    ignore_file: str = ".gitignore"
    include_hidden: bool = False
    log_level: str = "INFO"
    log_format: str = "console"

    @classmethod
    def from_env(cls) -> ProbeSettings:
        return cls(
            ignore_file=os.environ.get("PROJECT_PROBE_IGNORE_FILE", ".gitignore"),
            include_hidden=_env_bool("PROJECT_PROBE_INCLUDE_HIDDEN", False),
            log_level=os.environ.get("PROJECT_PROBE_LOG_LEVEL", "INFO").upper(),
            log_format=os.environ.get("PROJECT_PROBE_LOG_FORMAT", "console").lower(),
        )
