"""Filesystem walker — enumerates project entries for the ignore engine."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path
from typing import NamedTuple

import structlog

from project_probe.exceptions import ProbeIOError
from project_probe.ignore.engine import IgnoreEngine

log = structlog.get_logger("project_probe.walker")

# Never descended into, whatever the ignore rules say
_ALWAYS_SKIP = {".git", ".hg", ".svn"}


class WalkEntry(NamedTuple):
    relative_path: str  # "/"-separated, relative to the project root
    is_dir: bool


def list_top_level_files(root: Path) -> list[str]:
    """Names of the regular files directly inside ``root``."""
    try:
        return sorted(entry.name for entry in os.scandir(root) if entry.is_file())
    except OSError as e:
        raise ProbeIOError(f"Cannot list directory {root}: {e}") from e


def walk_project(
    root: Path,
    engine: IgnoreEngine | None = None,
    *,
    include_hidden: bool = False,
) -> Iterator[WalkEntry]:
    """Yield every non-ignored entry under ``root`` in sorted order.

    Ignored directories are pruned, so nothing below them is visited, unless
    user rules could re-include a path below a directory the generic rules
    exclude; such a directory is descended into but not yielded.
    Dot-entries are skipped unless ``include_hidden`` is set.
    """

    def _on_error(err: OSError) -> None:
        log.warning("walker.unreadable_dir", path=err.filename, error=str(err))

    for dirpath, dirnames, filenames in os.walk(root, onerror=_on_error):
        base = Path(dirpath).relative_to(root)

        kept_dirs = []
        for d in sorted(dirnames):
            if d in _ALWAYS_SKIP or (not include_hidden and d.startswith(".")):
                continue
            rel = (base / d).as_posix()
            if engine is not None and engine.is_ignored(rel, is_directory=True):
                if engine.may_contain_kept(rel):
                    kept_dirs.append(d)
                else:
                    log.debug("walker.pruned", path=rel)
                continue
            kept_dirs.append(d)
            yield WalkEntry(rel, True)
        dirnames[:] = kept_dirs

        for f in sorted(filenames):
            if not include_hidden and f.startswith("."):
                continue
            rel = (base / f).as_posix()
            if engine is not None and engine.is_ignored(rel, is_directory=False):
                continue
            yield WalkEntry(rel, False)
