"""Project language detection from top-level marker files."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

import structlog

from project_probe.models.language import Language
from project_probe.walker import list_top_level_files

log = structlog.get_logger("project_probe.detector")

# marker filename -> languages, built once from the Language table
MARKER_TABLE: dict[str, frozenset[Language]] = {}
# marker extension (no dot) -> languages
EXTENSION_TABLE: dict[str, frozenset[Language]] = {}


def _build_tables() -> None:
    by_name: dict[str, set[Language]] = {}
    by_ext: dict[str, set[Language]] = {}
    for lang in Language:
        for name in lang.marker_files:
            by_name.setdefault(name, set()).add(lang)
        for ext in lang.marker_extensions:
            by_ext.setdefault(ext, set()).add(lang)
    MARKER_TABLE.update({k: frozenset(v) for k, v in by_name.items()})
    EXTENSION_TABLE.update({k: frozenset(v) for k, v in by_ext.items()})


_build_tables()


class LanguageDetector:
    """Map top-level filenames to the set of project languages they imply."""

    def detect(self, top_level_filenames: Iterable[str]) -> set[Language]:
        """Detect languages from bare filenames. Unknown names are ignored."""
        found: set[Language] = set()
        for name in top_level_filenames:
            found |= MARKER_TABLE.get(name, frozenset())
            suffix = Path(name).suffix
            if suffix:
                found |= EXTENSION_TABLE.get(suffix[1:], frozenset())
        return found

    def detect_from_dir(self, root: str | Path) -> set[Language]:
        """Detect languages from the regular files directly inside ``root``."""
        names = list_top_level_files(Path(root))
        langs = self.detect(names)
        log.debug(
            "detector.detected",
            root=str(root),
            languages=sorted(lang.value for lang in langs),
        )
        return langs
