"""IgnoreEngine — resolves ignore status across the generic and user rule sets."""

from __future__ import annotations

from project_probe.ignore.ruleset import RuleSet, split_path


class IgnoreEngine:
    """Two-tier ignore resolution.

    The user RuleSet is asked first and any definite answer wins. When it has
    no opinion the generic RuleSet decides, and a path neither set matches is
    not ignored. Keeping the tiers separate lets the user rules be detached
    without rebuilding the generic rules.

    Within one tier a file inside an excluded directory cannot be
    re-included. Across tiers, a user rule naming the path itself overrides
    a generic exclusion of one of its parent directories.
    """

    def __init__(self, generic: RuleSet | None = None, user: RuleSet | None = None) -> None:
        self._generic = generic
        self._user = user

    @property
    def generic(self) -> RuleSet | None:
        return self._generic

    @property
    def user(self) -> RuleSet | None:
        return self._user

    def set_generic(self, ruleset: RuleSet | None) -> None:
        self._generic = ruleset

    def set_user(self, ruleset: RuleSet | None) -> None:
        self._user = ruleset

    def clear(self) -> None:
        self._generic = None
        self._user = None

    def is_ignored(self, relative_path: str, is_directory: bool = False) -> bool:
        names = split_path(relative_path)
        if not names or (self._generic is None and self._user is None):
            return False

        if self._user is not None:
            if self._user_excludes_parent(names):
                return True
            verdict = self._user.matches_parts(names, is_directory)
            if verdict is not None:
                return verdict

        for depth in range(1, len(names)):
            if self._resolve(names[:depth], True):
                return True
        return self._resolve(names, is_directory)

    def may_contain_kept(self, relative_dir: str) -> bool:
        """Whether user rules could re-include something below an ignored directory.

        Used by the walker to decide if a directory excluded by the generic
        rules still has to be descended into.
        """
        if self._user is None:
            return False
        names = split_path(relative_dir)
        if not names:
            return False
        if self._user_excludes_parent(names) or self._user.matches_parts(names, True):
            return False
        return self._user.may_reinclude_under(names)

    def _user_excludes_parent(self, names: tuple[str, ...]) -> bool:
        return any(self._user.matches_parts(names[:depth], True) for depth in range(1, len(names)))

    def _resolve(self, names: tuple[str, ...], is_directory: bool) -> bool:
        if self._user is not None:
            verdict = self._user.matches_parts(names, is_directory)
            if verdict is not None:
                return verdict
        if self._generic is not None:
            verdict = self._generic.matches_parts(names, is_directory)
            if verdict is not None:
                return verdict
        return False
