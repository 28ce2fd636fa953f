"""Tests for IgnoreEngine two-tier precedence."""

from __future__ import annotations

from project_probe.ignore.engine import IgnoreEngine
from project_probe.ignore.ruleset import RuleSource, parse_rules


def generic(text: str):
    return parse_rules(text, RuleSource.GENERIC)


def user(text: str):
    return parse_rules(text, RuleSource.USER)


class TestIgnoreEngine:
    def test_empty_engine_ignores_nothing(self):
        engine = IgnoreEngine()
        assert engine.is_ignored("anything") is False
        assert engine.is_ignored("a/b/c", is_directory=True) is False

    def test_generic_only(self):
        engine = IgnoreEngine(generic=generic("*.tmp"))
        assert engine.is_ignored("x.tmp") is True
        assert engine.is_ignored("x.rs") is False

    def test_user_overrides_generic(self):
        engine = IgnoreEngine(generic=generic("*.tmp"), user=user("!important.tmp"))
        assert engine.is_ignored("important.tmp") is False
        assert engine.is_ignored("scratch.tmp") is True

    def test_user_ignore_beats_generic_unignore(self):
        engine = IgnoreEngine(generic=generic("!*.env"), user=user("secrets.env"))
        assert engine.is_ignored("secrets.env") is True

    def test_falls_back_to_generic_when_user_silent(self):
        engine = IgnoreEngine(generic=generic("*.log"), user=user("dist/"))
        assert engine.is_ignored("run.log") is True
        assert engine.is_ignored("dist", is_directory=True) is True

    def test_user_only(self):
        engine = IgnoreEngine(user=user("*.bak"))
        assert engine.is_ignored("a.bak") is True
        assert engine.is_ignored("a.txt") is False

    def test_detaching_user_rules(self):
        engine = IgnoreEngine(generic=generic("*.tmp"), user=user("!important.tmp"))
        engine.set_user(None)
        assert engine.is_ignored("important.tmp") is True

    def test_clear(self):
        engine = IgnoreEngine(generic=generic("*"), user=user("*"))
        engine.clear()
        assert engine.generic is None
        assert engine.user is None
        assert engine.is_ignored("a") is False

    def test_ignored_parent_directory(self):
        engine = IgnoreEngine(generic=generic("target/"))
        assert engine.is_ignored("target/debug/app") is True
        assert engine.is_ignored("target", is_directory=True) is True
        assert engine.is_ignored("target") is False
        assert engine.is_ignored("src/main.rs") is False

    def test_basename_rule_ignores_nested_contents(self):
        engine = IgnoreEngine(generic=generic("build"))
        assert engine.is_ignored("build") is True
        assert engine.is_ignored("src/build/out.o") is True

    def test_user_file_rule_beats_generic_parent_directory(self):
        engine = IgnoreEngine(generic=generic("logs/"), user=user("!logs/keep.txt"))
        assert engine.is_ignored("logs/keep.txt") is False
        assert engine.is_ignored("logs/other.txt") is True

    def test_cannot_reinclude_file_within_user_tier(self):
        engine = IgnoreEngine(user=user("logs/\n!logs/keep.txt"))
        assert engine.is_ignored("logs/keep.txt") is True

    def test_cannot_reinclude_file_within_generic_tier(self):
        engine = IgnoreEngine(generic=generic("logs/\n!logs/keep.txt"))
        assert engine.is_ignored("logs/keep.txt") is True

    def test_user_parent_exclusion_beats_generic_unignore(self):
        engine = IgnoreEngine(generic=generic("!*.rs"), user=user("vendor/"))
        assert engine.is_ignored("vendor/lib.rs") is True

    def test_reinclude_directory_itself(self):
        engine = IgnoreEngine(generic=generic("node_modules/"), user=user("!node_modules/"))
        assert engine.is_ignored("node_modules/pkg/index.js") is False

    def test_recursive_wildcard(self):
        engine = IgnoreEngine(generic=generic("**/node_modules"))
        assert engine.is_ignored("a/b/node_modules/x.js") is True
        assert engine.is_ignored("node_modules_old/x.js") is False


class TestMayContainKept:
    def test_no_user_rules(self):
        engine = IgnoreEngine(generic=generic("logs/"))
        assert engine.may_contain_kept("logs") is False

    def test_user_negation_below_directory(self):
        engine = IgnoreEngine(generic=generic("logs/"), user=user("!logs/keep.txt"))
        assert engine.may_contain_kept("logs") is True
        assert engine.may_contain_kept("logs/archive") is False
        assert engine.may_contain_kept("build") is False

    def test_bare_user_negation_matches_anywhere(self):
        engine = IgnoreEngine(generic=generic("dist/"), user=user("!*.keep"))
        assert engine.may_contain_kept("dist/a/b") is True

    def test_user_excluded_directory_stays_pruned(self):
        engine = IgnoreEngine(user=user("logs/\n!logs/keep.txt"))
        assert engine.may_contain_kept("logs") is False
