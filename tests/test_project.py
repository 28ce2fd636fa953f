"""Tests for Project orchestration — end to end on temporary directories."""

from __future__ import annotations

from pathlib import Path

import pytest

from conftest import write_tree
from project_probe.core.config import ProbeSettings
from project_probe.exceptions import NotParsedError, ProjectNotFoundError
from project_probe.models.language import Language
from project_probe.models.project import ProjectState
from project_probe.project import Project


class TestProjectLifecycle:
    def test_nonexistent_dir(self):
        with pytest.raises(ProjectNotFoundError) as exc_info:
            Project("/imaginary/dir")
        assert str(exc_info.value) == "Directory /imaginary/dir cannot be found"

    def test_file_is_not_a_project(self, tmp_path: Path):
        f = tmp_path / "file.txt"
        f.write_text("")
        with pytest.raises(FileNotFoundError):
            Project(str(f))

    def test_initial_state(self, tmp_path: Path):
        project = Project(tmp_path)
        assert project.state is ProjectState.UNINITIALIZED
        assert project.languages == set()
        assert project.code_stats is None
        assert project.root == tmp_path

    def test_queries_before_parse(self, tmp_path: Path):
        project = Project(tmp_path)
        with pytest.raises(NotParsedError):
            project.is_ignored("a")
        with pytest.raises(NotParsedError):
            project.get_code_stats()
        with pytest.raises(NotParsedError):
            project.set_gitignore("a", update_existing=False)
        with pytest.raises(NotParsedError):
            project.use_project_gitignore(True)

    def test_is_git(self, tmp_path: Path):
        assert Project(tmp_path).is_git is False
        (tmp_path / ".git").mkdir()
        assert Project(tmp_path).is_git is True

    def test_state_transitions(self, rust_project: Path):
        project = Project(rust_project)
        project.parse()
        assert project.state is ProjectState.PARSED
        project.set_gitignore("*.tmp")
        assert project.state is ProjectState.GITIGNORE_CONFIGURED
        project.get_code_stats()
        assert project.state is ProjectState.STATS_COMPUTED
        project.parse()
        assert project.state is ProjectState.PARSED
        assert project.code_stats is None


class TestParse:
    def test_detects_rust(self, rust_project: Path):
        project = Project(rust_project)
        project.parse()
        assert project.languages == {Language.RUST}

    def test_detects_node(self, node_project: Path):
        project = Project(node_project)
        project.parse()
        assert project.languages == {Language.JAVASCRIPT}
        assert project.generic_gitignore[0].find("\n### Node") == 0

    def test_generic_rules_from_template(self, node_project: Path):
        project = Project(node_project)
        project.parse()
        assert project.is_ignored("node_modules/left-pad/index.js") is True
        assert project.is_ignored("logs/app.log") is True
        assert project.is_ignored("index.js") is False

    def test_no_languages_ignores_nothing(self, tmp_path: Path):
        write_tree(tmp_path, {"notes/todo.txt": "x\n"})
        project = Project(tmp_path)
        project.parse()
        assert project.languages == set()
        assert project.is_ignored("notes/todo.txt") is False

    def test_reparse_picks_up_new_markers(self, tmp_path: Path):
        project = Project(tmp_path)
        project.parse()
        assert project.languages == set()
        (tmp_path / "go.mod").write_text("module x\n")
        project.parse()
        assert project.languages == {Language.GO}


class TestSetGitignore:
    def test_end_to_end_rust(self, rust_project: Path):
        project = Project(rust_project)
        project.parse()
        project.set_gitignore("target/\n", False)

        assert project.is_ignored("target/debug/app") is True
        assert project.is_ignored("src/main.rs") is False

        stats = project.get_code_stats()
        assert stats.files["src/main.rs"] == 3
        assert stats.files["src/lib.rs"] == 3
        assert "target/debug/app" not in stats.files
        assert stats.languages["Rust"].file_count == 2

    def test_whitespace_separated_rules(self, tmp_path: Path):
        project = Project(tmp_path)
        project.parse()
        project.set_gitignore("files/to/ignore/1.js \n files/to/ignore/2.rs ", update_existing=False)
        assert project.is_ignored("files/to/ignore/1.js") is True
        assert project.is_ignored("files/to/ignore/2.rs") is True
        assert project.is_ignored("files/to/ignore/3.rs") is False

    def test_replace_keeps_templates_drops_previous_extras(self, node_project: Path):
        project = Project(node_project)
        project.parse()
        project.set_gitignore("*.md", update_existing=False)
        project.set_gitignore("*.txt", update_existing=False)
        assert project.is_ignored("README.md") is False
        assert project.is_ignored("notes.txt") is True
        assert project.is_ignored("node_modules/x.js") is True

    def test_update_existing_appends(self, node_project: Path):
        project = Project(node_project)
        project.parse()
        project.set_gitignore("*.md", update_existing=False)
        project.set_gitignore("*.txt", update_existing=True)
        assert project.is_ignored("README.md") is True
        assert project.is_ignored("notes.txt") is True

    def test_comment_lines_dropped(self, tmp_path: Path):
        project = Project(tmp_path)
        project.parse()
        project.set_gitignore("# build output\nout/\n")
        assert project.generic_gitignore == ["out/"]

    def test_negation_in_extra_lines(self, tmp_path: Path):
        project = Project(tmp_path)
        project.parse()
        project.set_gitignore("*.log\n!keep.log")
        assert project.is_ignored("app.log") is True
        assert project.is_ignored("keep.log") is False


class TestUseProjectGitignore:
    def test_user_rules_override_generic(self, tmp_path: Path):
        write_tree(tmp_path, {".gitignore": "!important.tmp\n"})
        project = Project(tmp_path)
        project.parse()
        project.set_gitignore("*.tmp")
        project.use_project_gitignore(True)
        assert project.is_ignored("important.tmp") is False
        assert project.is_ignored("other.tmp") is True

    def test_detach(self, tmp_path: Path):
        write_tree(tmp_path, {".gitignore": "!important.tmp\n"})
        project = Project(tmp_path)
        project.parse()
        project.set_gitignore("*.tmp")
        project.use_project_gitignore(True)
        project.use_project_gitignore(False)
        assert project.engine.user is None
        assert project.is_ignored("important.tmp") is True

    def test_missing_ignore_file(self, tmp_path: Path):
        project = Project(tmp_path)
        project.parse()
        project.use_project_gitignore(True)
        assert project.engine.user is None

    def test_gitignore_applies_to_stats(self, tmp_path: Path):
        write_tree(
            tmp_path,
            {
                ".gitignore": "# generated\ngenerated/\n*.min.js\n",
                "app.js": "a\nb\n",
                "app.min.js": "ab\n",
                "generated/out.js": "x\n",
            },
        )
        project = Project(tmp_path)
        project.parse()
        project.use_project_gitignore(True)
        stats = project.get_code_stats()
        assert stats.files == {"app.js": 2}

    def test_custom_ignore_file_name(self, tmp_path: Path):
        write_tree(tmp_path, {".probeignore": "*.txt\n"})
        project = Project(tmp_path, settings=ProbeSettings(ignore_file=".probeignore"))
        project.parse()
        project.use_project_gitignore(True)
        assert project.is_ignored("a.txt") is True

    def test_user_negation_inside_template_directory(self, tmp_path: Path):
        write_tree(
            tmp_path,
            {
                "package.json": "{}\n",
                ".gitignore": "!logs/keep.js\n",
                "logs/keep.js": "keep();\n",
                "logs/debug.js": "drop();\n",
            },
        )
        project = Project(tmp_path)
        project.parse()
        project.use_project_gitignore(True)

        assert project.is_ignored("logs/keep.js") is False
        assert project.is_ignored("logs/debug.js") is True
        assert project.get_code_stats().files == {"package.json": 1, "logs/keep.js": 1}


class TestQueries:
    def test_check_path_existing(self, rust_project: Path):
        project = Project(rust_project)
        project.parse()
        status = project.check_path("target")
        assert status.exists is True
        assert status.is_dir is True
        assert status.is_ignored is True

    def test_check_path_missing_with_trailing_slash(self, rust_project: Path):
        project = Project(rust_project)
        project.parse()
        assert project.check_path("debug/").is_dir is True
        assert project.check_path("debug/").is_ignored is True
        assert project.check_path("debug").is_ignored is False

    def test_absolute_path(self, rust_project: Path):
        project = Project(rust_project)
        project.parse()
        assert project.is_ignored(str(rust_project.resolve() / "target" / "debug" / "app")) is True

    def test_absolute_path_outside_root(self, rust_project: Path, tmp_path_factory):
        project = Project(rust_project)
        project.parse()
        other = tmp_path_factory.mktemp("elsewhere")
        with pytest.raises(ValueError):
            project.is_ignored(str(other / "x.rs"))


class TestCodeStats:
    def test_recomputed_each_call(self, tmp_path: Path):
        write_tree(tmp_path, {"a.py": "1\n"})
        project = Project(tmp_path)
        project.parse()
        first = project.get_code_stats()
        (tmp_path / "b.py").write_text("1\n2\n")
        second = project.get_code_stats()
        assert first.total_files == 1
        assert second.total_files == 2
        assert second.languages["Python"].line_count == 3

    def test_hidden_files_skipped(self, tmp_path: Path):
        write_tree(tmp_path, {".hidden.py": "1\n", "shown.py": "1\n"})
        project = Project(tmp_path)
        project.parse()
        assert list(project.get_code_stats().files) == ["shown.py"]

    def test_include_hidden_setting(self, tmp_path: Path):
        write_tree(tmp_path, {".hidden.py": "1\n", "shown.py": "1\n"})
        project = Project(tmp_path, settings=ProbeSettings(include_hidden=True))
        project.parse()
        assert set(project.get_code_stats().files) == {".hidden.py", "shown.py"}

    def test_json_detected(self, node_project: Path):
        project = Project(node_project)
        project.parse()
        stats = project.get_code_stats()
        assert "JSON" in stats.languages
        assert "node_modules/left-pad/index.js" not in stats.files
