"""Shared pytest fixtures for project_probe tests."""

from __future__ import annotations

from pathlib import Path

import pytest


def write_tree(root: Path, files: dict[str, str]) -> Path:
    """Create ``files`` (relative path -> content) under ``root``."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
    return root


@pytest.fixture
def rust_project(tmp_path: Path) -> Path:
    return write_tree(
        tmp_path,
        {
            "Cargo.toml": '[package]\nname = "app"\n',
            "src/main.rs": "fn main() {\n    println!(\"hi\");\n}\n",
            "src/lib.rs": "pub fn add(a: i32, b: i32) -> i32 {\n    a + b\n}",
            "target/debug/app": "binary\n",
        },
    )


@pytest.fixture
def node_project(tmp_path: Path) -> Path:
    return write_tree(
        tmp_path,
        {
            "package.json": '{\n  "name": "web"\n}\n',
            "index.js": "console.log(1);\n",
            "node_modules/left-pad/index.js": "module.exports = 1;\n",
            "logs/app.log": "started\n",
        },
    )


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "PROJECT_PROBE_IGNORE_FILE",
        "PROJECT_PROBE_INCLUDE_HIDDEN",
        "PROJECT_PROBE_LOG_LEVEL",
        "PROJECT_PROBE_LOG_FORMAT",
    ):
        monkeypatch.delenv(key, raising=False)
