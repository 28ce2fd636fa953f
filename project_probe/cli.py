"""CLI entry point: project-probe.

Subcommands:
    project-probe languages /path/to/project            # Detected languages
    project-probe check /path/to/project a.log src/     # Ignore status per path
    project-probe stats /path/to/project [--json]       # Line counts per language
"""

from __future__ import annotations

import json
from functools import wraps
from typing import Any, Callable

import click

from project_probe.core.config import ProbeSettings
from project_probe.core.logging import setup_logging
from project_probe.exceptions import ProbeError
from project_probe.project import Project


def _ignore_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by commands that evaluate ignore rules."""
    func = click.option(
        "--ignore",
        "extra_ignore",
        default=None,
        help="Extra ignore rules, separated by whitespace or newlines",
    )(func)
    func = click.option(
        "--update-existing",
        is_flag=True,
        help="Append --ignore rules to the generic rules instead of rebuilding them",
    )(func)
    func = click.option(
        "--use-gitignore/--no-use-gitignore",
        default=True,
        help="Apply the project's own ignore file (default: on)",
    )(func)
    return func


def _handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (ProbeError, ValueError) as e:
            raise click.ClickException(str(e)) from e

    return wrapper


def _load_project(
    project_path: str,
    extra_ignore: str | None,
    update_existing: bool,
    use_gitignore: bool,
) -> Project:
    project = Project(project_path)
    project.parse()
    if extra_ignore:
        project.set_gitignore(extra_ignore, update_existing=update_existing)
    project.use_project_gitignore(use_gitignore)
    return project


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """Project Probe: detect languages, apply ignore rules, count lines."""
    setup_logging(ProbeSettings.from_env(), verbose=verbose)


@main.command("languages")
@click.argument("project_path", type=click.Path(exists=True, file_okay=False))
@_handle_errors
def languages(project_path: str) -> None:
    """Print the languages detected from top-level marker files."""
    project = Project(project_path)
    project.parse()
    if not project.languages:
        click.echo("No languages detected.")
        return
    for lang in sorted(project.languages, key=lambda lang: lang.value):
        click.echo(lang.value)


@main.command("check")
@click.argument("project_path", type=click.Path(exists=True, file_okay=False))
@click.argument("targets", nargs=-1, required=True)
@_ignore_options
@_handle_errors
def check(
    project_path: str,
    targets: tuple[str, ...],
    extra_ignore: str | None,
    update_existing: bool,
    use_gitignore: bool,
) -> None:
    """Report whether each TARGET path is ignored."""
    project = _load_project(project_path, extra_ignore, update_existing, use_gitignore)
    for target in targets:
        status = project.check_path(target)
        verdict = "ignored" if status.is_ignored else "kept"
        kind = "dir" if status.is_dir else "file"
        missing = "" if status.exists else " (missing)"
        click.echo(f"{verdict:8s} {kind:4s} {target}{missing}")


@main.command("stats")
@click.argument("project_path", type=click.Path(exists=True, file_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print the full report as JSON")
@_ignore_options
@_handle_errors
def stats(
    project_path: str,
    as_json: bool,
    extra_ignore: str | None,
    update_existing: bool,
    use_gitignore: bool,
) -> None:
    """Count lines of every non-ignored file, grouped by language."""
    project = _load_project(project_path, extra_ignore, update_existing, use_gitignore)
    result = project.get_code_stats()

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    langs = ", ".join(sorted(lang.value for lang in project.languages)) or "none"
    click.echo(f"Project languages: {langs}")
    click.echo(f"Files: {result.total_files}  Lines: {result.total_lines}")
    click.echo("")
    for name, lang_stats in sorted(
        result.languages.items(), key=lambda item: item[1].line_count, reverse=True
    ):
        click.echo(f"  {name:20s} files={lang_stats.file_count:5d}  lines={lang_stats.line_count:7d}")
    for warning in result.warnings:
        click.echo(f"warning: {warning}", err=True)


if __name__ == "__main__":
    main()
