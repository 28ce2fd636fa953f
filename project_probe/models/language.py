"""Supported project languages and the marker files that imply them."""

from __future__ import annotations

from enum import Enum


class Language(Enum):
    """Project language, detected from top-level marker files."""

    CRYSTAL = "crystal"
    DART = "dart"
    ELIXIR = "elixir"
    ELM = "elm"
    ERLANG = "erlang"
    GO = "go"
    HASKELL = "haskell"
    JAVA = "java"
    JAVASCRIPT = "javascript"
    JULIA = "julia"
    NIM = "nim"
    OCAML = "ocaml"
    PERL = "perl"
    PHP = "php"
    PURESCRIPT = "purescript"
    PYTHON = "python"
    R = "r"
    RUBY = "ruby"
    RUST = "rust"
    SCALA = "scala"
    SWIFT = "swift"
    ZIG = "zig"

    @property
    def marker_files(self) -> tuple[str, ...]:
        return _MARKER_FILES.get(self, ())

    @property
    def marker_extensions(self) -> tuple[str, ...]:
        return _MARKER_EXTENSIONS.get(self, ())


# Ordered marker filenames per language (same markers the starship prompt uses).
# "build.sbt" is shared by Java and Scala.
_MARKER_FILES: dict[Language, tuple[str, ...]] = {
    Language.CRYSTAL: ("shard.yml",),
    Language.DART: ("pubspec.yaml", "pubspec.yml", "pubspec.lock"),
    Language.ELIXIR: ("mix.exs",),
    Language.ELM: ("elm.json", "elm-package.json", ".elm-version"),
    Language.ERLANG: ("rebar.config", "erlang.mk"),
    Language.GO: ("go.mod", "go.sum", "glide.yaml", "Gopkg.yml", "Gopkg.lock", ".go-version"),
    Language.HASKELL: ("stack.yaml", "Setup.hs"),
    Language.JAVA: (
        "build.gradle",
        "pom.xml",
        "build.gradle.kts",
        "build.sbt",
        ".java.version",
        "deps.edn",
        "project.clj",
        "build.boot",
    ),
    Language.JAVASCRIPT: ("package.json", ".node-version", ".nvmrc"),
    Language.JULIA: ("Project.toml", "Manifest.toml"),
    Language.NIM: ("nim.cfg",),
    Language.OCAML: ("dune", "dune-project", "jbuild", "jbuild-ignore", ".merlin"),
    Language.PERL: (
        "Makefile.PL",
        "Build.PL",
        "cpanfile",
        "cpanfile.snapshot",
        "META.json",
        "META.yml",
        ".perl-version",
    ),
    Language.PHP: ("composer.json", ".php-version"),
    Language.PURESCRIPT: ("spago.dhall", "packages.dhall"),
    Language.PYTHON: (
        "requirements.txt",
        ".python-version",
        "pyproject.toml",
        "Pipfile",
        "tox.ini",
        "setup.py",
        "__init__.py",
    ),
    Language.R: (".Rprofile",),
    Language.RUBY: ("Gemfile", ".ruby-version"),
    Language.RUST: ("Cargo.toml",),
    Language.SCALA: (".scalaenv", ".sbtenv", "build.sbt"),
    Language.SWIFT: ("Package.swift",),
}

# Marker extensions, without the leading dot
_MARKER_EXTENSIONS: dict[Language, tuple[str, ...]] = {
    Language.HASKELL: ("cabal",),
    Language.OCAML: ("opam",),
    Language.RUBY: ("gemspec",),
    Language.ZIG: ("zig",),
}
