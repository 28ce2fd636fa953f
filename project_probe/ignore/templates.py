"""Built-in ignore templates, one block of rule text per language.

The blocks follow the gitignore.io templates, reduced to the supported rule
subset (no character classes or ``?``).
"""

from __future__ import annotations

from collections.abc import Iterable

from project_probe.exceptions import TemplateNotFoundError
from project_probe.models.language import Language

_TEMPLATES: dict[Language, str] = {
    Language.CRYSTAL: """
### Crystal ###
/docs/
/lib/
/bin/
/.shards/
*.dwarf
""",
    Language.DART: """
### Dart ###
.dart_tool/
.packages
build/
doc/api/
.flutter-plugins
.flutter-plugins-dependencies
""",
    Language.ELIXIR: """
### Elixir ###
/_build
/cover
/deps
/doc
/.fetch
erl_crash.dump
*.ez
*.beam
/config/*.secret.exs
.elixir_ls/
""",
    Language.ELM: """
### Elm ###
elm-stuff
repl-temp-*
""",
    Language.ERLANG: """
### Erlang ###
.eunit
*.o
*.beam
*.plt
erl_crash.dump
.concrete/DEV_MODE
_build/
.rebar3
rebar3.crashdump
""",
    Language.GO: """
### Go ###
*.exe
*.exe~
*.dll
*.so
*.dylib
*.test
*.out
vendor/
go.work
""",
    Language.HASKELL: """
### Haskell ###
dist
dist-*
cabal-dev
*.o
*.hi
*.hie
*.chi
*.chs.h
*.dyn_o
*.dyn_hi
.hpc
.hsenv
.cabal-sandbox/
cabal.sandbox.config
*.prof
*.aux
*.hp
*.eventlog
.stack-work/
cabal.project.local
.ghc.environment.*
""",
    Language.JAVA: """
### Java ###
*.class
*.log
*.ctxt
.mtj.tmp/
*.jar
*.war
*.nar
*.ear
*.zip
*.tar.gz
*.rar
hs_err_pid*
replay_pid*
target/
.gradle/
build/
""",
    Language.JAVASCRIPT: """
### Node ###
logs
*.log
npm-debug.log*
yarn-debug.log*
yarn-error.log*
lerna-debug.log*
.pnpm-debug.log*
report.*.json
pids
*.pid
*.seed
*.pid.lock
lib-cov
coverage
*.lcov
.nyc_output
.grunt
bower_components
.lock-wscript
build/Release
node_modules/
jspm_packages/
web_modules/
*.tsbuildinfo
.npm
.eslintcache
.stylelintcache
.node_repl_history
*.tgz
.yarn-integrity
.env
.env.*
!.env.example
.cache
.parcel-cache
.next
out
.nuxt
dist
.docusaurus
.serverless/
.fusebox/
.dynamodb/
.tern-port
.vscode-test
.yarn/cache
.yarn/unplugged
.yarn/build-state.yml
.yarn/install-state.gz
.pnp.*
""",
    Language.JULIA: """
### Julia ###
*.jl.cov
*.jl.*.cov
*.jl.mem
deps/deps.jl
""",
    Language.NIM: """
### Nim ###
nimcache/
nimblecache/
htmldocs/
""",
    Language.OCAML: """
### OCaml ###
*.annot
*.cmo
*.cma
*.cmi
*.a
*.o
*.cmx
*.cmxs
*.cmxa
.merlin
*.install
*.coverage
*.byte
*.native
_build/
_opam/
_coverage/
""",
    Language.PERL: """
### Perl ###
!Build/
.last_cover_stats
/META.yml
/META.json
/MYMETA.*
*.o
*.pm.tdy
*.bs
.build/
_build/
cover_db/
blib/
inc/
.lwpcookies
.last_cover_stats
nytprof.out
pm_to_blib
.perl-version
""",
    Language.PHP: """
### Composer ###
composer.phar
/vendor/
""",
    Language.PURESCRIPT: """
### PureScript ###
bower_components
node_modules
.psci_modules
output
.pulp-cache
.psc-package
.psc*
.purs*
.spago
""",
    Language.PYTHON: """
### Python ###
__pycache__/
*.pyc
*.pyo
*.pyd
*$py.class
*.so
.Python
build/
develop-eggs/
dist/
downloads/
eggs/
.eggs/
parts/
sdist/
var/
wheels/
share/python-wheels/
*.egg-info/
.installed.cfg
*.egg
MANIFEST
pip-log.txt
pip-delete-this-directory.txt
htmlcov/
.tox/
.nox/
.coverage
.coverage.*
.cache
nosetests.xml
coverage.xml
*.cover
.hypothesis/
.pytest_cache/
.mypy_cache/
.ruff_cache/
.ipynb_checkpoints
.env
.venv
env/
venv/
ENV/
""",
    Language.R: """
### R ###
.Rhistory
.Rapp.history
.RData
.Ruserdata
*-Ex.R
/*.tar.gz
/*.Rcheck/
.Rproj.user/
vignettes/*.html
vignettes/*.pdf
.httr-oauth
*_cache/
/cache/
*.utf8.md
*.knit.md
rsconnect/
""",
    Language.RUBY: """
### Ruby ###
*.gem
*.rbc
/.config
/coverage/
/InstalledFiles
/pkg/
/spec/reports/
/spec/examples.txt
/test/tmp/
/test/version_tmp/
/tmp/
.dat*
.repl_history
build/
/.yardoc/
/_yardoc/
/doc/
/rdoc/
/.bundle/
/vendor/bundle
/lib/bundler/man/
.rvmrc
""",
    Language.RUST: """
### Rust ###
debug/
target/
**/*.rs.bk
*.pdb
""",
    Language.SCALA: """
### Scala ###
*.class
*.log
.bsp/
.metals/
.bloop/
target/
project/target/
project/project/
""",
    Language.SWIFT: """
### Swift ###
xcuserdata/
*.xcscmblueprint
*.xccheckout
build/
DerivedData/
*.moved-aside
*.pbxuser
*.mode1v3
*.mode2v3
*.perspectivev3
*.hmap
*.ipa
*.dSYM.zip
*.dSYM
timeline.xctimeline
playground.xcworkspace
.build/
Packages/
Package.pins
Package.resolved
*.xcodeproj
Carthage/Build/
fastlane/report.xml
fastlane/Preview.html
fastlane/screenshots/**/*.png
fastlane/test_output
""",
    Language.ZIG: """
### Zig ###
zig-cache/
.zig-cache/
zig-out/
/release/
/debug/
/build/
/build-*/
/docgen_tmp/
""",
}


def get_template(language: Language) -> str:
    """Return the built-in ignore text for ``language``."""
    try:
        return _TEMPLATES[language]
    except KeyError:
        raise TemplateNotFoundError(f"No ignore template for language: {language.value}") from None


def templates_for(languages: Iterable[Language]) -> list[str]:
    """Template blocks for ``languages`` in a stable (declaration) order."""
    wanted = set(languages)
    return [get_template(lang) for lang in Language if lang in wanted]
