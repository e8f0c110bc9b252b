# spellck/app/flake8_plugin.py
"""
Host-integration mode: spellck as a flake8 plugin (codes SPK1xx).

flake8 creates one SpellingPlugin per file and calls run(). The Dictionary
is built once per process from the files listed in SPELLCK_LINT_DICT
(os.pathsep-separated); there is no built-in default in this mode.
Whether a report warns, fails the build or is ignored is decided by
flake8's own select/ignore/noqa settings.
"""

from __future__ import annotations

import ast
import functools
from typing import Iterator, Optional, Sequence, Tuple, Type

from spellck.core.dictionary import Dictionary
from spellck.core.errors import ConfigError
from spellck.infra.config_loader import LINT_DICT_ENV, load_config
from spellck.infra.word_sources import FileWordSource, build_dictionary
from spellck.processors.python_processor import collect_unit
from spellck.services.orchestrator import Orchestrator

__version__ = "0.3.0"

MISSPELLING_CODE = "SPK100"

LintResult = Tuple[int, int, str, Type["SpellingPlugin"]]


@functools.lru_cache(maxsize=None)
def lint_dictionary(paths: Tuple[str, ...]) -> Dictionary:
    return build_dictionary([FileWordSource(p) for p in paths], include_default=False)


def load_lint_dictionary() -> Dictionary:
    """Dictionary named by SPELLCK_LINT_DICT; ConfigError if it is not set."""
    paths = load_config()["lint_dicts"]
    if paths is None:
        raise ConfigError(f"failed to start misspelling lint: environment variable `{LINT_DICT_ENV}` not specified")
    if not paths:
        raise ConfigError(f"failed to start misspelling lint: `{LINT_DICT_ENV}` names no files")
    return lint_dictionary(tuple(paths))


class SpellingPlugin:
    name = "spellck"
    version = __version__

    def __init__(self, tree: ast.AST, filename: str = "stdin", lines: Optional[Sequence[str]] = None) -> None:
        self.tree = tree
        self.filename = filename
        self.lines = list(lines or [])

    def run(self) -> Iterator[LintResult]:
        dictionary = load_lint_dictionary()
        source = "".join(self.lines)
        unit = collect_unit(self.tree, source, self.filename)
        report = Orchestrator(dictionary).check_unit(unit)
        for d in report.diagnostics:
            yield d.span.line, d.span.column, f"{MISSPELLING_CODE} {d.message}", type(self)
