# tests/test_flake8_plugin.py
"""Tests for host-integration mode (flake8 plugin)."""

import ast
import os
import textwrap

import pytest

from spellck.app import flake8_plugin
from spellck.app.flake8_plugin import SpellingPlugin
from spellck.core.errors import ConfigError


SOURCE = textwrap.dedent('''\
    """Bad dok."""

    __spellck_extra_words__ = "frob"


    def frob_mispelled():
        pass


    def quux():  # spellck: ignore
        pass
''')


def run_plugin(source, filename):
    lines = source.splitlines(keepends=True)
    plugin = SpellingPlugin(ast.parse(source), filename=filename, lines=lines)
    return list(plugin.run())


@pytest.fixture(autouse=True)
def fresh_cache():
    flake8_plugin.lint_dictionary.cache_clear()
    yield
    flake8_plugin.lint_dictionary.cache_clear()


def test_missing_env_is_config_error(monkeypatch):
    monkeypatch.delenv("SPELLCK_LINT_DICT", raising=False)

    with pytest.raises(ConfigError, match="SPELLCK_LINT_DICT"):
        run_plugin(SOURCE, "mod.py")


def test_reports_through_flake8_tuples(monkeypatch, tmp_path):
    d1 = tmp_path / "a.txt"
    d1.write_text("bad\n", encoding="utf-8")
    d2 = tmp_path / "b.txt"
    d2.write_text("pass\n", encoding="utf-8")
    monkeypatch.setenv("SPELLCK_LINT_DICT", os.pathsep.join([str(d1), str(d2)]))

    results = run_plugin(SOURCE, str(tmp_path / "mod.py"))

    assert results == [
        (1, 0, "SPK100 misspelled word: dok", SpellingPlugin),
        (6, 0, "SPK100 misspelled word: mispelled", SpellingPlugin),
    ]


def test_dictionary_is_built_once(monkeypatch, tmp_path):
    words = tmp_path / "words.txt"
    words.write_text("bad\ndok\n", encoding="utf-8")
    monkeypatch.setenv("SPELLCK_LINT_DICT", str(words))

    run_plugin(SOURCE, "a.py")
    run_plugin(SOURCE, "b.py")

    assert flake8_plugin.lint_dictionary.cache_info().misses == 1
