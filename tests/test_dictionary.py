# tests/test_dictionary.py
"""Tests for the Dictionary value and build_dictionary."""

import pytest

from spellck.core.dictionary import Dictionary
from spellck.core.errors import ConfigError, SourceReadError
from spellck.infra.word_sources import (
    FileWordSource,
    InMemoryWordSource,
    SpellCheckerWordSource,
    build_dictionary,
    default_source,
    parse_word_lines,
)


def test_contains_is_case_insensitive():
    d = Dictionary(["Hello", "world"])

    assert d.contains("hello")
    assert d.contains("HELLO")
    assert d.contains("World")
    assert "WORLD" in d
    assert not d.contains("hell")


def test_stored_words_keep_their_case():
    d = Dictionary(["  Python  ", "", "   "])

    assert d.words == frozenset({"Python"})
    assert len(d) == 1


def test_with_words_returns_new_dictionary():
    base = Dictionary(["foo"])
    extended = base.with_words(["bar"])

    assert extended.contains("bar")
    assert not base.contains("bar")
    assert base.with_words([]) is base


def test_parse_word_lines_trims_and_skips_blanks():
    assert parse_word_lines("alpha\n\n  beta  \r\n\t\ngamma") == ["alpha", "beta", "gamma"]


def test_build_is_a_flat_union(tmp_path):
    f1 = tmp_path / "one.txt"
    f1.write_text("alpha\nBeta\n", encoding="utf-8")
    f2 = tmp_path / "two.txt"
    f2.write_text("\ngamma\nalpha\n", encoding="utf-8")

    d = build_dictionary([FileWordSource(f1), FileWordSource(f2)], include_default=False)

    for w in ("alpha", "beta", "BETA", "gamma"):
        assert d.contains(w)
    assert not d.contains("delta")
    assert len(d) == 3


def test_build_includes_default_source():
    default = InMemoryWordSource(["the"], name="<default>")
    extra = InMemoryWordSource(["spellck"])

    with_default = build_dictionary([extra], include_default=True, default=default)
    without_default = build_dictionary([extra], include_default=False, default=default)

    assert with_default.contains("the")
    assert with_default.contains("spellck")
    assert not without_default.contains("the")
    assert without_default.contains("spellck")


def test_build_without_any_source_is_config_error():
    with pytest.raises(ConfigError):
        build_dictionary([], include_default=False)


def test_missing_file_raises_source_read_error(tmp_path):
    missing = tmp_path / "nope.txt"

    with pytest.raises(SourceReadError) as info:
        build_dictionary([FileWordSource(missing)], include_default=False)

    assert info.value.path == missing
    # a read failure is also a configuration failure
    assert isinstance(info.value, ConfigError)


def test_non_utf8_file_raises_source_read_error(tmp_path):
    bad = tmp_path / "latin1.txt"
    bad.write_bytes(b"caf\xe9\n")

    with pytest.raises(SourceReadError):
        FileWordSource(bad).read()


def test_default_source_prefers_configured_file(tmp_path):
    words = tmp_path / "words"
    words.write_text("the\n", encoding="utf-8")

    src = default_source({"default_dict_path": str(words)})

    assert isinstance(src, FileWordSource)
    assert src.read() == ["the"]


def test_default_source_uses_pyspellchecker_by_default():
    src = default_source({})

    assert isinstance(src, SpellCheckerWordSource)
    assert src.language == "en"


def test_builtin_default_knows_common_words():
    pytest.importorskip("spellchecker")

    with_default = build_dictionary([], include_default=True, default=SpellCheckerWordSource("en"))
    without_default = build_dictionary([InMemoryWordSource(["spellck"])], include_default=False)

    assert with_default.contains("the")
    assert not without_default.contains("the")
