# tests/test_text_extract.py
"""Tests for identifier splitting and doc-text extraction."""

import re

import pytest

from spellck.core.models import Token
from spellck.utils.text_extract import extract_doc_words, split_identifier, strip_doc_markers


def words(tokens):
    return [t.normalized for t in tokens]


# === Identifier splitter ===

@pytest.mark.parametrize(
    "identifier, expected",
    [
        ("foo_bar", ["foo", "bar"]),
        ("FooBar", ["foo", "bar"]),
        ("fooBar", ["foo", "bar"]),
        ("HTTPServer", ["http", "server"]),
        ("IOError", ["io", "error"]),
        ("URL", ["url"]),
        ("parseURL", ["parse", "url"]),
        ("MAX_RETRY_COUNT", ["max", "retry", "count"]),
        ("v2", []),
        ("v2Config", ["v", "config"]),
        ("foo_v2", ["foo"]),
        ("config_v2", ["config"]),
        ("configV2", ["config"]),
        ("v2_config", ["config"]),
        ("AB123C", ["ab", "c"]),
        ("utf8_decode", ["utf", "decode"]),
        ("__init__", ["init"]),
        ("x", ["x"]),
        ("_", []),
        ("123", []),
        ("", []),
    ],
)
def test_split_identifier(identifier, expected):
    assert words(split_identifier(identifier)) == expected


def test_split_keeps_original_text_and_offsets():
    tokens = split_identifier("get_HTTPServer2x")

    assert tokens == [
        Token("get", "get", 0),
        Token("HTTP", "http", 4),
        Token("Server", "server", 8),
        Token("x", "x", 15),
    ]


def test_split_acronym_gives_last_capital_to_next_word():
    assert [t.text for t in split_identifier("XMLHttpRequest")] == ["XML", "Http", "Request"]


@pytest.mark.parametrize(
    "identifier",
    ["fooBarBaz", "HTTPServer_v10Alpha", "a_B_cD", "__private_Thing2Go__", "ABCdefGHI", "snake_case_42"],
)
def test_split_reproduces_letter_skeleton(identifier):
    skeleton = re.sub(r"[^A-Za-z]", "", identifier).lower()

    assert "".join(words(split_identifier(identifier))) == skeleton


def test_split_is_restartable():
    assert split_identifier("FooBar") == split_identifier("FooBar")


# === Doc-text extractor ===

def test_extract_plain_text():
    assert words(extract_doc_words("Bad dok coment")) == ["bad", "dok", "coment"]


def test_extract_strips_python_string_markers():
    raw = 'r"""Return the value.\n\n    Second line.\n    """'

    assert words(extract_doc_words(raw)) == ["return", "the", "value", "second", "line"]


def test_extract_strips_comment_markers():
    raw = "/// Frobs the widget.\n/// See also: `other_thing`"

    assert words(extract_doc_words(raw)) == ["frobs", "the", "widget", "see", "also", "other", "thing"]


def test_extract_treats_digits_and_punctuation_as_separators():
    assert words(extract_doc_words("utf8-encoded, 10x faster!")) == ["utf", "encoded", "x", "faster"]


def test_extract_does_not_special_case_urls():
    assert words(extract_doc_words("see https://example.com")) == ["see", "https", "example", "com"]


def test_extract_offsets_index_the_raw_text():
    raw = '"""Hello world"""'
    tokens = extract_doc_words(raw)

    assert [raw[t.offset:t.offset + len(t.text)] for t in tokens] == ["Hello", "world"]


def test_marker_blanking_preserves_length():
    raw = "b'''x\n  # y\n'''"

    assert len(strip_doc_markers(raw)) == len(raw)


def test_string_prefix_only_stripped_on_first_line():
    raw = '"""First.\nu"quoted" text\n"""'

    assert "u" in words(extract_doc_words(raw))


def test_extract_empty():
    assert extract_doc_words("") == []


def test_numbered_placeholder_only_at_segment_end():
    assert words(split_identifier("fooV2Bar")) == ["foo", "v", "bar"]
    assert words(split_identifier("HTTPServerV2")) == ["http", "server"]


def test_plain_text_starting_with_letter_and_apostrophe():
    assert words(extract_doc_words("B's value")) == ["b", "s", "value"]


def test_unclosed_string_prefix_is_a_word():
    assert words(extract_doc_words("r'aw text")) == ["r", "aw", "text"]


def test_closed_prefixed_string_is_stripped():
    assert words(extract_doc_words("b'bytes here'")) == ["bytes", "here"]
