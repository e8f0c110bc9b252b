# spellck/utils/text_extract.py
"""
Pure text helpers that turn program text into candidate words.

Public API:
- split_identifier(identifier) -> list[Token]
- extract_doc_words(raw_doc) -> list[Token]

Both are stateless and restartable. Only ASCII letters form words; any
other character is a separator. Token offsets always index the string that
was passed in.
"""

from __future__ import annotations

import re
from typing import List

from spellck.core.models import Token


# ---------------- Identifier splitting ----------------

_LETTER_RUN_RE = re.compile(r"[A-Za-z]+")

# Order matters:
# 1) an uppercase run that is followed by Upper+lower gives up its last
#    letter to the next word (HTTPServer -> HTTP, Server);
# 2) an optional capital followed by lowercase letters (Foo, bar);
# 3) any remaining uppercase run is one acronym word (URL, A).
_CASE_WORD_RE = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+")

# `v2`, `configV2`: one letter plus trailing digits is a numbered placeholder.
_TRAILING_DIGITS_RE = re.compile(r"[0-9]+$")


def split_identifier(identifier: str) -> List[Token]:
    """
    Decompose a program identifier into its natural-language words.

    - Underscores separate segments and are never part of a word.
    - Casing transitions open new words (fooBar -> foo, Bar).
    - Uppercase runs are acronyms, except that the last capital moves to the
      next word when a lowercase letter follows (HTTPServer -> HTTP, Server).
    - Digit runs (and any non-letter) are dropped and close the current word.
    - A single-letter word directly followed by the digits that end its
      segment is a numbered placeholder and is dropped: `v2`, `foo_v2` and
      `fooV2` all lose the `v`, while `v2Config` keeps it.

    Examples:
        split_identifier("foo_bar")     -> foo, bar
        split_identifier("IOError")     -> IO, Error
        split_identifier("v2Config")    -> v, Config
    """
    tokens: List[Token] = []
    seg_start = 0
    for segment in identifier.split("_"):
        start = seg_start
        seg_start += len(segment) + 1
        seg_tokens: List[Token] = []
        for run in _LETTER_RUN_RE.finditer(segment):
            run_start = start + run.start()
            for m in _CASE_WORD_RE.finditer(run.group(0)):
                word = m.group(0)
                seg_tokens.append(Token(text=word, normalized=word.lower(), offset=run_start + m.start()))
        digits = _TRAILING_DIGITS_RE.search(segment)
        if digits and seg_tokens:
            last = seg_tokens[-1]
            if len(last.text) == 1 and last.offset - start + 1 == digits.start():
                seg_tokens.pop()
        tokens.extend(seg_tokens)
    return tokens


# ---------------- Documentation text ----------------

_WORD_RE = re.compile(r"[A-Za-z]+")

# Leading markers we blank out before scanning. A string opener (with its
# r/b/u/f prefix) only counts on the first line, and only when the text also
# ends with the same quote, i.e. it really is a string literal.
_FIRST_LINE_MARKER_RE = re.compile(
    r"""^[ \t]*(?:[rRuUbBfF]{0,2}(?P<quote>\"\"\"|'''|"|')|//[/!]?|/\*[*!]?|\*/?|\#+!?)"""
)
_LINE_MARKER_RE = re.compile(r"""^[ \t]*(?:\"\"\"|'''|//[/!]?|/\*[*!]?|\*/?|\#+!?)""")


def strip_doc_markers(raw_doc: str) -> str:
    """
    Replace leading indentation and comment/string markers on each line
    with spaces. Character positions are preserved.
    """
    out: List[str] = []
    for i, line in enumerate(raw_doc.splitlines(keepends=True)):
        m = None
        if i == 0:
            m = _FIRST_LINE_MARKER_RE.match(line)
            if m and m.group("quote") and not _closes_with(raw_doc, m.group("quote"), m.end()):
                m = None
        if m is None:
            m = _LINE_MARKER_RE.match(line)
        if m and m.end():
            line = " " * m.end() + line[m.end():]
        out.append(line)
    return "".join(out)


def _closes_with(raw_doc: str, quote: str, opened_at: int) -> bool:
    tail = raw_doc.rstrip()
    return len(tail) >= opened_at + len(quote) and tail.endswith(quote)


def extract_doc_words(raw_doc: str) -> List[Token]:
    """
    Tokenize raw documentation text (comment markers included).

    Every maximal run of ASCII letters is a Token. Punctuation, digits,
    whitespace and markup are separators; inline code and URLs are not
    special-cased.
    """
    if not raw_doc:
        return []
    text = strip_doc_markers(raw_doc)
    return [
        Token(text=m.group(0), normalized=m.group(0).lower(), offset=m.start())
        for m in _WORD_RE.finditer(text)
    ]
