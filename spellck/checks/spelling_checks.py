# spellck/checks/spelling_checks.py
"""
SpellingCheck: flags words in public identifiers and doc text that are not
in the Dictionary.

How it works:
- The processor hands over Records (identifier or doc-comment text).
- Identifiers are split into words (fooBar -> foo, Bar); doc text is scanned
  for letter runs. See utils.text_extract.
- unknown_words() keeps the words the Dictionary does not contain, once each,
  in first-seen order.
- A Record with at least one unknown word yields exactly one Diagnostic.

Matching is exact and case-insensitive: no stemming, no suggestions.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Set

from spellck.core.dictionary import Dictionary
from spellck.core.interfaces import Check
from spellck.core.models import Diagnostic, Record, RecordKind, Severity, Token
from spellck.utils.text_extract import extract_doc_words, split_identifier


def unknown_words(tokens: Iterable[Token], dictionary: Dictionary) -> List[str]:
    """Distinct normalized words missing from `dictionary`, first-seen order."""
    seen: Set[str] = set()
    out: List[str] = []
    for tok in tokens:
        word = tok.normalized
        if word in seen or dictionary.contains(word):
            continue
        seen.add(word)
        out.append(word)
    return out


def tokens_for(record: Record) -> List[Token]:
    if record.kind is RecordKind.IDENTIFIER:
        return split_identifier(record.text)
    return extract_doc_words(record.text)


class SpellingCheck(Check):
    def __init__(self, dictionary: Dictionary, severity: Severity = Severity.WARNING) -> None:
        self.dictionary = dictionary
        self.severity = severity

    def name(self) -> str:
        return "spelling"

    def run(self, record: Record) -> Optional[Diagnostic]:
        if record.suppressed:
            return None

        # A name listed as a whole (e.g. "HTTPServer") needs no splitting.
        if record.kind is RecordKind.IDENTIFIER and self.dictionary.contains(record.text):
            return None

        words = unknown_words(tokens_for(record), self.dictionary)
        if not words:
            return None
        return Diagnostic(record=record, words=tuple(words), severity=self.severity)
