# spellck/infra/word_sources.py
"""
Dictionary inputs and the one place a Dictionary gets built.

Sources:
- FileWordSource: plain text file, one word per line, blank lines ignored.
- InMemoryWordSource: a list already in memory (inline directives, tests).
- SpellCheckerWordSource: the built-in default list, taken from the word
  frequency table that ships with pyspellchecker.

build_dictionary(...) merges them into one immutable Dictionary. Every file
is opened, read fully and closed before the next one; nothing stays open
while checking runs.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from spellck.core.dictionary import Dictionary
from spellck.core.errors import ConfigError, SourceReadError
from spellck.core.interfaces import WordSource

try:
    from spellchecker import SpellChecker
except ImportError:
    SpellChecker = None  # reported as a ConfigError only if the default list is requested

log = logging.getLogger(__name__)


def parse_word_lines(text: str) -> List[str]:
    """One word per line; trim surrounding whitespace, skip blank lines."""
    return [line.strip() for line in text.splitlines() if line.strip()]


class FileWordSource(WordSource):
    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    @property
    def name(self) -> str:
        return str(self.path)

    def read(self) -> List[str]:
        try:
            with self.path.open("r", encoding="utf-8") as fp:
                text = fp.read()
        except UnicodeDecodeError as exc:
            raise SourceReadError(self.path, f"not valid UTF-8 ({exc.reason})") from exc
        except OSError as exc:
            raise SourceReadError(self.path, exc.strerror or str(exc)) from exc
        return parse_word_lines(text)


class InMemoryWordSource(WordSource):
    def __init__(self, words: Iterable[str], name: str = "<memory>") -> None:
        self._words = list(words)
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def read(self) -> List[str]:
        return [w.strip() for w in self._words if w and w.strip()]


class SpellCheckerWordSource(WordSource):
    """
    The built-in default word list: every word known to pyspellchecker for
    `language`. Unknown languages fall back to English.
    """

    def __init__(self, language: str = "en") -> None:
        self.language = (language or "en").strip() or "en"

    @property
    def name(self) -> str:
        return f"<pyspellchecker:{self.language}>"

    def read(self) -> List[str]:
        if SpellChecker is None:
            raise ConfigError(
                "the built-in dictionary needs pyspellchecker; install it or pass --no-def-dict"
            )
        try:
            sp = SpellChecker(language=self.language)
        except ValueError:
            log.warning("No built-in word list for language %r, using English", self.language)
            sp = SpellChecker(language="en")
        return list(sp.word_frequency.keys())


def default_source(cfg: Optional[Dict[str, Any]] = None) -> WordSource:
    """
    The built-in default source for this configuration: the file named by
    `default_dict_path` if set, otherwise pyspellchecker's list.
    """
    cfg = cfg or {}
    path = cfg.get("default_dict_path")
    if path:
        return FileWordSource(path)
    return SpellCheckerWordSource(cfg.get("language_code") or "en")


def build_dictionary(
    sources: Sequence[WordSource],
    include_default: bool = True,
    default: Optional[WordSource] = None,
) -> Dictionary:
    """
    Merge `sources` (plus the default source when `include_default`) into a
    single Dictionary. A flat union: no precedence, no conflict detection.

    Raises:
        ConfigError: default disabled and no other source supplied.
        SourceReadError: a source could not be read (no partial dictionary).
    """
    chosen: List[WordSource] = list(sources)
    if include_default:
        chosen.insert(0, default or default_source())
    if not chosen:
        raise ConfigError("no dictionary: the default dictionary is disabled and no other was given")

    words: List[str] = []
    for src in chosen:
        loaded = src.read()
        log.debug("Loaded %d words from %s", len(loaded), src.name)
        words.extend(loaded)

    dictionary = Dictionary(words)
    log.info("Dictionary ready: %d words from %d source(s)", len(dictionary), len(chosen))
    return dictionary
