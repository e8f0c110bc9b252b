# spellck/core/dictionary.py
"""
The Dictionary value: an immutable, case-insensitive set of accepted words.

A Dictionary is built once (see infra.word_sources.build_dictionary) and then
passed explicitly into every check. It is never a process-wide singleton and
never mutated; `with_words` returns a new instance instead.
"""

from __future__ import annotations

from typing import FrozenSet, Iterable, Iterator


class Dictionary:
    """Stored words keep their case; lookups compare lowercase forms."""

    __slots__ = ("_words", "_lookup")

    def __init__(self, words: Iterable[str] = ()) -> None:
        cleaned = frozenset(w.strip() for w in words if w and w.strip())
        self._words: FrozenSet[str] = cleaned
        self._lookup: FrozenSet[str] = frozenset(w.lower() for w in cleaned)

    def contains(self, word: str) -> bool:
        """True iff the lowercase form of `word` is in the merged set."""
        return word.lower() in self._lookup

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __len__(self) -> int:
        return len(self._lookup)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self) -> str:
        return f"Dictionary({len(self)} words)"

    @property
    def words(self) -> FrozenSet[str]:
        """The stored words, case preserved."""
        return self._words

    def with_words(self, extra: Iterable[str]) -> "Dictionary":
        """Return a new Dictionary holding these words plus `extra`."""
        extra = [w for w in extra if w and w.strip()]
        if not extra:
            return self
        return Dictionary(self._words.union(extra))
