# spellck/core/interfaces.py
"""
Stable abstractions the rest of spellck depends on.
The orchestrator and the entry points import only these interfaces, not the
concrete Python walker or the concrete word-list readers.

- FileProcessor: source file -> SourceUnit (the tree-walking collaborator).
- WordSource: anything that yields dictionary words.
- Check: one Record -> optional Diagnostic.
- ReportWriter: sink for a finished RunReport.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Protocol

from .models import Diagnostic, Record, RunReport, SourceUnit

__all__ = ["FileProcessor", "WordSource", "Check", "ReportWriter"]


class FileProcessor(ABC):
    """
    Extracts a read-only SourceUnit (public identifiers and their doc text)
    from a given file path. Never mutates files.
    """

    @abstractmethod
    def supports(self) -> Iterable[str]:
        """
        Return the file extensions this processor can handle.
        Example: [".py", ".pyi"]

        The Orchestrator builds a lookup from extension -> processor.
        """
        raise NotImplementedError

    @abstractmethod
    def build_unit(self, path: Path) -> SourceUnit:
        """
        Produce the SourceUnit for `path`.

        Raise SourceReadError if the file cannot be read. Parse failures
        (e.g. SyntaxError) propagate; the orchestrator records them per file.
        """
        raise NotImplementedError


class WordSource(ABC):
    """One dictionary input: a word list file, an in-memory list, etc."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Short label for logs and error messages."""
        raise NotImplementedError

    @abstractmethod
    def read(self) -> List[str]:
        """
        Return the words of this source, one entry per non-blank line,
        surrounding whitespace trimmed. Raise SourceReadError on failure.
        """
        raise NotImplementedError


class Check(ABC):
    """
    A read-only rule applied to one Record. Ordinary findings are returned
    as a Diagnostic; returning None means the record is clean or skipped.
    """

    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def run(self, record: Record) -> Optional[Diagnostic]:
        raise NotImplementedError


class ReportWriter(Protocol):
    """
    Structural type for report sinks (text emitter, JSON, CSV): any object
    with a compatible `write` method qualifies.
    """

    def write(self, report: RunReport) -> None:
        ...
